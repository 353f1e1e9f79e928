from app import create_app


def _client(**plugin_settings):
    app = create_app("TestingConfig")
    if plugin_settings:
        app.config["PLUGIN_SETTINGS"]["unit_converter"] = plugin_settings
    return app.test_client()


def test_categories_endpoint_lists_catalog():
    client = _client()
    response = client.get("/api/unit_converter/categories")
    assert response.status_code == 200
    payload = response.get_json()
    assert payload["success"] is True
    data = payload["data"]
    assert data["categories"] == ["length", "mass", "temperature", "volume", "time"]
    assert data["default_category"] == "length"
    assert data["max_bytes"] == 8
    assert data["catalog"]["time"]["base_unit"] == "s"


def test_units_endpoint():
    client = _client()
    response = client.get("/api/unit_converter/units/volume")
    assert response.status_code == 200
    data = response.get_json()["data"]
    assert data["category"] == "volume"
    assert data["units"][6]["abbreviation"] == "m³"


def test_units_endpoint_unknown_category():
    client = _client()
    response = client.get("/api/unit_converter/units/speed")
    assert response.status_code == 404
    payload = response.get_json()
    assert payload["success"] is False
    assert payload["error"]["code"] == "unit.invalid_category"


def test_convert_endpoint_success():
    client = _client()
    response = client.post(
        "/api/unit_converter/convert",
        json={"category": "length", "value": "1", "from_index": 3, "to_index": 7},
    )
    assert response.status_code == 200
    data = response.get_json()["data"]
    assert data == {"input": "1", "output": "39.37008", "value": 39.37007874}


def test_convert_endpoint_accepts_numbers():
    client = _client()
    response = client.post(
        "/api/unit_converter/convert",
        json={"category": "temperature", "value": 100, "from_index": 0, "to_index": 1},
    )
    data = response.get_json()["data"]
    assert data["input"] == "100"
    assert data["output"] == "212"


def test_convert_endpoint_empty_value():
    client = _client()
    response = client.post(
        "/api/unit_converter/convert",
        json={"category": "mass", "value": "", "from_index": 0, "to_index": 1},
    )
    assert response.get_json()["data"] == {"input": "", "output": "", "value": None}


def test_convert_endpoint_out_of_range_index_gives_zero():
    client = _client()
    response = client.post(
        "/api/unit_converter/convert",
        json={"category": "mass", "value": "5", "from_index": 0, "to_index": 42},
    )
    assert response.status_code == 200
    assert response.get_json()["data"]["output"] == "0"


def test_convert_endpoint_rejects_invalid_payload():
    client = _client()
    response = client.post(
        "/api/unit_converter/convert",
        json={"category": "length", "value": "1", "from_index": "first"},
    )
    assert response.status_code == 400
    error = response.get_json()["error"]
    assert error["code"] == "unit.invalid_request"
    assert error["details"]["errors"]


def test_convert_endpoint_rejects_unknown_category():
    client = _client()
    response = client.post(
        "/api/unit_converter/convert",
        json={"category": "speed", "value": "1", "from_index": 0, "to_index": 1},
    )
    assert response.status_code == 400
    assert response.get_json()["error"]["code"] == "unit.invalid_category"


def test_max_bytes_setting_applies_to_output():
    client = _client(max_bytes=4)
    response = client.post(
        "/api/unit_converter/convert",
        json={"category": "length", "value": "1", "from_index": 3, "to_index": 7},
    )
    data = response.get_json()["data"]
    assert data["output"] == "39.4"
    categories = client.get("/api/unit_converter/categories").get_json()["data"]
    assert categories["max_bytes"] == 4
