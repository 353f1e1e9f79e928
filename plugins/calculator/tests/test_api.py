from app import create_app


def _client():
    app = create_app("TestingConfig")
    return app.test_client()


def _press(client, token, state=None):
    body = {"token": token}
    if state is not None:
        body["state"] = state
    return client.post("/api/calculator/press", json=body)


def test_press_without_state_starts_fresh_session():
    client = _client()
    resp = _press(client, "7")
    assert resp.status_code == 200
    payload = resp.get_json()
    assert payload["success"] is True
    assert payload["data"]["state"] == {
        "current_input": "7",
        "expression": "",
        "should_reset_input": False,
    }


def test_press_chain_carries_state_between_requests():
    client = _client()
    state = None
    for token in ["5", "+", "3", "+", "2", "="]:
        state = _press(client, token, state).get_json()["data"]["state"]
    assert state["current_input"] == "10"
    assert state["expression"] == ""


def test_press_rejects_unknown_token():
    client = _client()
    resp = _press(client, "sqrt")
    assert resp.status_code == 400
    payload = resp.get_json()
    assert payload["success"] is False
    assert payload["error"]["code"] == "calc.invalid_token"


def test_press_requires_token():
    client = _client()
    resp = client.post("/api/calculator/press", json={"state": {"current_input": "1"}})
    assert resp.status_code == 400
    assert resp.get_json()["error"]["code"] == "calc.invalid_request"


def test_key_maps_keyboard_input():
    client = _client()
    resp = client.post(
        "/api/calculator/key",
        json={
            "key": "*",
            "state": {"current_input": "6", "expression": "", "should_reset_input": False},
        },
    )
    data = resp.get_json()["data"]
    assert data["ignored"] is False
    assert data["token"] == "×"
    assert data["state"]["expression"] == "6 ×"


def test_key_ignores_unmapped_keys():
    client = _client()
    state = {"current_input": "42", "expression": "", "should_reset_input": False}
    resp = client.post("/api/calculator/key", json={"key": "F1", "state": state})
    assert resp.status_code == 200
    data = resp.get_json()["data"]
    assert data["ignored"] is True
    assert data["state"] == state


def test_evaluate_endpoint():
    client = _client()
    resp = client.post("/api/calculator/evaluate", json={"a": 7, "operator": "÷", "b": 2})
    data = resp.get_json()["data"]
    assert data == {"kind": "numeric", "value": 3.5, "display": "3.5"}


def test_evaluate_endpoint_division_by_zero():
    client = _client()
    resp = client.post("/api/calculator/evaluate", json={"a": 1, "operator": "÷", "b": 0})
    data = resp.get_json()["data"]
    assert data["kind"] == "division_by_zero"
    assert data["display"] == "Error"
    assert data["value"] is None


def test_evaluate_endpoint_unknown_operator():
    client = _client()
    resp = client.post("/api/calculator/evaluate", json={"a": 1, "operator": "^", "b": 2})
    data = resp.get_json()["data"]
    assert data["value"] is None
    assert data["display"] == "NaN"


def test_tokens_endpoint_lists_vocabulary():
    client = _client()
    data = client.get("/api/calculator/tokens").get_json()["data"]
    assert "±" in data["tokens"]
    assert data["keys"]["Enter"] == "="


def test_every_mapped_key_is_accepted_by_key_endpoint():
    client = _client()
    keys = client.get("/api/calculator/tokens").get_json()["data"]["keys"]
    for key, token in keys.items():
        resp = client.post("/api/calculator/key", json={"key": key})
        data = resp.get_json()["data"]
        assert data["ignored"] is False
        assert data["token"] == token


def test_press_applies_state_sent_with_each_request():
    client = _client()
    first = _press(client, "1").get_json()["data"]["state"]
    second = _press(client, "2", first).get_json()["data"]["state"]
    third = _press(client, "3", second).get_json()["data"]["state"]
    assert third["current_input"] == "123"
    stale = _press(client, "2").get_json()["data"]["state"]
    assert stale["current_input"] == "2"
