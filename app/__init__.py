"""Application factory for the Quantio calculator and converter."""

from __future__ import annotations

import importlib
from pathlib import Path
from typing import Iterable
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import yaml
from flask import Flask, render_template, request

from common.errors import InternalAppError, NotFoundAppError, ValidationAppError
from common.logging import get_logger, install_request_logging
from common.responses import fail

from . import config as config_module
from .blueprints import PLUGIN_PACKAGE, register_plugin_blueprints

CONFIG_PATH = Path(__file__).resolve().parent.parent / "config.yml"

DEFAULT_THEMES = {"light": {"label": "Light"}, "dark": {"label": "Dark"}}
DEFAULT_CONTRASTS = {
    "default": {"label": "Default"},
    "mc": {"label": "Medium contrast"},
    "hc": {"label": "High contrast"},
}

logger = get_logger("quantio.app")


def theme_stylesheet(theme: str, contrast: str) -> str:
    """Return the stylesheet path for a theme and contrast level."""

    if contrast == "default":
        return f"css/themes/theme-{theme}.css"
    return f"css/themes/theme-{theme}-{contrast}.css"


def _append_display_params(url: str, params: dict[str, str], host: str | None = None) -> str:
    if not url or not params:
        return url
    try:
        parsed = urlsplit(url)
    except ValueError:
        return url
    if parsed.scheme and parsed.netloc and host and parsed.netloc != host:
        return url
    query = dict(parse_qsl(parsed.query, keep_blank_values=True))
    query.update({key: value for key, value in params.items() if value})
    new_query = urlencode(query, doseq=True)
    return urlunsplit((parsed.scheme, parsed.netloc, parsed.path, new_query, parsed.fragment))


def _load_yaml_config(path: Path | None = None) -> dict:
    config_path = path or CONFIG_PATH
    if not config_path.exists():
        return {}
    with config_path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle) or {}


def _load_manifests(plugins: Iterable[str]) -> list[dict[str, str]]:
    manifests: list[dict[str, str]] = []
    for name in plugins:
        module = importlib.import_module(f"{PLUGIN_PACKAGE}.{name}")
        manifest = getattr(module, "manifest", None)
        if manifest:
            manifests.append(dict(manifest))
    manifests.sort(key=lambda item: item["title"].lower())
    return manifests


def _choose(requested: str | None, options: dict, default: str | None) -> str:
    if not default or default not in options:
        default = next(iter(options.keys()))
    return requested if requested in options else default


def create_app(config_name: str | None = None, *, config_path: Path | None = None) -> Flask:
    """Create and configure the Flask application instance."""

    app = Flask(__name__, static_folder="ui/static", template_folder="ui/templates")
    app.config.from_object(config_module.BaseConfig)

    yaml_config = _load_yaml_config(config_path)
    app.config["SITE_SETTINGS"] = yaml_config.get("site", {}) or {}
    app.config["PLUGIN_SETTINGS"] = yaml_config.get("plugins", {}) or {}

    if config_name:
        config_obj = getattr(config_module, config_name, None)
        if config_obj:
            app.config.from_object(config_obj)
        else:
            logger.warning("unknown config class %r, using BaseConfig", config_name)

    install_request_logging(app)
    plugins = register_plugin_blueprints(app)

    def _display_state() -> dict:
        site_config = app.config.get("SITE_SETTINGS", {})
        themes = dict(site_config.get("themes", {}) or DEFAULT_THEMES)
        contrasts = dict(site_config.get("contrasts", {}) or DEFAULT_CONTRASTS)
        theme = _choose(request.args.get("theme"), themes, site_config.get("default_theme"))
        contrast = _choose(
            request.args.get("contrast"), contrasts, site_config.get("default_contrast")
        )
        return {
            "themeOptions": themes,
            "contrastOptions": contrasts,
            "currentTheme": theme,
            "currentContrast": contrast,
            "stylesheet": theme_stylesheet(theme, contrast),
        }

    def _display_links(display: dict) -> dict:
        theme, contrast = display["currentTheme"], display["currentContrast"]
        return {
            "themes": {
                name: _append_display_params(
                    request.path, {"theme": name, "contrast": contrast}, request.host
                )
                for name in display["themeOptions"]
            },
            "contrasts": {
                name: _append_display_params(
                    request.path, {"theme": theme, "contrast": name}, request.host
                )
                for name in display["contrastOptions"]
            },
        }

    @app.after_request
    def apply_response_headers(response):
        """Attach strict security headers to every outgoing response."""

        configured = app.config.get("RESPONSE_HEADERS", {})
        for header, value in configured.items():
            if header not in response.headers:
                response.headers[header] = value
        return response

    manifests = _load_manifests(plugins)
    plugin_settings = app.config["PLUGIN_SETTINGS"]
    for manifest in manifests:
        plugin_config = plugin_settings.get(manifest.get("blueprint"), {}) or {}
        if plugin_config.get("summary"):
            manifest["summary"] = plugin_config["summary"]
    app.config["PLUGIN_MANIFESTS"] = manifests

    @app.route("/")
    def home() -> str:
        display = _display_state()
        site_config = app.config.get("SITE_SETTINGS", {})
        state = {
            "page": "home",
            "siteSettings": site_config,
            "manifests": app.config.get("PLUGIN_MANIFESTS", []),
            **display,
            "links": _display_links(display),
        }
        return render_template(
            "index.html",
            initial_state=state,
            site_settings=site_config,
            stylesheet=display["stylesheet"],
            current_theme=display["currentTheme"],
            current_contrast=display["currentContrast"],
        )

    @app.errorhandler(400)
    def bad_request(error):
        return fail(ValidationAppError(message="Bad request", code="bad_request"))

    @app.errorhandler(404)
    def not_found(error):
        return fail(NotFoundAppError(message="Resource not found"))

    @app.errorhandler(405)
    def method_not_allowed(error):
        return fail(
            ValidationAppError(message="Method not allowed", code="method_not_allowed"),
            status=405,
        )

    @app.errorhandler(500)
    def server_error(error):  # pragma: no cover
        return fail(InternalAppError(message="Internal server error"))

    logger.debug("registered plugins: %s", ", ".join(m["blueprint"] for m in manifests))
    return app


__all__ = ["create_app", "theme_stylesheet"]
