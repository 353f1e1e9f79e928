"""Plugin discovery and blueprint registration."""

from __future__ import annotations

import importlib
import pkgutil
from pathlib import Path
from typing import Any, Mapping

from flask import Blueprint, Flask

from common.logging import get_logger

PLUGIN_PACKAGE = "plugins"

logger = get_logger("quantio.plugins")


def discover_plugins(
    settings: Mapping[str, Any] | None = None, package: str = PLUGIN_PACKAGE
) -> list[str]:
    """Return the names of plugin packages that are not disabled in ``settings``."""

    package_path = Path(__file__).resolve().parent.parent / package
    if not package_path.exists():
        return []
    settings = settings or {}
    names: list[str] = []
    for module_info in sorted(pkgutil.iter_modules([str(package_path)]), key=lambda m: m.name):
        if not module_info.ispkg:
            continue
        plugin_config = settings.get(module_info.name) or {}
        if plugin_config.get("enabled", True) is False:
            logger.info("plugin %s disabled by configuration", module_info.name)
            continue
        names.append(module_info.name)
    return names


def _plugin_blueprints(name: str, package: str = PLUGIN_PACKAGE) -> list[Blueprint]:
    module = importlib.import_module(f"{package}.{name}.api")
    module_blueprints = getattr(module, "blueprints", None)
    if module_blueprints:
        return list(module_blueprints)
    blueprint = getattr(module, "bp", None)
    return [blueprint] if blueprint is not None else []


def register_plugin_blueprints(app: Flask, plugins: list[str] | None = None) -> list[str]:
    """Register the API blueprints of ``plugins`` (default: every enabled plugin)."""

    if plugins is None:
        plugins = discover_plugins(app.config.get("PLUGIN_SETTINGS"))
    registered: list[str] = []
    for name in plugins:
        for bp in _plugin_blueprints(name):
            app.register_blueprint(bp)
            logger.debug("registered blueprint %s at %s", bp.name, bp.url_prefix)
        registered.append(name)
    return registered


__all__ = ["PLUGIN_PACKAGE", "discover_plugins", "register_plugin_blueprints"]
