from __future__ import annotations

import importlib
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from .config import get_settings_module
from .container import Container, build_container
from .leaves.controller import register as register_leaves
from .shell.controller import register as register_shell
from .shell.sections import register as register_sections

# settings copied into app.config; collaborator credentials are opaque here
_PASSTHROUGH_SETTINGS = (
    "API_BASE_URL",
    "API_TIMEOUT_SECONDS",
    "ROLE_COOKIE_MAX_AGE",
    "PROFILE_RENDER_WAIT",
    "ENRICHMENT_WORKERS",
    "SUPABASE_URL",
    "SUPABASE_KEY",
    "CALENDAR_API_KEY",
    "EMAIL_SERVICE_KEY",
)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    for key in _PASSTHROUGH_SETTINGS:
        if hasattr(settings, key):
            app.config[key] = getattr(settings, key)

    if app.config["DEBUG"]:
        print("[hrms-portal] settings=", settings_module, " api=", app.config.get("API_BASE_URL") or "(unset)")

    if container is None:
        container = build_container(
            api_base_url=app.config.get("API_BASE_URL", ""),
            api_timeout=float(app.config.get("API_TIMEOUT_SECONDS", 5)),
            enrichment_workers=int(app.config.get("ENRICHMENT_WORKERS", 4)),
            role_cookie_max_age=int(app.config.get("ROLE_COOKIE_MAX_AGE", 8 * 60 * 60)),
        )
    app.extensions["hrms_portal"] = container

    register_shell(app, container)
    register_leaves(app, container)
    # placeholder screens go last so dedicated views keep their paths
    register_sections(app, container)

    return app
