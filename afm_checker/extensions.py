# afm_checker/extensions.py
# Єдине місце для транспорту GSIS, прив'язаного до Flask-додатку

from flask import current_app

from .adapters.gsis_adapter import GsisAdapter

EXTENSION_KEY = "gsis"


def init_gsis(app, transport=None):
    """Attach a transport to the app; None means build GsisAdapter from config lazily."""
    app.extensions[EXTENSION_KEY] = transport


def get_transport():
    transport = current_app.extensions.get(EXTENSION_KEY)
    if transport is None:
        transport = GsisAdapter.from_config(current_app.config)
        current_app.extensions[EXTENSION_KEY] = transport
    return transport
