# afm_checker/routes/api.py
# REST API: пошук за ΑΦΜ та інформація про версію сервісу

import logging

from flask import Blueprint, request, jsonify, current_app

from ..exceptions import InvalidRequestError, MalformedReplyError
from ..extensions import get_transport
from ..services.lookup_service import lookup
from ..services.serializer import to_json

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


def _respond(params: dict):
    try:
        payload = lookup(params, get_transport())
    except InvalidRequestError as e:
        return jsonify({"success": False, "error_type": "request", "error_msg": str(e)}), 400
    except MalformedReplyError as e:
        logger.error("Malformed GSIS reply: %s", e)
        return jsonify({"success": False, "error_type": "reply", "error_msg": str(e)}), 422
    # dates as ISO strings, not the HTTP-date format of jsonify
    return current_app.response_class(
        to_json(payload), status=200 if payload["success"] else 502, mimetype="application/json"
    )


@api_bp.post("/afm/lookup")
def afm_lookup():
    """
    Body: afm_for (required), afm_from, look_date (YYYY-MM-DD), separator.
    Missing afm_from falls back to AFM_CALLED_BY from config.
    """
    body = request.get_json(force=True, silent=True) or {}
    if not isinstance(body, dict):
        return jsonify({"success": False, "error_type": "request", "error_msg": "JSON body must be an object"}), 400
    params = {
        "method": "query",
        "afm_for": body.get("afm_for") or body.get("afmFor"),
        "afm_from": body.get("afm_from") or body.get("afmFrom") or current_app.config.get("AFM_CALLED_BY") or None,
        "look_date": body.get("look_date") or body.get("lookDate"),
        "separator": body.get("separator") or current_app.config.get("ACTIVITY_SEPARATOR", "."),
    }
    return _respond(params)


@api_bp.get("/afm/info")
def afm_info():
    return _respond({"method": "info"})
