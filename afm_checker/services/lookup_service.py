# afm_checker/services/lookup_service.py
# Повний цикл: параметри -> executor -> parser/normalizer -> dict або JSON

import logging
from typing import Any, Mapping, Union

from ..adapters.base import RegistryTransport
from ..exceptions import InvalidRequestError
from ..models import QueryMethod, QueryRequest, Success
from .normalizer import normalize
from .query_executor import execute
from .reply import as_plain, parse_reply
from .serializer import outcome_to_dict, to_json

logger = logging.getLogger(__name__)

JSON_FORMATS = ("json",)
STRUCTURED_FORMATS = ("structured", "array", "dict")
DEFAULTS = {"method": QueryMethod.QUERY.value, "type": "json", "separator": "."}


def info_metadata(reply: Any) -> Any:
    """rgWsPublic2VersionInfo reply, passed through without normalization."""
    plain = as_plain(reply)
    if isinstance(plain, Mapping) and "result" in plain:
        return plain["result"]
    return plain


def lookup(params: Mapping, transport: RegistryTransport) -> dict:
    """Run one query and return the outcome envelope as a dict.

    Raises InvalidRequestError for unusable params and MalformedReplyError
    when the registry reply cannot be understood.
    """
    opts = {**DEFAULTS, **{k: v for k, v in params.items() if v is not None}}
    request = QueryRequest.from_params(opts)
    outcome = execute(request, transport)
    if not isinstance(outcome, Success):
        return outcome_to_dict(outcome)

    if request.method == QueryMethod.INFO:
        return outcome_to_dict(outcome, info_metadata(outcome.reply))

    result = normalize(parse_reply(outcome.reply), separator=opts["separator"])
    logger.info("GSIS query %s: found=%s", result.query_id, result.found)
    return outcome_to_dict(outcome, result)


def render(payload: dict, output_format: str = "json", indent: int = None) -> Union[str, dict]:
    fmt = (output_format or "json").lower()
    if fmt in JSON_FORMATS:
        return to_json(payload, indent=indent)
    if fmt in STRUCTURED_FORMATS:
        return payload
    raise InvalidRequestError(f"unknown output format: {output_format!r}")


def run_lookup(params: Mapping, transport: RegistryTransport, output_format: str = None) -> Union[str, dict]:
    output_format = output_format or params.get("type") or DEFAULTS["type"]
    return render(lookup(params, transport), output_format)
