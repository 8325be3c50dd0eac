"""Query executor: one outbound registry call per request.

Builds the INPUT_REC payload from a QueryRequest, calls the transport once
and classifies the result as Success or TransportFailure. A populated
error_rec in the reply is still a Success; it is the normalizer that turns
it into found=False.
"""

import logging

from ..adapters.base import RegistryTransport
from ..exceptions import TransportFault
from ..models import QueryMethod, QueryOutcome, QueryRequest, Success, TransportFailure

logger = logging.getLogger(__name__)


def build_payload(request: QueryRequest) -> dict:
    # empty afm_called_by: the registry treats the token owner as the caller
    payload = {
        "afm_called_by": request.caller_id or "",
        "afm_called_for": request.target_id,
    }
    # without as_on_date the registry answers for today
    if request.as_of_date is not None:
        payload["as_on_date"] = request.as_of_date.isoformat()
    return payload


class QueryExecutor:
    def __init__(self, transport: RegistryTransport):
        self.transport = transport

    def execute(self, request: QueryRequest) -> QueryOutcome:
        try:
            if request.method == QueryMethod.INFO:
                logger.info("GSIS version info")
                reply = self.transport.version_info()
            else:
                payload = build_payload(request)
                logger.info("GSIS lookup for %s (by %s)", payload["afm_called_for"], payload["afm_called_by"] or "token owner")
                reply = self.transport.afm_method(payload)
        except TransportFault as e:
            logger.warning("GSIS call failed: %s (code=%s)", e.message, e.code)
            return TransportFailure(code=e.code, message=e.message)

        return Success(reply=reply, method=request.method)


def execute(request: QueryRequest, transport: RegistryTransport) -> QueryOutcome:
    return QueryExecutor(transport).execute(request)
