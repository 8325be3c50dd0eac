# afm_checker/services/reply.py
# Coerce the SOAP reply (zeep objects or plain dicts) into a typed RawReply

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Optional

from zeep.helpers import serialize_object

from ..exceptions import MalformedReplyError
from ..models import RawActivityItem, RawCallerRecord, RawReply

RESULT_KEY = "result"
RESULT_TYPE_KEY = "rg_ws_public2_result_rtType"

_CALLER_FIELDS = (
    "token_username",
    "token_afm",
    "token_afm_fullname",
    "afm_called_by",
    "afm_called_by_fullname",
    "as_on_date",
)


def as_plain(payload: Any) -> Any:
    """zeep CompoundValue -> (Ordered)dict/list, anything else unchanged."""
    if payload is None or isinstance(payload, (str, bytes, int, float)):
        return payload
    return serialize_object(payload, target_cls=dict)


def unwrap_result(payload: Any) -> Mapping:
    """Strip the result / rg_ws_public2_result_rtType envelopes if present."""
    body = as_plain(payload)
    for key in (RESULT_KEY, RESULT_TYPE_KEY):
        if isinstance(body, Mapping) and key in body:
            body = body[key]
    if not isinstance(body, Mapping):
        raise MalformedReplyError(f"reply is not a record: {type(body).__name__}")
    return body


def _activity(raw: Any) -> RawActivityItem:
    if not isinstance(raw, Mapping):
        raise MalformedReplyError(f"activity item is not a record: {raw!r}")
    if raw.get("firm_act_code") is None:
        raise MalformedReplyError("activity item without firm_act_code")
    return RawActivityItem(
        firm_act_code=raw.get("firm_act_code"),
        firm_act_descr=raw.get("firm_act_descr"),
        firm_act_kind=raw.get("firm_act_kind"),
        firm_act_kind_descr=raw.get("firm_act_kind_descr"),
    )


def coerce_activities(tab: Any) -> Optional[tuple]:
    """Normalize firm_act_tab to a tuple of RawActivityItem.

    None means the element was not in the reply at all. The service sends a
    single object instead of a list when there is exactly one activity.
    """
    tab = as_plain(tab)
    if tab is None:
        return None
    if isinstance(tab, Mapping):
        if "item" not in tab:
            raise MalformedReplyError("firm_act_tab without item element")
        items = tab["item"]
    elif isinstance(tab, (list, tuple)):
        items = tab
    else:
        raise MalformedReplyError(f"unexpected firm_act_tab shape: {type(tab).__name__}")

    if items is None:
        return ()
    if isinstance(items, Mapping):
        return (_activity(items),)
    if isinstance(items, (list, tuple)):
        return tuple(_activity(i) for i in items)
    raise MalformedReplyError(f"unexpected activity item shape: {type(items).__name__}")


def parse_reply(payload: Any) -> RawReply:
    body = unwrap_result(payload)

    caller_rec = body.get("afm_called_by_rec")
    if not isinstance(caller_rec, Mapping):
        raise MalformedReplyError("reply has no afm_called_by_rec")

    error_rec = body.get("error_rec") or {}
    if not isinstance(error_rec, Mapping):
        raise MalformedReplyError("error_rec is not a record")

    basic = body.get("basic_rec")
    if basic is not None and not isinstance(basic, Mapping):
        raise MalformedReplyError("basic_rec is not a record")

    return RawReply(
        call_seq_id=body.get("call_seq_id"),
        error_code=error_rec.get("error_code"),
        error_descr=error_rec.get("error_descr"),
        caller=RawCallerRecord(**{f: caller_rec.get(f) for f in _CALLER_FIELDS}),
        basic=MappingProxyType(dict(basic)) if basic is not None else None,
        activities=coerce_activities(body.get("firm_act_tab")),
    )
