# afm_checker/services/serializer.py
# Outcome -> plain dict / JSON document (dates as ISO strings, Greek text kept as is)

import json
from collections.abc import Mapping
from dataclasses import fields, is_dataclass
from datetime import date
from decimal import Decimal
from typing import Any

from ..models import NormalizedResult, QueryOutcome, TransportFailure


def _plain(value: Any) -> Any:
    # asdict() cannot copy the read-only activity tree
    if is_dataclass(value) and not isinstance(value, type):
        return {f.name: _plain(getattr(value, f.name)) for f in fields(value)}
    if isinstance(value, Mapping):
        return {k: _plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    return value


def result_to_dict(result: NormalizedResult) -> dict:
    return _plain(result)


def outcome_to_dict(outcome: QueryOutcome, data: Any = None) -> dict:
    if isinstance(outcome, TransportFailure):
        return {
            "success": False,
            "error_type": outcome.error_type,
            "error_msg": outcome.message,
            "error_code": outcome.code,
        }
    if is_dataclass(data):
        data = _plain(data)
    return {"success": True, "data": data}


def _default(value: Any):
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else str(value)
    if isinstance(value, (set, frozenset)):
        return sorted(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def to_json(payload: Any, indent: int = None) -> str:
    return json.dumps(payload, ensure_ascii=False, default=_default, indent=indent)
