# afm_checker/models.py
# Typed records for a registry query: request, outcome, raw reply and normalized result

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Mapping, Optional, Union

from dateutil import parser as dtparser

from .exceptions import InvalidRequestError

# Literal encodings used by the registry
PHYSICAL_PERSON_FLAG = "ΦΠ"   # i_ni_flag_descr of a natural person
ACTIVE_FLAG = "1"             # deactivation_flag of an active entity
NORMAL_VAT_FLAG = "Y"         # normal_vat_system_flag


class QueryMethod(str, Enum):
    QUERY = "query"
    INFO = "info"


def _first(params: Mapping, *keys):
    for k in keys:
        if params.get(k) is not None:
            return params.get(k)
    return None


@dataclass(frozen=True)
class QueryRequest:
    target_id: Optional[str] = None
    caller_id: Optional[str] = None
    as_of_date: Optional[date] = None
    method: QueryMethod = QueryMethod.QUERY

    def __post_init__(self):
        if self.method == QueryMethod.QUERY and not (self.target_id or "").strip():
            raise InvalidRequestError("target AFM is required for method=query")

    @classmethod
    def from_params(cls, params: Mapping) -> "QueryRequest":
        """Build a request from loose caller parameters.

        Accepts both snake_case (afm_for, afm_from, look_date) and the
        camelCase names (afmFor, afmFrom, lookDate). Missing method means query.
        """
        raw_method = _first(params, "method") or QueryMethod.QUERY
        if isinstance(raw_method, QueryMethod):
            method = raw_method
        else:
            try:
                method = QueryMethod(str(raw_method).strip().lower())
            except ValueError:
                raise InvalidRequestError(f"unknown method: {raw_method!r}") from None

        look_date = _first(params, "look_date", "lookDate", "as_of_date")
        as_of = None
        if isinstance(look_date, date):
            as_of = look_date
        elif look_date:
            try:
                as_of = dtparser.isoparse(str(look_date).strip()).date()
            except ValueError:
                raise InvalidRequestError(f"look_date is not an ISO date: {look_date!r}") from None

        target = _first(params, "afm_for", "afmFor", "target_id")
        caller = _first(params, "afm_from", "afmFrom", "caller_id")
        return cls(
            target_id=str(target).strip() if target is not None else None,
            caller_id=str(caller).strip() if caller is not None else None,
            as_of_date=as_of,
            method=method,
        )


# Raw reply, coerced from the SOAP payload by services.reply

@dataclass(frozen=True)
class RawCallerRecord:
    token_username: Optional[str] = None
    token_afm: Optional[str] = None
    token_afm_fullname: Optional[str] = None
    afm_called_by: Optional[str] = None
    afm_called_by_fullname: Optional[str] = None
    as_on_date: Any = None


@dataclass(frozen=True)
class RawActivityItem:
    firm_act_code: Any
    firm_act_descr: Optional[str] = None
    firm_act_kind: Any = None
    firm_act_kind_descr: Optional[str] = None


@dataclass(frozen=True)
class RawReply:
    call_seq_id: Any
    error_code: Optional[str]
    error_descr: Optional[str]
    caller: RawCallerRecord
    basic: Optional[Mapping[str, Any]] = None
    # None: no firm_act_tab element at all
    activities: Optional[tuple] = None


# Outcome of one executor call

@dataclass(frozen=True)
class Success:
    reply: Any
    method: QueryMethod = QueryMethod.QUERY
    success = True


@dataclass(frozen=True)
class TransportFailure:
    code: Any
    message: str
    error_type: str = "SOAP"
    success = False


QueryOutcome = Union[Success, TransportFailure]


# Normalized result

@dataclass(frozen=True)
class ErrorInfo:
    code: str
    message: Optional[str]


@dataclass(frozen=True)
class Identity:
    username: Optional[str]
    full_name: Optional[str]
    vat_id: str


@dataclass(frozen=True)
class CallerInfo:
    user: Identity
    owner: Identity


@dataclass(frozen=True)
class Address:
    street: Optional[str]
    house_number: str
    city: Optional[str]
    zip: Optional[str]

    def is_blank(self) -> bool:
        # deactivated entities come back with no address on file
        return (
            self.street is None
            and self.house_number == ""
            and self.city is None
            and self.zip is None
        )


@dataclass(frozen=True)
class ActivityItem:
    code: str
    description: Optional[str]
    formatted_code: str


@dataclass(frozen=True)
class ActivityKind:
    kind: str
    description: Optional[str]
    items: tuple = ()


# kind code -> ActivityKind, read-only, ordered by ascending kind
ActivityTree = Mapping[str, ActivityKind]


@dataclass(frozen=True)
class EntityData:
    as_of_date: Optional[date]
    name: Optional[str]
    commercial_title: Optional[str]
    vat_id: str
    tax_office_id: Optional[str]
    tax_office_name: Optional[str]
    address: Optional[Address]
    entity_kind: str
    is_company: bool
    company_type_descr: str
    is_active: bool
    is_active_descr: str
    firm_type_descr: str
    registration_date: Optional[date]
    stop_date: Optional[date]
    uses_normal_vat_regime: bool
    activities: Optional[ActivityTree] = field(default=None, hash=False)


@dataclass(frozen=True)
class NormalizedResult:
    found: bool
    query_id: str
    caller: CallerInfo
    error: Optional[ErrorInfo] = None
    data: Optional[EntityData] = None
