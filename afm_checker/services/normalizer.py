# afm_checker/services/normalizer.py
# Нормалізація відповіді реєстру: RawReply -> NormalizedResult

from datetime import date, datetime
from typing import Any, Mapping, Optional

from dateutil import parser as dtparser

from ..exceptions import MalformedReplyError
from ..models import (
    ACTIVE_FLAG,
    NORMAL_VAT_FLAG,
    PHYSICAL_PERSON_FLAG,
    Address,
    CallerInfo,
    EntityData,
    ErrorInfo,
    Identity,
    NormalizedResult,
    RawReply,
)
from .activities import build_tree


def _trim(value: Any) -> str:
    return "" if value is None else str(value).strip()


def _as_date(value: Any) -> Optional[date]:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    if not text:
        return None
    try:
        return dtparser.isoparse(text).date()
    except (ValueError, OverflowError):
        raise MalformedReplyError(f"unparseable date in reply: {value!r}") from None


def _caller(reply: RawReply) -> CallerInfo:
    rec = reply.caller
    return CallerInfo(
        # the physical person whose tokens were used
        user=Identity(
            username=rec.token_username,
            full_name=rec.token_afm_fullname,
            vat_id=_trim(rec.token_afm),
        ),
        # the entity on whose behalf the user asks; often the same person
        owner=Identity(
            username=None,
            full_name=rec.afm_called_by_fullname,
            vat_id=_trim(rec.afm_called_by),
        ),
    )


def _address(basic: Mapping) -> Optional[Address]:
    address = Address(
        street=basic.get("postal_address"),
        house_number=_trim(basic.get("postal_address_no")),
        city=basic.get("postal_area_description"),
        zip=basic.get("postal_zip_code"),
    )
    return None if address.is_blank() else address


def _entity(reply: RawReply, separator: str) -> EntityData:
    basic = reply.basic
    if basic is None:
        raise MalformedReplyError("reply without error has no basic_rec")

    entity_kind = _trim(basic.get("i_ni_flag_descr"))
    activities = None
    if reply.activities is not None:
        activities = build_tree(reply.activities, separator)

    return EntityData(
        as_of_date=_as_date(reply.caller.as_on_date),
        name=basic.get("onomasia"),
        commercial_title=basic.get("commer_title"),
        vat_id=_trim(basic.get("afm")),
        tax_office_id=basic.get("doy"),
        tax_office_name=basic.get("doy_descr"),
        address=_address(basic),
        entity_kind=entity_kind,
        is_company=entity_kind != PHYSICAL_PERSON_FLAG,
        company_type_descr=_trim(basic.get("legal_status_descr")),
        is_active=basic.get("deactivation_flag") == ACTIVE_FLAG,
        is_active_descr=_trim(basic.get("deactivation_flag_descr")),
        firm_type_descr=_trim(basic.get("firm_flag_descr")),
        registration_date=_as_date(basic.get("regist_date")),
        stop_date=_as_date(basic.get("stop_date")),
        uses_normal_vat_regime=basic.get("normal_vat_system_flag") == NORMAL_VAT_FLAG,
        activities=activities,
    )


def normalize(reply: RawReply, separator: str = ".") -> NormalizedResult:
    """Reshape a parsed registry reply into a NormalizedResult.

    A populated error code is a valid negative answer (unknown AFM, no
    permission, ...): found is False and data stays None.
    """
    found = reply.error_code is None
    error = None
    if not found:
        error = ErrorInfo(code=str(reply.error_code).strip(), message=reply.error_descr)

    return NormalizedResult(
        found=found,
        query_id=_trim(reply.call_seq_id),
        caller=_caller(reply),
        error=error,
        data=_entity(reply, separator) if found else None,
    )
