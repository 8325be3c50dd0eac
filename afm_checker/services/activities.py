# afm_checker/services/activities.py
# Activity codes (ΚΑΔ): formatting and the kind -> items tree

from decimal import Decimal
from types import MappingProxyType
from typing import Iterable

from ..exceptions import InvalidActivityCodeError
from ..models import ActivityItem, ActivityKind, ActivityTree, RawActivityItem

CODE_DIGITS = 8


def _code_digits(code) -> str:
    if isinstance(code, bool):
        raise InvalidActivityCodeError(f"activity code is not numeric: {code!r}")
    if isinstance(code, int):
        text = str(code)
    elif isinstance(code, Decimal):
        if code != code.to_integral_value():
            raise InvalidActivityCodeError(f"activity code is not an integer: {code!r}")
        text = str(int(code))
    elif isinstance(code, str):
        text = code.strip()
    else:
        raise InvalidActivityCodeError(f"activity code is not numeric: {code!r}")

    if not text.isdigit() or not text.isascii():
        raise InvalidActivityCodeError(f"activity code is not numeric: {code!r}")
    if len(text) > CODE_DIGITS:
        raise InvalidActivityCodeError(f"activity code longer than {CODE_DIGITS} digits: {code!r}")
    return text


def format_activity_code(code, separator: str = ".") -> str:
    """Format an activity code as four 2-digit groups, e.g. 1234 -> 00.00.12.34.

    Numeric transports drop leading zeros, so the code is left-padded first.
    """
    padded = _code_digits(code).zfill(CODE_DIGITS)
    return separator.join(padded[i:i + 2] for i in range(0, CODE_DIGITS, 2))


def _sort_key(value: str):
    # numeric codes sort by value, anything else after them as text
    return (0, int(value), value) if value.isdigit() else (1, 0, value)


def _kind_key(kind) -> str:
    return "" if kind is None else str(kind).strip()


def build_tree(activities: Iterable[RawActivityItem], separator: str = ".") -> ActivityTree:
    """Group activities by kind, kinds ascending and codes ascending within a kind.

    Items are keyed by code alone: a code sent twice appears once, under the
    kind of its last occurrence (last write wins for descriptions too). A kind
    whose only code moved elsewhere stays in the tree with no items.
    """
    if isinstance(activities, RawActivityItem):
        activities = (activities,)

    kind_descr = {}
    per_code = {}
    for item in activities:
        kind = _kind_key(item.firm_act_kind)
        code = _code_digits(item.firm_act_code)
        kind_descr[kind] = item.firm_act_kind_descr
        # 1110000 and "01110000" are the same code
        per_code[int(code)] = (kind, code, item)

    tree = {}
    for kind in sorted(kind_descr, key=_sort_key):
        tree[kind] = ActivityKind(
            kind=kind,
            description=kind_descr[kind],
            items=tuple(
                ActivityItem(
                    code=code,
                    description=item.firm_act_descr,
                    formatted_code=format_activity_code(code, separator),
                )
                for number, (item_kind, code, item) in sorted(per_code.items())
                if item_kind == kind
            ),
        )
    return MappingProxyType(tree)
