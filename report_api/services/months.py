"""Month resolution module.

Maps the ``month`` query parameter to a calendar month number and builds the
month-scoped filter shared by every query. The filter compares only the month
component of ``date_of_sale``, so records from any year match.
"""
from typing import Optional

from sqlalchemy import extract, false
from sqlalchemy.sql.elements import ColumnElement

from report_api.models.transaction import Transaction

MONTH_NAMES = [
    "january", "february", "march", "april", "may", "june",
    "july", "august", "september", "october", "november", "december",
]

_MONTH_LOOKUP: dict[str, int] = {}
for _number, _name in enumerate(MONTH_NAMES, start=1):
    _MONTH_LOOKUP[_name] = _number
    _MONTH_LOOKUP[_name[:3]] = _number
    _MONTH_LOOKUP[str(_number)] = _number


def resolve_month(value: Optional[str]) -> Optional[int]:
    """Resolve a month name, abbreviation or number to 1-12.

    Returns None for anything unrecognised.
    """
    if value is None:
        return None
    return _MONTH_LOOKUP.get(value.strip().lower())


def month_filter(month: Optional[str]) -> ColumnElement[bool]:
    """Build the predicate matching records sold in ``month`` of any year.

    An unresolvable month yields a predicate that matches nothing.
    """
    number = resolve_month(month)
    if number is None:
        return false()
    return extract("month", Transaction.date_of_sale) == number
