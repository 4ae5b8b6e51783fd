"""Normalization of raw form values into domain types.

Every helper returns None instead of raising so the estimator can keep
producing a number while the user is still typing.
"""
import logging
import math
from datetime import date, datetime

DATE_FORMATS = ["%Y-%m-%d", "%Y/%m/%d", "%d.%m.%Y"]

logger = logging.getLogger(__name__)


def parse_date(value: str | date | None, formats: list[str] | None = None) -> date | None:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = value.strip()
    if not text:
        return None
    for date_format in formats or DATE_FORMATS:
        try:
            return datetime.strptime(text, date_format).date()
        except ValueError:
            continue
    logger.debug("Unparseable date %r treated as absent", value)
    return None


def parse_package_id(value: str | int | None) -> int | float | None:
    """Coerce a select value to a package id.

    Blank and non-numeric values mean nothing is selected. Numeric values that are not
    whole numbers stay selected but match no package, so pricing falls back to the default.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    text = str(value).strip()
    if not text:
        return None
    try:
        return int(text)
    except ValueError:
        pass
    try:
        number = float(text)
    except ValueError:
        logger.debug("Non-numeric package id %r treated as not selected", value)
        return None
    if math.isnan(number):
        return None
    return int(number) if number.is_integer() else number
