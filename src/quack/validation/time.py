"""Recognising and validating date-time and duration values."""

import logging
import re
from datetime import datetime
from typing import Any

logger = logging.getLogger(__name__)

# https://www.w3.org/TR/xmlschema11-2/#dateTime, limited to the years
# 0001-9999 that `datetime` can represent
_XSD_DATE_TIME = re.compile(
    r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d+)?(Z|[+-]\d{2}:\d{2})?"
)

# https://www.w3.org/TR/xmlschema11-2/#duration
_XSD_DURATION = re.compile(
    r"-?P(?=\d|T\d)(\d+Y)?(\d+M)?(\d+D)?(T(?=\d)(\d+H)?(\d+M)?(\d+(\.\d+)?S)?)?"
)


def xsd_date_time(value: Any) -> bool:
    """True if `value` is a string matching the pattern for an xsd:dateTime."""
    if not isinstance(value, str) or not _XSD_DATE_TIME.fullmatch(value):
        return False
    try:
        datetime.fromisoformat(value)
    except ValueError:
        logger.debug(f"Not a valid date time: {value}")
        return False
    return True


def xsd_duration(value: Any) -> bool:
    """True if `value` is a string matching the pattern for an xsd:duration."""
    return isinstance(value, str) and _XSD_DURATION.fullmatch(value) is not None
