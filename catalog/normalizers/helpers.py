# catalog/normalizers/helpers.py
import logging
from numbers import Real
from typing import Any, Optional

log = logging.getLogger(__name__)

# In-band null markers seen in otherwise populated fields
PLACEHOLDERS = frozenset({"", "?", "unknown"})


def is_placeholder(value: Any) -> bool:
    """True for strings that only pretend to carry data ("", "?", "Unknown")."""
    return isinstance(value, str) and value.strip().lower() in PLACEHOLDERS


def is_number(value: Any) -> bool:
    # bool is an int subclass; JSON true is not a number
    return isinstance(value, Real) and not isinstance(value, bool)


def format_number(n: Real) -> str:
    """Decimal string form; integral floats lose their trailing .0"""
    if isinstance(n, float) and n.is_integer():
        return str(int(n))
    return str(n)


def clean_str(s: Any) -> Optional[str]:
    """Trimmed string, or None for null / blank / non-string values."""
    if not isinstance(s, str):
        return None
    s = s.strip()
    return s or None


def fallthrough(field: str, value: Any) -> None:
    """Unexpected raw shape: note it and degrade to absence."""
    if value is not None:
        log.debug("unrecognised %s shape %s, treating as absent", field, type(value).__name__)
    return None
