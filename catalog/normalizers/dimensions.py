# catalog/normalizers/dimensions.py
from typing import Any, Mapping, Optional

from .helpers import clean_str, fallthrough, format_number, is_number, is_placeholder

# Rendered as "<LABEL> <value>", in this order
LABELLED = (("h", "H"), ("w", "W"), ("d", "D"), ("l", "L"))
# Rendered as "<value> <name>", after the labelled group
SUFFIXED = ("diameter", "wingspan")
SEPARATOR = " × "


def normalize_dimensions(dims: Any) -> Optional[str]:
    """
    Collapse the dimensions object into one display string.

    A usable `display` wins. Otherwise the string is synthesized from the
    structured sub-fields, applying the record's default `unit` to values
    that carry none. Parts containing "?" are placeholder data and dropped.
    """
    if not isinstance(dims, Mapping) or not dims:
        return fallthrough("dimensions", dims)

    display = dims.get("display")
    if isinstance(display, str) and not is_placeholder(display):
        return display.strip()

    default_unit = clean_str(dims.get("unit"))
    parts = []
    for key, label in LABELLED:
        value = render_value(dims.get(key), default_unit)
        if value:
            parts.append(f"{label} {value}")
    for key in SUFFIXED:
        value = render_value(dims.get(key), default_unit)
        if value:
            parts.append(f"{value} {key}")

    parts = [p for p in parts if "?" not in p]
    return SEPARATOR.join(parts) if parts else None


def render_value(val: Any, default_unit: Optional[str] = None) -> Optional[str]:
    """
    Render one dimension sub-value:
      {"value": 26, "unit": "in"} -> "26 in"
      26 (default unit "cm")      -> "26 cm"
      "24 in"                     -> "24 in"
    """
    if isinstance(val, Mapping):
        inner = val.get("value")
        if is_number(inner):
            text = format_number(inner)
        else:
            text = clean_str(inner)
        if not text:
            return None
        unit = clean_str(val.get("unit")) or default_unit
        return f"{text} {unit}" if unit else text
    if is_number(val):
        text = format_number(val)
        return f"{text} {default_unit}" if default_unit else text
    return clean_str(val)
