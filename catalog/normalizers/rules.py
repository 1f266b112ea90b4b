from copy import deepcopy
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from catalog.models import Item, Relation
from catalog.settings import TITLE_FALLBACK
from .base import Normalizer
from .dimensions import normalize_dimensions
from .helpers import clean_str, fallthrough, format_number, is_number, is_placeholder
from .types import RawRecord

CREATOR_SEPARATOR = " and "
MATERIALS_SEPARATOR = ", "

# Raw flag names -> canonical names. Anything else is dropped.
FLAG_NAMES = {
    "attribution_uncertain": "attributionUncertain",
    "prototype": "prototype",
    "possible_duplicate": "possibleDuplicate",
    "materials_incomplete": "materialsIncomplete",
    "needs_review": "needsReview",
    "missing_dimensions": "missingDimensions",
    "needs_research": "needsResearch",
}

# Small structured fields and the sub-fields we keep from each
SUBFIELDS = {
    "geo": ("country", "region"),
    "series": ("title", "type"),
    "location": ("site", "shelf"),
    "edition": ("number", "notes"),
}


class RuleNormalizer(Normalizer):
    """
    Rule-based normalizer: one independent, total coercion rule per field.
    Takes a raw export record (RawRecord or plain dict) and returns a
    canonical Item. Unexpected shapes become None rather than errors.
    """
    def normalize_record(self, rec: Any) -> Item:
        r = RawRecord.from_mapping(deepcopy(rec))  # work on a copy so Items never share state with the input
        return Item(
            id=r.object_id,
            title=norm_title(r.title),
            object_type=r.object_type,
            department=r.department,
            accession_number=clean_str(r.accession_number),
            creator=norm_creator(r.creator),
            date=norm_date(r.date),
            materials=norm_materials(r.materials),
            dimensions=normalize_dimensions(r.dimensions),
            flags=norm_flags(r.flags),
            related=norm_related(r.related),
            description=clean_str(r.description),
            condition=clean_str(r.condition),
            credit_line=clean_str(r.credit_line),
            transcription=clean_str(r.transcription),
            status=clean_str(r.status),
            rights=norm_rights(r.rights),
            external_ids=norm_external_ids(r.external_ids),
            geo=norm_subfields(r.geo, SUBFIELDS["geo"]),
            series=norm_subfields(r.series, SUBFIELDS["series"]),
            location=norm_subfields(r.location, SUBFIELDS["location"]),
            edition=norm_subfields(r.edition, SUBFIELDS["edition"]),
            inventory_location=norm_inventory_location(r.inventory_location),
            notes=norm_list(r.notes),
            keywords=norm_list(r.keywords),
            variants=norm_list(r.variants),
            tags=norm_list(r.tags),
            provenance=norm_list(r.provenance),
        )


def normalize(rec: Any) -> Item:
    """Normalize one raw record with the default rules."""
    return RuleNormalizer().normalize_record(rec)


# --- Individual field helpers (each total: any JSON value in, canonical value out) ---

def norm_title(t: Any) -> str:
    """Raw title if it has any text (numbers rendered as text), otherwise the fallback literal."""
    if isinstance(t, str) and t.strip():
        return t
    if is_number(t):
        return format_number(t)
    return TITLE_FALLBACK


def norm_creator(c: Any) -> Optional[str]:
    """
    ["Charles Eames", "Ray Eames"] -> "Charles Eames and Ray Eames"
    "Unknown", ["Unknown"], [] and null -> None
    """
    if isinstance(c, list):
        names = [_as_text(n) for n in c if not is_placeholder(n)]
        names = [n for n in names if n]
        return CREATOR_SEPARATOR.join(names) if names else None
    if isinstance(c, str):
        return None if is_placeholder(c) else c.strip()
    if is_number(c):
        return format_number(c)
    return fallthrough("creator", c)


def norm_date(d: Any) -> Optional[str]:
    """Structured {display, earliest, latest}, a bare year number, or free text."""
    if isinstance(d, Mapping):
        display = d.get("display")
        if isinstance(display, str) and not is_placeholder(display):
            return display.strip()
        return None
    if is_number(d):
        return format_number(d)
    if isinstance(d, str):
        return None if is_placeholder(d) else d.strip()
    return fallthrough("date", d)


def norm_materials(m: Any) -> Optional[str]:
    """Like creator, but joined with ", " and without the "unknown" filter."""
    if isinstance(m, list):
        parts = [_as_text(x) for x in m]
        parts = [p for p in parts if p]
        return MATERIALS_SEPARATOR.join(parts) if parts else None
    if isinstance(m, str):
        return clean_str(m)
    return fallthrough("materials", m)


def norm_flags(f: Any) -> Optional[Dict[str, bool]]:
    """Keep known flags that are exactly True; an all-false set collapses to None."""
    if not isinstance(f, Mapping):
        return fallthrough("flags", f)
    out = {FLAG_NAMES[k]: True for k, v in f.items() if k in FLAG_NAMES and v is True}
    return out or None


def norm_related(rel: Any) -> List[Relation]:
    """Relation entries with both a kind and a target id; always a list."""
    if not isinstance(rel, list):
        fallthrough("related", rel)
        return []
    out: List[Relation] = []
    for entry in rel:
        pair = _relation_pair(entry)
        if pair:
            out.append(Relation(type=pair[0], object_id=pair[1]))
    return out


def _relation_pair(entry: Any) -> Optional[Tuple[str, str]]:
    if not isinstance(entry, Mapping):
        return None
    kind = clean_str(entry.get("type"))
    target = _as_text(entry.get("object_id")) or _as_text(entry.get("objectId"))
    if not kind or not target:
        return None
    return kind, target


def norm_external_ids(ids: Any) -> Optional[Dict[str, Any]]:
    if not isinstance(ids, Mapping):
        return fallthrough("external_ids", ids)
    out = {
        str(k): (v.strip() if isinstance(v, str) else v)
        for k, v in ids.items()
        if v is not None and not (isinstance(v, str) and not v.strip())
    }
    return out or None


def norm_rights(r: Any) -> Optional[str]:
    """Either a plain rights statement or {"status": ..., "notes": ...}."""
    if isinstance(r, str):
        return clean_str(r)
    if isinstance(r, Mapping):
        return clean_str(r.get("status"))
    return fallthrough("rights", r)


def norm_subfields(obj: Any, keys: Tuple[str, ...]) -> Optional[Dict[str, Any]]:
    """Keep only the named sub-fields that carry something; None if none do."""
    if not isinstance(obj, Mapping):
        return None
    out = {}
    for k in keys:
        v = obj.get(k)
        if isinstance(v, str):
            v = v.strip()
        if v:
            out[k] = v
    return out or None


def norm_list(xs: Any) -> Optional[List[Any]]:
    """Non-empty lists pass through untouched; everything else is absent."""
    if isinstance(xs, list) and xs:
        return list(xs)
    return None


def norm_inventory_location(loc: Any) -> Optional[Union[int, float, str]]:
    if is_number(loc):
        return loc
    if isinstance(loc, str):
        return clean_str(loc)
    return fallthrough("inventory_location", loc)


def _as_text(x: Any) -> Optional[str]:
    if is_number(x):
        return format_number(x)
    return clean_str(x)
