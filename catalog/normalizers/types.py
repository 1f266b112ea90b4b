# catalog/normalizers/types.py
from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Mapping, Union

# Anything json.load can hand us.
JSONValue = Union[None, bool, int, float, str, List[Any], Dict[str, Any]]
Record = Dict[str, Any]


@dataclass(frozen=True)
class RawRecord:
    """
    One untransformed catalog entry.

    The known fields are listed explicitly so the normalizer's field list
    stays auditable. Each value is whatever JSON shape the export held;
    anything we don't recognise lands in `extra`.
    """
    object_id: JSONValue = None
    accession_number: JSONValue = None
    title: JSONValue = None
    creator: JSONValue = None
    date: JSONValue = None
    object_type: JSONValue = None
    department: JSONValue = None
    materials: JSONValue = None
    dimensions: JSONValue = None
    tags: JSONValue = None
    credit_line: JSONValue = None
    notes: JSONValue = None
    provenance: JSONValue = None
    external_ids: JSONValue = None
    description: JSONValue = None
    flags: JSONValue = None
    condition: JSONValue = None
    keywords: JSONValue = None
    related: JSONValue = None
    geo: JSONValue = None
    inventory_location: JSONValue = None
    rights: JSONValue = None
    transcription: JSONValue = None
    series: JSONValue = None
    location: JSONValue = None
    variants: JSONValue = None
    edition: JSONValue = None
    status: JSONValue = None
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, mapping: Any) -> "RawRecord":
        """Split a raw JSON object into known fields and overflow."""
        if isinstance(mapping, RawRecord):
            return mapping
        if not isinstance(mapping, Mapping):
            return cls()
        known = {k: mapping[k] for k in KNOWN_FIELDS if k in mapping}
        extra = {str(k): v for k, v in mapping.items() if k not in KNOWN_FIELDS}
        return cls(**known, extra=extra)


KNOWN_FIELDS = frozenset(f.name for f in fields(RawRecord) if f.name != "extra")
