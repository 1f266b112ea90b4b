from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

# -----------------------------
# Canonical models handed to the display layer.
# `None` is the one absence marker: no empty strings, no empty lists.
# -----------------------------

@dataclass(frozen=True)
class Relation:
    type: str
    object_id: str
    title: Optional[str] = None   # set by the enricher


@dataclass(frozen=True)
class Item:
    id: str
    title: str                                   # never None, see TITLE_FALLBACK
    object_type: Optional[str] = None
    department: Optional[str] = None
    accession_number: Optional[str] = None
    creator: Optional[str] = None
    date: Optional[str] = None
    materials: Optional[str] = None
    dimensions: Optional[str] = None
    flags: Optional[Dict[str, bool]] = None       # only True entries survive
    related: List[Relation] = field(default_factory=list)
    description: Optional[str] = None
    condition: Optional[str] = None
    credit_line: Optional[str] = None
    transcription: Optional[str] = None
    status: Optional[str] = None
    rights: Optional[str] = None
    external_ids: Optional[Dict[str, Any]] = None
    geo: Optional[Dict[str, Any]] = None
    series: Optional[Dict[str, Any]] = None
    location: Optional[Dict[str, Any]] = None
    edition: Optional[Dict[str, Any]] = None
    inventory_location: Optional[Union[int, float, str]] = None
    notes: Optional[List[Any]] = None
    keywords: Optional[List[Any]] = None
    variants: Optional[List[Any]] = None
    tags: Optional[List[Any]] = None
    provenance: Optional[List[Any]] = None

    def __str__(self):
        return f"Item {self.id} ({self.title}), creator={self.creator}, date={self.date}"


# -------------------------------------------------------------------
# Serializers: plain dicts in the camelCase shape the display layer reads
# -------------------------------------------------------------------
def relation_to_dict(r: Relation) -> Dict[str, Any]:
    return {"type": r.type, "objectId": r.object_id, "title": r.title}


def item_to_dict(item: Item) -> Dict[str, Any]:
    """Return an Item as a JSON-ready dict with camelCase keys."""
    return {
        "id": item.id,
        "accessionNumber": item.accession_number,
        "title": item.title,
        "creator": item.creator,
        "date": item.date,
        "objectType": item.object_type,
        "department": item.department,
        "materials": item.materials,
        "dimensions": item.dimensions,
        "flags": dict(item.flags) if item.flags else None,
        "related": [relation_to_dict(r) for r in item.related],
        "description": item.description,
        "condition": item.condition,
        "creditLine": item.credit_line,
        "transcription": item.transcription,
        "status": item.status,
        "rights": item.rights,
        "externalIds": item.external_ids,
        "geo": item.geo,
        "series": item.series,
        "location": item.location,
        "edition": item.edition,
        "inventoryLocation": item.inventory_location,
        "notes": item.notes,
        "keywords": item.keywords,
        "variants": item.variants,
        "tags": item.tags,
        "provenance": item.provenance,
    }
