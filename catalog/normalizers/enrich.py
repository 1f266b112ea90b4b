# catalog/normalizers/enrich.py
import logging
from dataclasses import replace
from typing import Dict, Iterable, List

from catalog.models import Item, Relation

log = logging.getLogger(__name__)


def enrich(items: Iterable[Item]) -> List[Item]:
    """
    Resolve every relation's display title against the whole collection.

    Needs the full batch: any item may point at any other. Returns new
    Item objects; the inputs are left untouched. A target id that isn't in
    the collection is shown as the id itself.
    """
    items = list(items)
    titles: Dict[str, str] = {}
    for it in items:
        if isinstance(it.id, str):
            titles.setdefault(it.id, it.title)  # first record wins on duplicate ids

    unresolved = 0
    out: List[Item] = []
    for it in items:
        if not it.related:
            out.append(it)
            continue
        related: List[Relation] = []
        for rel in it.related:
            title = titles.get(rel.object_id)
            if title is None:
                unresolved += 1
                title = rel.object_id
            related.append(replace(rel, title=title))
        out.append(replace(it, related=related))

    if unresolved:
        log.debug("%d relation(s) point outside the collection", unresolved)
    return out


def count_unresolved(items: Iterable[Item]) -> int:
    """Relations whose target id isn't an item id in this collection."""
    items = list(items)
    ids = {it.id for it in items if isinstance(it.id, str)}
    return sum(1 for it in items for rel in it.related if rel.object_id not in ids)
