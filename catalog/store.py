# catalog/store.py
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from catalog.loader import CatalogExport, ExportMeta
from catalog.models import Item
from catalog.normalizers import NormalizerPipeline, get_default_normalizer

# -----------------------------
# In-memory catalog: the enriched Items the display layer reads.
# Replaced wholesale on every ingest, never persisted.
# -----------------------------
@dataclass
class Catalog:
    meta: ExportMeta = field(default_factory=ExportMeta)
    items: List[Item] = field(default_factory=list)
    _by_id: Dict[str, Item] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self):
        for it in self.items:
            if isinstance(it.id, str):
                self._by_id.setdefault(it.id, it)

    def __len__(self):
        return len(self.items)

    def get(self, item_id: str) -> Optional[Item]:
        return self._by_id.get(item_id)

    def filter(
        self,
        department: Optional[str] = None,
        object_type: Optional[str] = None,
        flag: Optional[str] = None,
        q: Optional[str] = None,
    ) -> List[Item]:
        """Exact department/object_type, a set flag, and a title/creator substring."""
        out = self.items
        if department:
            out = [it for it in out if it.department == department]
        if object_type:
            out = [it for it in out if it.object_type == object_type]
        if flag:
            out = [it for it in out if it.flags and it.flags.get(flag)]
        if q:
            needle = q.lower()
            out = [
                it for it in out
                if needle in it.title.lower() or (it.creator and needle in it.creator.lower())
            ]
        return list(out)


def build_catalog(export: CatalogExport, normalizer: Optional[NormalizerPipeline] = None) -> Catalog:
    """Normalize + enrich an export into a fresh Catalog."""
    normalizer = normalizer or get_default_normalizer()
    return Catalog(meta=export.meta, items=normalizer.run(export.records))


_catalog = Catalog()

def get_catalog() -> Catalog:
    return _catalog

def set_catalog(catalog: Catalog) -> None:
    global _catalog
    _catalog = catalog
