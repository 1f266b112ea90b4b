# catalog/normalizers/base.py
from typing import Any, Protocol
from catalog.models import Item

class Normalizer(Protocol):
    def normalize_record(self, rec: Any) -> Item:
        """Return a NEW canonical Item for one raw record. Never raise."""
        ...
