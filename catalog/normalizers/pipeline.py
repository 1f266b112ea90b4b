import logging
from typing import Any, Iterable, List, Optional

from catalog.models import Item
from .base import Normalizer
from .enrich import enrich
from .rules import RuleNormalizer

log = logging.getLogger(__name__)

class NormalizerPipeline(Normalizer):
    """
    Normalize a whole batch, then enrich relations in one pass.
    Enrichment needs every record materialized first, so the two
    steps never interleave.
    """
    def __init__(self, normalizer: Optional[Normalizer] = None):
        self.normalizer = normalizer or RuleNormalizer()

    def normalize_record(self, rec: Any) -> Item:
        return self.normalizer.normalize_record(rec)

    def run(self, records: Iterable[Any]) -> List[Item]:
        items = [self.normalizer.normalize_record(r) for r in records]
        log.info("normalized %d record(s)", len(items))
        return enrich(items)

def get_default_normalizer() -> NormalizerPipeline:
    """Factory for the default pipeline: rule-based normalizer + relation enrichment."""
    return NormalizerPipeline(RuleNormalizer())
