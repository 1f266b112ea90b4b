from .pipeline import get_default_normalizer, NormalizerPipeline
from .rules import RuleNormalizer, normalize
from .enrich import enrich
from .helpers import is_placeholder
from .types import RawRecord, Record
from .base import Normalizer

__all__ = [
    "get_default_normalizer",
    "NormalizerPipeline",
    "RuleNormalizer",
    "normalize",
    "enrich",
    "is_placeholder",
    "RawRecord",
    "Record",
    "Normalizer",
]
