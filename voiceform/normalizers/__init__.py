from .pipeline import get_default_normalizer, NormalizerPipeline
from .rules import RuleNormalizer
from .base import Normalizer

__all__ = [
    "get_default_normalizer",
    "NormalizerPipeline",
    "RuleNormalizer",
    "Normalizer",
]
