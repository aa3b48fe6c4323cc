from typing import List, Optional
from .base import Normalizer
from .rules import RuleNormalizer

class NormalizerPipeline(Normalizer):
    """
    A chain of normalizers.
    Each stage takes the output of the previous stage, so a model-backed
    extraction step can later run after (or instead of) the regex rules.
    """
    def __init__(self, stages: List[Normalizer]):
        self.stages = stages

    def normalize_answer(self, text: str, field_type: Optional[str], language: str = "en") -> str:
        out = text
        for stage in self.stages:
            out = stage.normalize_answer(out, field_type, language)
        return out

def get_default_normalizer() -> Normalizer:
    """Factory for the default pipeline. Currently just rule-based."""
    return NormalizerPipeline([RuleNormalizer()])
