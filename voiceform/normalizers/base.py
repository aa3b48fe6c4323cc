# voiceform/normalizers/base.py
from typing import Optional, Protocol

class Normalizer(Protocol):
    def normalize_answer(self, text: str, field_type: Optional[str], language: str = "en") -> str:
        """Return the canonical value for `text`. Never raise on odd input."""
        ...
