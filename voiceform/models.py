from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict

# -----------------------------
# Form definition + wizard state
# -----------------------------
class FieldSpec(BaseModel):
    """One question of a form. Fixed once a session owns its field list."""
    model_config = ConfigDict(frozen=True)

    id: str                 # unique key inside a form
    question: str           # canonical English prompt
    type: str = "text"      # text | email | tel | date | signature | ...
    required: bool = False  # only meaningful for upload-derived fields

    def public(self) -> Dict[str, object]:
        """Shape used by /api/form-structure."""
        return {"id": self.id, "question": self.question, "type": self.type}


@dataclass
class Session:
    """One form-filling run, keyed by an opaque session id."""
    session_id: str
    fields: List[FieldSpec]
    language: str = "en"
    cursor: int = 0                                    # 0..len(fields); len(fields) == complete
    answers: Dict[str, str] = field(default_factory=dict)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    file_name: Optional[str] = None                    # set for upload-created sessions
    file_type: Optional[str] = None

    @property
    def total_fields(self) -> int:
        return len(self.fields)

    @property
    def complete(self) -> bool:
        return self.cursor >= len(self.fields)

    def index_of(self, field_id: str) -> Optional[int]:
        for i, f in enumerate(self.fields):
            if f.id == field_id:
                return i
        return None

    def __repr__(self):
        return (
            f"<Session(session_id={self.session_id}, language={self.language}, "
            f"cursor={self.cursor}/{len(self.fields)})>"
        )


@dataclass(frozen=True)
class NormalizationResult:
    """Transient result of normalizing one answer. Only `value` gets stored."""
    value: str
    original: str
