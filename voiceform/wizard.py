"""
Session wizard: sequences questions and ties the normalizer, the session
store and the translator together.

Progress is client-driven. The server owns each session's field list and the
declared type of every field, but the caller names which field an answer
belongs to (and which index to ask next). The stored cursor only records how
far the session has been committed; it is never used to reject an answer.
"""
import logging
import uuid
from typing import Any, Dict, List, Optional

from voiceform.errors import InvalidRequest, SessionNotFound, UnsupportedMediaType
from voiceform.forms import DEFAULT_FIELDS, fields_for_upload
from voiceform.i18n import Translator
from voiceform.models import FieldSpec, NormalizationResult, Session
from voiceform.normalizers import Normalizer
from voiceform.settings import DEFAULT_LANGUAGE
from voiceform.store import SessionStore

log = logging.getLogger(__name__)

COMPLETED_MESSAGE = "Form completed successfully! You can now download your PDF."
INVALID_FILE_MESSAGE = "Invalid file type. Please upload PDF, JPG, PNG, or DOC files."


class SessionWizard:
    def __init__(self, store: SessionStore, normalizer: Normalizer, translator: Translator,
                 default_fields: Optional[List[FieldSpec]] = None):
        self.store = store
        self.normalizer = normalizer
        self.translator = translator
        self.default_fields = list(default_fields or DEFAULT_FIELDS)

    # ------------------------------------------------------------
    # Session lifecycle
    # ------------------------------------------------------------
    def start(self, language: Optional[str] = None) -> Dict[str, Any]:
        """Open a session on the built-in form and return its first question."""
        language = language or DEFAULT_LANGUAGE
        session = Session(session_id=str(uuid.uuid4()), fields=list(self.default_fields), language=language)
        self.store.put(session)
        log.info("session started: %s language=%s", session.session_id, language)
        return {"sessionId": session.session_id, **self._prompt(session, 0, language)}

    def upload_form(self, file_bytes: bytes, mime_type: Optional[str], file_name: Optional[str]) -> Dict[str, Any]:
        """
        Open a session whose questions come from an uploaded form.
        Only the mime type decides the field set; `file_bytes` is not parsed.
        """
        fields = fields_for_upload(mime_type)
        if fields is None:
            log.warning("upload rejected: file=%s type=%s", file_name, mime_type)
            raise UnsupportedMediaType(INVALID_FILE_MESSAGE)

        session = Session(
            session_id=str(uuid.uuid4()),
            fields=fields,
            language="en",
            file_name=file_name,
            file_type=mime_type,
        )
        self.store.put(session)
        log.info("session from upload: %s file=%s type=%s bytes=%d fields=%d",
                 session.session_id, file_name, mime_type, len(file_bytes or b""), len(fields))
        return {
            "sessionId": session.session_id,
            "fileName": file_name,
            "fileType": mime_type,
            "extractedFields": [f.model_dump() for f in fields],
            "totalFields": len(fields),
        }

    def get_session(self, session_id: str) -> Session:
        session = self.store.get(session_id) if session_id else None
        if session is None:
            raise SessionNotFound(session_id)
        return session

    def describe(self, session_id: str) -> Dict[str, Any]:
        s = self.get_session(session_id)
        return {
            "sessionId": s.session_id,
            "language": s.language,
            "fieldIndex": s.cursor,
            "totalFields": s.total_fields,
            "complete": s.complete,
            "answers": dict(s.answers),
            "createdAt": s.created_at.isoformat(),
        }

    # ------------------------------------------------------------
    # Questions and answers
    # ------------------------------------------------------------
    def question(self, session_id: str, field_index: int, language: Optional[str] = None) -> Dict[str, Any]:
        """Prompt for `field_index`, or the completion message past the last field."""
        session = self.get_session(session_id)
        if field_index is None or field_index < 0:
            raise InvalidRequest("Invalid field index")
        language = language or session.language
        if field_index >= session.total_fields:
            return {
                "sessionId": session.session_id,
                "complete": True,
                "message": self.translate_prompt(COMPLETED_MESSAGE, language),
                "fieldIndex": session.total_fields,
                "totalFields": session.total_fields,
            }
        return {"sessionId": session.session_id, "complete": False, **self._prompt(session, field_index, language)}

    def submit_answer(self, raw_text: Optional[str], field_type: Optional[str], field_id: Optional[str],
                      language: Optional[str] = None) -> Dict[str, Any]:
        """
        Normalize one answer. Session state is untouched, so a client can
        re-normalize freely and commit only the value it keeps.
        """
        if not raw_text or not field_id:
            log.warning("answer rejected: missing answer or field (field=%r)", field_id)
            raise InvalidRequest("Missing required parameters")

        result = self.normalize(raw_text, field_type, language or DEFAULT_LANGUAGE)
        log.debug("normalized field=%s type=%s %r -> %r", field_id, field_type, raw_text, result.value)
        return {"value": result.value, "original": result.original, "field": field_id}

    def normalize(self, raw_text: str, field_type: Optional[str], language: str = DEFAULT_LANGUAGE) -> NormalizationResult:
        value = self.normalizer.normalize_answer(raw_text, field_type, language)
        return NormalizationResult(value=value, original=raw_text)

    def commit_answer(self, session_id: str, field_id: Optional[str], value: Optional[str]) -> Dict[str, Any]:
        """Store a normalized value; last write wins. The cursor never moves back."""
        session = self.get_session(session_id)
        if not field_id or value is None:
            raise InvalidRequest("Missing required parameters")
        idx = session.index_of(field_id)
        if idx is None:
            log.warning("commit rejected: session=%s unknown field=%s", session_id, field_id)
            raise InvalidRequest(f"Unknown field: {field_id}")

        session.answers[field_id] = value
        session.cursor = max(session.cursor, idx + 1)
        self.store.put(session)
        log.info("answer committed: session=%s field=%s cursor=%d/%d",
                 session_id, field_id, session.cursor, session.total_fields)
        return {
            "sessionId": session.session_id,
            "field": field_id,
            "value": value,
            "fieldIndex": session.cursor,
            "totalFields": session.total_fields,
            "complete": session.complete,
        }

    def translate_prompt(self, text: str, language: Optional[str]) -> str:
        return self.translator.translate(text, language or DEFAULT_LANGUAGE)

    def _prompt(self, session: Session, index: int, language: str) -> Dict[str, Any]:
        f = session.fields[index]
        return {
            "question": self.translate_prompt(f.question, language),
            "originalQuestion": f.question,
            "fieldId": f.id,
            "fieldType": f.type,
            "fieldIndex": index,
            "totalFields": session.total_fields,
        }
