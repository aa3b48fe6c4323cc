import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, ConfigDict, Field

from voiceform.deps import get_wizard
from voiceform.errors import WizardError
from voiceform.forms import DEFAULT_FIELDS
from voiceform.wizard import SessionWizard

log = logging.getLogger(__name__)

# --------------------------------------------------------------------
# Router setup
# --------------------------------------------------------------------
router = APIRouter(prefix="/api", tags=["form"])


# Request schemas. Everything is optional here so that missing values are
# reported with our own 400 messages instead of a generic validation error.
class StartRequest(BaseModel):
    language: Optional[str] = None


class AnswerRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    answer: Optional[str] = None                          # raw transcript
    field: Optional[str] = None                           # field id the answer belongs to
    field_type: Optional[str] = Field(None, alias="fieldType")
    language: Optional[str] = None


class QuestionRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    session_id: Optional[str] = Field(None, alias="sessionId")
    field_index: int = Field(0, alias="fieldIndex")
    language: Optional[str] = None


class CommitRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    session_id: Optional[str] = Field(None, alias="sessionId")
    field: Optional[str] = None
    value: Optional[str] = None


@router.post("/start")
def start(req: Optional[StartRequest] = None, wizard: SessionWizard = Depends(get_wizard)) -> Dict[str, Any]:
    """
    Open a new session on the built-in form.

    Response JSON:
      {"success": true, "sessionId": ..., "question": <localized prompt>,
       "originalQuestion": ..., "fieldId": ..., "fieldType": ...,
       "fieldIndex": 0, "totalFields": 6}
    """
    try:
        out = wizard.start((req.language if req else None) or "en")
    except Exception:
        log.exception("start failed")
        raise HTTPException(500, "Failed to start form")
    return {"success": True, **out}


@router.post("/answer")
def answer(req: AnswerRequest, wizard: SessionWizard = Depends(get_wizard)) -> Dict[str, Any]:
    """
    Normalize a transcript for one field. Nothing is stored; see /api/commit.

    Request body:
      {"answer": "my number is 555-123-4567", "field": "phone", "fieldType": "tel"}
    """
    try:
        out = wizard.submit_answer(req.answer, req.field_type, req.field, req.language or "en")
    except WizardError:
        raise
    except Exception:
        log.exception("answer processing failed: field=%s", req.field)
        raise HTTPException(500, "Failed to process answer")
    return {"success": True, **out}


@router.post("/question")
def question(req: QuestionRequest, wizard: SessionWizard = Depends(get_wizard)) -> Dict[str, Any]:
    """Localized prompt for the requested field index, or the completion message."""
    if not req.session_id:
        raise HTTPException(400, "Missing required parameters")
    return {"success": True, **wizard.question(req.session_id, req.field_index, req.language)}


@router.post("/commit")
def commit(req: CommitRequest, wizard: SessionWizard = Depends(get_wizard)) -> Dict[str, Any]:
    """Store a normalized value in the session and report progress."""
    if not req.session_id:
        raise HTTPException(400, "Missing required parameters")
    return {"success": True, **wizard.commit_answer(req.session_id, req.field, req.value)}


@router.get("/session/{session_id}")
def get_session(session_id: str, wizard: SessionWizard = Depends(get_wizard)) -> Dict[str, Any]:
    return {"success": True, **wizard.describe(session_id)}


@router.get("/form-structure")
def form_structure() -> Dict[str, Any]:
    """The built-in questionnaire, in asking order."""
    return {"success": True, "fields": [f.public() for f in DEFAULT_FIELDS]}
