import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, File, HTTPException, Response, UploadFile
from pydantic import BaseModel, ConfigDict, Field

from voiceform.deps import get_wizard
from voiceform.errors import WizardError
from voiceform.forms import DEFAULT_FIELDS
from voiceform.render import render_pdf
from voiceform.wizard import SessionWizard

log = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["documents"])


class TranslateRequest(BaseModel):
    text: Optional[str] = None
    language: Optional[str] = None


class RenderRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    form_data: Optional[Dict[str, Any]] = Field(None, alias="formData")
    session_id: Optional[str] = Field(None, alias="sessionId")  # use the session's labels/answers
    language: Optional[str] = None


@router.post("/translate")
def translate(req: TranslateRequest, wizard: SessionWizard = Depends(get_wizard)) -> Dict[str, Any]:
    if not req.text:
        raise HTTPException(400, "No text provided")
    language = req.language or "en"
    try:
        translated = wizard.translate_prompt(req.text, language)
    except Exception:
        log.exception("translation failed: language=%s", language)
        raise HTTPException(500, "Failed to translate text")
    return {"success": True, "originalText": req.text, "translatedText": translated, "language": language}


@router.post("/generate-pdf")
def generate_pdf(req: RenderRequest, wizard: SessionWizard = Depends(get_wizard)) -> Response:
    """
    Render the filled form as a PDF download.

    Either `formData` (field id -> value) or `sessionId` must be given.
    With a session, its own field list supplies the labels and, when
    `formData` is absent, its committed answers supply the values.
    """
    fields = DEFAULT_FIELDS
    form_data = req.form_data
    if req.session_id:
        session = wizard.get_session(req.session_id)
        fields = session.fields
        if form_data is None:
            form_data = dict(session.answers)
    if form_data is None:
        raise HTTPException(400, "No form data provided")

    try:
        pdf = render_pdf(form_data, fields, req.language or "en")
    except Exception:
        log.exception("pdf rendering failed")
        raise HTTPException(500, "Failed to generate PDF")

    return Response(
        content=pdf,
        media_type="application/pdf",
        headers={"Content-Disposition": 'attachment; filename="filled-form.pdf"'},
    )


@router.post("/upload-form")
async def upload_form(file: Optional[UploadFile] = File(None), wizard: SessionWizard = Depends(get_wizard)) -> Dict[str, Any]:
    """
    Accept a blank form (PDF, JPG, PNG, DOC, DOCX) and open a session for it.
    Field extraction is mocked: the field set depends on the file type only.
    """
    if file is None:
        raise HTTPException(400, "No file provided")
    try:
        content = await file.read()
        out = wizard.upload_form(content, file.content_type, file.filename)
    except WizardError:
        raise
    except Exception:
        log.exception("upload failed: file=%s", file.filename)
        raise HTTPException(500, "Failed to process uploaded form")
    return {"success": True, **out}
