"""
Form definitions: the built-in questionnaire and the field sets handed out
for uploaded documents.

Uploads are classified by mime type only. File content is never inspected;
the field sets below stand in for real OCR / document parsing.
"""
from typing import List, Optional

from .models import FieldSpec

DEFAULT_FIELDS: List[FieldSpec] = [
    FieldSpec(id="fullName", question="What is your full name?", type="text"),
    FieldSpec(id="email", question="What is your email address?", type="email"),
    FieldSpec(id="phone", question="What is your phone number?", type="tel"),
    FieldSpec(id="address", question="What is your residential address?", type="text"),
    FieldSpec(id="dateOfBirth", question="What is your date of birth?", type="date"),
    FieldSpec(id="occupation", question="What is your occupation?", type="text"),
]

# Scanned documents and photos of paper forms
DOCUMENT_FIELDS: List[FieldSpec] = [
    FieldSpec(id="fullName", question="Full Name", type="text", required=True),
    FieldSpec(id="email", question="Email Address", type="email", required=True),
    FieldSpec(id="phone", question="Phone Number", type="tel", required=False),
    FieldSpec(id="address", question="Address", type="text", required=False),
    FieldSpec(id="signature", question="Signature", type="signature", required=True),
    FieldSpec(id="date", question="Date", type="date", required=False),
]

# Word-processor files
WORD_FIELDS: List[FieldSpec] = [
    FieldSpec(id="applicantName", question="Applicant Name", type="text", required=True),
    FieldSpec(id="idNumber", question="ID Number", type="text", required=True),
    FieldSpec(id="contact", question="Contact Number", type="tel", required=True),
    FieldSpec(id="email", question="Email", type="email", required=False),
    FieldSpec(id="reference", question="Reference Number", type="text", required=False),
]

ALLOWED_MIME_TYPES = (
    "application/pdf",
    "image/jpeg",
    "image/png",
    "application/msword",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
)


def fields_for_upload(mime_type: Optional[str]) -> Optional[List[FieldSpec]]:
    """
    Map an upload's mime type to its field set.
    Returns None when the mime type is not allow-listed.
    """
    if mime_type not in ALLOWED_MIME_TYPES:
        return None
    if mime_type == "application/pdf" or mime_type.startswith("image/"):
        return list(DOCUMENT_FIELDS)
    # only the two word-processor types are left
    return list(WORD_FIELDS)
