from datetime import date
from typing import Dict, List, Optional

from fpdf import FPDF

from voiceform.models import FieldSpec

TITLE = "Draft Form - Generated by AI Assistant"
FOOTER = "This form was automatically filled using AI Voice Assistant technology."
MISSING = "Not provided"


def _latin1(s: str) -> str:
    """Core PDF fonts only cover Latin-1; anything else becomes '?'."""
    return s.encode("latin-1", "replace").decode("latin-1")


def render_pdf(form_data: Dict[str, object], fields: List[FieldSpec], language: str = "en",
               generated_on: Optional[date] = None) -> bytes:
    """
    Lay out one label/value block per field and return the PDF bytes.
    Values missing from `form_data` are printed as "Not provided".
    """
    generated_on = generated_on or date.today()

    pdf = FPDF(format="A4")
    pdf.set_auto_page_break(auto=True, margin=20)
    pdf.add_page()

    pdf.set_font("helvetica", "B", 20)
    pdf.cell(0, 10, TITLE, align="C", new_x="LMARGIN", new_y="NEXT")
    pdf.set_font("helvetica", "", 12)
    pdf.cell(0, 8, f"Generated on {generated_on.isoformat()}", align="C", new_x="LMARGIN", new_y="NEXT")
    pdf.ln(10)

    for f in fields:
        value = form_data.get(f.id)
        text = str(value) if value not in (None, "") else MISSING

        pdf.set_font("helvetica", "B", 14)
        pdf.cell(0, 8, _latin1(f.question), new_x="LMARGIN", new_y="NEXT")
        pdf.set_font("helvetica", "", 12)
        pdf.multi_cell(0, 6, _latin1(text), new_x="LMARGIN", new_y="NEXT")
        pdf.ln(6)

    pdf.ln(4)
    pdf.set_font("helvetica", "I", 10)
    pdf.cell(0, 6, FOOTER, align="C", new_x="LMARGIN", new_y="NEXT")
    pdf.cell(0, 6, _latin1(f"Language: {language} | Please review all information for accuracy."),
             align="C", new_x="LMARGIN", new_y="NEXT")

    return bytes(pdf.output())
