from __future__ import annotations

import io
from typing import Any

from reportlab.pdfgen import canvas

from plan_mail.config.constants import DOCUMENT_AUTHOR
from plan_mail.pdf.renderer import Document, render


def write_pdf(document: Document, compress: bool = True) -> bytes:
    buffer = io.BytesIO()
    layout = document.layout
    pdf = canvas.Canvas(
        buffer,
        pagesize=(layout.width, layout.height),
        pageCompression=1 if compress else 0,
    )
    pdf.setTitle(document.title)
    pdf.setAuthor(DOCUMENT_AUTHOR)
    for page in document.pages:
        for instruction in page:
            pdf.setFont(instruction.font, instruction.font_size)
            pdf.setFillColorRGB(*instruction.color)
            pdf.drawString(instruction.x, instruction.y, instruction.text)
        pdf.showPage()
    pdf.save()
    return buffer.getvalue()


def render_plan_pdf(plan: dict[str, Any], display_name: Any = None) -> tuple[bytes, int]:
    """Render a plan straight to PDF bytes; also returns the page count."""
    document = render(plan, display_name)
    return write_pdf(document), document.page_count
