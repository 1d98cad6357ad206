import re

from plan_mail.pdf.renderer import Line, PageLayout, paginate, render
from plan_mail.pdf.writer import render_plan_pdf, write_pdf

PAGE_OBJECT = re.compile(rb"/Type /Page(?!s)")


def test_write_pdf_produces_valid_single_page_document():
    data = write_pdf(render({"summary": "Lose fat"}, "Ana"))
    assert data.startswith(b"%PDF-")
    assert data.rstrip().endswith(b"%%EOF")
    assert len(PAGE_OBJECT.findall(data)) == 1


def test_write_pdf_emits_one_pdf_page_per_document_page():
    layout = PageLayout(top=800, bottom=220)
    document = paginate([Line(f"row {i}") for i in range(75)], layout)
    assert document.page_count == 3
    data = write_pdf(document)
    assert len(PAGE_OBJECT.findall(data)) == 3


def test_uncompressed_output_contains_drawn_text():
    data = write_pdf(render({"notes": "Drink water"}, "Ana"), compress=False)
    assert b"Drink water" in data
    assert b"Hi Ana" in data


def test_render_plan_pdf_reports_page_count():
    data, page_count = render_plan_pdf({"notes": "\n".join(str(i) for i in range(120))})
    assert page_count >= 2
    assert len(PAGE_OBJECT.findall(data)) == page_count
