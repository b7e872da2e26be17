from __future__ import annotations

from io import BytesIO
from pathlib import Path

import pytest
from reportlab.lib import colors
from reportlab.pdfgen import canvas

from pdftk_forms.pdf.runner import PdftkCommandError

SAMPLE_DUMP = """\
---
FieldType: Text
FieldName: first_name
FieldFlags: 0
FieldJustification: Left
---
FieldType: Text
FieldName: city
FieldFlags: 0
FieldValue: Lyon
FieldJustification: Left
---
FieldType: Text
FieldName: reference
FieldFlags: 1
FieldValue: REF-42
FieldJustification: Left
---
FieldType: Button
FieldName: agree
FieldFlags: 0
FieldStateOption: Off
FieldStateOption: Yes
---
FieldType: Choice
FieldName: country
FieldFlags: 131072
FieldValue:
FieldStateOption: FR
FieldStateOption: DE
"""

FILLED_PDF = b"%PDF-1.4\n% filled by fake pdftk\n%%EOF\n"


class FakeRunner:
    """Stands in for the pdftk process; records every command it receives."""

    def __init__(self, dump: str = SAMPLE_DUMP, version: str = "pdftk 2.02 a Handy Tool for Manipulating PDF Documents") -> None:
        self.dump = dump
        self.version = version
        self.commands: list[list[str]] = []
        self.data_files: list[str] = []

    def __call__(self, command):
        command = list(command)
        self.commands.append(command)
        if "--version" in command:
            return self.version
        if "fill_form" in command:
            source = command[command.index("fill_form") - 1]
            data_path = command[command.index("fill_form") + 1]
            output = command[command.index("output") + 1]
            if Path(output).resolve() == Path(source).resolve():
                raise PdftkCommandError(command, 1, "Error: The given output filename may not also be given as an input filename.")
            self.data_files.append(Path(data_path).read_text(encoding="utf-8"))
            Path(output).write_bytes(FILLED_PDF)
            return ""
        return self.dump


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def template(tmp_path: Path) -> Path:
    path = tmp_path / "bic.pdf"
    path.write_bytes(b"%PDF-1.4\n%%EOF\n")
    return path


def build_form_pdf(text_fields: list[str], checkboxes: tuple[str, ...] = ()) -> bytes:
    """One-page PDF with an AcroForm text field per name, stacked top to bottom."""
    buffer = BytesIO()
    report = canvas.Canvas(buffer, pagesize=(612, 792))
    y = 720
    for name in text_fields:
        report.acroForm.textfield(
            name=name,
            x=72,
            y=y,
            width=300,
            height=20,
            value="",
            borderWidth=0,
            textColor=colors.black,
        )
        y -= 40
    for name in checkboxes:
        report.acroForm.checkbox(
            name=name,
            x=72,
            y=y,
            size=16,
            checked=False,
            buttonStyle="check",
        )
        y -= 40
    report.showPage()
    report.save()
    return buffer.getvalue()


@pytest.fixture
def form_pdf(tmp_path: Path) -> Path:
    path = tmp_path / "contact.pdf"
    path.write_bytes(build_form_pdf(["first_name", "last_name", "notes"], ("subscribe",)))
    return path
