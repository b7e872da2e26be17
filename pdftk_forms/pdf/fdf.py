"""FDF (Forms Data Format) rendering."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path

FieldValue = str | Sequence[str]

FOOTER = "]\nendobj\ntrailer\n<<\n/Root 1 0 R\n\n>>\n%%EOF\n"

UTF16_BOM = "FEFF"


def quote(value: object) -> str:
    """Escape a value for use inside an FDF literal string."""
    return (
        str(value)
        .strip()
        .replace("\\", "\\\\")
        .replace("(", "\\(")
        .replace(")", "\\)")
        .replace("\n", "\\r")
    )


def pdf_string(value: object) -> str:
    """Render ``value`` as a PDF string token.

    ASCII text becomes an escaped literal ``(...)``. Anything else becomes a
    UTF-16BE hex string with a byte order mark; pdftk reads literals as
    PDFDocEncoding.
    """
    text = str(value).strip()
    if text.isascii():
        return f"({quote(text)})"
    encoded = text.replace("\n", "\r").encode("utf-16-be").hex().upper()
    return f"<{UTF16_BOM}{encoded}>"


class Fdf:
    def __init__(
        self,
        data: Mapping[str, FieldValue] | None = None,
        file: str | None = None,
        ufile: str | None = None,
        id: Sequence[str] | None = None,
    ) -> None:
        self.data = dict(data or {})
        self.file = file
        self.ufile = ufile
        self.id = list(id) if id is not None else None

    def header(self) -> str:
        header = "%FDF-1.2\n\n1 0 obj\n<<\n/FDF << /Fields 2 0 R"
        if self.file:
            header += "/F " + pdf_string(self.file)
        if self.ufile:
            header += "/UF " + pdf_string(self.ufile)
        if self.id:
            header += "/ID[" + "".join(pdf_string(part) for part in self.id) + "]"
        return header + ">>\n>>\nendobj\n2 0 obj\n["

    def field(self, name: str, value: FieldValue) -> str:
        if isinstance(value, str):
            rendered = pdf_string(value)
        else:
            rendered = "[" + "".join(pdf_string(item) for item in value) + "]"
        return f"<</T{pdf_string(name)}/V{rendered}>>\n"

    def render(self) -> str:
        body = "".join(self.field(name, value) for name, value in self.data.items())
        return self.header() + body + FOOTER

    def save_to(self, path: str | Path) -> Path:
        target = Path(path)
        target.write_text(self.render(), encoding="utf-8")
        return target

    def __str__(self) -> str:
        return self.render()
