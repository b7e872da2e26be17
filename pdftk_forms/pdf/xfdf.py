"""XFDF (XML Forms Data Format) rendering."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from xml.sax.saxutils import escape, quoteattr

from pdftk_forms.pdf.fdf import FieldValue

HEADER = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    '<xfdf xmlns="http://ns.adobe.com/xfdf/" xml:space="preserve">\n'
    "  <fields>\n"
)
FOOTER = "  </fields>\n</xfdf>\n"


class Xfdf:
    def __init__(self, data: Mapping[str, FieldValue] | None = None) -> None:
        self.data = dict(data or {})

    def field(self, name: str, value: FieldValue) -> str:
        values = [value] if isinstance(value, str) else list(value)
        rendered = "".join(f"<value>{escape(str(item))}</value>" for item in values)
        return f"    <field name={quoteattr(str(name))}>{rendered}</field>\n"

    def render(self) -> str:
        body = "".join(self.field(name, value) for name, value in self.data.items())
        return HEADER + body + FOOTER

    def save_to(self, path: str | Path) -> Path:
        target = Path(path)
        target.write_text(self.render(), encoding="utf-8")
        return target

    def __str__(self) -> str:
        return self.render()
