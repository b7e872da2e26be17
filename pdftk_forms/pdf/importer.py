"""Parse pdftk field dumps into in-memory models."""

from __future__ import annotations

from html import unescape

from pdftk_forms.model.field import Field

STANZA_SEPARATOR = "---"


class FieldDumpError(RuntimeError):
    """Raised when a field dump line cannot be interpreted."""


def parse_field_dump(text: str) -> list[Field]:
    """Turn ``dump_data_fields`` output into Field objects.

    Stanzas are separated by ``---`` lines. Each line inside a stanza is a
    ``Key: value`` pair; ``FieldBegin`` markers and keys we do not use are
    ignored. Stanzas without a ``FieldName`` are dropped.
    """
    imported: list[Field] = []
    for stanza in _split_stanzas(text):
        field = _build_field(stanza)
        if field is not None:
            imported.append(field)
    return imported


def _split_stanzas(text: str) -> list[list[tuple[str, str]]]:
    stanzas: list[list[tuple[str, str]]] = []
    current: list[tuple[str, str]] = []

    for raw_line in text.splitlines():
        line = raw_line.rstrip("\r")
        if line.strip() == STANZA_SEPARATOR:
            if current:
                stanzas.append(current)
            current = []
            continue
        if not line.strip() or line.strip() == "FieldBegin":
            continue

        key, sep, value = line.partition(":")
        if not sep:
            continue
        # pdftk writes "Key: value"; only the first separator counts
        if value.startswith(" "):
            value = value[1:]
        # PDF text uses CR line breaks; the FDF writer turns \n back into CR
        text = unescape(value).replace("\r\n", "\n").replace("\r", "\n")
        current.append((key.strip(), text))

    if current:
        stanzas.append(current)
    return stanzas


def _build_field(stanza: list[tuple[str, str]]) -> Field | None:
    name: str | None = None
    field_type = ""
    value: str | None = None
    flags = 0
    justification: str | None = None
    options: list[str] = []

    for key, raw in stanza:
        if key == "FieldName":
            name = raw
        elif key == "FieldType":
            field_type = raw
        elif key == "FieldValue":
            value = raw
        elif key == "FieldFlags":
            try:
                flags = int(raw)
            except ValueError as exc:
                raise FieldDumpError(f"Invalid FieldFlags: {raw!r}") from exc
        elif key == "FieldJustification":
            justification = raw
        elif key == "FieldStateOption":
            options.append(raw)

    if name is None:
        return None

    return Field(
        name=name,
        type=field_type,
        value=value,
        flags=flags,
        justification=justification,
        options=options,
    )
