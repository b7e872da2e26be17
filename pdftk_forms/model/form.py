"""Form model: the fillable fields of one PDF template."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from pdftk_forms import config
from pdftk_forms.model.field import TEXT, Field
from pdftk_forms.pdf.fdf import Fdf
from pdftk_forms.pdf.runner import Runner
from pdftk_forms.pdf.wrapper import Wrapper
from pdftk_forms.pdf.xfdf import Xfdf


class Form:
    """A fillable form on a particular PDF.

    Fields are read from the template through pdftk the first time they
    are needed and cached for the lifetime of the object::

        form = Form("bic.pdf")
        form.set("name", "Jane")
        form["city"] = "Lyon"
        form.save()  # -> bic.pdf.filled

    ``get``/``set`` are the primary accessors. Item access is a thin layer
    over them that raises ``KeyError`` for names the template does not
    declare.
    """

    def __init__(
        self,
        template: str | Path,
        wrapper: Wrapper | None = None,
        path: str | None = None,
        runner: Runner | None = None,
    ) -> None:
        self.template = Path(template)
        self._wrapper = wrapper or Wrapper(path=path, runner=runner)
        self._fields: list[Field] | None = None

    @property
    def wrapper(self) -> Wrapper:
        return self._wrapper

    @property
    def fields(self) -> list[Field]:
        if self._fields is None:
            self._fields = self._wrapper.fields(self.template)
        return self._fields

    @property
    def loaded(self) -> bool:
        return self._fields is not None

    def reload(self) -> None:
        self._fields = None

    def field_names(self) -> list[str]:
        return [field.name for field in self.fields]

    def get(self, name: object) -> Field | None:
        # Duplicate names in a dump resolve to the first occurrence.
        key = str(name)
        for field in self.fields:
            if field.name == key:
                return field
        return None

    def set(self, name: object, value: str) -> str | bool:
        """Store ``value`` on a writable field and return it.

        Returns ``False`` for unknown or read-only fields. Setting ``""``
        returns ``""``, which is also falsy: compare with ``is False`` to
        detect a refused write.
        """
        field = self.get(name)
        if field is None or field.read_only:
            return False
        field.value = value
        return value

    def save(self, path: str | Path | None = None, **fill_options: object) -> Path:
        """Fill the template with the current values and write a new PDF.

        ``fill_options`` go straight to ``Wrapper.fill_form`` (``flatten``,
        ``need_appearances``, passwords, ``data_format``). Returns the
        output path, ``<template>.filled`` by default.
        """
        output = Path(path) if path is not None else self._default_output()
        return self._wrapper.fill_form(self.template, output, self.to_dict(), **fill_options)

    def save_in_place(self, **fill_options: object) -> Path:
        return self.save(self.template, **fill_options)

    def to_dict(self, full: bool = False) -> dict[str, str]:
        values: dict[str, str] = {}
        for field in self.fields:
            if full or field.value:
                values[field.name] = "" if field.value is None else str(field.value)
        return values

    def to_fdf(self, full: bool = False) -> Fdf:
        return Fdf(self.to_dict(full))

    def to_xfdf(self, full: bool = False) -> Xfdf:
        return Xfdf(self.to_dict(full))

    def dummy_fill(self) -> Form:
        """Set every text field to its own name; handy for mapping unnamed forms."""
        for field in self.fields:
            if field.type == TEXT:
                field.value = field.name
        return self

    def _default_output(self) -> Path:
        return self.template.with_name(self.template.name + config.FILLED_SUFFIX)

    def __getitem__(self, name: str) -> Field:
        field = self.get(name)
        if field is None:
            raise KeyError(name)
        return field

    def __setitem__(self, name: str, value: str) -> None:
        if name not in self:
            raise KeyError(name)
        self.set(name, value)

    def __contains__(self, name: object) -> bool:
        return self.get(name) is not None

    def __iter__(self) -> Iterator[Field]:
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)

    def __str__(self) -> str:
        return str(self.to_dict(full=True))
