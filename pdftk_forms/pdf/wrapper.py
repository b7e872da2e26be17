"""Command builder for the pdftk binary: field dumps and form filling."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from contextlib import suppress
import logging
import os
from pathlib import Path
import re
import tempfile

from pdftk_forms import config
from pdftk_forms.model.field import Field
from pdftk_forms.pdf.fdf import Fdf, FieldValue
from pdftk_forms.pdf.importer import parse_field_dump
from pdftk_forms.pdf.loader import resolve_template
from pdftk_forms.pdf.runner import Runner, run_command
from pdftk_forms.pdf.xfdf import Xfdf

logger = logging.getLogger(__name__)

DATA_FORMATS = ("fdf", "xfdf")

_VERSION_PATTERN = re.compile(r"pdftk(?:-java)?\D*?(\d+)\.(\d+)", re.IGNORECASE)


class Wrapper:
    """Runs pdftk on behalf of a Form.

    ``runner`` receives the full argument list (binary first) and returns
    stdout; tests substitute a fake to avoid touching the real binary.
    """

    def __init__(self, path: str | None = None, runner: Runner | None = None) -> None:
        self.path = path or config.PDFTK_PATH
        self.runner = runner or run_command

    def call(self, *args: str | Path) -> str:
        return self.runner([self.path, *(str(arg) for arg in args)])

    def fields(self, template: str | Path) -> list[Field]:
        source = resolve_template(template)
        output = self.call(source, config.DUMP_COMMAND)
        fields = parse_field_dump(output)
        logger.debug("Read %d field(s) from %s", len(fields), source)
        return fields

    def fill_form(
        self,
        template: str | Path,
        destination: str | Path,
        values: Mapping[str, FieldValue],
        flatten: bool = False,
        need_appearances: bool = False,
        owner_password: str | None = None,
        user_password: str | None = None,
        allow: Sequence[str] | None = None,
        data_format: str = "fdf",
    ) -> Path:
        source = resolve_template(template)
        output = Path(destination)
        if data_format not in DATA_FORMATS:
            raise ValueError(f"Unsupported data format: {data_format!r}")

        document = Xfdf(values) if data_format == "xfdf" else Fdf(values)
        fd, data_path = tempfile.mkstemp(prefix=config.DATA_FILE_PREFIX, suffix=f".{data_format}")
        os.close(fd)

        # pdftk refuses to write over one of its inputs
        in_place = output.resolve() == source.resolve()
        target = output
        if in_place:
            fd, temp_output = tempfile.mkstemp(prefix=config.DATA_FILE_PREFIX, suffix=".pdf", dir=source.parent)
            os.close(fd)
            target = Path(temp_output)

        try:
            document.save_to(data_path)
            args: list[str | Path] = [source, "fill_form", data_path, "output", target]
            if flatten:
                args.append("flatten")
            if need_appearances:
                args.append("need_appearances")
            args.extend(self._encryption_args(owner_password, user_password, allow))
            self.call(*args)
            if in_place:
                os.replace(target, output)
        finally:
            with suppress(OSError):
                os.remove(data_path)
            if in_place:
                with suppress(OSError):
                    os.remove(target)

        logger.debug("Filled %d value(s) from %s into %s", len(values), source, output)
        return output

    def version(self) -> str | None:
        match = _VERSION_PATTERN.search(self.call("--version"))
        if match is None:
            return None
        return f"{match.group(1)}.{match.group(2)}"

    def supports_xfdf(self) -> bool:
        version = self.version()
        if version is None:
            return False
        major, minor = (int(part) for part in version.split("."))
        return (major, minor) >= config.XFDF_MIN_VERSION

    @staticmethod
    def _encryption_args(
        owner_password: str | None,
        user_password: str | None,
        allow: Sequence[str] | None,
    ) -> list[str]:
        if not (owner_password or user_password):
            return []
        args = ["encrypt_128bit"]
        if owner_password:
            args.extend(["owner_pw", owner_password])
        if user_password:
            args.extend(["user_pw", user_password])
        if allow:
            args.extend(["allow", *allow])
        return args
