"""Form field model definitions."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntFlag


class FieldFlag(IntFlag):
    READ_ONLY = 1 << 0
    REQUIRED = 1 << 1
    NO_EXPORT = 1 << 2
    RADIO = 1 << 15
    PUSH_BUTTON = 1 << 16
    COMBO = 1 << 17


TEXT = "Text"
BUTTON = "Button"
CHOICE = "Choice"
SIGNATURE = "Signature"


@dataclass(slots=True)
class Field:
    name: str
    type: str
    value: str | None = None
    flags: int = 0
    justification: str | None = None
    options: list[str] = field(default_factory=list)

    def _has(self, flag: FieldFlag) -> bool:
        return bool(self.flags & flag)

    @property
    def read_only(self) -> bool:
        return self._has(FieldFlag.READ_ONLY)

    @property
    def required(self) -> bool:
        return self._has(FieldFlag.REQUIRED)

    @property
    def no_export(self) -> bool:
        return self._has(FieldFlag.NO_EXPORT)

    @property
    def is_radio(self) -> bool:
        return self.type == BUTTON and self._has(FieldFlag.RADIO)

    @property
    def is_push_button(self) -> bool:
        return self.type == BUTTON and self._has(FieldFlag.PUSH_BUTTON)

    @property
    def is_checkbox(self) -> bool:
        return self.type == BUTTON and not (self.is_radio or self.is_push_button)

    @property
    def is_combo(self) -> bool:
        return self.type == CHOICE and self._has(FieldFlag.COMBO)

    def to_dict(self) -> dict[str, object]:
        return {
            "name": self.name,
            "type": self.type,
            "value": self.value,
            "flags": self.flags,
            "justification": self.justification,
            "options": list(self.options),
        }
