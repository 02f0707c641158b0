from __future__ import annotations

from dataclasses import dataclass, replace

DEFAULT_INDENT_SIZE = 2
DEFAULT_FILL_CHARACTER = " "


@dataclass
class Indent:
    """
    Nesting level plus the unit used to render it.
    Owning nodes bump ``level`` when they move deeper; nothing else changes.
    """
    level: int = 0
    unit_width: int = DEFAULT_INDENT_SIZE
    fill_character: str = DEFAULT_FILL_CHARACTER

    def indenting(self) -> str:
        return self.fill_character * self.unit_width * self.level

    def child(self) -> "Indent":
        # one level deeper in the same unit; fill resets to the default
        return Indent(self.level + 1, self.unit_width)

    def copy(self) -> "Indent":
        return replace(self)
