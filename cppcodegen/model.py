"""Composable C++ source nodes and their renderer.

This module defines three node kinds: ``Snippet`` holds final text lines,
``Block`` wraps a list of snippets in a header/footer pair, and ``Class`` sorts
its snippets into access-specifier buckets. Nested nodes are flattened into
literal lines the moment they are added, so a parent never holds a live
reference to another block or class.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Protocol, Union, runtime_checkable

from .codegen import Indent
from .templates import (
    ACCESS_ORDER,
    CLASS_CLOSE,
    AccessSpecifier,
    Kind,
    access_label,
    block_wrapping,
    class_header,
    snippet_wrapping,
)

logger = logging.getLogger(__name__)


@runtime_checkable
class Renderable(Protocol):
    """Anything that can be absorbed as lines: it renders itself to text."""

    def render(self) -> str: ...


Content = Union[str, Renderable, Iterable[Union[str, Renderable]]]


def _describe(node: Renderable) -> str:
    kind = getattr(node, "kind", None)
    return kind.value if isinstance(kind, Kind) else type(node).__name__


def _split_rendered(text: str) -> list[str]:
    # newline-separated; a trailing newline does not yield an empty last line
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


# -----------------------------
# Leaf
# -----------------------------

@dataclass
class Snippet:
    kind: Kind = Kind.LINE
    indent: Indent = field(default_factory=Indent)
    base_dir_path: str = ""
    header: str = field(default="", init=False)
    footer: str = field(default="", init=False)
    _lines: list[str] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        self.indent = self.indent.copy()
        self.header, self.footer = snippet_wrapping(self.kind, self.base_dir_path)

    @classmethod
    def line(cls, indent: Indent | None = None) -> "Snippet":
        return cls(Kind.LINE, indent if indent is not None else Indent())

    @classmethod
    def system_include(cls, indent: Indent | None = None) -> "Snippet":
        return cls(Kind.SYSTEM_INCLUDE, indent if indent is not None else Indent())

    @classmethod
    def local_include(cls, base_dir_path: str = "", indent: Indent | None = None) -> "Snippet":
        return cls(Kind.LOCAL_INCLUDE, indent if indent is not None else Indent(), base_dir_path)

    @property
    def lines(self) -> tuple[str, ...]:
        return tuple(self._lines)

    def add(self, item: Content) -> None:
        """
        Append one literal line, absorb a rendered node, or append each item
        of a sequence in order. Only literal text gets header/footer wrapping.
        """
        if isinstance(item, str):
            self._lines.append(f"{self.header}{item}{self.footer}")
        elif isinstance(item, Renderable):
            absorbed = _split_rendered(item.render())
            logger.debug("Absorbed %s as %d line(s).", _describe(item), len(absorbed))
            self._lines.extend(absorbed)
        elif isinstance(item, Iterable):
            for each in item:
                self.add(each)
        else:
            # scalars outside the contract are kept as their text
            self.add(str(item))

    def render(self) -> str:
        prefix = self.indent.indenting()
        return "".join(f"{prefix}{ln}\n" for ln in self._lines)

    def increment_indent(self, levels: int = 1) -> None:
        self.indent.level += levels


def _wrap(item: Content, indent: Indent) -> list[Snippet]:
    """One fresh plain-line snippet per literal text or absorbed node."""
    if isinstance(item, (str, Renderable)) or not isinstance(item, Iterable):
        child = Snippet.line(indent)
        child.add(item)
        return [child]
    wrapped: list[Snippet] = []
    for each in item:
        wrapped.extend(_wrap(each, indent))
    return wrapped


def _reindent(snippets: Iterable[Snippet], levels: int) -> int:
    count = 0
    for sn in snippets:
        sn.increment_indent(levels)
        count += 1
    return count


# -----------------------------
# Composites
# -----------------------------

@dataclass
class Block:
    kind: Kind = Kind.CODE_BLOCK
    indent: Indent = field(default_factory=Indent)
    declaration: str = ""
    header: str = field(default="", init=False)
    footer: str = field(default="", init=False)
    _snippets: list[Snippet] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        self.indent = self.indent.copy()
        self.header, self.footer = block_wrapping(self.kind, self.declaration)

    @classmethod
    def code_block(cls, indent: Indent | None = None) -> "Block":
        return cls(Kind.CODE_BLOCK, indent if indent is not None else Indent())

    @classmethod
    def definition(cls, declaration: str, indent: Indent | None = None) -> "Block":
        return cls(Kind.DEFINITION, indent if indent is not None else Indent(), declaration)

    @classmethod
    def namespace(cls, name: str, indent: Indent | None = None) -> "Block":
        return cls(Kind.NAMESPACE, indent if indent is not None else Indent(), name)

    @property
    def snippets(self) -> tuple[Snippet, ...]:
        return tuple(self._snippets)

    def add(self, item: Content) -> None:
        self._snippets.extend(_wrap(item, self.indent.child()))

    def render(self) -> str:
        prefix = self.indent.indenting()
        body = "".join(sn.render() for sn in self._snippets)
        return f"{prefix}{self.header}{body}{prefix}{self.footer}"

    def increment_indent(self, levels: int = 1) -> None:
        self.indent.level += levels
        count = _reindent(self._snippets, levels)
        logger.debug("Block re-indented by %d (%d snippet(s)).", levels, count)


def _empty_buckets() -> dict[AccessSpecifier, list[Snippet]]:
    return {access: [] for access in ACCESS_ORDER}


@dataclass
class Class:
    name: str
    indent: Indent = field(default_factory=Indent)
    kind: Kind = field(default=Kind.CLASS, init=False)
    header: str = field(default="", init=False)
    footer: str = field(default=CLASS_CLOSE, init=False)
    _members: dict[AccessSpecifier, list[Snippet]] = field(
        default_factory=_empty_buckets, init=False, repr=False
    )

    def __post_init__(self) -> None:
        self.indent = self.indent.copy()
        self.header = class_header(self.name)

    def members(self, access: AccessSpecifier) -> tuple[Snippet, ...]:
        return tuple(self._members.get(access, ()))

    def add(self, item: Content, access: AccessSpecifier = AccessSpecifier.PRIVATE) -> None:
        # unknown access values get their own bucket, which is never rendered
        self._members.setdefault(access, []).extend(_wrap(item, self.indent.child()))

    def render(self) -> str:
        prefix = self.indent.indenting()
        out = f"{prefix}{self.header}"
        for access in ACCESS_ORDER:
            bucket = self._members[access]
            if not bucket:
                continue
            out += prefix + access_label(access)
            out += "".join(sn.render() for sn in bucket)
        return out + f"{prefix}{self.footer}"

    def increment_indent(self, levels: int = 1) -> None:
        self.indent.level += levels
        count = 0
        for bucket in self._members.values():
            count += _reindent(bucket, levels)
        logger.debug("Class %s re-indented by %d (%d snippet(s)).", self.name, levels, count)
