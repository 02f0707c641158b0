from __future__ import annotations

from typing import Literal, NotRequired, TypedDict, Union

from .codegen import DEFAULT_FILL_CHARACTER, DEFAULT_INDENT_SIZE, Indent
from .model import Block, Class, Snippet
from .templates import AccessSpecifier, Kind


class IndentSpec(TypedDict, total=False):
    level: int
    unit_width: int
    fill_character: str


class SnippetSpec(TypedDict):
    kind: Literal["line", "system_include", "local_include"]
    base_dir_path: NotRequired[str]
    indent: NotRequired[IndentSpec]
    lines: NotRequired[list[str]]


class BlockSpec(TypedDict):
    kind: Literal["code_block", "definition", "namespace"]
    declaration: NotRequired[str]  # signature for definitions, name for namespaces
    indent: NotRequired[IndentSpec]
    body: NotRequired[list["BodyItem"]]


class ClassSpec(TypedDict):
    kind: Literal["class"]
    name: str
    indent: NotRequired[IndentSpec]
    public: NotRequired[list["BodyItem"]]
    protected: NotRequired[list["BodyItem"]]
    private: NotRequired[list["BodyItem"]]


NodeSpec = Union[SnippetSpec, BlockSpec, ClassSpec]
BodyItem = Union[str, NodeSpec]

SNIPPET_KINDS: tuple[Kind, ...] = (Kind.LINE, Kind.SYSTEM_INCLUDE, Kind.LOCAL_INCLUDE)
BLOCK_KINDS: tuple[Kind, ...] = (Kind.CODE_BLOCK, Kind.DEFINITION, Kind.NAMESPACE)


def _kind_of(spec: NodeSpec, allowed: tuple[Kind, ...]) -> Kind:
    raw = spec.get("kind")
    try:
        kind = Kind(raw)
    except ValueError:
        raise ValueError(f"Unknown node kind {raw!r}. Allowed: {[k.value for k in allowed]}") from None
    if kind not in allowed:
        raise ValueError(f"Node kind {raw!r} not allowed here. Allowed: {[k.value for k in allowed]}")
    return kind


def make_indent(spec: IndentSpec | None = None) -> Indent:
    spec = spec or {}
    return Indent(
        level=int(spec.get("level", 0)),
        unit_width=int(spec.get("unit_width", DEFAULT_INDENT_SIZE)),
        fill_character=spec.get("fill_character", DEFAULT_FILL_CHARACTER),
    )


def _body(items: list[BodyItem]) -> list[str | Snippet | Block | Class]:
    return [it if isinstance(it, str) else make_node(it) for it in items]


def make_snippet(spec: SnippetSpec) -> Snippet:
    kind = _kind_of(spec, SNIPPET_KINDS)
    sn = Snippet(kind, make_indent(spec.get("indent")), spec.get("base_dir_path", ""))
    sn.add(spec.get("lines", []))
    return sn


def make_block(spec: BlockSpec) -> Block:
    kind = _kind_of(spec, BLOCK_KINDS)
    blk = Block(kind, make_indent(spec.get("indent")), spec.get("declaration", ""))
    blk.add(_body(spec.get("body", [])))
    return blk


def make_class(spec: ClassSpec) -> Class:
    _kind_of(spec, (Kind.CLASS,))
    cls = Class(spec["name"], make_indent(spec.get("indent")))
    for access in AccessSpecifier:
        cls.add(_body(spec.get(access.value, [])), access)
    return cls


def make_node(spec: NodeSpec) -> Snippet | Block | Class:
    """Build whichever node ``spec["kind"]`` names."""
    kind = _kind_of(spec, tuple(Kind))
    if kind in SNIPPET_KINDS:
        return make_snippet(spec)  # type: ignore[arg-type]
    if kind in BLOCK_KINDS:
        return make_block(spec)  # type: ignore[arg-type]
    return make_class(spec)  # type: ignore[arg-type]
