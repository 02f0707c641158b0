from .codegen import DEFAULT_FILL_CHARACTER, DEFAULT_INDENT_SIZE, Indent
from .templates import AccessSpecifier, Kind
from .model import Block, Class, Renderable, Snippet
from .types import (
    BlockSpec, ClassSpec, IndentSpec, SnippetSpec,
    make_block, make_class, make_indent, make_node, make_snippet,
)

__all__ = [
    # indent
    "Indent", "DEFAULT_INDENT_SIZE", "DEFAULT_FILL_CHARACTER",
    # nodes
    "Snippet", "Block", "Class", "Renderable", "Kind", "AccessSpecifier",
    # declarative specs
    "IndentSpec", "SnippetSpec", "BlockSpec", "ClassSpec",
    "make_indent", "make_snippet", "make_block", "make_class", "make_node",
]
