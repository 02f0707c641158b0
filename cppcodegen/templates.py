"""Literal header/footer text for every node kind and access label."""

from __future__ import annotations

from enum import Enum


class Kind(str, Enum):
    LINE = "line"
    SYSTEM_INCLUDE = "system_include"
    LOCAL_INCLUDE = "local_include"
    CODE_BLOCK = "code_block"
    DEFINITION = "definition"
    NAMESPACE = "namespace"
    CLASS = "class"


class AccessSpecifier(str, Enum):
    PUBLIC = "public"
    PROTECTED = "protected"
    PRIVATE = "private"


SYSTEM_INCLUDE_HEADER = "#include <"
SYSTEM_INCLUDE_FOOTER = ">"
LOCAL_INCLUDE_HEADER = '#include "'
LOCAL_INCLUDE_FOOTER = '"'

CODE_BLOCK_OPEN = "{\n"
BLOCK_OPEN = " {\n"
BLOCK_CLOSE = "}\n"
CLASS_CLOSE = "};\n"

# Fixed render order; buckets outside this tuple are never emitted.
ACCESS_ORDER: tuple[AccessSpecifier, ...] = (
    AccessSpecifier.PUBLIC,
    AccessSpecifier.PROTECTED,
    AccessSpecifier.PRIVATE,
)


def access_label(access: AccessSpecifier) -> str:
    return f" {access.value}:\n"


def snippet_wrapping(kind: Kind, base_dir_path: str = "") -> tuple[str, str]:
    """Header/footer applied to every literal line of a snippet of ``kind``."""
    if kind is Kind.SYSTEM_INCLUDE:
        return SYSTEM_INCLUDE_HEADER, SYSTEM_INCLUDE_FOOTER
    if kind is Kind.LOCAL_INCLUDE:
        return LOCAL_INCLUDE_HEADER + base_dir_path, LOCAL_INCLUDE_FOOTER
    return "", ""


def block_wrapping(kind: Kind, declaration: str = "") -> tuple[str, str]:
    """
    Header/footer rendered once around a block's children.

    ``declaration`` is the text before the opening brace: the function
    signature for definitions, the bare name for namespaces.
    """
    if kind is Kind.DEFINITION:
        return declaration + BLOCK_OPEN, BLOCK_CLOSE
    if kind is Kind.NAMESPACE:
        return f"namespace {declaration}" + BLOCK_OPEN, BLOCK_CLOSE
    return CODE_BLOCK_OPEN, BLOCK_CLOSE


def class_header(name: str) -> str:
    return f"class {name}" + BLOCK_OPEN
