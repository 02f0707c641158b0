import pytest

from cppcodegen import (
    AccessSpecifier, Block, Class, Indent, Kind, Snippet,
    make_block, make_class, make_indent, make_node, make_snippet,
)
from cppcodegen.types import BlockSpec, ClassSpec


def test_make_indent_defaults_and_overrides() -> None:
    assert make_indent() == Indent()
    assert make_indent({"level": 2, "fill_character": "\t"}) == Indent(2, 2, "\t")


def test_make_snippet_include() -> None:
    sn: Snippet = make_snippet({"kind": "local_include", "base_dir_path": "gen/", "lines": ["a.h", "b.h"]})
    assert sn.kind is Kind.LOCAL_INCLUDE
    assert sn.render() == '#include "gen/a.h"\n#include "gen/b.h"\n'


def test_make_node_matches_hand_built_tree() -> None:
    spec: BlockSpec = {
        "kind": "namespace",
        "declaration": "geo",
        "body": [
            {
                "kind": "class",
                "name": "Point",
                "public": ["double x() const;"],
                "private": ["double x_;"],
            },
            "using Points = std::vector<Point>;",
        ],
    }

    cls = Class("Point")
    cls.add("double x() const;", AccessSpecifier.PUBLIC)
    cls.add("double x_;")
    ns = Block.namespace("geo")
    ns.add(cls)
    ns.add("using Points = std::vector<Point>;")

    built = make_node(spec)
    assert isinstance(built, Block)
    assert built.render() == ns.render()


def test_make_class_nested_definition() -> None:
    spec: ClassSpec = {
        "kind": "class",
        "name": "Counter",
        "indent": {"level": 1},
        "public": [{"kind": "definition", "declaration": "int next()", "body": ["return ++n_;"]}],
        "private": ["int n_ = 0;"],
    }
    assert make_class(spec).render() == (
        "  class Counter {\n"
        "   public:\n"
        "    int next() {\n"
        "      return ++n_;\n"
        "    }\n"
        "   private:\n"
        "    int n_ = 0;\n"
        "  };\n"
    )


def test_unknown_kind_rejected() -> None:
    with pytest.raises(ValueError, match="Unknown node kind"):
        make_node({"kind": "struct"})  # type: ignore[typeddict-item]
    with pytest.raises(ValueError, match="Unknown node kind"):
        make_node({})  # type: ignore[typeddict-item]


def test_kind_must_fit_the_builder() -> None:
    with pytest.raises(ValueError, match="not allowed here"):
        make_block({"kind": "class", "name": "X"})  # type: ignore[typeddict-item]
    with pytest.raises(ValueError, match="not allowed here"):
        make_snippet({"kind": "namespace"})  # type: ignore[typeddict-item]
