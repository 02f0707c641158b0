"""Simple profiling of node construction, rendering and re-indentation."""

from __future__ import annotations

import timeit
import tracemalloc

from cppcodegen import AccessSpecifier, Block, Class


def _build_nest(depth: int) -> Block:
    current: Block = Block.code_block()
    current.add("int leaf = 0;")
    for i in range(depth - 1):
        outer: Block = Block.namespace(f"n{i}")
        outer.add(current)
        current = outer
    return current


def _build_wide_class(members: int) -> Class:
    cls: Class = Class("Wide")
    for i in range(members):
        cls.add(f"int m{i};", AccessSpecifier.PUBLIC if i % 2 else AccessSpecifier.PRIVATE)
    return cls


def main() -> None:
    build: float = timeit.timeit(lambda: _build_nest(20), number=100)
    print(f"Nested build (depth 20): {build:.4f}s/100")

    wide: Class = _build_wide_class(500)
    render: float = timeit.timeit(wide.render, number=100)
    print(f"Class.render() (500 members): {render:.4f}s/100")

    reindent: float = timeit.timeit(lambda: wide.increment_indent(1), number=100)
    print(f"Class.increment_indent() (500 members): {reindent:.4f}s/100")

    tracemalloc.start()
    _build_nest(50).render()
    current: int
    peak: int
    current, peak = tracemalloc.get_traced_memory()
    tracemalloc.stop()
    print(f"Nested tree memory: current={current} bytes peak={peak} bytes")


if __name__ == "__main__":
    main()
