# wgraph-smoketest.py
# Run with:  python -u wgraph-smoketest.py

import os
import traceback
from typing import Callable, List, Tuple

from wgraph import REPRESENTATIONS, empty_graph


class TestRunner:
    def __init__(self) -> None:
        self.passed: int = 0
        self.failed: int = 0
        self._tests: List[Tuple[str, Callable[[str], None]]] = []

    def test(self, name: str) -> Callable[[Callable[[str], None]], Callable[[str], None]]:
        def deco(fn: Callable[[str], None]) -> Callable[[str], None]:
            self._tests.append((name, fn))
            return fn
        return deco

    def assert_true(self, expr: bool, msg: str = "") -> None:
        if not expr:
            raise AssertionError(msg or "Expected True, got False")

    def assert_false(self, expr: bool, msg: str = "") -> None:
        if expr:
            raise AssertionError(msg or "Expected False, got True")

    def assert_equal(self, a, b, msg: str = "") -> None:
        if a != b:
            raise AssertionError(msg or f"Expected {b!r}, got {a!r}")

    def run(self) -> bool:
        print("Running weighted graph smoketests...\n")
        show_trace = os.getenv("SHOW_TRACE", "0") not in ("0", "", "false", "False")
        for rep in REPRESENTATIONS:
            for name, fn in self._tests:
                label = f"[{rep}] {name}"
                try:
                    fn(rep)
                except Exception as ex:
                    # keep all usage of `ex` inside the except block (mypy-friendly)
                    print(f"✗ {label}  -- {type(ex).__name__}: {ex}")
                    if show_trace:
                        traceback.print_exc()
                    self.failed += 1
                else:
                    print(f"✓ {label}")
                    self.passed += 1
        print("\nFinished:", f"{self.passed} passed,", f"{self.failed} failed.")
        return self.failed == 0


tr = TestRunner()


@tr.test("add is idempotent")
def _(rep: str) -> None:
    g = empty_graph(rep)
    tr.assert_true(g.add("A"))
    tr.assert_false(g.add("A"))
    tr.assert_equal(g.vertices(), {"A"})


@tr.test("round trip: set, overwrite, remove")
def _(rep: str) -> None:
    g = empty_graph(rep)
    g.add("A")
    g.add("B")
    g.set("A", "B", 5)
    tr.assert_equal(g.targets("A"), {"B": 5})
    tr.assert_equal(g.sources("B"), {"A": 5})
    tr.assert_equal(g.set("A", "B", 20), 20)
    tr.assert_equal(g.targets("A"), {"B": 20})
    tr.assert_true(g.remove("A"))
    tr.assert_equal(g.vertices(), {"B"})
    tr.assert_equal(g.sources("B"), {})


@tr.test("three-vertex chain")
def _(rep: str) -> None:
    g = empty_graph(rep)
    for v in ("A", "B", "C"):
        g.add(v)
    g.set("A", "B", 5)
    g.set("B", "C", 10)
    tr.assert_equal(g.targets("A"), {"B": 5})
    tr.assert_equal(g.targets("B"), {"C": 10})
    tr.assert_equal(g.sources("C"), {"B": 10})


@tr.test("unknown vertex: empty queries, remove is a no-op")
def _(rep: str) -> None:
    g = empty_graph(rep)
    g.set("A", "B", 1)
    tr.assert_equal(g.targets("Z"), {})
    tr.assert_equal(g.sources("Z"), {})
    tr.assert_false(g.remove("Z"))
    tr.assert_equal(len(g.edges()), 1)


@tr.test("textual dump is stable")
def _(rep: str) -> None:
    g = empty_graph(rep)
    g.set("A", "B", 20)
    g.set("B", "C", 5)
    tr.assert_equal(str(g), "A -> [B (20)]\nB -> [C (5)]\nC -> []\n")


if __name__ == "__main__":
    ok = tr.run()
    # Non-zero exit on failure helps CI or scripts detect problems.
    import sys
    sys.exit(0 if ok else 1)
