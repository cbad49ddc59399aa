import random
from typing import Any, Dict, List, Tuple

Op = Tuple[Any, ...]

LABELS = ("A", "B", "C", "D", "E", "F")


def expect_raises(exc_types, fn, *args, **kwargs) -> None:
    try:
        fn(*args, **kwargs)
    except exc_types:
        return
    except Exception as ex:
        raise AssertionError(f"Expected {exc_types}, but got {type(ex).__name__}: {ex}") from ex
    else:
        raise AssertionError(f"Expected {exc_types}, but no exception was raised")


def graph_snapshot(g: "Any") -> Dict[str, Any]:
    """Everything observable through the public contract, in comparable form."""
    verts = g.vertices()
    return {
        "vertices": verts,
        "targets": {v: g.targets(v) for v in verts},
        "sources": {v: g.sources(v) for v in verts},
        "dump": str(g),
    }


def random_script(seed: int, steps: int, labels=LABELS) -> List[Op]:
    """Deterministic mix of add/set/remove calls; weights include 0 and negatives."""
    rng = random.Random(seed)
    ops: List[Op] = []
    for _ in range(steps):
        roll = rng.random()
        if roll < 0.25:
            ops.append(("add", rng.choice(labels)))
        elif roll < 0.85:
            ops.append(("set", rng.choice(labels), rng.choice(labels), rng.randint(-5, 20)))
        else:
            ops.append(("remove", rng.choice(labels)))
    return ops


def apply_script(g: "Any", ops: List[Op]) -> List[Any]:
    """Run ops against g and return each call's result."""
    results = []
    for name, *args in ops:
        results.append(getattr(g, name)(*args))
    return results
