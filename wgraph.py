# wgraph.py


from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Callable, Dict, Optional, Set, Tuple
import logging
import re

logger = logging.getLogger(__name__)

Label = str
EdgeRecord = Tuple[Label, Label, int]

_ANSI_RE = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
_CTRL_RE = re.compile(r"[\x00-\x1f\x7f]")  # non-printable/control chars

REPRESENTATIONS = ("edges", "vertices")


def safe_str(x: object, max_len: int = 120) -> str:
    """
    Best-effort safe-ish string for logs/printing:
    - uses str() then strips ANSI escapes and control chars
    - truncates long values to avoid log spam
    """
    s = str(x)
    s = _ANSI_RE.sub("", s)
    s = _CTRL_RE.sub("", s)
    if len(s) > max_len:
        s = s[: max_len - 1] + "…"
    return s


def format_line(label: Label, outgoing: Dict[Label, int]) -> str:
    """One line of the textual dump: ``A -> [B (10), C (5)]``."""
    pairs = ", ".join(f"{safe_str(t)} ({w})" for t, w in outgoing.items())
    return f"{safe_str(label)} -> [{pairs}]"


class Graph(ABC):
    """
    Mutable, directed, weighted graph over string labels.

    Contract shared by every representation:
    - at most one edge per ordered (source, target) pair; setting it again
      overwrites the weight
    - setting an edge auto-inserts missing endpoints
    - removing a vertex removes every edge that touches it
    - queries hand back copies, never live views of internal storage
    - sources()/targets() of an unknown vertex are empty, not an error

    A weight of 0 is stored like any other weight; it does not delete the edge.
    """

    def __init__(
        self,
        *,
        vertex_validator: Optional[Callable[[Label], bool]] = None,
        max_vertices: Optional[int] = None,
    ):
        self._vertex_validator = vertex_validator
        self._max_vertices = max_vertices

    # ---------- internal helpers ----------

    def _validate_label(self, v: object) -> None:
        if not isinstance(v, str):
            logger.warning("Rejected vertex of type %s", type(v).__name__)
            raise TypeError(f"Vertex label must be str; got {type(v).__name__}")
        if self._vertex_validator is not None and not self._vertex_validator(v):
            logger.warning("Vertex %s failed custom validation", safe_str(v))
            raise ValueError("Vertex failed custom validation")

    @staticmethod
    def _validate_weight(weight: object) -> None:
        # bool is an int subclass, but True/False are not meaningful weights
        if isinstance(weight, bool) or not isinstance(weight, int):
            logger.warning("Rejected weight of type %s", type(weight).__name__)
            raise TypeError(f"Edge weight must be int; got {type(weight).__name__}")

    def _check_capacity(self, new_vertices: int = 1) -> None:
        if self._max_vertices is None or new_vertices <= 0:
            return
        if len(self) + new_vertices > self._max_vertices:
            logger.warning("Vertex cap reached (max_vertices=%d)", self._max_vertices)
            raise OverflowError(f"Vertex cap exceeded (max_vertices={self._max_vertices})")

    def _missing(self, *labels: Label) -> int:
        return len({v for v in labels if v not in self})

    @abstractmethod
    def _check_rep(self) -> None:
        """Assert the representation invariant of the concrete storage."""
        raise NotImplementedError

    # ---------- mutation ----------

    @abstractmethod
    def add(self, vertex: Label) -> bool:
        """Add vertex if absent. Returns True if it was inserted."""
        raise NotImplementedError

    @abstractmethod
    def set(self, source: Label, target: Label, weight: int) -> int:
        """
        Create or overwrite the edge source -> target and return the new weight.

        Missing endpoints are inserted first.
        """
        raise NotImplementedError

    @abstractmethod
    def remove(self, vertex: Label) -> bool:
        """Remove vertex and its incident edges. Returns True if it existed."""
        raise NotImplementedError

    # ---------- queries ----------

    @abstractmethod
    def vertices(self) -> Set[Label]:
        raise NotImplementedError

    @abstractmethod
    def sources(self, target: Label) -> Dict[Label, int]:
        raise NotImplementedError

    @abstractmethod
    def targets(self, source: Label) -> Dict[Label, int]:
        raise NotImplementedError

    @abstractmethod
    def edges(self) -> Tuple[EdgeRecord, ...]:
        raise NotImplementedError

    # ---------- dunder ----------

    @abstractmethod
    def __len__(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def __contains__(self, vertex: object) -> bool:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(vertices={len(self)}, edges={len(self.edges())})"


def empty_graph(representation: str = "edges", **options) -> Graph:
    """Build an empty graph backed by the named representation."""
    # local import to avoid cycles
    if representation == "edges":
        from concrete_edges_graph import ConcreteEdgesGraph
        return ConcreteEdgesGraph(**options)
    if representation == "vertices":
        from concrete_vertices_graph import ConcreteVerticesGraph
        return ConcreteVerticesGraph(**options)
    raise ValueError(
        f"Unknown representation {representation!r} (expected one of: {', '.join(REPRESENTATIONS)})"
    )
