# concrete_edges_graph.py


from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Optional, Set, Tuple, Callable
import logging

from wgraph import EdgeRecord, Graph, Label, format_line, safe_str

logger = logging.getLogger(__name__)


@dataclass
class Edge:
    """Mutable edge record; weight is overwritten in place by Graph.set()."""

    source: Label
    target: Label
    weight: int


class ConcreteEdgesGraph(Graph):
    """
    Edge-centric graph: a vertex set plus a flat list of Edge records.

    Rep invariant:
    - every edge's source and target are in the vertex set
    - no two edges share the same (source, target) pair

    Vertices are kept in a dict used as an insertion-ordered set, so the
    textual dump lists vertices in the order they were added.
    """

    def __init__(
        self,
        *,
        vertex_validator: Optional[Callable[[Label], bool]] = None,
        max_vertices: Optional[int] = None,
    ):
        super().__init__(vertex_validator=vertex_validator, max_vertices=max_vertices)
        self._vertices: Dict[Label, None] = {}
        self._edges: List[Edge] = []
        self._check_rep()

    def _check_rep(self) -> None:
        seen = set()
        for e in self._edges:
            assert e.source in self._vertices, f"edge source {e.source!r} not a vertex"
            assert e.target in self._vertices, f"edge target {e.target!r} not a vertex"
            pair = (e.source, e.target)
            assert pair not in seen, f"duplicate edge {pair!r}"
            seen.add(pair)

    def _find(self, source: Label, target: Label) -> Optional[Edge]:
        for e in self._edges:
            if e.source == source and e.target == target:
                return e
        return None

    # ---------- mutation ----------

    def add(self, vertex: Label) -> bool:
        self._validate_label(vertex)
        if vertex in self._vertices:
            return False
        self._check_capacity()
        self._vertices[vertex] = None
        logger.debug("Added vertex %s", safe_str(vertex))
        self._check_rep()
        return True

    def set(self, source: Label, target: Label, weight: int) -> int:
        self._validate_label(source)
        self._validate_label(target)
        self._validate_weight(weight)
        # all-or-nothing: refuse before inserting either endpoint
        self._check_capacity(self._missing(source, target))

        self.add(source)
        self.add(target)

        edge = self._find(source, target)
        if edge is not None:
            logger.debug("Updated edge %s: %d -> %d", format_line(source, {target: weight}), edge.weight, weight)
            edge.weight = weight
        else:
            self._edges.append(Edge(source, target, weight))
            logger.debug("Created edge %s", format_line(source, {target: weight}))
        self._check_rep()
        return weight

    def remove(self, vertex: Label) -> bool:
        if vertex not in self:
            return False
        before = len(self._edges)
        self._edges = [e for e in self._edges if e.source != vertex and e.target != vertex]
        del self._vertices[vertex]
        logger.debug("Removed vertex %s and %d incident edge(s)",
                     safe_str(vertex), before - len(self._edges))
        self._check_rep()
        return True

    # ---------- queries ----------

    def vertices(self) -> Set[Label]:
        return set(self._vertices)

    def sources(self, target: Label) -> Dict[Label, int]:
        return {e.source: e.weight for e in self._edges if e.target == target}

    def targets(self, source: Label) -> Dict[Label, int]:
        return {e.target: e.weight for e in self._edges if e.source == source}

    def edges(self) -> Tuple[EdgeRecord, ...]:
        return tuple(
            (u, v, w) for u in self._vertices for v, w in self.targets(u).items()
        )

    # ---------- dunder ----------

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, vertex: object) -> bool:
        return isinstance(vertex, str) and vertex in self._vertices

    def __str__(self) -> str:
        return "".join(format_line(u, self.targets(u)) + "\n" for u in self._vertices)
