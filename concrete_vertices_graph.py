# concrete_vertices_graph.py


from __future__ import annotations
from typing import Callable, Dict, List, Optional, Set, Tuple
import logging

from wgraph import EdgeRecord, Graph, Label, format_line, safe_str

logger = logging.getLogger(__name__)


class Vertex:
    """
    A labeled vertex owning its outgoing edges (target -> weight).

    Mutable: set_edge() and remove_edge() change it in place.
    """

    def __init__(self, label: Label):
        self.label = label
        self._out: Dict[Label, int] = {}

    def set_edge(self, target: Label, weight: int) -> int:
        self._out[target] = weight
        return weight

    def remove_edge(self, target: Label) -> bool:
        return self._out.pop(target, None) is not None

    def has_edge(self, target: Label) -> bool:
        return target in self._out

    def weight_to(self, target: Label) -> int:
        return self._out[target]

    def outgoing(self) -> Dict[Label, int]:
        return dict(self._out)

    def __str__(self) -> str:
        return format_line(self.label, self._out)

    def __repr__(self) -> str:
        return f"Vertex({self.label!r}, out={self._out!r})"


class ConcreteVerticesGraph(Graph):
    """
    Vertex-centric graph: an ordered list of Vertex objects.

    Rep invariant:
    - labels are unique across the list
    - every target in a vertex's outgoing map is itself a vertex label

    Edge operations are delegated to the source vertex; a vertex's outgoing
    map makes duplicate (source, target) edges impossible by construction.
    """

    def __init__(
        self,
        *,
        vertex_validator: Optional[Callable[[Label], bool]] = None,
        max_vertices: Optional[int] = None,
    ):
        super().__init__(vertex_validator=vertex_validator, max_vertices=max_vertices)
        self._vertices: List[Vertex] = []
        self._check_rep()

    def _check_rep(self) -> None:
        labels = [v.label for v in self._vertices]
        assert len(labels) == len(set(labels)), "duplicate vertex label"
        known = set(labels)
        for v in self._vertices:
            for t in v.outgoing():
                assert t in known, f"edge {v.label!r} -> {t!r} targets unknown vertex"

    def _get(self, label: object) -> Optional[Vertex]:
        for v in self._vertices:
            if v.label == label:
                return v
        return None

    # ---------- mutation ----------

    def add(self, vertex: Label) -> bool:
        self._validate_label(vertex)
        if self._get(vertex) is not None:
            return False
        self._check_capacity()
        self._vertices.append(Vertex(vertex))
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

        src = self._get(source)
        assert src is not None
        if src.has_edge(target):
            logger.debug("Updated edge %s: %d -> %d",
                         format_line(source, {target: weight}), src.weight_to(target), weight)
        else:
            logger.debug("Created edge %s", format_line(source, {target: weight}))
        result = src.set_edge(target, weight)
        self._check_rep()
        return result

    def remove(self, vertex: Label) -> bool:
        v = self._get(vertex)
        if v is None:
            return False
        self._vertices.remove(v)
        dropped = len(v.outgoing())
        for other in self._vertices:
            if other.remove_edge(vertex):
                dropped += 1
        logger.debug("Removed vertex %s and %d incident edge(s)", safe_str(vertex), dropped)
        self._check_rep()
        return True

    # ---------- queries ----------

    def vertices(self) -> Set[Label]:
        return {v.label for v in self._vertices}

    def sources(self, target: Label) -> Dict[Label, int]:
        if not isinstance(target, str):
            return {}
        return {
            v.label: v.weight_to(target) for v in self._vertices if v.has_edge(target)
        }

    def targets(self, source: Label) -> Dict[Label, int]:
        # unknown source is an empty result, same as the edge-centric graph
        v = self._get(source)
        return v.outgoing() if v is not None else {}

    def edges(self) -> Tuple[EdgeRecord, ...]:
        return tuple(
            (v.label, t, w) for v in self._vertices for t, w in v.outgoing().items()
        )

    # ---------- dunder ----------

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, vertex: object) -> bool:
        return self._get(vertex) is not None

    def __str__(self) -> str:
        return "".join(f"{v}\n" for v in self._vertices)
