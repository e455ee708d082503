"""
graph.py — Graph Model
=======================
Single source of truth for graph topology.  The editor mutates it, the
algorithms only ever see a read-only snapshot of it.

Responsibilities:
  1. CRUD on nodes & edges                  (add / remove / update / get)
  2. Adjacency queries                      (neighbours, outgoing, incoming, …)
  3. Snapshots                              (copy-on-read for algorithm runs)
  4. Serialisation round-trip               (to_dict / from_dict)

Design decisions:
  - Nodes & edges stored in insertion-ordered dicts keyed by id for O(1)
    lookup.  Insertion order is the canonical iteration order every
    algorithm uses, so runs are reproducible.
  - A separate incidence dict `_incident[node_id] → [edge_id, …]` is kept
    in edge insertion order so adjacency queries are O(degree), not O(E).
    It records BOTH endpoints; direction is applied at query time, so
    flipping `directed` needs no re-index.
  - Two error policies: `add_node` / `update_*` raise on misuse, while
    `add_edge` silently drops edges that would dangle or duplicate an id.
"""

import logging
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple
import dataclasses

from graph.node import Node
from graph.edge import Edge
from graph.errors import DuplicateIdError, NotFoundError, SnapshotError

logger = logging.getLogger(__name__)


class Graph:
    """
    Attributes:
        nodes      : read-only {node_id: Node}
        edges      : read-only {edge_id: Edge}
        directed   : bool – graph-level directedness
        read_only  : True for snapshots handed to algorithm runs
        _incident  : {node_id: [edge_id, …]}
    """

    def __init__(self, directed: bool = False):
        self._nodes:    Dict[str, Node]      = {}
        self._edges:    Dict[str, Edge]      = {}
        self._incident: Dict[str, List[str]] = {}
        self._directed: bool                 = directed
        self._read_only: bool                = False

    # ==================================================================
    # PROPERTIES
    # ==================================================================
    @property
    def nodes(self) -> Mapping[str, Node]:
        return MappingProxyType(self._nodes)

    @property
    def edges(self) -> Mapping[str, Edge]:
        return MappingProxyType(self._edges)

    @property
    def directed(self) -> bool:
        return self._directed

    @property
    def read_only(self) -> bool:
        return self._read_only

    def set_directed(self, directed: bool) -> None:
        self._check_writable()
        self._directed = bool(directed)

    # ==================================================================
    # NODE CRUD
    # ==================================================================
    def add_node(self, node: Node) -> Node:
        self._check_writable()
        if node.id in self._nodes:
            raise DuplicateIdError(f"Node with id '{node.id}' already exists")
        self._nodes[node.id] = node
        self._incident[node.id] = []
        return node

    def remove_node(self, node_id: str) -> None:
        self._check_writable()
        if node_id not in self._nodes:
            return
        # remove every edge touching this node, whatever the direction
        for eid in list(self._incident.get(node_id, [])):
            self.remove_edge(eid)
        del self._nodes[node_id]
        self._incident.pop(node_id, None)

    def update_node(self, node_id: str, **changes) -> Node:
        """Partial-field merge.  Returns the new Node value."""
        self._check_writable()
        node = self._nodes.get(node_id)
        if node is None:
            raise NotFoundError(f"Node with id '{node_id}' not found")
        _check_fields(Node, changes)
        changes = _as_numbers(changes, ("x", "y"))
        updated = dataclasses.replace(node, **changes)
        self._nodes[node_id] = updated
        return updated

    def get_node(self, node_id: str) -> Optional[Node]:
        return self._nodes.get(node_id)

    def has_node(self, node_id: str) -> bool:
        return node_id in self._nodes

    # ==================================================================
    # EDGE CRUD
    # ==================================================================
    def add_edge(self, edge: Edge) -> Optional[Edge]:
        """
        Insert an edge.  Silently ignored (returns None) when the id is
        taken or an endpoint does not exist, so a stale UI action can never
        leave a dangling edge behind.
        """
        self._check_writable()
        if edge.id in self._edges:
            logger.debug("Ignoring edge %s: id already exists", edge.id)
            return None
        if edge.source not in self._nodes or edge.target not in self._nodes:
            logger.debug(
                "Ignoring edge %s: endpoint missing (%s → %s)", edge.id, edge.source, edge.target
            )
            return None
        self._edges[edge.id] = edge
        self._incident[edge.source].append(edge.id)
        if edge.target != edge.source:
            self._incident[edge.target].append(edge.id)
        return edge

    def remove_edge(self, edge_id: str) -> None:
        self._check_writable()
        edge = self._edges.pop(edge_id, None)
        if edge is None:
            return
        for nid in {edge.source, edge.target}:
            ids = self._incident.get(nid)
            if ids is not None and edge_id in ids:
                ids.remove(edge_id)

    def update_edge(self, edge_id: str, **changes) -> Edge:
        """Partial-field merge.  Re-pointing to a missing node raises NotFoundError."""
        self._check_writable()
        edge = self._edges.get(edge_id)
        if edge is None:
            raise NotFoundError(f"Edge with id '{edge_id}' not found")
        _check_fields(Edge, changes)
        changes = _as_numbers(changes, ("weight",))
        for key in ("source", "target"):
            if key in changes and changes[key] not in self._nodes:
                raise NotFoundError(f"Node with id '{changes[key]}' not found")
        updated = dataclasses.replace(edge, **changes)
        self._edges[edge_id] = updated
        if (updated.source, updated.target) != (edge.source, edge.target):
            self._reindex()
        return updated

    def get_edge(self, edge_id: str) -> Optional[Edge]:
        return self._edges.get(edge_id)

    def edge_between(self, a: str, b: str) -> Optional[Edge]:
        """First edge connecting a and b (direction-aware)."""
        for nbr, edge in self.neighbours(a):
            if nbr == b:
                return edge
        return None

    # ==================================================================
    # ADJACENCY QUERIES
    # ==================================================================
    def neighbours(self, node_id: str) -> List[Tuple[str, Edge]]:
        """
        [(neighbour_id, edge)] one hop away, in edge insertion order.
        Directed: outgoing edges only.  Undirected: every incident edge.
        """
        result = []
        for eid in self._incident.get(node_id, []):
            edge = self._edges[eid]
            if edge.source == node_id:
                result.append((edge.target, edge))
            elif not self._directed and edge.target == node_id:
                result.append((edge.source, edge))
        return result

    def neighbour_nodes(self, node_id: str) -> List[Node]:
        return [self._nodes[nbr] for nbr, _ in self.neighbours(node_id)]

    def outgoing_edges(self, node_id: str) -> List[Edge]:
        return [self._edges[eid] for eid in self._incident.get(node_id, []) if self._edges[eid].source == node_id]

    def incoming_edges(self, node_id: str) -> List[Edge]:
        return [self._edges[eid] for eid in self._incident.get(node_id, []) if self._edges[eid].target == node_id]

    def all_edges(self, node_id: str) -> List[Edge]:
        if self._directed:
            return self.outgoing_edges(node_id) + self.incoming_edges(node_id)
        return [self._edges[eid] for eid in self._incident.get(node_id, [])]

    def degree(self, node_id: str) -> int:
        return len(self._incident.get(node_id, []))

    # ==================================================================
    # SNAPSHOT / RESET
    # ==================================================================
    def snapshot(self) -> "Graph":
        """
        Independent, read-only copy.  Nodes and edges are immutable values,
        so sharing them is safe; only the containers are copied.
        """
        g = Graph(directed=self._directed)
        g._nodes    = dict(self._nodes)
        g._edges    = dict(self._edges)
        g._incident = {nid: list(eids) for nid, eids in self._incident.items()}
        g._read_only = True
        logger.debug("Snapshot taken: %r", g)
        return g

    def copy(self) -> "Graph":
        """Writable copy (e.g. to edit a snapshot further)."""
        g = self.snapshot()
        g._read_only = False
        return g

    def clear(self) -> None:
        self._check_writable()
        self._nodes.clear()
        self._edges.clear()
        self._incident.clear()

    # ==================================================================
    # SERIALISATION
    # ==================================================================
    def to_dict(self) -> dict:
        return {
            "directed": self._directed,
            "nodes":    [n.to_dict() for n in self._nodes.values()],
            "edges":    [e.to_dict() for e in self._edges.values()],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Graph":
        """Rebuild through the normal insertion rules (bad edges are dropped)."""
        g = cls(directed=bool(data.get("directed", False)))
        for nd in data.get("nodes", []):
            g.add_node(Node.from_dict(nd))
        for ed in data.get("edges", []):
            g.add_edge(Edge.from_dict(ed))
        return g

    # ==================================================================
    # UTILITY
    # ==================================================================
    def node_count(self) -> int:
        return len(self._nodes)

    def edge_count(self) -> int:
        return len(self._edges)

    def has_negative_edges(self) -> bool:
        return any(e.weight < 0 for e in self._edges.values())

    def node_ids(self) -> List[str]:
        return list(self._nodes.keys())

    def _check_writable(self) -> None:
        if self._read_only:
            raise SnapshotError("Graph snapshot is read-only")

    def _reindex(self) -> None:
        self._incident = {nid: [] for nid in self._nodes}
        for edge in self._edges.values():
            self._incident[edge.source].append(edge.id)
            if edge.target != edge.source:
                self._incident[edge.target].append(edge.id)

    def __repr__(self) -> str:
        return f"Graph(nodes={self.node_count()}, edges={self.edge_count()}, directed={self._directed})"


# ---------------------------------------------------------------------------
def _check_fields(cls, changes: dict) -> None:
    """Reject id changes and fields the value type doesn't have."""
    if "id" in changes:
        raise ValueError("id cannot be changed")
    known = {f.name for f in dataclasses.fields(cls)}
    unknown = set(changes) - known
    if unknown:
        raise ValueError(f"Unknown {cls.__name__} field(s): {', '.join(sorted(unknown))}")


def _as_numbers(changes: dict, numeric: tuple) -> dict:
    """Coerce numeric fields to float; anything else is a ValueError."""
    result = dict(changes)
    for key in numeric:
        if key not in result:
            continue
        try:
            result[key] = float(result[key])
        except (TypeError, ValueError):
            raise ValueError(f"{key} must be a number, got {result[key]!r}") from None
    return result
