"""Graphs, subgraphs, nodes, edges and the context that names them.

A :class:`Graph` collects attribute, node, edge and subgraph statements and
renders them as a DOT document. Graphs are usually created through a
:class:`Context`, which guarantees that every graph name is used once.
"""

from __future__ import annotations

import logging
import threading
from enum import Enum
from typing import TYPE_CHECKING, Union

import networkx as nx

from dotgen.attributes import (
    CLUSTER_ATTRIBUTES,
    EDGE_ATTRIBUTES,
    GRAPH_ATTRIBUTES,
    NODE_ATTRIBUTES,
    SUBGRAPH_ATTRIBUTES,
    AttributeId,
    AttributeTable,
    union,
)
from dotgen.errors import DuplicateIdError, TypeMismatchError
from dotgen.values import Double, Id, Int, String

if TYPE_CHECKING:
    from dotgen.config import RenderConfig

logger = logging.getLogger(__name__)

Name = Union[Id, Int, Double, String]


def as_name(name: Name | str) -> Name:
    """Accept a graph or node name; plain strings must be valid IDs."""
    if isinstance(name, str):
        return Id(name)
    if isinstance(name, (Id, Int, Double, String)):
        return name
    raise TypeMismatchError(
        f"Names must be an Id, Int, Double or String, got {type(name).__name__}"
    )


class GraphKind(Enum):
    """The ten kinds of graph; flags are read from the member value."""

    GRAPH = "graph"
    DIGRAPH = "digraph"
    STRICT_GRAPH = "strict_graph"
    STRICT_DIGRAPH = "strict_digraph"
    SUBGRAPH = "subgraph"
    CLUSTER_GRAPH = "cluster_graph"
    CLUSTER_DIGRAPH = "cluster_digraph"
    STRICT_CLUSTER_GRAPH = "strict_cluster_graph"
    STRICT_CLUSTER_DIGRAPH = "strict_cluster_digraph"
    CLUSTER_SUBGRAPH = "cluster_subgraph"

    @property
    def is_strict(self) -> bool:
        return self.value.startswith("strict")

    @property
    def is_directed(self) -> bool:
        return self.value.endswith("digraph")

    @property
    def is_cluster(self) -> bool:
        return "cluster" in self.value

    @property
    def is_subgraph(self) -> bool:
        return self.value.endswith("subgraph")

    @property
    def keyword(self) -> str:
        if self.is_subgraph:
            return "subgraph"
        return "digraph" if self.is_directed else "graph"

    @property
    def legal_attributes(self) -> tuple[AttributeId, ...]:
        if self.is_subgraph:
            if self.is_cluster:
                return union(SUBGRAPH_ATTRIBUTES, CLUSTER_ATTRIBUTES)  # type: ignore[return-value]
            return SUBGRAPH_ATTRIBUTES
        if self.is_cluster:
            return union(GRAPH_ATTRIBUTES, CLUSTER_ATTRIBUTES)  # type: ignore[return-value]
        return GRAPH_ATTRIBUTES


class Node:
    def __init__(self, name: Name | str) -> None:
        self.name = as_name(name)
        self.attributes = AttributeTable(NODE_ATTRIBUTES)

    @property
    def key(self) -> str:
        return self.name.render()

    def add_attribute(self, attr: AttributeId, value: object) -> None:
        self.attributes.add(attr, value)

    def render(self) -> str:
        return _statement(self.key, self.attributes)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Node({self.key!r})"


class Edge:
    """An edge between two nodes; the operator comes from the document."""

    def __init__(self, tail: Node, head: Node) -> None:
        self.tail = tail
        self.head = head
        self.attributes = AttributeTable(EDGE_ATTRIBUTES)

    def add_attribute(self, attr: AttributeId, value: object) -> None:
        self.attributes.add(attr, value)

    def render(self, directed: bool) -> str:
        op = "->" if directed else "--"
        return _statement(f"{self.tail.key} {op} {self.head.key}", self.attributes)

    def __repr__(self) -> str:
        return f"Edge({self.tail.key!r}, {self.head.key!r})"


def _statement(head: str, table: AttributeTable) -> str:
    attrs = table.render().strip()
    if attrs:
        return f"{head} [{attrs}];"
    return f"{head};"


class Graph:
    """A graph, digraph or subgraph and everything declared inside it."""

    def __init__(
        self,
        name: Name | str,
        kind: GraphKind = GraphKind.DIGRAPH,
        context: Context | None = None,
    ) -> None:
        self.name = as_name(name)
        self.kind = kind
        self.context = context
        self.attributes = AttributeTable(kind.legal_attributes)
        self.node_defaults = AttributeTable(NODE_ATTRIBUTES)
        self.edge_defaults = AttributeTable(EDGE_ATTRIBUTES)
        self.nodes: dict[str, Node] = {}
        self.edges: list[Edge] = []
        self.subgraphs: list[Graph] = []

    @property
    def is_strict(self) -> bool:
        return self.kind.is_strict

    @property
    def is_directed(self) -> bool:
        return self.kind.is_directed

    @property
    def is_cluster(self) -> bool:
        return self.kind.is_cluster

    @property
    def is_subgraph(self) -> bool:
        return self.kind.is_subgraph

    @property
    def display_name(self) -> str:
        """The name as written in DOT, with the cluster prefix if needed."""
        name = self.name
        if not self.is_cluster:
            return name.render()
        raw = name.text if isinstance(name, String) else name.render()
        if raw.startswith("cluster"):
            return name.render()
        if isinstance(name, Id):
            return Id(f"cluster_{raw}").render()
        return String(f"cluster_{raw}").render()

    def add_attribute(self, attr: AttributeId, value: object) -> None:
        self.attributes.add(attr, value)

    def add_node(self, name: Name | str) -> Node:
        node = Node(name)
        if node.key in self.nodes:
            raise DuplicateIdError(f"Node {node.key} already exists in graph {self.name}")
        self.nodes[node.key] = node
        return node

    def node(self, name: Name | str) -> Node | None:
        return self.nodes.get(as_name(name).render())

    def _endpoint(self, endpoint: Node | Name | str) -> Node:
        if isinstance(endpoint, Node):
            return endpoint
        return self.node(endpoint) or self.add_node(endpoint)

    def add_edge(self, tail: Node | Name | str, head: Node | Name | str) -> Edge:
        edge = Edge(self._endpoint(tail), self._endpoint(head))
        self.edges.append(edge)
        return edge

    def add_subgraph(self, graph: Graph) -> None:
        if not graph.is_subgraph:
            raise ValueError(f"{graph.kind.value} cannot be nested in a graph")
        if graph is self:
            raise ValueError("A graph cannot contain itself")
        self.subgraphs.append(graph)

    def create_subgraph(self, name: Name | str, cluster: bool = False) -> Graph:
        kind = GraphKind.CLUSTER_SUBGRAPH if cluster else GraphKind.SUBGRAPH
        if self.context is not None:
            sub = self.context.create_graph(name, kind)
        else:
            sub = Graph(name, kind)
        self.add_subgraph(sub)
        return sub

    def _lines(self, level: int, pad: str, directed: bool) -> list[str]:
        outer = pad * level
        inner = pad * (level + 1)
        head = f"{self.kind.keyword} {self.display_name} {{"
        if self.is_strict:
            head = "strict " + head
        lines = [outer + head]

        for keyword, table in (
            ("graph", self.attributes),
            ("node", self.node_defaults),
            ("edge", self.edge_defaults),
        ):
            if len(table):
                lines.append(inner + _statement(keyword, table))
        lines.extend(inner + node.render() for node in self.nodes.values())
        lines.extend(inner + edge.render(directed) for edge in self.edges)
        for sub in self.subgraphs:
            lines.extend(sub._lines(level + 1, pad, directed))

        lines.append(outer + "}")
        return lines

    def render(self, config: RenderConfig | None = None) -> str:
        """Render the DOT document for this graph and its subgraphs."""
        if config is None:
            from dotgen.config import RenderConfig

            config = RenderConfig()
        text = "\n".join(self._lines(0, " " * config.indent, self.is_directed))
        return text + "\n" if config.trailing_newline else text

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Graph({self.name.render()!r}, {self.kind})"

    def to_networkx(self) -> nx.MultiGraph:
        """Convert to a networkx multigraph carrying the rendered attributes.

        Subgraph nodes and edges are merged into the result.
        """
        g: nx.MultiGraph = nx.MultiDiGraph() if self.is_directed else nx.MultiGraph()
        g.graph.update({attr.value: text for attr, text in self.attributes.items()})
        self._fill_networkx(g)
        return g

    def _fill_networkx(self, g: nx.MultiGraph) -> None:
        for key, node in self.nodes.items():
            g.add_node(key, **{attr.value: text for attr, text in node.attributes.items()})
        for edge in self.edges:
            g.add_edge(
                edge.tail.key,
                edge.head.key,
                **{attr.value: text for attr, text in edge.attributes.items()},
            )
        for sub in self.subgraphs:
            sub._fill_networkx(g)


class Context:
    """Registry of graph names.

    ``create_graph`` checks and inserts under one lock, so concurrent calls
    with the same name produce exactly one graph.
    """

    def __init__(self) -> None:
        self._graphs: dict[str, Graph] = {}
        self._lock = threading.Lock()

    def create_graph(self, name: Name | str, kind: GraphKind = GraphKind.DIGRAPH) -> Graph:
        key = as_name(name).render()
        with self._lock:
            if key in self._graphs:
                raise DuplicateIdError(f"Graph {key} already exists")
            graph = Graph(name, kind, context=self)
            self._graphs[key] = graph
        logger.debug("Registered %s %s", kind.value, key)
        return graph

    def get(self, name: Name | str) -> Graph | None:
        return self._graphs.get(as_name(name).render())

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, (str, Id, Int, Double, String)):
            return False
        try:
            key = as_name(name).render()
        except ValueError:
            return False
        return key in self._graphs

    def __len__(self) -> int:
        return len(self._graphs)
