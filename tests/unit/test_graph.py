"""Unit tests for dotgen.graph."""

import threading

import networkx as nx
import pytest

from dotgen.attributes import CLUSTER_ATTRIBUTES, GRAPH_ATTRIBUTES, AttributeId
from dotgen.colors import NamedColor
from dotgen.config import RenderConfig
from dotgen.enums import RankDir, RankType, Shape, Style
from dotgen.errors import DuplicateIdError, TypeMismatchError, UnsupportedAttributeError
from dotgen.graph import Context, Graph, GraphKind, Node
from dotgen.values import Double, EscString, Id, Int, String

A = AttributeId


class TestGraphKind:
    def test_flags(self) -> None:
        assert GraphKind.STRICT_DIGRAPH.is_strict
        assert GraphKind.STRICT_DIGRAPH.is_directed
        assert not GraphKind.GRAPH.is_directed
        assert GraphKind.CLUSTER_SUBGRAPH.is_cluster
        assert GraphKind.CLUSTER_SUBGRAPH.is_subgraph
        assert not GraphKind.CLUSTER_DIGRAPH.is_subgraph
        assert not GraphKind.SUBGRAPH.is_directed

    def test_ten_kinds(self) -> None:
        assert len(GraphKind) == 10

    def test_legal_attributes(self) -> None:
        assert GraphKind.DIGRAPH.legal_attributes == GRAPH_ATTRIBUTES
        assert GraphKind.SUBGRAPH.legal_attributes == (A.RANK,)

        cluster_graph = GraphKind.CLUSTER_GRAPH.legal_attributes
        assert cluster_graph[: len(GRAPH_ATTRIBUTES)] == GRAPH_ATTRIBUTES
        assert set(cluster_graph) == set(GRAPH_ATTRIBUTES) | set(CLUSTER_ATTRIBUTES)

        cluster_sub = GraphKind.CLUSTER_SUBGRAPH.legal_attributes
        assert cluster_sub[0] == A.RANK
        assert set(cluster_sub) == {A.RANK} | set(CLUSTER_ATTRIBUTES)


class TestNames:
    def test_name_kinds(self) -> None:
        assert Graph("g").name == Id("g")
        assert Graph(Int(3)).display_name == "3"
        assert Graph(Double(1.5)).display_name == "1.50"
        assert Graph(String("my graph")).display_name == '"my graph"'

    def test_plain_string_must_be_an_id(self) -> None:
        with pytest.raises(ValueError):
            Graph("my graph")

    def test_other_types_rejected(self) -> None:
        with pytest.raises(TypeMismatchError):
            Node(3.5)  # type: ignore[arg-type]

    def test_cluster_prefix(self) -> None:
        assert Graph("core", GraphKind.CLUSTER_SUBGRAPH).display_name == "cluster_core"
        assert Graph("cluster1", GraphKind.CLUSTER_SUBGRAPH).display_name == "cluster1"
        assert Graph(String("a b"), GraphKind.CLUSTER_SUBGRAPH).display_name == '"cluster_a b"'
        assert Graph("core", GraphKind.SUBGRAPH).display_name == "core"


class TestGraphBuilding:
    def test_add_attribute_passes_through(self) -> None:
        g = Graph("g")
        g.add_attribute(A.RANKDIR, RankDir.LR)
        assert g.attributes.get(A.RANKDIR) == '"LR"'
        with pytest.raises(UnsupportedAttributeError):
            g.add_attribute(A.SHAPE, Shape.BOX)

    def test_subgraph_only_accepts_rank(self) -> None:
        sub = Graph("s", GraphKind.SUBGRAPH)
        sub.add_attribute(A.RANK, RankType.SAME)
        with pytest.raises(UnsupportedAttributeError):
            sub.add_attribute(A.LABEL, EscString("x"))

    def test_duplicate_node(self) -> None:
        g = Graph("g")
        g.add_node("a")
        with pytest.raises(DuplicateIdError):
            g.add_node("a")

    def test_node_lookup(self) -> None:
        g = Graph("g")
        a = g.add_node("a")
        assert g.node("a") is a
        assert g.node("b") is None

    def test_edge_creates_missing_nodes(self) -> None:
        g = Graph("g")
        a = g.add_node("a")
        edge = g.add_edge(a, "b")
        assert edge.tail is a
        assert g.node("b") is edge.head
        assert list(g.nodes) == ["a", "b"]

    def test_edge_operator_is_chosen_by_caller(self) -> None:
        edge = Graph("g", GraphKind.GRAPH).add_edge("a", "b")
        edge.add_attribute(A.COLOR, NamedColor("red"))
        assert edge.render(directed=True) == 'a -> b [color="red"];'
        assert edge.render(directed=False) == 'a -- b [color="red"];'
        with pytest.raises(TypeError):
            edge.render()  # type: ignore[call-arg]

    def test_add_subgraph_requires_subgraph_kind(self) -> None:
        g = Graph("g")
        with pytest.raises(ValueError):
            g.add_subgraph(Graph("h", GraphKind.DIGRAPH))
        g.add_subgraph(Graph("s", GraphKind.SUBGRAPH))
        assert len(g.subgraphs) == 1


class TestRender:
    def test_empty_graph(self) -> None:
        assert Graph("g", GraphKind.GRAPH).render() == "graph g {\n}\n"

    def test_strict(self) -> None:
        assert str(Graph("g", GraphKind.STRICT_DIGRAPH)) == "strict digraph g {\n}\n"

    def test_full_document(self) -> None:
        g = Graph("g")
        g.add_attribute(A.RANKDIR, RankDir.LR)
        g.node_defaults.add(A.SHAPE, Shape.BOX)
        g.edge_defaults.add(A.STYLE, Style.DASHED)
        a = g.add_node("a")
        a.add_attribute(A.COLOR, NamedColor("red"))
        g.add_edge("a", "b").add_attribute(A.LABEL, EscString("x"))
        sub = g.create_subgraph("core", cluster=True)
        sub.add_attribute(A.LABEL, EscString("Core"))
        sub.add_node("c")
        sub.add_edge("c", "d")

        assert g.render() == (
            "digraph g {\n"
            '  graph [rankdir="LR"];\n'
            '  node [shape="box"];\n'
            '  edge [style="dashed"];\n'
            '  a [color="red"];\n'
            "  b;\n"
            '  a -> b [label="x"];\n'
            "  subgraph cluster_core {\n"
            '    graph [label="Core"];\n'
            "    c;\n"
            "    d;\n"
            "    c -> d;\n"
            "  }\n"
            "}\n"
        )

    def test_undirected_operator_reaches_subgraphs(self) -> None:
        g = Graph("g", GraphKind.GRAPH)
        g.add_edge("a", "b")
        g.create_subgraph("s").add_edge("c", "d")
        text = g.render()
        assert "a -- b;" in text
        assert "c -- d;" in text
        assert "->" not in text

    def test_config(self) -> None:
        g = Graph("g")
        g.add_node("a")
        config = RenderConfig(indent=4, trailing_newline=False)
        assert g.render(config) == "digraph g {\n    a;\n}"

    def test_render_is_repeatable(self) -> None:
        g = Graph("g")
        g.add_edge("a", "b")
        assert g.render() == g.render()


class TestNetworkx:
    def test_directed(self) -> None:
        g = Graph("g")
        g.add_attribute(A.RANKDIR, RankDir.LR)
        g.add_node("a").add_attribute(A.SHAPE, Shape.BOX)
        g.add_edge("a", "b")
        g.add_edge("a", "b")
        g.create_subgraph("s").add_edge("b", "c")

        nxg = g.to_networkx()
        assert isinstance(nxg, nx.MultiDiGraph)
        assert nxg.graph["rankdir"] == '"LR"'
        assert nxg.nodes["a"]["shape"] == '"box"'
        assert nxg.number_of_edges("a", "b") == 2
        assert nxg.has_edge("b", "c")

    def test_undirected(self) -> None:
        g = Graph("g", GraphKind.GRAPH)
        g.add_edge("a", "b")
        nxg = g.to_networkx()
        assert isinstance(nxg, nx.MultiGraph)
        assert not nxg.is_directed()


class TestContext:
    def test_create_and_get(self, context: Context) -> None:
        g = context.create_graph("g", GraphKind.GRAPH)
        assert context.get("g") is g
        assert "g" in context
        assert "h" not in context
        assert len(context) == 1
        assert g.context is context

    def test_contains_with_invalid_names(self, context: Context) -> None:
        context.create_graph("g")
        assert "1foo" not in context
        assert "" not in context
        assert 3.5 not in context

    def test_duplicate_name(self, context: Context) -> None:
        context.create_graph("g")
        with pytest.raises(DuplicateIdError):
            context.create_graph("g", GraphKind.GRAPH)

    def test_subgraphs_are_registered(self, context: Context) -> None:
        g = context.create_graph("g")
        sub = g.create_subgraph("s")
        assert context.get("s") is sub
        with pytest.raises(DuplicateIdError):
            g.create_subgraph("s")

    def test_concurrent_create(self, context: Context) -> None:
        barrier = threading.Barrier(8)
        created: list[Graph] = []
        errors: list[Exception] = []

        def worker() -> None:
            barrier.wait()
            try:
                created.append(context.create_graph("g"))
            except DuplicateIdError as e:
                errors.append(e)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(created) == 1
        assert len(errors) == 7
        assert context.get("g") is created[0]
