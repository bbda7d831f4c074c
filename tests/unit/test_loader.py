"""Unit tests for dotgen.loader."""

from pathlib import Path

import pytest

from dotgen.attributes import AttributeId, HtmlAttributeId
from dotgen.colors import HSV, RGB, RGBA, ColorList, NamedColor
from dotgen.enums import ArrowType, CompassPoint, RankDir, Sides, Style
from dotgen.errors import RangeError, TypeMismatchError
from dotgen.graph import Context, GraphKind
from dotgen.loader import LoadError, coerce_value, load_graph, parse_color
from dotgen.values import (
    AddDouble,
    AddPoint,
    Bool,
    Double,
    EscString,
    Int,
    LayerList,
    LayerRange,
    Point,
    PortPos,
    Rect,
    String,
    StyleList,
    ViewPort,
)

A = AttributeId


class TestParseColor:
    def test_hex(self) -> None:
        assert parse_color("#FF0000") == RGB(255, 0, 0)
        assert parse_color("#ff000080") == RGBA(255, 0, 0, 128)

    def test_name(self) -> None:
        assert parse_color("Red") == NamedColor("red")

    def test_hsv(self) -> None:
        assert parse_color("0.5,1,1") == HSV(0.5, 1.0, 1.0)

    def test_list(self) -> None:
        colors = parse_color("red;0.5:blue")
        assert isinstance(colors, ColorList)
        assert colors.render() == "red;0.50:blue"

    @pytest.mark.parametrize("raw", ["#FFF", "nosuchcolor", 3])
    def test_invalid(self, raw: object) -> None:
        with pytest.raises(ValueError):
            parse_color(raw)


class TestCoerceValue:
    def test_scalars(self) -> None:
        assert coerce_value(A.FONTSIZE, 12) == Double(12.0)
        assert coerce_value(A.PERIPHERIES, 2) == Int(2)
        assert coerce_value(A.CENTER, True) == Bool(True)
        assert coerce_value(A.FONTNAME, "Arial") == String("Arial")
        assert coerce_value(A.LABEL, "hello") == EscString("hello")
        assert coerce_value(A.LABEL, 42) == EscString("42")

    def test_enumerations(self) -> None:
        assert coerce_value(A.RANKDIR, "LR") is RankDir.LR
        assert coerce_value(A.ARROWHEAD, "vee") is ArrowType.VEE

    def test_unions_pick_first_match(self) -> None:
        assert coerce_value(A.STYLE, "filled") is Style.FILLED
        assert coerce_value(A.STYLE, "filled,rounded") == StyleList(
            (Style.FILLED, Style.ROUNDED)
        )
        assert coerce_value(A.SPLINES, "true") == Bool(True)
        assert coerce_value(A.SPLINES, "ortho") == String("ortho")
        assert coerce_value(A.RATIO, 2) == Double(2.0)
        assert coerce_value(A.RATIO, "fill") == String("fill")
        assert coerce_value(A.SIZE, "7,5") == Point(7, 5)
        assert coerce_value(A.NORMALIZE, True) == Bool(True)

    def test_geometry(self) -> None:
        assert coerce_value(A.POS, "1,2!") == Point(1, 2, marked=True)
        assert coerce_value(A.POS, "1,2 3,4").render() == "1.00,2.00 3.00,4.00"
        assert coerce_value(A.BB, "0,0,10,20") == Rect(Point(0, 0), Point(10, 20))
        assert coerce_value(A.SEP, "+4") == AddDouble(4, additive=True)
        assert coerce_value(A.SEP, "+4,2") == AddPoint(4, 2, additive=True)
        assert coerce_value(A.VIEWPORT, "100,50,2,'a'") == ViewPort(100, 50, 2, center="a")

    def test_ports_and_layers(self) -> None:
        assert coerce_value(A.HEADPORT, "p:ne") == PortPos("p", CompassPoint.NE)
        assert coerce_value(A.HEADPORT, "s") == PortPos(compass=CompassPoint.S)
        assert coerce_value(A.HEADPORT, "p1") == PortPos(port="p1")
        assert coerce_value(A.LAYERS, "a:b") == LayerList(("a", "b"))
        assert coerce_value(A.LAYER, "a,b:c") == LayerRange(("a", ("b", "c")))

    def test_colors(self) -> None:
        assert coerce_value(A.COLOR, "#00FF00") == RGB(0, 255, 0)

    def test_html_sides(self) -> None:
        assert coerce_value(HtmlAttributeId.SIDES, "lt") == Sides.LEFT | Sides.TOP

    def test_unreadable(self) -> None:
        with pytest.raises(TypeMismatchError):
            coerce_value(A.COLOR, "nosuchcolor")
        with pytest.raises(TypeMismatchError):
            coerce_value(A.SHAPE, "blob")
        with pytest.raises(TypeMismatchError):
            coerce_value(A.PERIPHERIES, 1.5)


class TestLoadGraph:
    def test_sample(self, sample_yaml: str) -> None:
        graph = load_graph(sample_yaml)
        assert graph.kind is GraphKind.DIGRAPH
        assert graph.attributes.get(A.RANKDIR) == '"LR"'
        assert graph.node_defaults.get(A.SHAPE) == '"box"'
        assert list(graph.nodes) == ["a", "b", "c"]
        assert len(graph.edges) == 2
        assert graph.edges[0].attributes.get(A.STYLE) == '"dashed"'
        (core,) = graph.subgraphs
        assert core.kind is GraphKind.CLUSTER_SUBGRAPH
        assert core.display_name == "cluster_core"
        assert list(core.nodes) == ["d"]

    def test_from_file(self, sample_yaml_file: Path) -> None:
        graph = load_graph(sample_yaml_file)
        assert graph.display_name == "deps"

    def test_from_mapping(self) -> None:
        graph = load_graph({"name": "g", "kind": "strict_graph", "nodes": {"x": None}})
        assert graph.is_strict
        assert not graph.is_directed
        assert graph.render() == "strict graph g {\n  x;\n}\n"

    def test_registers_in_context(self, context: Context, sample_yaml: str) -> None:
        graph = load_graph(sample_yaml, context)
        assert context.get("deps") is graph
        assert "core" in context

    def test_names_that_are_not_ids(self) -> None:
        graph = load_graph({"name": "g", "nodes": {"my node": None, 7: None}})
        assert list(graph.nodes) == ['"my node"', "7"]

    @pytest.mark.parametrize(
        "text",
        [
            "- just\n- a list\n",
            "kind: digraph\n",
            "name: g\nkind: hypergraph\n",
            "name: g\nattributes: {nosuchattr: 1}\n",
            "name: g\nedges:\n  - {tail: a}\n",
            "name: g\nnodes: [a, b]\n",
            "name: g\nsubgraphs:\n  - {cluster: true}\n",
            "name: [unclosed\n",
        ],
    )
    def test_malformed(self, text: str) -> None:
        with pytest.raises(LoadError):
            load_graph(text)

    def test_value_errors_propagate(self) -> None:
        with pytest.raises(RangeError):
            load_graph({"name": "g", "nodes": {"a": {"sides": 2}}})
        with pytest.raises(TypeMismatchError):
            load_graph({"name": "g", "nodes": {"a": {"shape": "blob"}}})
