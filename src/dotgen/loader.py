"""Build graphs from YAML descriptions.

A description is a mapping::

    name: deps
    kind: digraph
    attributes: {rankdir: LR}
    node_defaults: {shape: box}
    nodes:
      a: {color: red}
      b:
    edges:
      - {tail: a, head: b, attributes: {style: dashed}}
    subgraphs:
      - {name: core, cluster: true, nodes: {c: }}

Attribute values are YAML scalars or lists, coerced to the value kinds the
attribute accepts.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable

import yaml

from dotgen.attributes import ATTRIBUTE_SPECS, AttributeId, AttributeKey, AttributeTable
from dotgen.colors import HSV, RGB, RGBA, Color, ColorList, NamedColor
from dotgen.enums import CompassPoint, DotEnum, Sides, Style
from dotgen.errors import DotError, TypeMismatchError
from dotgen.graph import Context, Graph, GraphKind, Name
from dotgen.values import (
    AddDouble,
    AddPoint,
    Bool,
    Double,
    EscString,
    Id,
    Int,
    LayerList,
    LayerRange,
    Point,
    PointList,
    PortPos,
    Rect,
    String,
    StyleList,
    ViewPort,
)

logger = logging.getLogger(__name__)


class LoadError(DotError):
    """Raised when a graph description is malformed."""


def _number(raw: Any) -> float:
    if isinstance(raw, bool):
        raise ValueError(f"Not a number: {raw!r}")
    if isinstance(raw, (int, float)):
        return float(raw)
    if isinstance(raw, str):
        return float(raw.strip())
    raise ValueError(f"Not a number: {raw!r}")


def _numbers(raw: Any) -> list[float]:
    parts = raw if isinstance(raw, list) else str(raw).split(",")
    return [_number(p) for p in parts]


def _parse_bool(raw: Any) -> Bool:
    if isinstance(raw, bool):
        return Bool(raw)
    if isinstance(raw, str) and raw.lower() in ("true", "false"):
        return Bool(raw.lower() == "true")
    raise ValueError(f"Not a boolean: {raw!r}")


def _parse_int(raw: Any) -> Int:
    if isinstance(raw, bool) or isinstance(raw, float):
        raise ValueError(f"Not an integer: {raw!r}")
    return Int(int(raw))


def _parse_string(raw: Any) -> String:
    if isinstance(raw, bool) or not isinstance(raw, (str, int, float)):
        raise ValueError(f"Not a string: {raw!r}")
    return String(str(raw))


def _parse_esc_string(raw: Any) -> EscString:
    return EscString(_parse_string(raw).text)


def _parse_point(raw: Any) -> Point:
    marked = False
    if isinstance(raw, str) and raw.endswith("!"):
        raw, marked = raw[:-1], True
    coords = _numbers(raw)
    if len(coords) not in (2, 3):
        raise ValueError(f"Points have 2 or 3 coordinates: {raw!r}")
    return Point(*coords, marked=marked)


def _parse_point_list(raw: Any) -> PointList:
    items = raw if isinstance(raw, list) else str(raw).split()
    return PointList([_parse_point(p) for p in items])


def _parse_rect(raw: Any) -> Rect:
    coords = _numbers(raw)
    if len(coords) != 4:
        raise ValueError(f"Rects have 4 coordinates: {raw!r}")
    return Rect(Point(coords[0], coords[1]), Point(coords[2], coords[3]))


def _strip_plus(raw: Any) -> tuple[Any, bool]:
    if isinstance(raw, str) and raw.startswith("+"):
        return raw[1:], True
    return raw, False


def _parse_add_double(raw: Any) -> AddDouble:
    raw, additive = _strip_plus(raw)
    return AddDouble(_number(raw), additive)


def _parse_add_point(raw: Any) -> AddPoint:
    raw, additive = _strip_plus(raw)
    coords = _numbers(raw)
    if len(coords) != 2:
        raise ValueError(f"Expected x,y: {raw!r}")
    return AddPoint(coords[0], coords[1], additive)


def _parse_port_pos(raw: Any) -> PortPos:
    if not isinstance(raw, str):
        raise ValueError(f"Not a port: {raw!r}")
    port, _, compass = raw.rpartition(":")
    if not port:
        try:
            return PortPos(compass=CompassPoint(compass))
        except ValueError:
            return PortPos(port=compass)
    return PortPos(port=port, compass=CompassPoint(compass))


def _parse_layer_list(raw: Any) -> LayerList:
    return LayerList(raw if isinstance(raw, list) else str(raw).split(":"))


def _parse_layer_range(raw: Any) -> LayerRange:
    items = raw if isinstance(raw, list) else str(raw).split(",")
    parsed: list[str | tuple[str, str]] = []
    for item in items:
        first, sep, last = str(item).partition(":")
        parsed.append((first, last) if sep else first)
    return LayerRange(parsed)


def _parse_view_port(raw: Any) -> ViewPort:
    if not isinstance(raw, str):
        raise ValueError(f"Not a viewport: {raw!r}")
    parts = raw.split(",")
    if len(parts) == 4 and parts[3].startswith("'") and parts[3].endswith("'"):
        return ViewPort(*(_number(p) for p in parts[:3]), center=parts[3][1:-1])
    coords = [_number(p) for p in parts]
    if len(coords) == 5:
        return ViewPort(*coords[:3], center=Point(coords[3], coords[4]))
    if len(coords) in (2, 3):
        return ViewPort(*coords)
    raise ValueError(f"Not a viewport: {raw!r}")


def _parse_style_list(raw: Any) -> StyleList:
    items = raw if isinstance(raw, list) else str(raw).split(",")
    return StyleList([Style(str(s).strip()) for s in items])


def _parse_sides(raw: Any) -> Sides:
    letters = {"L": Sides.LEFT, "R": Sides.RIGHT, "B": Sides.BOTTOM, "T": Sides.TOP}
    if not isinstance(raw, str) or not raw:
        raise ValueError(f"Not a side set: {raw!r}")
    result = letters[raw[0].upper()]
    for c in raw[1:]:
        result |= letters[c.upper()]
    return result


def _parse_single_color(raw: str) -> Color:
    text = raw.strip()
    if text.startswith("#"):
        digits = text[1:]
        if len(digits) not in (6, 8):
            raise ValueError(f"Not a color: {raw!r}")
        channels = [int(digits[i : i + 2], 16) for i in range(0, len(digits), 2)]
        return RGB(*channels) if len(channels) == 3 else RGBA(*channels)
    if "," in text or " " in text:
        h, s, v = (float(p) for p in text.replace(",", " ").split())
        return HSV(h, s, v)
    return NamedColor(text)


def parse_color(raw: Any) -> Color:
    """Parse ``#RRGGBB``, ``#RRGGBBAA``, ``H,S,V``, an X11 name or a
    ``color[;weight]:color...`` list."""
    if not isinstance(raw, str):
        raise ValueError(f"Not a color: {raw!r}")
    if ":" not in raw and ";" not in raw:
        return _parse_single_color(raw)
    colors = ColorList()
    for part in raw.split(":"):
        color, sep, weight = part.partition(";")
        colors.add(_parse_single_color(color), float(weight) if sep else None)
    return colors


_PARSERS: dict[type, Callable[[Any], Any]] = {
    Bool: _parse_bool,
    Int: _parse_int,
    Double: lambda raw: Double(_number(raw)),
    String: _parse_string,
    EscString: _parse_esc_string,
    Point: _parse_point,
    PointList: _parse_point_list,
    Rect: _parse_rect,
    AddDouble: _parse_add_double,
    AddPoint: _parse_add_point,
    PortPos: _parse_port_pos,
    LayerList: _parse_layer_list,
    LayerRange: _parse_layer_range,
    ViewPort: _parse_view_port,
    StyleList: _parse_style_list,
    Sides: _parse_sides,
    Color: parse_color,
}


def coerce_value(attr: AttributeKey, raw: Any) -> Any:
    """Turn a raw YAML value into the first value kind ``attr`` accepts."""
    spec = ATTRIBUTE_SPECS[attr]
    for kind in spec.kinds:
        if isinstance(kind, type) and issubclass(kind, DotEnum):
            parser: Callable[[Any], Any] | None = kind
        else:
            parser = _PARSERS.get(kind)
        if parser is None:
            continue
        try:
            return parser(raw)
        except (ValueError, KeyError, TypeError):
            continue
    raise TypeMismatchError(
        f"Cannot read {raw!r} as {spec.kind_names} for attribute {attr.value}"
    )


def _attribute_id(key: Any) -> AttributeId:
    try:
        return AttributeId(key)
    except ValueError:
        raise LoadError(f"Unknown attribute: {key!r}") from None


def _mapping(data: Any, what: str) -> dict[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise LoadError(f"{what} must be a mapping")
    return data


def _fill_table(table: AttributeTable, data: Any, what: str) -> None:
    for key, raw in _mapping(data, what).items():
        attr = _attribute_id(key)
        table.add(attr, coerce_value(attr, raw))


def _name(raw: Any) -> Name:
    if isinstance(raw, bool) or raw is None:
        raise LoadError(f"Invalid name: {raw!r}")
    if isinstance(raw, int):
        return Int(raw)
    if isinstance(raw, float):
        return Double(raw)
    try:
        return Id(str(raw))
    except ValueError:
        return String(str(raw))


def _populate(graph: Graph, data: dict[str, Any]) -> None:
    _fill_table(graph.attributes, data.get("attributes"), "attributes")
    _fill_table(graph.node_defaults, data.get("node_defaults"), "node_defaults")
    _fill_table(graph.edge_defaults, data.get("edge_defaults"), "edge_defaults")

    for raw_name, attrs in _mapping(data.get("nodes"), "nodes").items():
        node = graph.add_node(_name(raw_name))
        _fill_table(node.attributes, attrs, f"node {raw_name}")

    edges = data.get("edges") or []
    if not isinstance(edges, list):
        raise LoadError("edges must be a list")
    for entry in edges:
        entry = _mapping(entry, "edge")
        if "tail" not in entry or "head" not in entry:
            raise LoadError(f"Edges need a tail and a head: {entry!r}")
        edge = graph.add_edge(_name(entry["tail"]), _name(entry["head"]))
        _fill_table(edge.attributes, entry.get("attributes"), "edge attributes")

    subgraphs = data.get("subgraphs") or []
    if not isinstance(subgraphs, list):
        raise LoadError("subgraphs must be a list")
    for entry in subgraphs:
        entry = _mapping(entry, "subgraph")
        if "name" not in entry:
            raise LoadError("Subgraphs need a name")
        sub = graph.create_subgraph(_name(entry["name"]), cluster=bool(entry.get("cluster")))
        _populate(sub, entry)


def load_graph(source: Path | str | dict[str, Any], context: Context | None = None) -> Graph:
    """Build a graph from a YAML file, YAML text or an already parsed mapping."""
    if isinstance(source, Path):
        logger.info("Loading graph description from %s", source)
        source = source.read_text()
    if isinstance(source, str):
        try:
            data = yaml.safe_load(source)
        except yaml.YAMLError as exc:
            raise LoadError(f"Invalid YAML: {exc}") from exc
    else:
        data = source
    if not isinstance(data, dict):
        raise LoadError("Graph description must be a mapping")
    if "name" not in data:
        raise LoadError("Graph description needs a name")

    try:
        kind = GraphKind(data.get("kind", "digraph"))
    except ValueError:
        raise LoadError(f"Unknown graph kind: {data.get('kind')!r}") from None

    name = _name(data["name"])
    graph = context.create_graph(name, kind) if context is not None else Graph(name, kind)
    _populate(graph, data)
    logger.debug(
        "Loaded %s %s: %d nodes, %d edges, %d subgraphs",
        kind.value,
        graph.display_name,
        len(graph.nodes),
        len(graph.edges),
        len(graph.subgraphs),
    )
    return graph
