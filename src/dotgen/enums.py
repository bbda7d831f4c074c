"""Closed enumerations of DOT and HTML-label literals."""

from __future__ import annotations

from enum import Enum, Flag


class DotEnum(Enum):
    """An enumeration whose members render as their literal text."""

    def render(self) -> str:
        return str(self.value)

    def __str__(self) -> str:
        return self.render()


class ArrowType(DotEnum):
    """Arrowhead and arrowtail shapes."""

    NORMAL = "normal"
    INV = "inv"
    DOT = "dot"
    INV_DOT = "invdot"
    ODOT = "odot"
    INV_ODOT = "invodot"
    NONE = "none"
    TEE = "tee"
    EMPTY = "empty"
    INV_EMPTY = "invempty"
    DIAMOND = "diamond"
    ODIAMOND = "odiamond"
    EDIAMOND = "ediamond"
    CROW = "crow"
    BOX = "box"
    OBOX = "obox"
    OPEN = "open"
    HALF_OPEN = "halfopen"
    VEE = "vee"


class ClusterMode(DotEnum):
    LOCAL = "local"
    GLOBAL = "global"
    NONE = "none"


class DirType(DotEnum):
    FORWARD = "forward"
    BACK = "back"
    BOTH = "both"
    NONE = "none"


class OutputMode(DotEnum):
    BREADTH_FIRST = "breadthfirst"
    NODES_FIRST = "nodesfirst"
    EDGES_FIRST = "edgesfirst"


class PackMode(DotEnum):
    NODE = "node"
    CLUST = "clust"
    GRAPH = "graph"
    ARRAY = "array"


class PageDir(DotEnum):
    BL = "BL"
    BR = "BR"
    TL = "TL"
    TR = "TR"
    RB = "RB"
    RT = "RT"
    LB = "LB"
    LT = "LT"


class QuadType(DotEnum):
    NORMAL = "normal"
    FAST = "fast"
    NONE = "none"


class RankType(DotEnum):
    SAME = "same"
    MIN = "min"
    SOURCE = "source"
    MAX = "max"
    SINK = "sink"


class RankDir(DotEnum):
    TB = "TB"
    LR = "LR"
    BT = "BT"
    RL = "RL"


class SmoothType(DotEnum):
    NONE = "none"
    AVG_DIST = "avg_dist"
    GRAPH_DIST = "graph_dist"
    POWER_DIST = "power_dist"
    RNG = "rng"
    SPRING = "spring"
    TRIANGLE = "triangle"


class StartType(DotEnum):
    REGULAR = "regular"
    SELF = "self"
    RANDOM = "random"


class CompassPoint(DotEnum):
    N = "n"
    NE = "ne"
    E = "e"
    SE = "se"
    S = "s"
    SW = "sw"
    W = "w"
    NW = "nw"
    C = "c"
    ANY = "_"


class Style(DotEnum):
    """Drawing styles for graphs, clusters, nodes and edges."""

    SOLID = "solid"
    DASHED = "dashed"
    DOTTED = "dotted"
    BOLD = "bold"
    INVIS = "invis"
    FILLED = "filled"
    STRIPED = "striped"
    WEDGED = "wedged"
    DIAGONALS = "diagonals"
    ROUNDED = "rounded"
    RADIAL = "radial"
    TAPERED = "tapered"


class Shape(DotEnum):
    """Node shapes."""

    BOX = "box"
    POLYGON = "polygon"
    ELLIPSE = "ellipse"
    OVAL = "oval"
    CIRCLE = "circle"
    POINT = "point"
    EGG = "egg"
    TRIANGLE = "triangle"
    PLAINTEXT = "plaintext"
    PLAIN = "plain"
    DIAMOND = "diamond"
    TRAPEZIUM = "trapezium"
    PARALLELOGRAM = "parallelogram"
    HOUSE = "house"
    PENTAGON = "pentagon"
    HEXAGON = "hexagon"
    SEPTAGON = "septagon"
    OCTAGON = "octagon"
    DOUBLE_CIRCLE = "doublecircle"
    DOUBLE_OCTAGON = "doubleoctagon"
    TRIPLE_OCTAGON = "tripleoctagon"
    INV_TRIANGLE = "invtriangle"
    INV_TRAPEZIUM = "invtrapezium"
    INV_HOUSE = "invhouse"
    MDIAMOND = "Mdiamond"
    MSQUARE = "Msquare"
    MCIRCLE = "Mcircle"
    RECT = "rect"
    RECTANGLE = "rectangle"
    SQUARE = "square"
    STAR = "star"
    NONE = "none"
    UNDERLINE = "underline"
    CYLINDER = "cylinder"
    NOTE = "note"
    TAB = "tab"
    FOLDER = "folder"
    BOX3D = "box3d"
    COMPONENT = "component"
    RECORD = "record"
    MRECORD = "Mrecord"


# HTML-label attribute values.


class Alignment(DotEnum):
    CENTER = "CENTER"
    LEFT = "LEFT"
    RIGHT = "RIGHT"
    TEXT = "TEXT"
    MIDDLE = "MIDDLE"
    BOTTOM = "BOTTOM"
    TOP = "TOP"


class Scale(DotEnum):
    TRUE = "TRUE"
    FALSE = "FALSE"
    WIDTH = "WIDTH"
    HEIGHT = "HEIGHT"
    BOTH = "BOTH"


class HtmlStyle(DotEnum):
    ROUNDED = "ROUNDED"
    RADIAL = "RADIAL"


class Sides(Flag):
    """Cell borders to draw; members combine with ``|``."""

    LEFT = 1
    RIGHT = 2
    BOTTOM = 4
    TOP = 8

    def render(self) -> str:
        letters = (
            (Sides.LEFT, "L"),
            (Sides.RIGHT, "R"),
            (Sides.BOTTOM, "B"),
            (Sides.TOP, "T"),
        )
        return "".join(letter for side, letter in letters if side in self)

    def __str__(self) -> str:
        return self.render()
