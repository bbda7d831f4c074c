"""Attribute identifiers, their value specs, and per-entity attribute tables.

An :class:`AttributeTable` is bound to the attributes one kind of entity may
carry. Adding an attribute checks that it is legal for the entity, that the
value is of the kind the attribute expects and, for bounded numbers, that it
lies inside the documented range.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Union

from dotgen.colors import Color
from dotgen.enums import (
    Alignment,
    ArrowType,
    ClusterMode,
    DirType,
    HtmlStyle,
    OutputMode,
    PackMode,
    PageDir,
    QuadType,
    RankDir,
    RankType,
    Scale,
    Shape,
    Sides,
    SmoothType,
    StartType,
    Style,
)
from dotgen.errors import RangeError, TypeMismatchError, UnsupportedAttributeError
from dotgen.values import (
    AddDouble,
    AddPoint,
    Bool,
    Double,
    EscString,
    HtmlValue,
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
    escape_html,
)


class AttributeId(Enum):
    """DOT attributes; the value is the name written to DOT."""

    DAMPING = "Damping"
    K = "K"
    URL = "URL"
    BACKGROUND = "_background"
    AREA = "area"
    ARROWHEAD = "arrowhead"
    ARROWSIZE = "arrowsize"
    ARROWTAIL = "arrowtail"
    BB = "bb"
    BGCOLOR = "bgcolor"
    CENTER = "center"
    CHARSET = "charset"
    CLASS = "class"
    CLUSTERRANK = "clusterrank"
    COLOR = "color"
    COLORSCHEME = "colorscheme"
    COMMENT = "comment"
    COMPOUND = "compound"
    CONCENTRATE = "concentrate"
    CONSTRAINT = "constraint"
    DECORATE = "decorate"
    DEFAULTDIST = "defaultdist"
    DIM = "dim"
    DIMEN = "dimen"
    DIR = "dir"
    DIREDGECONSTRAINTS = "diredgeconstraints"
    DISTORTION = "distortion"
    DPI = "dpi"
    EDGE_URL = "edgeURL"
    EDGEHREF = "edgehref"
    EDGETARGET = "edgetarget"
    EDGETOOLTIP = "edgetooltip"
    EPSILON = "epsilon"
    ESEP = "esep"
    FILLCOLOR = "fillcolor"
    FIXEDSIZE = "fixedsize"
    FONTCOLOR = "fontcolor"
    FONTNAME = "fontname"
    FONTNAMES = "fontnames"
    FONTPATH = "fontpath"
    FONTSIZE = "fontsize"
    FORCELABELS = "forcelabels"
    GRADIENTANGLE = "gradientangle"
    GROUP = "group"
    HEAD_URL = "headURL"
    HEAD_LP = "head_lp"
    HEADCLIP = "headclip"
    HEADHREF = "headhref"
    HEADLABEL = "headlabel"
    HEADPORT = "headport"
    HEADTARGET = "headtarget"
    HEADTOOLTIP = "headtooltip"
    HEIGHT = "height"
    HREF = "href"
    ID = "id"
    IMAGE = "image"
    IMAGEPATH = "imagepath"
    IMAGEPOS = "imagepos"
    IMAGESCALE = "imagescale"
    INPUTSCALE = "inputscale"
    LABEL = "label"
    LABEL_URL = "labelURL"
    LABEL_SCHEME = "label_scheme"
    LABELANGLE = "labelangle"
    LABELDISTANCE = "labeldistance"
    LABELFLOAT = "labelfloat"
    LABELFONTCOLOR = "labelfontcolor"
    LABELFONTNAME = "labelfontname"
    LABELFONTSIZE = "labelfontsize"
    LABELHREF = "labelhref"
    LABELJUST = "labeljust"
    LABELLOC = "labelloc"
    LABELTARGET = "labeltarget"
    LABELTOOLTIP = "labeltooltip"
    LANDSCAPE = "landscape"
    LAYER = "layer"
    LAYERLISTSEP = "layerlistsep"
    LAYERS = "layers"
    LAYERSELECT = "layerselect"
    LAYERSEP = "layersep"
    LAYOUT = "layout"
    LEN = "len"
    LEVELS = "levels"
    LEVELSGAP = "levelsgap"
    LHEAD = "lhead"
    LHEIGHT = "lheight"
    LP = "lp"
    LTAIL = "ltail"
    LWIDTH = "lwidth"
    MARGIN = "margin"
    MAXITER = "maxiter"
    MCLIMIT = "mclimit"
    MINDIST = "mindist"
    MINLEN = "minlen"
    MODE = "mode"
    MODEL = "model"
    MOSEK = "mosek"
    NEWRANK = "newrank"
    NODESEP = "nodesep"
    NOJUSTIFY = "nojustify"
    NORMALIZE = "normalize"
    NOTRANSLATE = "notranslate"
    NSLIMIT = "nslimit"
    NSLIMIT1 = "nslimit1"
    ORDERING = "ordering"
    ORIENTATION = "orientation"
    OUTPUTORDER = "outputorder"
    OVERLAP = "overlap"
    OVERLAP_SCALING = "overlap_scaling"
    OVERLAP_SHRINK = "overlap_shrink"
    PACK = "pack"
    PACKMODE = "packmode"
    PAD = "pad"
    PAGE = "page"
    PAGEDIR = "pagedir"
    PENCOLOR = "pencolor"
    PENWIDTH = "penwidth"
    PERIPHERIES = "peripheries"
    PIN = "pin"
    POS = "pos"
    QUADTREE = "quadtree"
    QUANTUM = "quantum"
    RANK = "rank"
    RANKDIR = "rankdir"
    RANKSEP = "ranksep"
    RATIO = "ratio"
    RECTS = "rects"
    REGULAR = "regular"
    REMINCROSS = "remincross"
    REPULSIVEFORCE = "repulsiveforce"
    RESOLUTION = "resolution"
    ROOT = "root"
    ROTATE = "rotate"
    ROTATION = "rotation"
    SAMEHEAD = "samehead"
    SAMETAIL = "sametail"
    SAMPLEPOINTS = "samplepoints"
    SCALE = "scale"
    SEARCHSIZE = "searchsize"
    SEP = "sep"
    SHAPE = "shape"
    SHAPEFILE = "shapefile"
    SHOWBOXES = "showboxes"
    SIDES = "sides"
    SIZE = "size"
    SKEW = "skew"
    SMOOTHING = "smoothing"
    SORTV = "sortv"
    SPLINES = "splines"
    START = "start"
    STYLE = "style"
    STYLESHEET = "stylesheet"
    TAIL_URL = "tailURL"
    TAIL_LP = "tail_lp"
    TAILCLIP = "tailclip"
    TAILHREF = "tailhref"
    TAILLABEL = "taillabel"
    TAILPORT = "tailport"
    TAILTARGET = "tailtarget"
    TAILTOOLTIP = "tailtooltip"
    TARGET = "target"
    TOOLTIP = "tooltip"
    TRUECOLOR = "truecolor"
    VERTICES = "vertices"
    VIEWPORT = "viewport"
    VORO_MARGIN = "voro_margin"
    WEIGHT = "weight"
    WIDTH = "width"
    XDOTVERSION = "xdotversion"
    XLABEL = "xlabel"
    XLP = "xlp"
    Z = "z"


class HtmlAttributeId(Enum):
    """Attributes of the tags inside HTML-like labels."""

    ALIGN = "ALIGN"
    BALIGN = "BALIGN"
    BGCOLOR = "BGCOLOR"
    BORDER = "BORDER"
    CELLPADDING = "CELLPADDING"
    CELLSPACING = "CELLSPACING"
    COLOR = "COLOR"
    COLSPAN = "COLSPAN"
    COLUMNS = "COLUMNS"
    FACE = "FACE"
    FIXEDSIZE = "FIXEDSIZE"
    GRADIENTANGLE = "GRADIENTANGLE"
    HEIGHT = "HEIGHT"
    HREF = "HREF"
    ID = "ID"
    POINT_SIZE = "POINT-SIZE"
    PORT = "PORT"
    ROWS = "ROWS"
    ROWSPAN = "ROWSPAN"
    SCALE = "SCALE"
    SIDES = "SIDES"
    SRC = "SRC"
    STYLE = "STYLE"
    TARGET = "TARGET"
    TITLE = "TITLE"
    TOOLTIP = "TOOLTIP"
    VALIGN = "VALIGN"
    WIDTH = "WIDTH"


AttributeKey = Union[AttributeId, HtmlAttributeId]

# Abstract value families: any subclass is accepted.
_FAMILIES: tuple[type, ...] = (Color, HtmlValue)

_NUMERIC = (Int, Double)


@dataclass(frozen=True)
class AttributeSpec:
    """What an attribute accepts.

    ``kinds`` lists the value classes accepted (exact class, except for the
    color and HTML-label families). ``low``/``high`` bound numeric values,
    ``choices`` restricts the accepted values to a subset and attributes
    sharing a ``slot`` replace each other.
    """

    kinds: tuple[type, ...]
    low: float | None = None
    high: float | None = None
    choices: frozenset[object] | None = None
    slot: str | None = None

    def accepts(self, value: object) -> bool:
        for kind in self.kinds:
            if kind in _FAMILIES:
                if isinstance(value, kind):
                    return True
            elif type(value) is kind:
                return True
        return False

    @property
    def kind_names(self) -> str:
        return " or ".join(kind.__name__ for kind in self.kinds)


def _spec(
    *kinds: type,
    low: float | None = None,
    high: float | None = None,
    choices: Iterable[object] | None = None,
    slot: str | None = None,
) -> AttributeSpec:
    return AttributeSpec(
        kinds=kinds,
        low=low,
        high=high,
        choices=frozenset(choices) if choices is not None else None,
        slot=slot,
    )


_LABEL = _spec(EscString, HtmlValue)

A = AttributeId

DOT_ATTRIBUTE_SPECS: dict[AttributeId, AttributeSpec] = {
    A.DAMPING: _spec(Double, low=0.0),
    A.K: _spec(Double, low=0.0),
    A.URL: _spec(EscString),
    A.BACKGROUND: _spec(String),
    A.AREA: _spec(Double, low=0.0),
    A.ARROWHEAD: _spec(ArrowType),
    A.ARROWSIZE: _spec(Double, low=0.0),
    A.ARROWTAIL: _spec(ArrowType),
    A.BB: _spec(Rect),
    A.BGCOLOR: _spec(Color),
    A.CENTER: _spec(Bool),
    A.CHARSET: _spec(String),
    A.CLASS: _spec(String),
    A.CLUSTERRANK: _spec(ClusterMode),
    A.COLOR: _spec(Color),
    A.COLORSCHEME: _spec(String),
    A.COMMENT: _spec(String),
    A.COMPOUND: _spec(Bool),
    A.CONCENTRATE: _spec(Bool),
    A.CONSTRAINT: _spec(Bool),
    A.DECORATE: _spec(Bool),
    A.DEFAULTDIST: _spec(Double),
    A.DIM: _spec(Int, low=2, high=10),
    A.DIMEN: _spec(Int, low=2, high=10),
    A.DIR: _spec(DirType),
    A.DIREDGECONSTRAINTS: _spec(String, Bool),
    A.DISTORTION: _spec(Double, low=-100.0),
    A.DPI: _spec(Double, low=0.0),
    A.EDGE_URL: _spec(EscString),
    A.EDGEHREF: _spec(EscString),
    A.EDGETARGET: _spec(EscString),
    A.EDGETOOLTIP: _spec(EscString),
    A.EPSILON: _spec(Double),
    A.ESEP: _spec(AddDouble, AddPoint),
    A.FILLCOLOR: _spec(Color),
    A.FIXEDSIZE: _spec(Bool, String),
    A.FONTCOLOR: _spec(Color),
    A.FONTNAME: _spec(String),
    A.FONTNAMES: _spec(String),
    A.FONTPATH: _spec(String),
    A.FONTSIZE: _spec(Double, low=1.0),
    A.FORCELABELS: _spec(Bool),
    A.GRADIENTANGLE: _spec(Int),
    A.GROUP: _spec(String),
    A.HEAD_URL: _spec(EscString),
    A.HEAD_LP: _spec(Point),
    A.HEADCLIP: _spec(Bool),
    A.HEADHREF: _spec(EscString),
    A.HEADLABEL: _LABEL,
    A.HEADPORT: _spec(PortPos),
    A.HEADTARGET: _spec(EscString),
    A.HEADTOOLTIP: _spec(EscString),
    A.HEIGHT: _spec(Double, low=0.02),
    A.HREF: _spec(EscString),
    A.ID: _spec(EscString),
    A.IMAGE: _spec(String),
    A.IMAGEPATH: _spec(String),
    A.IMAGEPOS: _spec(String),
    A.IMAGESCALE: _spec(Bool, String),
    A.INPUTSCALE: _spec(Double),
    A.LABEL: _LABEL,
    A.LABEL_URL: _spec(EscString),
    A.LABEL_SCHEME: _spec(Int, low=0, high=3),
    A.LABELANGLE: _spec(Double, low=-180.0),
    A.LABELDISTANCE: _spec(Double, low=0.0),
    A.LABELFLOAT: _spec(Bool),
    A.LABELFONTCOLOR: _spec(Color),
    A.LABELFONTNAME: _spec(String),
    A.LABELFONTSIZE: _spec(Double, low=1.0),
    A.LABELHREF: _spec(EscString),
    A.LABELJUST: _spec(String),
    A.LABELLOC: _spec(String),
    A.LABELTARGET: _spec(EscString),
    A.LABELTOOLTIP: _spec(EscString),
    A.LANDSCAPE: _spec(Bool),
    A.LAYER: _spec(LayerRange),
    A.LAYERLISTSEP: _spec(String),
    A.LAYERS: _spec(LayerList),
    A.LAYERSELECT: _spec(LayerRange),
    A.LAYERSEP: _spec(String),
    A.LAYOUT: _spec(String),
    A.LEN: _spec(Double),
    A.LEVELS: _spec(Int, low=0),
    A.LEVELSGAP: _spec(Double),
    A.LHEAD: _spec(String),
    A.LHEIGHT: _spec(Double),
    A.LP: _spec(Point),
    A.LTAIL: _spec(String),
    A.LWIDTH: _spec(Double),
    A.MARGIN: _spec(Double, Point),
    A.MAXITER: _spec(Int),
    A.MCLIMIT: _spec(Double),
    A.MINDIST: _spec(Double, low=0.0),
    A.MINLEN: _spec(Int, low=0),
    A.MODE: _spec(String),
    A.MODEL: _spec(String),
    A.MOSEK: _spec(Bool),
    A.NEWRANK: _spec(Bool),
    A.NODESEP: _spec(Double, low=0.02),
    A.NOJUSTIFY: _spec(Bool),
    A.NORMALIZE: _spec(Double, Bool),
    A.NOTRANSLATE: _spec(Bool),
    A.NSLIMIT: _spec(Double),
    A.NSLIMIT1: _spec(Double),
    A.ORDERING: _spec(String),
    A.ORIENTATION: _spec(Double, String),
    A.OUTPUTORDER: _spec(OutputMode),
    A.OVERLAP: _spec(String, Bool),
    A.OVERLAP_SCALING: _spec(Double),
    A.OVERLAP_SHRINK: _spec(Bool),
    A.PACK: _spec(Bool, Int),
    A.PACKMODE: _spec(PackMode),
    A.PAD: _spec(Double, Point),
    A.PAGE: _spec(Double, Point),
    A.PAGEDIR: _spec(PageDir),
    A.PENCOLOR: _spec(Color),
    A.PENWIDTH: _spec(Double, low=0.0),
    A.PERIPHERIES: _spec(Int, low=0),
    A.PIN: _spec(Bool),
    A.POS: _spec(Point, PointList),
    A.QUADTREE: _spec(QuadType),
    A.QUANTUM: _spec(Double, low=0.0),
    A.RANK: _spec(RankType),
    A.RANKDIR: _spec(RankDir),
    A.RANKSEP: _spec(Double, low=0.02),
    A.RATIO: _spec(Double, String),
    A.RECTS: _spec(Rect),
    A.REGULAR: _spec(Bool),
    A.REMINCROSS: _spec(Bool),
    A.REPULSIVEFORCE: _spec(Double, low=0.0),
    A.RESOLUTION: _spec(Double),
    A.ROOT: _spec(String, Bool),
    A.ROTATE: _spec(Int),
    A.ROTATION: _spec(Double),
    A.SAMEHEAD: _spec(String),
    A.SAMETAIL: _spec(String),
    A.SAMPLEPOINTS: _spec(Int),
    A.SCALE: _spec(Double, Point),
    A.SEARCHSIZE: _spec(Int),
    A.SEP: _spec(AddDouble, AddPoint),
    A.SHAPE: _spec(Shape),
    A.SHAPEFILE: _spec(String),
    A.SHOWBOXES: _spec(Int, low=0),
    A.SIDES: _spec(Int, low=3),
    A.SIZE: _spec(Double, Point),
    A.SKEW: _spec(Double, low=-100.0),
    A.SMOOTHING: _spec(SmoothType),
    A.SORTV: _spec(Int, low=0),
    A.SPLINES: _spec(Bool, String),
    A.START: _spec(StartType, String),
    A.STYLE: _spec(Style, StyleList),
    A.STYLESHEET: _spec(String),
    A.TAIL_URL: _spec(EscString),
    A.TAIL_LP: _spec(Point),
    A.TAILCLIP: _spec(Bool),
    A.TAILHREF: _spec(EscString),
    A.TAILLABEL: _LABEL,
    A.TAILPORT: _spec(PortPos),
    A.TAILTARGET: _spec(EscString),
    A.TAILTOOLTIP: _spec(EscString),
    A.TARGET: _spec(EscString),
    A.TOOLTIP: _spec(EscString),
    A.TRUECOLOR: _spec(Bool),
    A.VERTICES: _spec(PointList),
    A.VIEWPORT: _spec(ViewPort),
    A.VORO_MARGIN: _spec(Double, low=0.0),
    A.WEIGHT: _spec(Int, low=0),
    A.WIDTH: _spec(Double, low=0.01),
    A.XDOTVERSION: _spec(String),
    A.XLABEL: _LABEL,
    A.XLP: _spec(Point),
    A.Z: _spec(Double),
}

H = HtmlAttributeId

_UINT8 = {"low": 0, "high": 255}
_UINT16 = {"low": 0, "high": 65535}

HTML_ATTRIBUTE_SPECS: dict[HtmlAttributeId, AttributeSpec] = {
    H.ALIGN: _spec(
        Alignment,
        choices=(Alignment.CENTER, Alignment.LEFT, Alignment.RIGHT, Alignment.TEXT),
        slot="align",
    ),
    H.BALIGN: _spec(
        Alignment,
        choices=(Alignment.CENTER, Alignment.LEFT, Alignment.RIGHT),
        slot="align",
    ),
    H.VALIGN: _spec(
        Alignment,
        choices=(Alignment.MIDDLE, Alignment.BOTTOM, Alignment.TOP),
        slot="align",
    ),
    H.BGCOLOR: _spec(Color),
    H.BORDER: _spec(Int, **_UINT8),
    H.CELLPADDING: _spec(Int, **_UINT8),
    H.CELLSPACING: _spec(Int, low=0, high=127),
    H.COLOR: _spec(Color),
    H.COLSPAN: _spec(Int, **_UINT16),
    H.COLUMNS: _spec(String, choices=(String("*"),)),
    H.FACE: _spec(String),
    H.FIXEDSIZE: _spec(Bool),
    H.GRADIENTANGLE: _spec(Int, low=0, high=360),
    H.HEIGHT: _spec(Int, **_UINT16),
    H.HREF: _spec(EscString),
    H.ID: _spec(EscString),
    H.POINT_SIZE: _spec(Int, Double, low=0),
    H.PORT: _spec(String),
    H.ROWS: _spec(String, choices=(String("*"),)),
    H.ROWSPAN: _spec(Int, **_UINT16),
    H.SCALE: _spec(Scale),
    H.SIDES: _spec(Sides),
    H.SRC: _spec(String),
    H.STYLE: _spec(HtmlStyle),
    H.TARGET: _spec(EscString),
    H.TITLE: _spec(EscString),
    H.TOOLTIP: _spec(EscString),
    H.WIDTH: _spec(Int, **_UINT16),
}

ATTRIBUTE_SPECS: dict[AttributeKey, AttributeSpec] = {
    **DOT_ATTRIBUTE_SPECS,
    **HTML_ATTRIBUTE_SPECS,
}


GRAPH_ATTRIBUTES: tuple[AttributeId, ...] = (
    A.DAMPING, A.K, A.URL, A.BACKGROUND, A.BB, A.BGCOLOR, A.CENTER,
    A.CHARSET, A.CLASS, A.CLUSTERRANK, A.COLORSCHEME, A.COMMENT,
    A.COMPOUND, A.CONCENTRATE, A.DEFAULTDIST, A.DIM, A.DIMEN,
    A.DIREDGECONSTRAINTS, A.DPI, A.EPSILON, A.ESEP, A.FONTCOLOR,
    A.FONTNAME, A.FONTNAMES, A.FONTPATH, A.FONTSIZE, A.FORCELABELS,
    A.GRADIENTANGLE, A.HREF, A.ID, A.IMAGEPATH, A.INPUTSCALE, A.LABEL,
    A.LABEL_SCHEME, A.LABELJUST, A.LABELLOC, A.LANDSCAPE, A.LAYERLISTSEP,
    A.LAYERS, A.LAYERSELECT, A.LAYERSEP, A.LAYOUT, A.LEVELS, A.LEVELSGAP,
    A.LHEIGHT, A.LP, A.LWIDTH, A.MARGIN, A.MAXITER, A.MCLIMIT, A.MINDIST,
    A.MODE, A.MODEL, A.MOSEK, A.NEWRANK, A.NODESEP, A.NOJUSTIFY,
    A.NORMALIZE, A.NOTRANSLATE, A.NSLIMIT, A.NSLIMIT1, A.ORDERING,
    A.ORIENTATION, A.OUTPUTORDER, A.OVERLAP, A.OVERLAP_SCALING,
    A.OVERLAP_SHRINK, A.PACK, A.PACKMODE, A.PAD, A.PAGE, A.PAGEDIR,
    A.QUADTREE, A.QUANTUM, A.RANKDIR, A.RANKSEP, A.RATIO, A.REMINCROSS,
    A.REPULSIVEFORCE, A.RESOLUTION, A.ROOT, A.ROTATE, A.ROTATION, A.SCALE,
    A.SEARCHSIZE, A.SEP, A.SHOWBOXES, A.SIZE, A.SMOOTHING, A.SORTV,
    A.SPLINES, A.START, A.STYLE, A.STYLESHEET, A.TARGET, A.TRUECOLOR,
    A.VIEWPORT, A.VORO_MARGIN, A.XDOTVERSION,
)

CLUSTER_ATTRIBUTES: tuple[AttributeId, ...] = (
    A.K, A.URL, A.AREA, A.BGCOLOR, A.CLASS, A.COLOR, A.COLORSCHEME,
    A.FILLCOLOR, A.FONTCOLOR, A.FONTNAME, A.FONTSIZE, A.GRADIENTANGLE,
    A.HREF, A.ID, A.LABEL, A.LABELJUST, A.LABELLOC, A.LAYER, A.LHEIGHT,
    A.LP, A.LWIDTH, A.MARGIN, A.NOJUSTIFY, A.PENCOLOR, A.PENWIDTH,
    A.PERIPHERIES, A.SORTV, A.STYLE, A.TARGET, A.TOOLTIP,
)

SUBGRAPH_ATTRIBUTES: tuple[AttributeId, ...] = (A.RANK,)

NODE_ATTRIBUTES: tuple[AttributeId, ...] = (
    A.URL, A.AREA, A.CLASS, A.COLOR, A.COLORSCHEME, A.COMMENT,
    A.DISTORTION, A.FILLCOLOR, A.FIXEDSIZE, A.FONTCOLOR, A.FONTNAME,
    A.FONTSIZE, A.GRADIENTANGLE, A.GROUP, A.HEIGHT, A.HREF, A.ID, A.IMAGE,
    A.IMAGEPOS, A.IMAGESCALE, A.LABEL, A.LABELLOC, A.LAYER, A.MARGIN,
    A.NOJUSTIFY, A.ORDERING, A.ORIENTATION, A.PENWIDTH, A.PERIPHERIES,
    A.PIN, A.POS, A.RECTS, A.REGULAR, A.ROOT, A.SAMPLEPOINTS, A.SHAPE,
    A.SHAPEFILE, A.SHOWBOXES, A.SIDES, A.SKEW, A.SORTV, A.STYLE, A.TARGET,
    A.TOOLTIP, A.VERTICES, A.WIDTH, A.XLABEL, A.XLP, A.Z,
)

EDGE_ATTRIBUTES: tuple[AttributeId, ...] = (
    A.URL, A.ARROWHEAD, A.ARROWSIZE, A.ARROWTAIL, A.CLASS, A.COLOR,
    A.COLORSCHEME, A.COMMENT, A.CONSTRAINT, A.DECORATE, A.DIR, A.EDGE_URL,
    A.EDGEHREF, A.EDGETARGET, A.EDGETOOLTIP, A.FILLCOLOR, A.FONTCOLOR,
    A.FONTNAME, A.FONTSIZE, A.HEAD_URL, A.HEAD_LP, A.HEADCLIP, A.HEADHREF,
    A.HEADLABEL, A.HEADPORT, A.HEADTARGET, A.HEADTOOLTIP, A.HREF, A.ID,
    A.LABEL, A.LABEL_URL, A.LABELANGLE, A.LABELDISTANCE, A.LABELFLOAT,
    A.LABELFONTCOLOR, A.LABELFONTNAME, A.LABELFONTSIZE, A.LABELHREF,
    A.LABELTARGET, A.LABELTOOLTIP, A.LAYER, A.LEN, A.LHEAD, A.LP, A.LTAIL,
    A.MINLEN, A.NOJUSTIFY, A.PENWIDTH, A.POS, A.SAMEHEAD, A.SAMETAIL,
    A.SHOWBOXES, A.STYLE, A.TAIL_URL, A.TAIL_LP, A.TAILCLIP, A.TAILHREF,
    A.TAILLABEL, A.TAILPORT, A.TAILTARGET, A.TAILTOOLTIP, A.TARGET,
    A.TOOLTIP, A.WEIGHT, A.XLABEL, A.XLP,
)


def union(*legal_sets: Iterable[AttributeKey]) -> tuple[AttributeKey, ...]:
    """Merge legal sets, keeping the first position of every attribute."""
    merged: dict[AttributeKey, None] = {}
    for legal in legal_sets:
        for attr in legal:
            merged.setdefault(attr, None)
    return tuple(merged)


def format_attribute_value(value: object, html: bool = False) -> str:
    """The text stored for a value.

    In DOT, strings and HTML labels carry their own delimiters and everything
    else is wrapped in double quotes. Inside HTML-like labels strings are
    escaped with character references instead of backslashes.
    """
    if html and isinstance(value, String):
        return f'"{escape_html(value.text)}"'
    text = value.render()  # type: ignore[attr-defined]
    if isinstance(value, (String, HtmlValue)):
        return text
    return f'"{text}"'


def check_value(attr: AttributeKey, value: object) -> str:
    """Validate ``value`` for ``attr`` and return the text to store."""
    spec = ATTRIBUTE_SPECS[attr]
    if not spec.accepts(value):
        raise TypeMismatchError(
            f"Attribute {attr.value} expects a value of type {spec.kind_names}, "
            f"got {type(value).__name__}"
        )
    if isinstance(value, _NUMERIC):
        number = value.value
        if spec.low is not None and number < spec.low:
            raise RangeError(f"Attribute {attr.value} must be at least {spec.low}, got {number}")
        if spec.high is not None and number > spec.high:
            raise RangeError(f"Attribute {attr.value} must be at most {spec.high}, got {number}")
    if spec.choices is not None and value not in spec.choices:
        raise RangeError(f"{value} not allowed as {attr.value}")
    return format_attribute_value(value, html=isinstance(attr, HtmlAttributeId))


class AttributeTable:
    """The attributes of one entity, restricted to a fixed legal set.

    Attributes render in the order they were last written. A table bound to
    an empty legal set renders as an empty string and rejects every
    insertion.
    """

    def __init__(self, legal: Iterable[AttributeKey] | None = None) -> None:
        self._legal: tuple[AttributeKey, ...] = union(legal or ())
        self._legal_set = frozenset(self._legal)
        self._values: dict[AttributeKey, str] = {}

    @property
    def legal(self) -> tuple[AttributeKey, ...]:
        return self._legal

    def supports(self, attr: AttributeKey) -> bool:
        return attr in self._legal_set

    def add(self, attr: AttributeKey, value: object) -> None:
        if attr not in self._legal_set:
            raise UnsupportedAttributeError(
                f"Attribute {attr.value!r} is not supported in this context"
            )
        text = check_value(attr, value)

        slot = ATTRIBUTE_SPECS[attr].slot
        if slot is not None:
            for other in [a for a in self._values if ATTRIBUTE_SPECS[a].slot == slot]:
                del self._values[other]
        self._values.pop(attr, None)
        self._values[attr] = text

    def get(self, attr: AttributeKey) -> str | None:
        return self._values.get(attr)

    def items(self) -> list[tuple[AttributeKey, str]]:
        return list(self._values.items())

    def __contains__(self, attr: object) -> bool:
        return attr in self._values

    def __len__(self) -> int:
        return len(self._values)

    def render(self) -> str:
        if not self._legal:
            return ""
        return "".join(f" {attr.value}={text}" for attr, text in self._values.items())

    def __str__(self) -> str:
        return self.render()
