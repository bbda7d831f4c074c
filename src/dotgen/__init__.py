"""dotgen: a typed object model and emitter for the GraphViz DOT language."""

from __future__ import annotations

__version__ = "0.1.0"

from dotgen.attributes import AttributeId, AttributeTable, HtmlAttributeId  # noqa: E402
from dotgen.colors import HSV, RGB, RGBA, ColorList, NamedColor  # noqa: E402
from dotgen.errors import (  # noqa: E402
    DotError,
    DuplicateIdError,
    RangeError,
    TypeMismatchError,
    UnsupportedAttributeError,
)
from dotgen.graph import Context, Edge, Graph, GraphKind, Node  # noqa: E402

__all__ = [
    "HSV",
    "RGB",
    "RGBA",
    "AttributeId",
    "AttributeTable",
    "ColorList",
    "Context",
    "DotError",
    "DuplicateIdError",
    "Edge",
    "Graph",
    "GraphKind",
    "HtmlAttributeId",
    "NamedColor",
    "Node",
    "RangeError",
    "TypeMismatchError",
    "UnsupportedAttributeError",
    "__version__",
]
