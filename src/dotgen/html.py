"""HTML-like labels.

Builds the label grammar GraphViz accepts between ``<`` and ``>``::

    label     : text | fonttable
    text      : textitem | text textitem
    textitem  : string | <BR/> | <FONT> text </FONT> | <I> text </I> | ...
    fonttable : table | <FONT> table </FONT> | <I> table </I> | ...
    table     : <TABLE> rows </TABLE>
    rows      : row | rows row | rows <HR/> row
    row       : <TR> cells </TR>
    cells     : cell | cells cell | cells <VR/> cell
    cell      : <TD> label </TD> | <TD> <IMG/> </TD>

Every tag carries an :class:`AttributeTable` bound to the HTML attributes it
supports.
"""

from __future__ import annotations

from typing import Union

from dotgen.attributes import AttributeTable, HtmlAttributeId
from dotgen.values import HtmlValue, escape_html

H = HtmlAttributeId


class HtmlNode:
    """Anything that renders as part of an HTML-like label."""

    def render(self) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.render()


class HtmlString(HtmlNode):
    def __init__(self, text: str) -> None:
        self.text = text

    def render(self) -> str:
        return escape_html(self.text)


class Text(HtmlNode):
    """An ordered run of text items."""

    def __init__(self, *items: TextItem) -> None:
        self.items: list[TextItem] = []
        for item in items:
            self.add(item)

    def add(self, item: TextItem | str) -> None:
        if isinstance(item, str):
            item = HtmlString(item)
        if not isinstance(item, (HtmlString, TaggedText)):
            raise ValueError(f"Not a text item: {item!r}")
        self.items.append(item)

    def render(self) -> str:
        return "".join(item.render() for item in self.items)


class Tag(HtmlNode):
    """A tag with attributes and optional content.

    Subclasses set ``tag`` and ``supported``; tags without content render as
    ``<TAG .../>``.
    """

    tag = ""
    supported: tuple[HtmlAttributeId, ...] = ()

    def __init__(self) -> None:
        self.attributes = AttributeTable(self.supported)

    def add_attribute(self, attr: HtmlAttributeId, value: object) -> None:
        self.attributes.add(attr, value)

    def content(self) -> str | None:
        return None

    def render(self) -> str:
        inner = self.content()
        head = f"<{self.tag}{self.attributes.render()}"
        if inner is None:
            return head + "/>"
        return f"{head}>{inner}</{self.tag}>"


# Text items


class TaggedText(Tag):
    """A tag wrapping a run of text."""

    def __init__(self, text: Text | None = None) -> None:
        super().__init__()
        self.text = text if text is not None else Text()

    def content(self) -> str | None:
        return self.text.render()


class LineBreak(TaggedText):
    tag = "BR"
    supported = (H.ALIGN,)

    def __init__(self) -> None:
        super().__init__()

    def content(self) -> str | None:
        return None


class Font(TaggedText):
    tag = "FONT"
    supported = (H.COLOR, H.FACE, H.POINT_SIZE)


class Italic(TaggedText):
    tag = "I"


class Bold(TaggedText):
    tag = "B"


class Underline(TaggedText):
    tag = "U"


class Overline(TaggedText):
    tag = "O"


class Subscript(TaggedText):
    tag = "SUB"


class Superscript(TaggedText):
    tag = "SUP"


class StrikeThrough(TaggedText):
    tag = "S"


TextItem = Union[HtmlString, TaggedText]


# Tables

_TABLE_ATTRIBUTES = (
    H.ALIGN,
    H.BGCOLOR,
    H.BORDER,
    H.CELLPADDING,
    H.CELLSPACING,
    H.COLOR,
    H.COLUMNS,
    H.FIXEDSIZE,
    H.GRADIENTANGLE,
    H.HEIGHT,
    H.HREF,
    H.ID,
    H.PORT,
    H.ROWS,
    H.SIDES,
    H.STYLE,
    H.TARGET,
    H.TITLE,
    H.TOOLTIP,
    H.VALIGN,
    H.WIDTH,
)

_CELL_ATTRIBUTES = (
    H.ALIGN,
    H.BALIGN,
    H.BGCOLOR,
    H.BORDER,
    H.CELLPADDING,
    H.CELLSPACING,
    H.COLOR,
    H.COLSPAN,
    H.FIXEDSIZE,
    H.GRADIENTANGLE,
    H.HEIGHT,
    H.HREF,
    H.ID,
    H.PORT,
    H.ROWSPAN,
    H.SIDES,
    H.STYLE,
    H.TARGET,
    H.TITLE,
    H.TOOLTIP,
    H.VALIGN,
    H.WIDTH,
)


class HorizontalRule(Tag):
    tag = "HR"


class VerticalRule(Tag):
    tag = "VR"


class Image(Tag):
    tag = "IMG"
    supported = (H.SCALE, H.SRC)


class TableCell(Tag):
    """A ``<TD>`` holding text, a nested font-table or an image."""

    tag = "TD"
    supported = _CELL_ATTRIBUTES

    def __init__(self, content: Text | FontTable | Image | None = None) -> None:
        super().__init__()
        if content is None:
            content = Text()
        if not isinstance(content, (Text, FontTable, Image)):
            raise ValueError(f"Table cells hold text, a table or an image, got {content!r}")
        self.body = content

    def content(self) -> str | None:
        return self.body.render()


class TableRow(Tag):
    tag = "TR"

    def __init__(self, *cells: TableCell) -> None:
        super().__init__()
        self.cells: list[TableCell | VerticalRule] = []
        for cell in cells:
            self.add(cell)

    def add(self, cell: TableCell) -> None:
        if not isinstance(cell, TableCell):
            raise ValueError(f"Table rows hold cells, got {cell!r}")
        self.cells.append(cell)

    def add_rule(self) -> None:
        """Append a ``<VR/>`` before the next cell."""
        self.cells.append(VerticalRule())

    def content(self) -> str | None:
        return "".join(cell.render() for cell in self.cells)


class FontTable(Tag):
    """A table, optionally wrapped in font-changing tags."""


class Table(FontTable):
    tag = "TABLE"
    supported = _TABLE_ATTRIBUTES

    def __init__(self, *rows: TableRow) -> None:
        super().__init__()
        self.rows: list[TableRow | HorizontalRule] = []
        for row in rows:
            self.add(row)

    def add(self, row: TableRow) -> None:
        if not isinstance(row, TableRow):
            raise ValueError(f"Tables hold rows, got {row!r}")
        self.rows.append(row)

    def add_rule(self) -> None:
        """Append an ``<HR/>`` before the next row."""
        self.rows.append(HorizontalRule())

    def content(self) -> str | None:
        return "".join(row.render() for row in self.rows)


class _WrappedTable(FontTable):
    def __init__(self, table: FontTable) -> None:
        super().__init__()
        if not isinstance(table, FontTable):
            raise ValueError(f"Expected a table, got {table!r}")
        self.table = table

    def content(self) -> str | None:
        return self.table.render()


class TableFont(_WrappedTable):
    tag = "FONT"
    supported = (H.COLOR, H.FACE, H.POINT_SIZE)


class TableItalic(_WrappedTable):
    tag = "I"


class TableBold(_WrappedTable):
    tag = "B"


class TableUnderline(_WrappedTable):
    tag = "U"


class TableOverline(_WrappedTable):
    tag = "O"


class HtmlLabel(HtmlValue):
    """An HTML-like label value, written as ``<...>`` without quotes."""

    def __init__(self, content: Text | FontTable | str) -> None:
        if isinstance(content, str):
            content = Text(HtmlString(content))
        if not isinstance(content, (Text, FontTable)):
            raise ValueError(f"HTML labels hold text or a table, got {content!r}")
        self.content = content

    def render(self) -> str:
        return f"<{self.content.render()}>"

    def __repr__(self) -> str:
        return f"HtmlLabel({self.render()!r})"
