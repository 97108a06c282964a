"""Style resolution — turn a content node's params into typed styles.

Recognised parameter paths:

    table      style.grid                          presence enables the grid
               style.grid.width                    number
               style.grid.color                    [r, g, b]
               style.padding.{top,left,bottom,right}
               style.align.horizontal              "center" | "right"
               style.align.vertical                "bottom" | "middle"
    cell       background_color                    [r, g, b]
    paragraph  leading                             number, default font_size + 2
               align                               "right" | "center"
               bullet                              text
               bullet_indent                       number
               padding.{top,left,bottom,right}

The resolvers never raise: whatever is missing or malformed falls back to
the default for that one field.
"""
import logging

from models.content import ContentNode
from models.styles import CellStyle, ParagraphStyle, TableStyle
from resolver.colors import decode_color
from resolver.fields import number, obj, read_choice, read_field, read_padding, text

logger = logging.getLogger(__name__)

STYLE_KINDS = ("table", "cell", "paragraph")

_TABLE_HORIZONTAL = frozenset({"center", "right"})
_TABLE_VERTICAL = frozenset({"bottom", "middle"})
_PARAGRAPH_ALIGN = frozenset({"right", "center"})

# Added to the font size when a paragraph gives no explicit leading
_LEADING_GAP = 2.0


def resolve_table_style(node: ContentNode) -> TableStyle:
    """Resolve ``params["style"]`` into a TableStyle.

    The grid, padding and align sub-objects are read independently.
    """
    defaults = TableStyle()
    style = read_field(node.params, "style", obj, None)
    if style is None:
        return defaults

    grid = read_field(style, "grid", obj, {})
    grid_color = decode_color(grid.get("color"))
    top, left, bottom, right = read_padding(style, "padding")
    align = read_field(style, "align", obj, {})

    return TableStyle(
        # Any grid value turns the grid on, even one that is not an object
        grid_visible="grid" in style,
        grid_width=read_field(grid, "width", number, defaults.grid_width),
        grid_color=grid_color if grid_color is not None else defaults.grid_color,
        padding_top=top,
        padding_left=left,
        padding_bottom=bottom,
        padding_right=right,
        horizontal_align=read_choice(align, "horizontal", _TABLE_HORIZONTAL, defaults.horizontal_align),
        vertical_align=read_choice(align, "vertical", _TABLE_VERTICAL, defaults.vertical_align),
    )


def resolve_cell_style(node: ContentNode) -> CellStyle:
    """Resolve ``params["background_color"]`` into a CellStyle; no fill unless it decodes."""
    return CellStyle(background_color=decode_color(node.params.get("background_color")))


def resolve_paragraph_style(node: ContentNode, font_size: float) -> ParagraphStyle:
    """Resolve top-level paragraph params.

    ``font_size`` comes from the enclosing text run and only determines the
    default leading.
    """
    params = node.params
    return ParagraphStyle(
        leading=read_field(params, "leading", number, font_size + _LEADING_GAP),
        align=read_choice(params, "align", _PARAGRAPH_ALIGN, "left"),
        bullet=read_field(params, "bullet", text, None),
        bullet_indent=read_field(params, "bullet_indent", number, 0.0),
        padding=read_padding(params, "padding"),
    )


def resolve_style(
    kind: str,
    node: ContentNode,
    font_size: float,
) -> TableStyle | CellStyle | ParagraphStyle:
    """Dispatch to the resolver for ``kind`` ("table", "cell" or "paragraph").

    Raises ValueError for an unknown kind.
    """
    if kind == "table":
        return resolve_table_style(node)
    if kind == "cell":
        return resolve_cell_style(node)
    if kind == "paragraph":
        return resolve_paragraph_style(node, font_size)
    raise ValueError(f"Unknown style kind {kind!r}; expected one of {', '.join(STYLE_KINDS)}")
