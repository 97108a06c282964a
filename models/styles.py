"""Resolved style models handed to the layout engine.

Every field carries a default, so a style is complete even when the content
node specifies nothing. Instances are frozen once built.
"""
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from models.color import Color

HorizontalAlign = Literal["left", "center", "right"]
VerticalAlign = Literal["top", "middle", "bottom"]


class TableStyle(BaseModel):
    model_config = ConfigDict(frozen=True)

    grid_visible: bool = False
    grid_width: float = 1.0
    grid_color: Color = Field(default_factory=Color.black)
    padding_top: float = 0.0
    padding_left: float = 0.0
    padding_bottom: float = 0.0
    padding_right: float = 0.0
    horizontal_align: HorizontalAlign = "left"
    vertical_align: VerticalAlign = "top"


class CellStyle(BaseModel):
    model_config = ConfigDict(frozen=True)

    background_color: Color | None = None  # None means no fill


class ParagraphStyle(BaseModel):
    """Paragraph layout parameters.

    ``leading`` has no fixed default: it depends on the font size of the
    enclosing text run and is always supplied by the resolver.
    ``padding`` is ordered (top, left, bottom, right).
    """
    model_config = ConfigDict(frozen=True)

    leading: float
    align: HorizontalAlign = "left"
    bullet: str | None = None
    bullet_indent: float = 0.0
    padding: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)
