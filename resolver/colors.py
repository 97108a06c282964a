"""Colour decoding from ``[r, g, b]`` parameter arrays."""
import logging

from models.color import Color
from models.values import ParamValue

logger = logging.getLogger(__name__)

_CHANNELS = ("r", "g", "b")


def decode_color(value: ParamValue | None) -> Color | None:
    """Decode a 3-element array into a Color.

    Returns None unless ``value`` is an array of exactly three elements.
    Within such an array a non-number element leaves its channel at 0.0
    instead of rejecting the whole colour. Channels are not clamped.
    """
    if value is None:
        return None
    items = value.as_array()
    if items is None:
        logger.debug("Ignoring colour: expected array, got %s", value.kind)
        return None
    if len(items) != len(_CHANNELS):
        logger.debug("Ignoring colour: expected 3 channels, got %d", len(items))
        return None
    channels = {name: item.as_number() for name, item in zip(_CHANNELS, items)}
    return Color(**{name: v for name, v in channels.items() if v is not None})
