"""Small text helpers: string repetition and edit-control sizing."""

from typing import Any, Optional


def repeat(text: str, count: int) -> str:
    """Return text repeated count times; an empty string when count <= 0."""
    if count <= 0:
        return ""
    return text * count


def edit_width(
    columns: int,
    char_width: int,
    padding: Optional[int] = None,
    scrollbar: int = 0,
) -> int:
    """
    Pixel width for a text-edit control that should show `columns` characters.

    Args:
        columns: Number of visible character columns
        char_width: Width of one character in pixels (see measure_char_width)
        padding: Border and inner margin in pixels; defaults to the
            `edit_padding` setting
        scrollbar: Extra pixels reserved for a vertical scrollbar
    """
    if columns < 0:
        raise ValueError(f"columns must be >= 0, got {columns}")
    if char_width <= 0:
        raise ValueError(f"char_width must be > 0, got {char_width}")
    if padding is None:
        from ..config import get_settings
        padding = get_settings().edit_padding
    return columns * char_width + padding + scrollbar


def measure_char_width(font: Any, sample: str = "0") -> int:
    """Width in pixels of `sample` in a tkinter font (a Font object or font spec)."""
    from tkinter import font as tkfont

    if not isinstance(font, tkfont.Font):
        font = tkfont.Font(font=font)
    return font.measure(sample)
