"""
Combodate - String Formatting Module.

This module provides the text helpers used to build the output table:
fixed-width padding, digit grouping anchored at either end of a string,
and the two-column table renderer.

Functions:
    pad: Pad text to a minimum width.
    group_digits_from_right: Insert separators counting from the right.
    group_digits_from_left: Insert separators counting from the left.
    render_table: Render (label, value) rows as an aligned table.
"""

from typing import Iterable, List, Sequence, Tuple


def pad(text: str, width: int, pad_on_left: bool, pad_char: str = " ") -> str:
    """
    Pads text with a fill character until it reaches the given width.

    Text that is already at least ``width`` characters long is returned
    unchanged; it is never truncated.

    Args:
        text: Text to pad.
        width: Minimum length of the result.
        pad_on_left: Prepend the padding if True, append it otherwise.
        pad_char: Single fill character. Defaults to a space.

    Returns:
        Text of length ``max(len(text), width)``.

    Raises:
        ValueError: If pad_char is not exactly one character.

    Example:
        >>> pad("hhhh", 7, True, "o")
        'ooohhhh'
    """
    if len(pad_char) != 1:
        raise ValueError(f"pad_char must be a single character, got {pad_char!r}")

    shortfall = width - len(text)
    if shortfall <= 0:
        return text

    padding = pad_char * shortfall
    return padding + text if pad_on_left else text + padding


def _check_group_size(group_size: int) -> None:
    if group_size < 1:
        raise ValueError(f"group_size must be at least 1, got {group_size}")


def _split_from_left(text: str, group_size: int) -> List[str]:
    """Splits text into chunks of group_size; the last chunk may be short."""
    _check_group_size(group_size)
    return [text[i:i + group_size] for i in range(0, len(text), group_size)]


def group_digits_from_right(text: str, group_size: int, separator: str) -> str:
    """
    Groups characters counting from the right-hand end.

    The leftmost group may be shorter than ``group_size``. No separator
    is added at either end.

    Args:
        text: Characters to group, typically a digit string.
        group_size: Characters per group (at least 1).
        separator: Text inserted between groups.

    Returns:
        Grouped text.

    Raises:
        ValueError: If group_size is less than 1.

    Example:
        >>> group_digits_from_right("1234567890", 3, " ")
        '1 234 567 890'
    """
    _check_group_size(group_size)
    head_size = len(text) % group_size
    head = [text[:head_size]] if head_size else []
    return separator.join(head + _split_from_left(text[head_size:], group_size))


def group_digits_from_left(text: str, group_size: int, separator: str) -> str:
    """
    Groups characters counting from the left-hand end.

    The rightmost group may be shorter than ``group_size``.

    Example:
        >>> group_digits_from_left("aaabbbcccdd", 3, "x")
        'aaaxbbbxcccxdd'
    """
    return separator.join(_split_from_left(text, group_size))


def render_table(rows: Iterable[Sequence[str]]) -> str:
    """
    Renders (label, value) rows as a two-column, space separated table.

    Labels are left-aligned and padded on the right to the widest label;
    values are right-aligned and padded on the left to the widest value.
    Row order is preserved and every line ends with a newline.

    Args:
        rows: Ordered (label, value) pairs. Row objects unpack the same way.

    Returns:
        The rendered table, or an empty string when there are no rows.
    """
    pairs: List[Tuple[str, str]] = [(label, value) for label, value in rows]
    if not pairs:
        return ""

    label_width = max(len(label) for label, _ in pairs)
    value_width = max(len(value) for _, value in pairs)

    lines = [
        f"{pad(label, label_width, False)} {pad(value, value_width, True)}\n"
        for label, value in pairs
    ]
    return "".join(lines)
