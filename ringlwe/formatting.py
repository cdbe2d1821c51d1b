"""Text rendering of 256-bit unsigned integers with stream-style options."""

from __future__ import annotations

from ringlwe.uint256 import IntLike, Uint256

_FORMAT_CODES = {10: "d", 8: "o", 16: "x"}


def format_uint256(
    value: IntLike,
    base: int = 10,
    show_base: bool = False,
    uppercase: bool = False,
    width: int = 0,
    fill: str = " ",
    align_left: bool = False,
) -> str:
    """Render ``value`` in base 8, 10 or 16.

    ``show_base`` prefixes octal values with ``0`` and hexadecimal values with
    ``0x`` (``0X`` when ``uppercase``); zero never gets a prefix. When the text
    is shorter than ``width`` it is padded with ``fill`` on the left, or on the
    right if ``align_left`` is set.
    """
    code = _FORMAT_CODES.get(base)
    if code is None:
        raise ValueError(f"Unsupported base {base}; expected 8, 10 or 16.")
    if len(fill) != 1:
        raise ValueError("The fill must be a single character.")

    number = int(Uint256(value))
    digits = format(number, code)
    prefix = ""
    if show_base and number != 0:
        if base == 8:
            prefix = "0"
        elif base == 16:
            prefix = "0x"
    rep = prefix + digits
    if uppercase:
        rep = rep.upper()

    padding = width - len(rep)
    if padding > 0:
        rep = rep + fill * padding if align_left else fill * padding + rep
    return rep