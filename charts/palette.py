"""Deterministic dataset colors."""

from __future__ import annotations

import re
from typing import Final, overload

from .errors import InvalidInput

DEFAULT_PALETTE: Final[tuple[str, ...]] = (
    "#3366CC",
    "#DC3912",
    "#FF9900",
    "#109618",
    "#990099",
    "#0099C6",
    "#DD4477",
    "#66AA00",
    "#B82E2E",
    "#316395",
    "#994499",
    "#22AA99",
)

_HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


def default_colors(n: int) -> list[str]:
    """Return `n` palette colors, cycling from the start when `n` exceeds the palette.

    Args:
        n: Number of colors requested.

    Returns:
        A list of exactly `n` hex colors; `colors[i] == DEFAULT_PALETTE[i % len(DEFAULT_PALETTE)]`.
    """

    if n < 0:
        raise InvalidInput(f"Color count must be >= 0, got {n}.")
    return [DEFAULT_PALETTE[idx % len(DEFAULT_PALETTE)] for idx in range(n)]


@overload
def with_alpha(color: str, alpha: float) -> str: ...


@overload
def with_alpha(color: None, alpha: float) -> None: ...


def with_alpha(color: str | None, alpha: float) -> str | None:
    """Return `color` as `#RRGGBBAA` with the given opacity.

    Args:
        color: `#RGB`, `#RRGGBB` or `#RRGGBBAA` hex color, or None.
        alpha: Opacity in [0, 1]; replaces any existing alpha byte.

    Returns:
        Upper-case 8-digit hex color, or None when `color` is None.

    Raises:
        InvalidInput: For malformed colors or out-of-range alpha.
    """

    if color is None:
        return None
    if not isinstance(color, str) or not _HEX_COLOR.match(color):
        raise InvalidInput(f"Expected a hex color like '#3366CC', got {color!r}.")
    if not 0.0 <= alpha <= 1.0:
        raise InvalidInput(f"Alpha must be within [0, 1], got {alpha!r}.")

    digits = color[1:]
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return f"#{digits[:6].upper()}{round(alpha * 255):02X}"
