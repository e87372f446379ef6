"""
core/music_theory/fingering.py — Scale fingering lookup.

The base table (templates/fingerings.yaml) holds one ascending octave per
(mode, key). Longer exercises are derived from it:
    - two octaves: first 7 fingers + the full 8, so the seam finger is not doubled
    - up-down:     ascending fingers + their reverse without the top finger

Missing (key, mode) entries fall back to the C major fingering.
"""

from __future__ import annotations

import functools
from pathlib import Path
from typing import Any

import yaml

from core.music_theory.pitch import validate_key, validate_mode
from core.music_theory.sequences import DIRECTIONS, OCTAVE_COUNTS
from core.music_theory.types import Fingering

_TEMPLATES_DIR: Path = Path(__file__).parent / "templates"

FALLBACK_KEY: tuple[str, str] = ("C", "major")


@functools.cache
def _load_fingerings() -> dict[tuple[str, str], Fingering]:
    """Load and cache the one-octave fingering table keyed by (key, mode)."""
    template_path = _TEMPLATES_DIR / "fingerings.yaml"
    if not template_path.exists():
        raise ValueError(f"Template file not found: {template_path}")

    with template_path.open(encoding="utf-8") as fh:
        data: dict[str, Any] = yaml.safe_load(fh) or {}

    table: dict[tuple[str, str], Fingering] = {}
    for mode, entries in data.items():
        for key, hands in (entries or {}).items():
            table[(str(key), mode)] = Fingering(
                right_hand=tuple(hands["right_hand"]),
                left_hand=tuple(hands["left_hand"]),
            )
    if FALLBACK_KEY not in table:
        raise ValueError(f"{template_path} must define the {FALLBACK_KEY} fingering")
    return table


def _lookup(table: dict[tuple[str, str], Fingering], key: str, mode: str) -> Fingering:
    return table.get((key, mode), table[FALLBACK_KEY])


def _extend(base: tuple[int, ...], octaves: int, direction: str) -> tuple[int, ...]:
    ascending = list(base) if octaves == 1 else list(base[:7]) + list(base)
    if direction == "up-down":
        ascending += ascending[-2::-1]
    return tuple(ascending)


def base_fingering(key: str, mode: str) -> Fingering:
    """Return the one-octave ascending fingering for a key (C major if missing)."""
    return _lookup(_load_fingerings(), validate_key(key), validate_mode(mode))


def scale_fingering(
    key: str,
    mode: str,
    octaves: int = 1,
    direction: str = "up",
) -> Fingering:
    """Return finger numbers matching scale_sequence(key, mode, octaves, direction).

    Raises:
        ValueError: If any argument is outside its enumerated domain

    Examples:
        >>> scale_fingering("C", "major").right_hand
        (1, 2, 3, 1, 2, 3, 4, 5)
        >>> len(scale_fingering("C", "major", 2, "up-down").right_hand)
        29
    """
    if octaves not in OCTAVE_COUNTS:
        raise ValueError(f"octaves must be one of {sorted(OCTAVE_COUNTS)}, got {octaves}")
    if direction not in DIRECTIONS:
        raise ValueError(f"Unknown direction {direction!r}. Valid: {list(DIRECTIONS)}")

    base = base_fingering(key, mode)
    return Fingering(
        right_hand=_extend(base.right_hand, octaves, direction),
        left_hand=_extend(base.left_hand, octaves, direction),
    )
