"""
core/music_theory/harmony.py — Degree chords and named progressions.

chord_at_degree() builds the chord on one scale degree:
    1. Root = key tonic + mode-specific degree offset
    2. Quality = forced quality, else the fixed per-degree table
    3. Notes = quality interval pattern applied to the root
    4. Label = roman numeral for the degree ("V7" when a dominant is forced)

Progression templates
---------------------
Located in core/music_theory/templates/progressions.yaml.
Loaded lazily on first call and cached as frozen ProgressionDef tuples.

Design decisions:
    - Minor keys take a major V (harmonic-minor convention) even though the
      natural minor scale is used for display.
    - resolve_progression() never raises on the progression id: unknown ids
      resolve to the first catalog entry. Use is_known_progression() to detect
      the substitution.
"""

from __future__ import annotations

import functools
from pathlib import Path
from typing import Any

import yaml

from core.music_theory.pitch import key_semitone, spell, uses_flats, validate_mode
from core.music_theory.types import QUALITIES, ChordDegree, ProgressionDef, ProgressionStep

# ---------------------------------------------------------------------------
# Degree tables
# ---------------------------------------------------------------------------

# Degree offsets within the octave (without the repeated root)
DEGREE_OFFSETS: dict[str, tuple[int, ...]] = {
    "major": (0, 2, 4, 5, 7, 9, 11),
    "minor": (0, 2, 3, 5, 7, 8, 10),
}

DEGREE_QUALITIES: dict[str, tuple[str, ...]] = {
    "major": ("major", "minor", "minor", "major", "major", "minor", "dim"),
    "minor": ("minor", "dim", "major", "minor", "major", "major", "major"),
}

DEGREE_LABELS: dict[str, tuple[str, ...]] = {
    "major": ("I", "ii", "iii", "IV", "V", "vi", "vii°"),
    "minor": ("i", "ii°", "III", "iv", "V", "VI", "VII"),
}

QUALITY_INTERVALS: dict[str, tuple[int, ...]] = {
    "major": (0, 4, 7),
    "minor": (0, 3, 7),
    "dim": (0, 3, 6),
    "dom7": (0, 4, 7, 10),
}

# ---------------------------------------------------------------------------
# YAML loading — lazy, cached, pure after first load
# ---------------------------------------------------------------------------

_TEMPLATES_DIR: Path = Path(__file__).parent / "templates"


@functools.cache
def _load_progressions() -> tuple[ProgressionDef, ...]:
    """Load and cache the progression catalog.

    Raises:
        ValueError: If the template is missing or holds no progressions
    """
    template_path = _TEMPLATES_DIR / "progressions.yaml"
    if not template_path.exists():
        raise ValueError(f"Template file not found: {template_path}")

    with template_path.open(encoding="utf-8") as fh:
        data: dict[str, Any] = yaml.safe_load(fh) or {}

    entries = data.get("progressions", [])
    if not entries:
        raise ValueError(f"No progressions defined in {template_path}")

    return tuple(
        ProgressionDef(
            id=entry["id"],
            name=entry.get("name", entry["id"]),
            steps=tuple(
                ProgressionStep(degree=step["degree"], quality=step.get("quality"))
                for step in entry.get("degrees", [])
            ),
        )
        for entry in entries
    )


def available_progressions() -> tuple[ProgressionDef, ...]:
    """Return the progression catalog in display order (first = default)."""
    return _load_progressions()


def is_known_progression(progression_id: str) -> bool:
    """Whether progression_id names a catalog entry."""
    return any(p.id == progression_id for p in _load_progressions())


def get_progression(progression_id: str) -> ProgressionDef:
    """Return a progression by id, falling back to the default progression."""
    catalog = _load_progressions()
    return next((p for p in catalog if p.id == progression_id), catalog[0])


# ---------------------------------------------------------------------------
# Chords
# ---------------------------------------------------------------------------


def _degree_label(mode: str, degree_index: int, forced_quality: str | None) -> str:
    label = DEGREE_LABELS[mode][degree_index]
    if forced_quality != "dom7":
        return label
    # A forced dominant always reads as a dominant-function chord
    return f"{label}7" if "V" in label else "V7"


def chord_at_degree(
    key: str,
    mode: str,
    degree_index: int,
    forced_quality: str | None = None,
) -> ChordDegree:
    """Build the chord on a scale degree of a key.

    Args:
        key:            Tonic, one of pitch.KEYS
        mode:           "major" or "minor"
        degree_index:   0-based scale degree (0–6)
        forced_quality: Override for the table quality, e.g. "dom7"

    Returns:
        ChordDegree spelled in the key's alphabet

    Raises:
        ValueError: If key, mode, degree_index or forced_quality is invalid

    Examples:
        >>> chord = chord_at_degree("C", "major", 4, "dom7")
        >>> chord.degree, chord.root, chord.notes
        ('V7', 'G', ('G', 'B', 'D', 'F'))
        >>> chord_at_degree("A", "minor", 4).notes
        ('E', 'G#', 'B')
    """
    root = key_semitone(key)
    validate_mode(mode)
    if not (0 <= degree_index <= 6):
        raise ValueError(f"degree_index must be in [0, 6], got {degree_index}")
    if forced_quality is not None and forced_quality not in QUALITIES:
        raise ValueError(f"Unknown chord quality {forced_quality!r}. Valid: {sorted(QUALITIES)}")

    flats = uses_flats(key)
    degree_root = (root + DEGREE_OFFSETS[mode][degree_index]) % 12
    quality = forced_quality or DEGREE_QUALITIES[mode][degree_index]

    return ChordDegree(
        degree=_degree_label(mode, degree_index, forced_quality),
        root=spell(degree_root, flats),
        quality=quality,
        notes=tuple(spell(degree_root + i, flats) for i in QUALITY_INTERVALS[quality]),
        index=degree_index,
    )


def diatonic_chords(key: str, mode: str) -> tuple[ChordDegree, ...]:
    """Return the 7 table-quality chords of a key, tonic first."""
    return tuple(chord_at_degree(key, mode, degree) for degree in range(7))


def resolve_progression(key: str, mode: str, progression_id: str) -> tuple[ChordDegree, ...]:
    """Expand a named progression into chords for a key.

    Unknown progression ids resolve to the default (first) progression.

    Examples:
        >>> [c.root for c in resolve_progression("G", "major", "I-IV-V7")]
        ['G', 'C', 'D']
    """
    progression = get_progression(progression_id)
    return tuple(
        chord_at_degree(key, mode, step.degree, step.quality) for step in progression.steps
    )
