"""
core/music_theory/sequences.py — Note-name sequences for scale and arpeggio practice.

Both expanders follow the same shape:
    1. Build the ascending sequence for the requested number of octaves
       (the octave seam note is never doubled)
    2. For "up-down", append the ascending sequence reversed without its top
       note, so the turn is not doubled either

Octave numbers are added separately by core.music_theory.octaves.
"""

from __future__ import annotations

from collections.abc import Sequence

from core.music_theory.scales import scale_notes

OCTAVE_COUNTS: frozenset[int] = frozenset({1, 2})
DIRECTIONS: tuple[str, ...] = ("up", "up-down")
ARPEGGIO_TYPES: tuple[str, ...] = ("root", "first-inv", "second-inv", "broken")

# Rotation applied to the chord before expansion
_ARPEGGIO_ROTATION: dict[str, int] = {
    "root": 0,
    "first-inv": 1,
    "second-inv": 2,
    "broken": 0,
}


def _validate_shape(octaves: int, direction: str) -> None:
    if octaves not in OCTAVE_COUNTS:
        raise ValueError(f"octaves must be one of {sorted(OCTAVE_COUNTS)}, got {octaves}")
    if direction not in DIRECTIONS:
        raise ValueError(f"Unknown direction {direction!r}. Valid: {list(DIRECTIONS)}")


def _with_descent(ascending: list[str], direction: str) -> tuple[str, ...]:
    if direction == "up-down":
        return tuple(ascending + ascending[-2::-1])
    return tuple(ascending)


def rotate_notes(notes: Sequence[str], k: int) -> tuple[str, ...]:
    """Rotate a chord's notes left by k positions (k-th inversion).

    Examples:
        >>> rotate_notes(("C", "E", "G"), 1)
        ('E', 'G', 'C')
    """
    if not notes:
        return ()
    k %= len(notes)
    return tuple(notes[k:]) + tuple(notes[:k])


def scale_sequence(
    key: str,
    mode: str,
    octaves: int = 1,
    direction: str = "up",
) -> tuple[str, ...]:
    """Return the note names of a scale exercise.

    Args:
        key:       Tonic, one of pitch.KEYS
        mode:      "major" or "minor"
        octaves:   1 or 2
        direction: "up" or "up-down"

    Returns:
        8 names for one octave up, 15 for two octaves up, 15/29 with descent

    Raises:
        ValueError: If any argument is outside its enumerated domain

    Examples:
        >>> scale_sequence("C", "major", 1, "up-down")
        ('C', 'D', 'E', 'F', 'G', 'A', 'B', 'C', 'B', 'A', 'G', 'F', 'E', 'D', 'C')
    """
    _validate_shape(octaves, direction)
    scale = list(scale_notes(key, mode))
    ascending = scale if octaves == 1 else scale[:7] + scale
    return _with_descent(ascending, direction)


def arpeggio_sequence(
    chord_notes: Sequence[str],
    octaves: int = 1,
    direction: str = "up",
    arpeggio_type: str = "root",
) -> tuple[str, ...]:
    """Return the note names of an arpeggio exercise.

    The chord is first rotated for the requested inversion. "broken" uses a
    turn-back cell (C E G E for a C triad; C E G Bb G E for C7) repeated once
    per octave; the other types repeat the chord tones once per octave. Every
    pattern closes on the first note of the rotated chord.

    Args:
        chord_notes:   Chord tones from the root upwards (3 or 4 names)
        octaves:       1 or 2
        direction:     "up" or "up-down"
        arpeggio_type: "root", "first-inv", "second-inv" or "broken"

    Raises:
        ValueError: If any argument is outside its enumerated domain

    Examples:
        >>> arpeggio_sequence(("C", "E", "G"), 1, "up", "first-inv")
        ('E', 'G', 'C', 'E')
        >>> arpeggio_sequence(("C", "E", "G"), 1, "up", "broken")
        ('C', 'E', 'G', 'E', 'C')
    """
    _validate_shape(octaves, direction)
    if arpeggio_type not in _ARPEGGIO_ROTATION:
        raise ValueError(f"Unknown arpeggio type {arpeggio_type!r}. Valid: {list(ARPEGGIO_TYPES)}")
    if not chord_notes:
        raise ValueError("chord_notes must not be empty")

    notes = list(rotate_notes(chord_notes, _ARPEGGIO_ROTATION[arpeggio_type]))
    cell = notes + notes[-2:0:-1] if arpeggio_type == "broken" else notes
    ascending = cell * octaves + [notes[0]]
    return _with_descent(ascending, direction)
