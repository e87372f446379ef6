"""
core/music_theory/octaves.py — Octave assignment for note-name sequences.

assign_octaves() walks a sequence once, comparing each note's semitone index
with the previous note's. A drop of more than a tritone means the line crossed
C going up (B → C), a rise of more than a tritone means it crossed C going
down (C → B). Anything smaller keeps the current octave.

The rule has no lookahead: it is only correct for lines that move by less than
a tritone in their intended direction, which holds for scale and arpeggio
sequences and for the voice-leading optimizer's chord rotations.
"""

from __future__ import annotations

from collections.abc import Sequence

from core.music_theory.pitch import semitone_index
from core.music_theory.types import PitchedNote

# Largest step (in semitones) treated as motion within the same octave
WRAP_THRESHOLD: int = 6


def assign_octaves(names: Sequence[str], start_octave: int = 4) -> tuple[int, ...]:
    """Return an octave number for every note name.

    Args:
        names:        Pitch class names in reading order
        start_octave: Octave of the first note

    Returns:
        Tuple of octave numbers, same length as names

    Examples:
        >>> assign_octaves(["C", "D", "E", "F", "G", "A", "B", "C"], 4)
        (4, 4, 4, 4, 4, 4, 4, 5)
        >>> assign_octaves(["C", "B", "A"], 5)
        (5, 4, 4)
    """
    octaves: list[int] = []
    octave = start_octave
    previous: int | None = None

    for name in names:
        current = semitone_index(name)
        if previous is not None:
            diff = current - previous
            if diff < -WRAP_THRESHOLD:
                octave += 1
            elif diff > WRAP_THRESHOLD:
                octave -= 1
        octaves.append(octave)
        previous = current

    return tuple(octaves)


def absolute_pitch(name: str, octave: int) -> int:
    """Return ``octave * 12 + semitone_index(name)``."""
    return octave * 12 + semitone_index(name)


def pitched_sequence(names: Sequence[str], start_octave: int = 4) -> tuple[PitchedNote, ...]:
    """Pair every note name with its assigned octave."""
    octaves = assign_octaves(names, start_octave)
    return tuple(PitchedNote(name=n, octave=o) for n, o in zip(names, octaves, strict=True))
