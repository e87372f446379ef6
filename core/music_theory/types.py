"""
core/music_theory/types.py — Frozen value objects for the practice theory engine.

All types are immutable frozen dataclasses — safe to hash, cache, and share
between callers. No I/O, no side effects, no external dependencies beyond stdlib.

Types:
    ChordDegree      — a chord built on a scale degree (label, root, quality, notes)
    ProgressionStep  — one (degree, forced quality) entry of a progression
    ProgressionDef   — a named, ordered progression definition
    PitchedNote      — a pitch class placed in an absolute octave
    Voicing          — one chord's notes in a chosen inversion and octave
    Fingering        — right/left hand finger numbers for a scale exercise
"""

from __future__ import annotations

from dataclasses import dataclass

from core.music_theory.pitch import semitone_index

#: Chord qualities the engine knows how to build
QUALITIES: frozenset[str] = frozenset({"major", "minor", "dim", "dom7"})

# Human-readable chord name suffixes
_QUALITY_SUFFIX: dict[str, str] = {
    "major": "",
    "minor": "m",
    "dim": "dim",
    "dom7": "7",
}

# ---------------------------------------------------------------------------
# ChordDegree
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ChordDegree:
    """A chord built on a scale degree of a key.

    Attributes:
        degree:  Roman numeral label, e.g. "I", "ii°", "V7"
        root:    Root pitch class in the key's spelling, e.g. "G", "Bb"
        quality: One of QUALITIES
        notes:   Pitch class names from the root upwards (3 or 4)
        index:   0-based scale degree (0=tonic, 6=seventh degree)
    """

    degree: str
    root: str
    quality: str
    notes: tuple[str, ...]
    index: int

    @property
    def name(self) -> str:
        """Chord symbol, e.g. 'Am', 'G7', 'Bdim'."""
        return f"{self.root}{_QUALITY_SUFFIX[self.quality]}"

    def __post_init__(self) -> None:
        if not self.degree:
            raise ValueError("ChordDegree.degree must not be empty")
        if self.quality not in QUALITIES:
            raise ValueError(
                f"ChordDegree.quality must be one of {sorted(QUALITIES)}, got {self.quality!r}"
            )
        if len(self.notes) not in (3, 4):
            raise ValueError(f"ChordDegree.notes must hold 3 or 4 names, got {len(self.notes)}")
        if not (0 <= self.index <= 6):
            raise ValueError(f"ChordDegree.index must be in [0, 6], got {self.index}")


# ---------------------------------------------------------------------------
# Progression definitions
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ProgressionStep:
    """One chord slot of a progression: a degree plus an optional forced quality."""

    degree: int
    quality: str | None = None

    def __post_init__(self) -> None:
        if not (0 <= self.degree <= 6):
            raise ValueError(f"ProgressionStep.degree must be in [0, 6], got {self.degree}")
        if self.quality is not None and self.quality not in QUALITIES:
            raise ValueError(
                f"ProgressionStep.quality must be one of {sorted(QUALITIES)}, "
                f"got {self.quality!r}"
            )


@dataclass(frozen=True)
class ProgressionDef:
    """A named chord progression.

    Attributes:
        id:    Catalog identifier, e.g. "I-IV-V7"
        name:  Display name, e.g. "I – IV – V7"
        steps: Ordered ProgressionStep entries
    """

    id: str
    name: str
    steps: tuple[ProgressionStep, ...]

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("ProgressionDef.id must not be empty")
        if not self.steps:
            raise ValueError(f"ProgressionDef {self.id!r} must have at least one step")


# ---------------------------------------------------------------------------
# PitchedNote / Voicing
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PitchedNote:
    """A pitch class placed in an absolute octave.

    ``pitch`` is ``octave * 12 + semitone_index(name)`` — so C4 is 48 and
    A4 is 57 in this numbering.
    """

    name: str
    octave: int

    @property
    def pitch(self) -> int:
        return self.octave * 12 + semitone_index(self.name)

    @property
    def label(self) -> str:
        """Scientific pitch label, e.g. 'C#4'."""
        return f"{self.name}{self.octave}"


@dataclass(frozen=True)
class Voicing:
    """A chord placed in a specific inversion and octave.

    Attributes:
        chord:       Source ChordDegree (unchanged)
        notes:       PitchedNotes in rotation order (lowest-intended first)
        rotation:    Inversion index (0 = root position)
        base_octave: Octave the rotation was started in
        score:       Score the candidate was selected with
        movement:    Semitone displacement from the previous voicing (0 for the first)
    """

    chord: ChordDegree
    notes: tuple[PitchedNote, ...]
    rotation: int
    base_octave: int
    score: int = 0
    movement: int = 0

    @property
    def pitches(self) -> tuple[int, ...]:
        """Absolute pitches in note order."""
        return tuple(n.pitch for n in self.notes)

    @property
    def pitches_desc(self) -> tuple[int, ...]:
        """Absolute pitches from highest (soprano) to lowest."""
        return tuple(sorted(self.pitches, reverse=True))

    @property
    def name(self) -> str:
        return self.chord.name

    @property
    def degree(self) -> str:
        return self.chord.degree


# ---------------------------------------------------------------------------
# Fingering
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Fingering:
    """Finger numbers (1 = thumb, 5 = little finger) for both hands."""

    right_hand: tuple[int, ...]
    left_hand: tuple[int, ...]

    def __post_init__(self) -> None:
        if len(self.right_hand) != len(self.left_hand):
            raise ValueError(
                "Fingering hands must have equal length, got "
                f"{len(self.right_hand)} and {len(self.left_hand)}"
            )
        for finger in (*self.right_hand, *self.left_hand):
            if not (1 <= finger <= 5):
                raise ValueError(f"Finger number must be in [1, 5], got {finger}")
