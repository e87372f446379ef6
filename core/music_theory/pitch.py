"""
core/music_theory/pitch.py — Pitch classes, key spelling and enharmonic normalization.

Exports:
    KEYS                 the 12 supported tonic names, in circle-of-fifths order
    MODES                ("major", "minor")
    KEY_SEMITONES        key → semitone offset from C
    CHROMATIC_SHARPS     12-element sharp alphabet
    CHROMATIC_FLATS      12-element flat alphabet
    FLAT_KEYS            keys spelled with the flat alphabet

    uses_flats(key) → bool
    chromatic_for(key) → tuple[str, ...]
    spell(semitone, flats) → str
    semitone_index(name) → int
    key_semitone(key) → int
    validate_key(key) / validate_mode(mode)
"""

from __future__ import annotations

KEYS: tuple[str, ...] = ("C", "G", "D", "A", "E", "B", "F#", "F", "Bb", "Eb", "Ab", "Db")

MODES: tuple[str, ...] = ("major", "minor")

KEY_SEMITONES: dict[str, int] = {
    "C": 0,
    "G": 7,
    "D": 2,
    "A": 9,
    "E": 4,
    "B": 11,
    "F#": 6,
    "F": 5,
    "Bb": 10,
    "Eb": 3,
    "Ab": 8,
    "Db": 1,
}

CHROMATIC_SHARPS: tuple[str, ...] = (
    "C",
    "C#",
    "D",
    "D#",
    "E",
    "F",
    "F#",
    "G",
    "G#",
    "A",
    "A#",
    "B",
)

CHROMATIC_FLATS: tuple[str, ...] = (
    "C",
    "Db",
    "D",
    "Eb",
    "E",
    "F",
    "Gb",
    "G",
    "Ab",
    "A",
    "Bb",
    "B",
)

FLAT_KEYS: frozenset[str] = frozenset({"F", "Bb", "Eb", "Ab", "Db"})

# Input normalisation: flat → sharp
FLAT_TO_SHARP: dict[str, str] = {
    "Db": "C#",
    "Eb": "D#",
    "Gb": "F#",
    "Ab": "G#",
    "Bb": "A#",
}


# ---------------------------------------------------------------------------
# Boundary validation
# ---------------------------------------------------------------------------


def validate_key(key: str) -> str:
    """Return key unchanged if it is one of KEYS.

    Raises:
        ValueError: If key is not a supported tonic
    """
    if key not in KEY_SEMITONES:
        raise ValueError(f"Unknown key {key!r}. Valid: {list(KEYS)}")
    return key


def validate_mode(mode: str) -> str:
    """Return mode unchanged if it is one of MODES.

    Raises:
        ValueError: If mode is not "major" or "minor"
    """
    if mode not in MODES:
        raise ValueError(f"Unknown mode {mode!r}. Valid: {list(MODES)}")
    return mode


# ---------------------------------------------------------------------------
# Spelling
# ---------------------------------------------------------------------------


def uses_flats(key: str) -> bool:
    """Whether notes in this key are spelled with the flat alphabet."""
    return key in FLAT_KEYS


def chromatic_for(key: str) -> tuple[str, ...]:
    """Return the chromatic alphabet used to spell notes in key."""
    return CHROMATIC_FLATS if uses_flats(key) else CHROMATIC_SHARPS


def spell(semitone: int, flats: bool) -> str:
    """Return the pitch class name for a semitone offset from C.

    Args:
        semitone: Offset from C; taken modulo 12
        flats:    Use the flat alphabet instead of sharps

    Examples:
        >>> spell(10, flats=True)
        'Bb'
        >>> spell(10, flats=False)
        'A#'
    """
    alphabet = CHROMATIC_FLATS if flats else CHROMATIC_SHARPS
    return alphabet[semitone % 12]


def semitone_index(name: str) -> int:
    """Return the semitone index (0–11, C=0) of a pitch class name.

    Flat spellings are normalised to their sharp equivalents first, so
    "Db" and "C#" both return 1.

    Raises:
        ValueError: If name is not a recognized pitch class
    """
    normalized = FLAT_TO_SHARP.get(name, name)
    try:
        return CHROMATIC_SHARPS.index(normalized)
    except ValueError:
        raise ValueError(
            f"Unknown pitch class {name!r}. Valid: {list(CHROMATIC_SHARPS)}"
        ) from None


def key_semitone(key: str) -> int:
    """Return the semitone offset of a key's tonic from C."""
    return KEY_SEMITONES[validate_key(key)]
