"""
core/music_theory/scales.py — Scale note names and key signature helpers.

Exports:
    SCALE_FORMULAS          8-step semitone intervals (root to octave) per mode

    scale_notes(key, mode) → tuple[str, ...]
    key_notes(key, mode) → frozenset[str]
    key_signature_label(key, mode) → str
"""

from __future__ import annotations

from core.music_theory.pitch import chromatic_for, key_semitone, validate_key, validate_mode

# ---------------------------------------------------------------------------
# Scale formulas (semitone intervals from root, octave repeat included)
# Minor uses natural minor for display; the harmonic-minor dominant lives in
# harmony.DEGREE_QUALITIES.
# ---------------------------------------------------------------------------

SCALE_FORMULAS: dict[str, tuple[int, ...]] = {
    "major": (0, 2, 4, 5, 7, 9, 11, 12),
    "minor": (0, 2, 3, 5, 7, 8, 10, 12),
}


def scale_notes(key: str, mode: str) -> tuple[str, ...]:
    """Return the 8 note names of a scale, root through octave repeat.

    Args:
        key:  Tonic, one of pitch.KEYS
        mode: "major" or "minor"

    Returns:
        Tuple of 8 names spelled in the key's alphabet; first and last are equal

    Raises:
        ValueError: If key or mode is unrecognized

    Examples:
        >>> scale_notes("C", "major")
        ('C', 'D', 'E', 'F', 'G', 'A', 'B', 'C')
        >>> scale_notes("F", "major")
        ('F', 'G', 'A', 'Bb', 'C', 'D', 'E', 'F')
    """
    root = key_semitone(key)
    chromatic = chromatic_for(key)
    formula = SCALE_FORMULAS[validate_mode(mode)]
    return tuple(chromatic[(root + interval) % 12] for interval in formula)


def key_notes(key: str, mode: str) -> frozenset[str]:
    """Return the 7 distinct pitch classes of a key (for accidental decisions)."""
    return frozenset(scale_notes(key, mode)[:7])


def key_signature_label(key: str, mode: str) -> str:
    """Return the key signature label used by the notation renderer.

    Major keys use the key name; minor keys append "m". Db minor has no
    signature in the renderer, so its enharmonic C#m is returned instead.

    Examples:
        >>> key_signature_label("Eb", "major")
        'Eb'
        >>> key_signature_label("A", "minor")
        'Am'
        >>> key_signature_label("Db", "minor")
        'C#m'
    """
    validate_key(key)
    if validate_mode(mode) == "major":
        return key
    if key == "Db":
        return "C#m"
    return f"{key}m"
