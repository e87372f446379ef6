"""
core/practice/records.py — Shapes of the practice records the application stores.

The engine never reads or writes these records. They are defined here so the
application validates a session against the same Key/Mode enumerations and
catalog ids the engine uses, and so session metadata is built in one place.

Record shapes:
    KeySession        — one practice of a key: tempo, feel rating, free-text notes
    SessionVariation  — completion flag of a catalog variation within a session
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from core.music_theory.harmony import get_progression, is_known_progression
from core.music_theory.pitch import validate_key, validate_mode
from core.music_theory.scales import key_signature_label
from core.practice.catalog import FEEL_LABELS, get_scale_variation

# Domain validation bounds
MIN_BPM = 20
MAX_BPM = 300
MAX_NOTES_LENGTH = 2000


@dataclass(frozen=True)
class KeySession:
    """
    Immutable value object for one practice session of a key.

    Attributes:
        session_id: Opaque identifier assigned by the storage layer
        key_name: Tonic, one of pitch.KEYS
        mode: "major" or "minor"
        bpm: Practice tempo, or None if not recorded
        feel: Feel rating 1–3 (see FEEL_LABELS), or None
        notes: Optional free-text notes
    """

    session_id: str
    key_name: str
    mode: str
    bpm: int | None = None
    feel: int | None = None
    notes: str | None = None

    @property
    def feel_label(self) -> str | None:
        return FEEL_LABELS.get(self.feel) if self.feel is not None else None

    def __post_init__(self) -> None:
        if not self.session_id:
            raise ValueError("KeySession.session_id must not be empty")
        validate_key(self.key_name)
        validate_mode(self.mode)
        if self.bpm is not None and not (MIN_BPM <= self.bpm <= MAX_BPM):
            raise ValueError(f"KeySession.bpm must be in [{MIN_BPM}, {MAX_BPM}], got {self.bpm}")
        if self.feel is not None and self.feel not in FEEL_LABELS:
            raise ValueError(
                f"KeySession.feel must be one of {sorted(FEEL_LABELS)}, got {self.feel}"
            )
        if self.notes is not None and len(self.notes) > MAX_NOTES_LENGTH:
            raise ValueError(f"KeySession.notes too long (max {MAX_NOTES_LENGTH} chars)")


@dataclass(frozen=True)
class SessionVariation:
    """Completion flag for one catalog variation within a session."""

    session_id: str
    variation_id: int
    completed: bool = False

    def __post_init__(self) -> None:
        if not self.session_id:
            raise ValueError("SessionVariation.session_id must not be empty")
        get_scale_variation(self.variation_id)


def session_metadata(key: str, mode: str, progression_id: str | None = None) -> dict[str, Any]:
    """
    Build the metadata dict stored alongside a practice session.

    Pure function — no I/O. An unknown progression id is recorded as the
    progression it resolves to, so stored metadata always names a catalog entry.

    Args:
        key: Tonic, one of pitch.KEYS
        mode: "major" or "minor"
        progression_id: Progression practiced in the session, if any

    Returns:
        Dict with key, mode, key signature and (optionally) progression fields
    """
    metadata: dict[str, Any] = {
        "key_name": validate_key(key),
        "mode": validate_mode(mode),
        "key_signature": key_signature_label(key, mode),
    }
    if progression_id is not None:
        progression = get_progression(progression_id)
        metadata["progression_id"] = progression.id
        metadata["progression_name"] = progression.name
        metadata["progression_fallback"] = not is_known_progression(progression_id)
    return metadata
