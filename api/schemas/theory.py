"""
api/schemas/theory.py — Pydantic request/response schemas for theory endpoints.

Covers:
    /theory/keys        — KeysResponse
    /theory/scale       — ScaleRequest / ScaleResponse
    /theory/chord       — ChordRequest / ChordOut
    /theory/arpeggio    — ArpeggioRequest / ArpeggioResponse
    /theory/progression — ProgressionRequest / ProgressionResponse
"""

from pydantic import BaseModel, Field, field_validator

from core.music_theory.harmony import QUALITY_INTERVALS
from core.music_theory.pitch import KEYS, MODES
from core.music_theory.sequences import ARPEGGIO_TYPES, DIRECTIONS

# ---------------------------------------------------------------------------
# Shared validators
# ---------------------------------------------------------------------------


def _check_key(v: str) -> str:
    if v not in KEYS:
        raise ValueError(f"key must be one of: {', '.join(KEYS)}")
    return v


def _check_mode(v: str) -> str:
    if v not in MODES:
        raise ValueError(f"mode must be one of: {', '.join(MODES)}")
    return v


class KeyModeRequest(BaseModel):
    """Base body: a key and a mode."""

    key: str = Field(..., description="Tonic, e.g. 'C', 'F#', 'Bb'.")
    mode: str = Field(default="major", description="'major' or 'minor'.")

    @field_validator("key")
    @classmethod
    def validate_key(cls, v: str) -> str:
        return _check_key(v)

    @field_validator("mode")
    @classmethod
    def validate_mode(cls, v: str) -> str:
        return _check_mode(v)


# ---------------------------------------------------------------------------
# Shared sub-schemas
# ---------------------------------------------------------------------------


class NoteOut(BaseModel):
    """A note name with its assigned octave."""

    name: str
    octave: int
    pitch: int


class FingeringOut(BaseModel):
    """Finger numbers (1 = thumb) aligned with the note sequence."""

    right_hand: list[int]
    left_hand: list[int]


class ChordOut(BaseModel):
    """One diatonic chord."""

    degree: str
    root: str
    quality: str
    name: str
    notes: list[str]
    index: int = Field(..., ge=0, le=6)


class VoicedChordOut(ChordOut):
    """A chord with the placement chosen for it."""

    voicing: list[NoteOut]
    rotation: int = Field(..., ge=0)
    base_octave: int
    movement: int = Field(..., ge=0)


# ---------------------------------------------------------------------------
# /theory/keys
# ---------------------------------------------------------------------------


class ProgressionOut(BaseModel):
    id: str
    name: str
    degrees: list[int]


class KeysResponse(BaseModel):
    """Response body for GET /theory/keys."""

    keys: list[str]
    modes: list[str]
    progressions: list[ProgressionOut]


# ---------------------------------------------------------------------------
# /theory/scale
# ---------------------------------------------------------------------------


class ScaleRequest(KeyModeRequest):
    """Request body for POST /theory/scale."""

    octaves: int = Field(default=1, ge=1, le=2)
    direction: str = Field(default="up", description="'up' or 'up-down'.")

    @field_validator("direction")
    @classmethod
    def validate_direction(cls, v: str) -> str:
        if v not in DIRECTIONS:
            raise ValueError(f"direction must be one of: {', '.join(DIRECTIONS)}")
        return v


class ScaleResponse(BaseModel):
    """Response body for POST /theory/scale."""

    key: str
    mode: str
    key_signature: str
    notes: list[NoteOut]
    fingering: FingeringOut


# ---------------------------------------------------------------------------
# /theory/chord
# ---------------------------------------------------------------------------


class ChordRequest(KeyModeRequest):
    """Request body for POST /theory/chord."""

    degree: int = Field(default=0, ge=0, le=6, description="0-based scale degree.")
    quality: str | None = Field(
        default=None,
        description="Override the diatonic quality: major, minor, dim or dom7.",
    )

    @field_validator("quality")
    @classmethod
    def validate_quality(cls, v: str | None) -> str | None:
        if v is not None and v not in QUALITY_INTERVALS:
            raise ValueError(f"quality must be one of: {', '.join(sorted(QUALITY_INTERVALS))}")
        return v


# ---------------------------------------------------------------------------
# /theory/arpeggio
# ---------------------------------------------------------------------------


class ArpeggioRequest(ScaleRequest):
    """Request body for POST /theory/arpeggio."""

    degree: int = Field(default=0, ge=0, le=6)
    arpeggio_type: str = Field(default="root")

    @field_validator("arpeggio_type")
    @classmethod
    def validate_arpeggio_type(cls, v: str) -> str:
        if v not in ARPEGGIO_TYPES:
            raise ValueError(f"arpeggio_type must be one of: {', '.join(ARPEGGIO_TYPES)}")
        return v


class ArpeggioResponse(BaseModel):
    """Response body for POST /theory/arpeggio."""

    chord: ChordOut
    arpeggio_type: str
    notes: list[NoteOut]


# ---------------------------------------------------------------------------
# /theory/progression
# ---------------------------------------------------------------------------


class ProgressionRequest(KeyModeRequest):
    """Request body for POST /theory/progression.

    Unknown progression ids are accepted and resolve to the default progression.
    """

    progression: str = Field(default="I-IV-V7")


class ProgressionResponse(BaseModel):
    """Response body for POST /theory/progression."""

    key: str
    mode: str
    progression_id: str
    progression_name: str
    progression_fallback: bool
    chords: list[VoicedChordOut]
    total_movement: int = Field(..., ge=0)
