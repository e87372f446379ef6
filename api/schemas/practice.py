"""
api/schemas/practice.py — Pydantic schemas for practice catalog endpoints.

Covers:
    /practice/catalog        — CatalogResponse
    /practice/variation      — VariationRequest / VariationResponse
    /practice/voicing-style  — VoicingStyleRequest / VoicingStyleResponse
"""

from pydantic import BaseModel, Field

from api.schemas.theory import FingeringOut, KeyModeRequest, NoteOut, VoicedChordOut


class ScaleVariationOut(BaseModel):
    id: int
    name: str
    description: str
    difficulty: int = Field(..., ge=1, le=3)
    sort_order: int
    kind: str
    octaves: int
    direction: str
    arpeggio_type: str


class VoicingStyleOut(BaseModel):
    id: int
    name: str
    description: str
    sort_order: int
    strategy: str


class CatalogResponse(BaseModel):
    """Response body for GET /practice/catalog."""

    scale_variations: list[ScaleVariationOut]
    voicing_styles: list[VoicingStyleOut]
    feel_labels: dict[int, str]


class VariationRequest(KeyModeRequest):
    """Request body for POST /practice/variation."""

    variation_id: int


class VariationResponse(BaseModel):
    """Response body for POST /practice/variation."""

    variation: ScaleVariationOut
    key: str
    mode: str
    notes: list[NoteOut]
    fingering: FingeringOut | None = None


class VoicingStyleRequest(KeyModeRequest):
    """Request body for POST /practice/voicing-style."""

    style_id: int
    progression: str = Field(default="I-IV-V7")


class VoicingStyleResponse(BaseModel):
    """Response body for POST /practice/voicing-style."""

    style: VoicingStyleOut
    progression_id: str
    progression_fallback: bool
    chords: list[VoicedChordOut]
    total_movement: int = Field(..., ge=0)
