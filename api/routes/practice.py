"""
api/routes/practice.py — Practice catalog endpoints.

Endpoints:
    GET  /practice/catalog        — Scale variations, voicing styles, feel labels
    POST /practice/variation      — One scale variation rendered in a key
    POST /practice/voicing-style  — A progression voiced in a catalog style

Session records are stored by the application; these endpoints only render
catalog entries through the theory engine.
"""

from __future__ import annotations

import dataclasses
import logging

from fastapi import APIRouter, Depends, HTTPException

from api.deps import get_engine_config
from api.routes.theory import fingering_out, note_out, voiced_chord_out
from api.schemas.practice import (
    CatalogResponse,
    ScaleVariationOut,
    VariationRequest,
    VariationResponse,
    VoicingStyleOut,
    VoicingStyleRequest,
    VoicingStyleResponse,
)
from core.config import EngineConfig
from core.music_theory.harmony import get_progression, is_known_progression
from core.music_theory.voicing import total_movement
from core.practice.catalog import (
    CHORD_VOICING_STYLES,
    FEEL_LABELS,
    SCALE_VARIATIONS,
    get_voicing_style,
    render_scale_variation,
    render_voicing_style,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/practice", tags=["practice"])


@router.get("/catalog", response_model=CatalogResponse)
def get_catalog() -> CatalogResponse:
    """Return the fixed practice catalogs in display order."""
    return CatalogResponse(
        scale_variations=[
            ScaleVariationOut(**dataclasses.asdict(v))
            for v in sorted(SCALE_VARIATIONS, key=lambda v: v.sort_order)
        ],
        voicing_styles=[
            VoicingStyleOut(**dataclasses.asdict(s))
            for s in sorted(CHORD_VOICING_STYLES, key=lambda s: s.sort_order)
        ],
        feel_labels=dict(FEEL_LABELS),
    )


@router.post("/variation", response_model=VariationResponse)
def render_variation(
    request: VariationRequest,
    config: EngineConfig = Depends(get_engine_config),
) -> VariationResponse:
    """Render one scale variation in the requested key.

    Raises:
        HTTPException(422): Unknown variation id.
    """
    try:
        rendered = render_scale_variation(request.key, request.mode, request.variation_id, config)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    fingering = None if rendered.fingering is None else fingering_out(rendered.fingering)

    return VariationResponse(
        variation=ScaleVariationOut(**dataclasses.asdict(rendered.variation)),
        key=rendered.key,
        mode=rendered.mode,
        notes=[note_out(n) for n in rendered.notes],
        fingering=fingering,
    )


@router.post("/voicing-style", response_model=VoicingStyleResponse)
def render_style(
    request: VoicingStyleRequest,
    config: EngineConfig = Depends(get_engine_config),
) -> VoicingStyleResponse:
    """Voice a progression the way a catalog voicing style prescribes.

    Raises:
        HTTPException(422): Unknown style id.
    """
    try:
        style = get_voicing_style(request.style_id)
        voicings = render_voicing_style(
            request.key, request.mode, request.style_id, request.progression, config
        )
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    fallback = not is_known_progression(request.progression)
    if fallback:
        logger.warning("Unknown progression %r, using default", request.progression)

    return VoicingStyleResponse(
        style=VoicingStyleOut(**dataclasses.asdict(style)),
        progression_id=get_progression(request.progression).id,
        progression_fallback=fallback,
        chords=[voiced_chord_out(v) for v in voicings],
        total_movement=total_movement(voicings),
    )
