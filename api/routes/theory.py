"""
api/routes/theory.py — Theory engine endpoints.

Endpoints:
    GET  /theory/keys        — Keys, modes and named progressions
    POST /theory/scale       — Scale sequence with octaves, fingering, key signature
    POST /theory/chord       — One diatonic chord at a degree
    POST /theory/arpeggio    — Arpeggio of a degree chord with octaves assigned
    POST /theory/progression — Resolved and voice-led progression

All endpoints delegate directly to core/music_theory. No database, no I/O.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from api.deps import get_engine_config
from api.schemas.theory import (
    ArpeggioRequest,
    ArpeggioResponse,
    ChordOut,
    ChordRequest,
    FingeringOut,
    KeysResponse,
    NoteOut,
    ProgressionOut,
    ProgressionRequest,
    ProgressionResponse,
    ScaleRequest,
    ScaleResponse,
    VoicedChordOut,
)
from core.config import EngineConfig
from core.music_theory.fingering import scale_fingering
from core.music_theory.harmony import (
    available_progressions,
    chord_at_degree,
    get_progression,
    is_known_progression,
    resolve_progression,
)
from core.music_theory.octaves import pitched_sequence
from core.music_theory.pitch import KEYS, MODES
from core.music_theory.scales import key_signature_label
from core.music_theory.sequences import arpeggio_sequence, scale_sequence
from core.music_theory.types import ChordDegree, Fingering, PitchedNote, Voicing
from core.music_theory.voicing import total_movement, voice_lead
from tools.music.serialize import chord_to_dict, fingering_to_dict, note_to_dict, voicing_to_dict

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/theory", tags=["theory"])


# Built from the dict views in tools/music/serialize.py; /tools returns the
# same shapes.


def note_out(note: PitchedNote) -> NoteOut:
    return NoteOut(**note_to_dict(note))


def chord_out(chord: ChordDegree) -> ChordOut:
    return ChordOut(**chord_to_dict(chord))


def fingering_out(fingering: Fingering) -> FingeringOut:
    return FingeringOut(**fingering_to_dict(fingering))


def voiced_chord_out(voicing: Voicing) -> VoicedChordOut:
    return VoicedChordOut(**voicing_to_dict(voicing))


# ---------------------------------------------------------------------------
# GET /theory/keys
# ---------------------------------------------------------------------------


@router.get("/keys", response_model=KeysResponse)
def list_keys() -> KeysResponse:
    """List the supported keys, modes and progression catalog."""
    return KeysResponse(
        keys=list(KEYS),
        modes=list(MODES),
        progressions=[
            ProgressionOut(id=p.id, name=p.name, degrees=[s.degree for s in p.steps])
            for p in available_progressions()
        ],
    )


# ---------------------------------------------------------------------------
# POST /theory/scale
# ---------------------------------------------------------------------------


@router.post("/scale", response_model=ScaleResponse)
def build_scale(
    request: ScaleRequest,
    config: EngineConfig = Depends(get_engine_config),
) -> ScaleResponse:
    """Return a scale exercise with octaves and fingering for both hands.

    Raises:
        HTTPException(422): The engine rejected the request.
    """
    try:
        names = scale_sequence(request.key, request.mode, request.octaves, request.direction)
        fingering = scale_fingering(request.key, request.mode, request.octaves, request.direction)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    notes = pitched_sequence(names, config.start_octave)
    logger.debug("scale %s %s: %d notes", request.key, request.mode, len(notes))
    return ScaleResponse(
        key=request.key,
        mode=request.mode,
        key_signature=key_signature_label(request.key, request.mode),
        notes=[note_out(n) for n in notes],
        fingering=fingering_out(fingering),
    )


# ---------------------------------------------------------------------------
# POST /theory/chord
# ---------------------------------------------------------------------------


@router.post("/chord", response_model=ChordOut)
def build_chord(request: ChordRequest) -> ChordOut:
    """Return the chord on one scale degree, optionally with a forced quality."""
    try:
        chord = chord_at_degree(request.key, request.mode, request.degree, request.quality)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return chord_out(chord)


# ---------------------------------------------------------------------------
# POST /theory/arpeggio
# ---------------------------------------------------------------------------


@router.post("/arpeggio", response_model=ArpeggioResponse)
def build_arpeggio(
    request: ArpeggioRequest,
    config: EngineConfig = Depends(get_engine_config),
) -> ArpeggioResponse:
    """Return the arpeggio of a degree chord with octaves assigned."""
    try:
        chord = chord_at_degree(request.key, request.mode, request.degree)
        names = arpeggio_sequence(
            chord.notes, request.octaves, request.direction, request.arpeggio_type
        )
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    notes = pitched_sequence(names, config.start_octave)
    return ArpeggioResponse(
        chord=chord_out(chord),
        arpeggio_type=request.arpeggio_type,
        notes=[note_out(n) for n in notes],
    )


# ---------------------------------------------------------------------------
# POST /theory/progression
# ---------------------------------------------------------------------------


@router.post("/progression", response_model=ProgressionResponse)
def build_progression(
    request: ProgressionRequest,
    config: EngineConfig = Depends(get_engine_config),
) -> ProgressionResponse:
    """Resolve a named progression and voice-lead it.

    Unknown progression ids resolve to the default progression and the
    response sets ``progression_fallback``.
    """
    fallback = not is_known_progression(request.progression)
    progression = get_progression(request.progression)
    if fallback:
        logger.warning(
            "Unknown progression %r, using default %r", request.progression, progression.id
        )

    try:
        voicings = voice_lead(
            resolve_progression(request.key, request.mode, progression.id), config
        )
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    return ProgressionResponse(
        key=request.key,
        mode=request.mode,
        progression_id=progression.id,
        progression_name=progression.name,
        progression_fallback=fallback,
        chords=[voiced_chord_out(v) for v in voicings],
        total_movement=total_movement(voicings),
    )
