"""
core/practice/ — Practice catalog and session record shapes.

Exports:
    Catalog:  FEEL_LABELS, SCALE_VARIATIONS, CHORD_VOICING_STYLES,
              ScaleVariation, ChordVoicingStyle, RenderedVariation,
              get_scale_variation, get_voicing_style,
              render_scale_variation, render_voicing_style
    Records:  KeySession, SessionVariation, session_metadata
"""

from core.practice.catalog import (
    CHORD_VOICING_STYLES,
    FEEL_LABELS,
    SCALE_VARIATIONS,
    ChordVoicingStyle,
    RenderedVariation,
    ScaleVariation,
    get_scale_variation,
    get_voicing_style,
    render_scale_variation,
    render_voicing_style,
)
from core.practice.records import KeySession, SessionVariation, session_metadata

__all__ = [
    "CHORD_VOICING_STYLES",
    "FEEL_LABELS",
    "SCALE_VARIATIONS",
    "ChordVoicingStyle",
    "RenderedVariation",
    "ScaleVariation",
    "get_scale_variation",
    "get_voicing_style",
    "render_scale_variation",
    "render_voicing_style",
    "KeySession",
    "SessionVariation",
    "session_metadata",
]
