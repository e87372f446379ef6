"""
voice_led_progression tool — resolve a named progression and voice-lead it.

Pure computation: no DB, no I/O.
Given a key + mode + progression id, returns every chord with its roman
numeral, chord tones, and the inversion/octave placement chosen by the
voice-leading optimizer, plus the total voice movement.

Unknown progression ids are not an error: the default progression is used
and the substitution is reported in metadata.
"""

import logging
from typing import Any

from core.music_theory.harmony import (
    available_progressions,
    get_progression,
    is_known_progression,
    resolve_progression,
)
from core.music_theory.pitch import KEYS, MODES
from core.music_theory.voicing import total_movement, voice_lead
from tools.base import MusicalTool, ToolParameter, ToolResult
from tools.music.serialize import voicing_to_dict

logger = logging.getLogger(__name__)


class VoiceLedProgression(MusicalTool):
    """
    Voice a chord progression with minimal movement between chords.

    Example:
        tool = VoiceLedProgression()
        result = tool(key="C", mode="major", progression="I-IV-V7")
        # chords: C (C4 E4 G4), F (C4 F4 A4), G7 (B3 D4 F4 G4)
    """

    @property
    def name(self) -> str:
        return "voice_led_progression"

    @property
    def description(self) -> str:
        ids = ", ".join(p.id for p in available_progressions())
        return (
            "Resolve a named chord progression in a key and choose smooth piano "
            "voicings (inversion and octave per chord) that minimize voice movement. "
            f"Progressions: {ids}."
        )

    @property
    def parameters(self) -> list[ToolParameter]:
        default_id = available_progressions()[0].id
        return [
            ToolParameter(
                name="key",
                type=str,
                description=f"Tonic. Options: {', '.join(KEYS)}",
                required=True,
                choices=KEYS,
            ),
            ToolParameter(
                name="mode",
                type=str,
                description="'major' or 'minor'. Default: 'major'.",
                required=False,
                default="major",
                choices=MODES,
            ),
            ToolParameter(
                name="progression",
                type=str,
                description=(
                    f"Progression id. Unknown ids fall back to '{default_id}'. "
                    f"Default: '{default_id}'."
                ),
                required=False,
                default=default_id,
            ),
        ]

    def execute(self, **kwargs: Any) -> ToolResult:
        key: str = kwargs["key"]
        mode: str = kwargs["mode"]
        requested: str = kwargs["progression"]

        fallback = not is_known_progression(requested)
        progression = get_progression(requested)
        if fallback:
            logger.warning(
                "Unknown progression %r, using default %r", requested, progression.id
            )

        voicings = voice_lead(resolve_progression(key, mode, progression.id), self.config)

        return ToolResult(
            success=True,
            data={
                "key": key,
                "mode": mode,
                "progression_id": progression.id,
                "progression_name": progression.name,
                "chords": [voicing_to_dict(v) for v in voicings],
                "total_movement": total_movement(voicings),
            },
            metadata={
                "progression_fallback": fallback,
                "requested_progression": requested,
                "chord_count": len(voicings),
            },
        )
