"""
scale_exercise tool — notes, octaves and fingering for a scale exercise.

Pure computation: no DB, no I/O.
Given a key + mode + octave count + direction, returns:
  - Note names with assigned octaves and absolute pitches
  - Right- and left-hand fingering aligned note-for-note
  - Key signature label for the notation renderer
  - The key's pitch-class set (for accidental decisions)
"""

from typing import Any

from core.music_theory.fingering import scale_fingering
from core.music_theory.octaves import pitched_sequence
from core.music_theory.pitch import KEYS, MODES
from core.music_theory.scales import key_notes, key_signature_label
from core.music_theory.sequences import DIRECTIONS, scale_sequence
from tools.base import MusicalTool, ToolParameter, ToolResult
from tools.music.serialize import fingering_to_dict, notes_to_dicts


class ScaleExercise(MusicalTool):
    """
    Build a scale exercise for one key.

    Returns the pitched note sequence with matching fingering for both hands,
    ready for notation rendering.

    Example:
        tool = ScaleExercise()
        result = tool(key="G", mode="major", octaves=2, direction="up-down")
        # data["notes"] has 29 entries, data["fingering"]["right_hand"] too
    """

    @property
    def name(self) -> str:
        return "scale_exercise"

    @property
    def description(self) -> str:
        return (
            "Build a piano scale exercise: note names with octaves, right- and "
            "left-hand fingering, and the key signature. "
            "Use when the user wants to practice or display a major or minor scale "
            "over one or two octaves, ascending or ascending-descending."
        )

    @property
    def parameters(self) -> list[ToolParameter]:
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
                description="'major' or 'minor' (natural minor). Default: 'major'.",
                required=False,
                default="major",
                choices=MODES,
            ),
            ToolParameter(
                name="octaves",
                type=int,
                description="Number of octaves (1 or 2). Default: 1.",
                required=False,
                default=1,
                choices=(1, 2),
            ),
            ToolParameter(
                name="direction",
                type=str,
                description="'up' or 'up-down'. Default: 'up'.",
                required=False,
                default="up",
                choices=DIRECTIONS,
            ),
        ]

    def execute(self, **kwargs: Any) -> ToolResult:
        """
        Build the scale exercise.

        Returns:
            ToolResult with notes, fingering, key signature and key notes
        """
        key: str = kwargs["key"]
        mode: str = kwargs["mode"]
        octaves: int = kwargs["octaves"]
        direction: str = kwargs["direction"]

        names = scale_sequence(key, mode, octaves, direction)
        notes = pitched_sequence(names, self.config.start_octave)
        fingering = scale_fingering(key, mode, octaves, direction)

        return ToolResult(
            success=True,
            data={
                "key": key,
                "mode": mode,
                "key_signature": key_signature_label(key, mode),
                "key_notes": sorted(key_notes(key, mode)),
                "notes": notes_to_dicts(notes),
                "fingering": fingering_to_dict(fingering),
            },
            metadata={
                "note_count": len(notes),
                "octaves": octaves,
                "direction": direction,
            },
        )
