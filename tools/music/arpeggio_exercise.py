"""
arpeggio_exercise tool — arpeggio of a degree chord with octaves assigned.

Pure computation: no DB, no I/O.
"""

from typing import Any

from core.music_theory.harmony import chord_at_degree
from core.music_theory.octaves import pitched_sequence
from core.music_theory.pitch import KEYS, MODES
from core.music_theory.sequences import ARPEGGIO_TYPES, DIRECTIONS, arpeggio_sequence
from tools.base import MusicalTool, ToolParameter, ToolResult
from tools.music.serialize import chord_to_dict, notes_to_dicts


class ArpeggioExercise(MusicalTool):
    """
    Build an arpeggio exercise on any scale degree of a key.

    Example:
        tool = ArpeggioExercise()
        result = tool(key="A", mode="minor", degree=4, arpeggio_type="broken")
        # E G# B G# E — the harmonic-minor dominant
    """

    @property
    def name(self) -> str:
        return "arpeggio_exercise"

    @property
    def description(self) -> str:
        return (
            "Build a piano arpeggio exercise on a scale degree chord: root position, "
            "first or second inversion, or broken-chord pattern, over one or two "
            "octaves, with octave numbers assigned to every note."
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
                description="'major' or 'minor'. Default: 'major'.",
                required=False,
                default="major",
                choices=MODES,
            ),
            ToolParameter(
                name="degree",
                type=int,
                description="0-based scale degree of the chord (0 = tonic). Default: 0.",
                required=False,
                default=0,
                choices=tuple(range(7)),
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
            ToolParameter(
                name="arpeggio_type",
                type=str,
                description=f"Pattern. Options: {', '.join(ARPEGGIO_TYPES)}. Default: 'root'.",
                required=False,
                default="root",
                choices=ARPEGGIO_TYPES,
            ),
        ]

    def execute(self, **kwargs: Any) -> ToolResult:
        chord = chord_at_degree(kwargs["key"], kwargs["mode"], kwargs["degree"])
        names = arpeggio_sequence(
            chord.notes,
            kwargs["octaves"],
            kwargs["direction"],
            kwargs["arpeggio_type"],
        )
        notes = pitched_sequence(names, self.config.start_octave)

        return ToolResult(
            success=True,
            data={
                "key": kwargs["key"],
                "mode": kwargs["mode"],
                "chord": chord_to_dict(chord),
                "arpeggio_type": kwargs["arpeggio_type"],
                "notes": notes_to_dicts(notes),
            },
            metadata={"note_count": len(notes)},
        )
