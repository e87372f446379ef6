"""
JSON-friendly views of theory engine objects, shared by the practice tools.

Pure functions: frozen dataclasses in, plain dicts and lists out.
"""

from typing import Any

from core.music_theory.types import ChordDegree, Fingering, PitchedNote, Voicing


def note_to_dict(note: PitchedNote) -> dict[str, Any]:
    return {"name": note.name, "octave": note.octave, "pitch": note.pitch}


def notes_to_dicts(notes: tuple[PitchedNote, ...]) -> list[dict[str, Any]]:
    return [note_to_dict(n) for n in notes]


def chord_to_dict(chord: ChordDegree) -> dict[str, Any]:
    return {
        "degree": chord.degree,
        "root": chord.root,
        "quality": chord.quality,
        "name": chord.name,
        "notes": list(chord.notes),
        "index": chord.index,
    }


def fingering_to_dict(fingering: Fingering) -> dict[str, list[int]]:
    return {"right_hand": list(fingering.right_hand), "left_hand": list(fingering.left_hand)}


def voicing_to_dict(voicing: Voicing) -> dict[str, Any]:
    """Chord fields plus the chosen placement."""
    return {
        **chord_to_dict(voicing.chord),
        "voicing": notes_to_dicts(voicing.notes),
        "rotation": voicing.rotation,
        "base_octave": voicing.base_octave,
        "movement": voicing.movement,
    }
