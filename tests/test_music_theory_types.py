"""
Tests for core/music_theory/types.py — frozen value objects.
"""

import pytest

from core.music_theory.types import (
    ChordDegree,
    Fingering,
    PitchedNote,
    ProgressionDef,
    ProgressionStep,
    Voicing,
)


def _c_major() -> ChordDegree:
    return ChordDegree(degree="I", root="C", quality="major", notes=("C", "E", "G"), index=0)


class TestChordDegree:
    def test_name_suffixes(self):
        assert _c_major().name == "C"
        assert ChordDegree("ii", "D", "minor", ("D", "F", "A"), 1).name == "Dm"
        assert ChordDegree("V7", "G", "dom7", ("G", "B", "D", "F"), 4).name == "G7"

    def test_unknown_quality(self):
        with pytest.raises(ValueError, match="quality"):
            ChordDegree("I", "C", "aug", ("C", "E", "G#"), 0)

    def test_wrong_note_count(self):
        with pytest.raises(ValueError, match="3 or 4"):
            ChordDegree("I", "C", "major", ("C", "E"), 0)

    def test_index_range(self):
        with pytest.raises(ValueError, match="index"):
            ChordDegree("I", "C", "major", ("C", "E", "G"), 7)

    def test_frozen(self):
        chord = _c_major()
        with pytest.raises(AttributeError):
            chord.root = "D"  # type: ignore[misc]


class TestProgressionTypes:
    def test_step_degree_range(self):
        with pytest.raises(ValueError, match="degree"):
            ProgressionStep(degree=8)

    def test_step_quality(self):
        with pytest.raises(ValueError, match="quality"):
            ProgressionStep(degree=4, quality="dom9")

    def test_progression_needs_steps(self):
        with pytest.raises(ValueError, match="at least one step"):
            ProgressionDef(id="empty", name="Empty", steps=())

    def test_progression_needs_id(self):
        with pytest.raises(ValueError, match="id"):
            ProgressionDef(id="", name="X", steps=(ProgressionStep(0),))


class TestPitchedNote:
    def test_pitch(self):
        assert PitchedNote("C", 4).pitch == 48
        assert PitchedNote("Bb", 3).pitch == 46

    def test_label(self):
        assert PitchedNote("F#", 5).label == "F#5"


class TestVoicing:
    def test_pitches_desc(self):
        notes = (PitchedNote("E", 4), PitchedNote("G", 4), PitchedNote("C", 5))
        voicing = Voicing(chord=_c_major(), notes=notes, rotation=1, base_octave=4)
        assert voicing.pitches == (52, 55, 60)
        assert voicing.pitches_desc == (60, 55, 52)
        assert voicing.name == "C"
        assert voicing.degree == "I"


class TestFingering:
    def test_unequal_hands(self):
        with pytest.raises(ValueError, match="equal length"):
            Fingering(right_hand=(1, 2, 3), left_hand=(3, 2))

    def test_finger_range(self):
        with pytest.raises(ValueError, match=r"\[1, 5\]"):
            Fingering(right_hand=(1, 6), left_hand=(1, 2))
