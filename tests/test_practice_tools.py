"""
Tests for the practice tools: scale_exercise, arpeggio_exercise, voice_led_progression.

Pure computation — no mocks, no I/O, no DB.
All tests are deterministic and isolated.
"""

import logging

from core.config import EngineConfig
from core.music_theory.harmony import resolve_progression
from core.music_theory.voicing import voice_lead
from tools.music.arpeggio_exercise import ArpeggioExercise
from tools.music.scale_exercise import ScaleExercise
from tools.music.voice_led_progression import VoiceLedProgression

# ---------------------------------------------------------------------------
# scale_exercise
# ---------------------------------------------------------------------------


class TestScaleExercise:
    _tool = ScaleExercise()

    def test_tool_name(self):
        assert self._tool.name == "scale_exercise"

    def test_key_is_required(self):
        key_param = next(p for p in self._tool.parameters if p.name == "key")
        assert key_param.required is True

    def test_defaults(self):
        result = self._tool(key="C")
        assert result.success is True
        assert result.data["mode"] == "major"
        assert [n["name"] for n in result.data["notes"]] == list("CDEFGABC")
        assert result.data["fingering"]["right_hand"] == [1, 2, 3, 1, 2, 3, 4, 5]

    def test_notes_carry_octaves(self):
        result = self._tool(key="G", mode="major")
        assert result.data["notes"][3] == {"name": "C", "octave": 5, "pitch": 60}

    def test_two_octaves_up_down(self):
        result = self._tool(key="G", mode="major", octaves=2, direction="up-down")
        assert len(result.data["notes"]) == 29
        assert len(result.data["fingering"]["left_hand"]) == 29
        assert result.metadata["note_count"] == 29

    def test_key_signature(self):
        result = self._tool(key="Db", mode="minor")
        assert result.data["key_signature"] == "C#m"

    def test_unknown_key_rejected(self):
        result = self._tool(key="H")
        assert result.success is False
        assert "key" in result.error

    def test_octaves_outside_choices_rejected(self):
        result = self._tool(key="C", octaves=3)
        assert result.success is False
        assert "octaves" in result.error

    def test_wrong_type_rejected(self):
        result = self._tool(key="C", octaves="2")
        assert result.success is False
        assert "must be int" in result.error

    def test_start_octave_from_config(self):
        tool = ScaleExercise(EngineConfig(start_octave=3))
        result = tool(key="C")
        assert result.data["notes"][0] == {"name": "C", "octave": 3, "pitch": 36}
        assert result.data["notes"][-1]["octave"] == 4


# ---------------------------------------------------------------------------
# arpeggio_exercise
# ---------------------------------------------------------------------------


class TestArpeggioExercise:
    _tool = ArpeggioExercise()

    def test_tool_name(self):
        assert self._tool.name == "arpeggio_exercise"

    def test_tonic_root_position(self):
        result = self._tool(key="C")
        labels = [f"{n['name']}{n['octave']}" for n in result.data["notes"]]
        assert labels == ["C4", "E4", "G4", "C5"]
        assert result.data["chord"]["degree"] == "I"

    def test_minor_dominant_broken(self):
        result = self._tool(key="A", mode="minor", degree=4, arpeggio_type="broken")
        assert result.success is True
        assert [n["name"] for n in result.data["notes"]] == ["E", "G#", "B", "G#", "E"]
        assert result.data["chord"]["name"] == "E"

    def test_degree_out_of_range(self):
        result = self._tool(key="C", degree=7)
        assert result.success is False

    def test_unknown_arpeggio_type(self):
        result = self._tool(key="C", arpeggio_type="rolled")
        assert result.success is False
        assert "arpeggio_type" in result.error

    def test_start_octave_from_config(self):
        result = ArpeggioExercise(EngineConfig(start_octave=5))(key="C")
        labels = [f"{n['name']}{n['octave']}" for n in result.data["notes"]]
        assert labels == ["C5", "E5", "G5", "C6"]


# ---------------------------------------------------------------------------
# voice_led_progression
# ---------------------------------------------------------------------------


class TestVoiceLedProgression:
    _tool = VoiceLedProgression()

    def test_tool_name(self):
        assert self._tool.name == "voice_led_progression"

    def test_description_lists_progressions(self):
        assert "ii-V-I" in self._tool.description

    def test_default_progression(self):
        result = self._tool(key="C")
        assert result.success is True
        assert result.data["progression_id"] == "I-IV-V7"
        assert [c["name"] for c in result.data["chords"]] == ["C", "F", "G7"]
        assert result.data["total_movement"] == 7
        assert result.metadata["progression_fallback"] is False

    def test_voicing_notes(self):
        result = self._tool(key="C", progression="I-IV-V7")
        second = result.data["chords"][1]
        assert [n["pitch"] for n in second["voicing"]] == [48, 53, 57]
        assert second["rotation"] == 2
        assert second["movement"] == 3

    def test_unknown_progression_falls_back(self, caplog):
        with caplog.at_level(logging.WARNING, logger="tools.music.voice_led_progression"):
            result = self._tool(key="F", progression="I-bVII-IV")
        assert result.success is True
        assert result.data["progression_id"] == "I-IV-V7"
        assert result.metadata["progression_fallback"] is True
        assert result.metadata["requested_progression"] == "I-bVII-IV"
        assert "Unknown progression" in caplog.text

    def test_minor_key(self):
        result = self._tool(key="E", mode="minor", progression="ii-V-I")
        assert [c["degree"] for c in result.data["chords"]] == ["ii°", "V7", "i"]

    def test_uses_configured_pitch_window(self):
        config = EngineConfig(pitch_low=52, pitch_high=79)
        result = VoiceLedProgression(config)(key="C", progression="I-IV-V7")

        first = result.data["chords"][0]
        assert [n["pitch"] for n in first["voicing"]] == [52, 55, 60]
        for chord in result.data["chords"]:
            assert all(52 <= n["pitch"] <= 79 for n in chord["voicing"])

    def test_matches_engine_under_same_config(self):
        config = EngineConfig(pitch_low=52, pitch_high=79)
        result = VoiceLedProgression().with_config(config)(key="Eb", progression="ii-V-I")

        expected = voice_lead(resolve_progression("Eb", "major", "ii-V-I"), config)
        assert [[n["pitch"] for n in c["voicing"]] for c in result.data["chords"]] == [
            list(v.pitches) for v in expected
        ]
