"""
Tests for core/practice/records.py — session record shapes and metadata.

Pure computation — no mocks, no I/O, no DB.
"""

import pytest

from core.practice.records import KeySession, SessionVariation, session_metadata


class TestKeySession:
    def test_minimal(self):
        session = KeySession(session_id="s1", key_name="G", mode="major")
        assert session.bpm is None
        assert session.feel_label is None

    def test_feel_label(self):
        session = KeySession(session_id="s1", key_name="G", mode="major", feel=3)
        assert session.feel_label == "Solid"

    @pytest.mark.parametrize("bpm", [20, 120, 300])
    def test_bpm_bounds_accepted(self, bpm):
        assert KeySession(session_id="s1", key_name="C", mode="minor", bpm=bpm).bpm == bpm

    @pytest.mark.parametrize("bpm", [19, 301])
    def test_bpm_out_of_range(self, bpm):
        with pytest.raises(ValueError, match="bpm"):
            KeySession(session_id="s1", key_name="C", mode="minor", bpm=bpm)

    def test_feel_out_of_range(self):
        with pytest.raises(ValueError, match="feel"):
            KeySession(session_id="s1", key_name="C", mode="major", feel=4)

    def test_notes_too_long(self):
        with pytest.raises(ValueError, match="too long"):
            KeySession(session_id="s1", key_name="C", mode="major", notes="x" * 2001)

    def test_notes_at_limit(self):
        session = KeySession(session_id="s1", key_name="C", mode="major", notes="x" * 2000)
        assert len(session.notes) == 2000

    def test_unknown_key(self):
        with pytest.raises(ValueError, match="Unknown key"):
            KeySession(session_id="s1", key_name="Cb", mode="major")

    def test_empty_session_id(self):
        with pytest.raises(ValueError, match="session_id"):
            KeySession(session_id="", key_name="C", mode="major")


class TestSessionVariation:
    def test_defaults_to_incomplete(self):
        assert SessionVariation(session_id="s1", variation_id=1).completed is False

    def test_unknown_variation(self):
        with pytest.raises(ValueError, match="Unknown scale variation"):
            SessionVariation(session_id="s1", variation_id=99)


class TestSessionMetadata:
    def test_without_progression(self):
        metadata = session_metadata("A", "minor")
        assert metadata == {"key_name": "A", "mode": "minor", "key_signature": "Am"}

    def test_with_progression(self):
        metadata = session_metadata("Db", "minor", "ii-V-I")
        assert metadata["key_signature"] == "C#m"
        assert metadata["progression_id"] == "ii-V-I"
        assert metadata["progression_fallback"] is False

    def test_unknown_progression_recorded_as_default(self):
        metadata = session_metadata("C", "major", "bogus")
        assert metadata["progression_id"] == "I-IV-V7"
        assert metadata["progression_fallback"] is True

    def test_invalid_mode(self):
        with pytest.raises(ValueError, match="Unknown mode"):
            session_metadata("C", "phrygian")
