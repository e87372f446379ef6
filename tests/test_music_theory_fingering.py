"""
Tests for core/music_theory/fingering.py — fingering table and expansion.
"""

import pytest

from core.music_theory.fingering import (
    FALLBACK_KEY,
    _load_fingerings,
    _lookup,
    base_fingering,
    scale_fingering,
)
from core.music_theory.pitch import KEYS, MODES
from core.music_theory.sequences import DIRECTIONS, scale_sequence
from core.music_theory.types import Fingering


class TestFingeringTable:
    def test_every_key_and_mode_present(self):
        table = _load_fingerings()
        for key in KEYS:
            for mode in MODES:
                assert (key, mode) in table

    def test_entries_are_one_octave(self):
        for fingering in _load_fingerings().values():
            assert len(fingering.right_hand) == 8

    def test_missing_entry_falls_back_to_c_major(self):
        c_major = Fingering(right_hand=(1, 2, 3, 1, 2, 3, 4, 5), left_hand=(5, 4, 3, 2, 1, 3, 2, 1))
        table = {FALLBACK_KEY: c_major}
        assert _lookup(table, "Ab", "minor") is c_major


class TestScaleFingering:
    def test_c_major_one_octave(self):
        fingering = scale_fingering("C", "major", 1, "up")
        assert fingering.right_hand == (1, 2, 3, 1, 2, 3, 4, 5)
        assert fingering.left_hand == (5, 4, 3, 2, 1, 3, 2, 1)

    def test_f_major_right_hand(self):
        assert base_fingering("F", "major").right_hand == (1, 2, 3, 4, 1, 2, 3, 4)

    def test_up_down_mirrors_without_top(self):
        rh = scale_fingering("C", "major", 1, "up-down").right_hand
        assert rh == (1, 2, 3, 1, 2, 3, 4, 5, 4, 3, 2, 1, 3, 2, 1)

    def test_two_octaves_drops_seam_finger(self):
        rh = scale_fingering("C", "major", 2, "up").right_hand
        assert rh == (1, 2, 3, 1, 2, 3, 4, 1, 2, 3, 1, 2, 3, 4, 5)

    @pytest.mark.parametrize("key", KEYS)
    @pytest.mark.parametrize("mode", MODES)
    @pytest.mark.parametrize("octaves", [1, 2])
    @pytest.mark.parametrize("direction", DIRECTIONS)
    def test_aligned_with_scale_sequence(self, key, mode, octaves, direction):
        fingering = scale_fingering(key, mode, octaves, direction)
        expected = len(scale_sequence(key, mode, octaves, direction))
        assert len(fingering.right_hand) == expected
        assert len(fingering.left_hand) == expected

    def test_invalid_octaves(self):
        with pytest.raises(ValueError, match="octaves"):
            scale_fingering("C", "major", 4)

    def test_invalid_direction(self):
        with pytest.raises(ValueError, match="Unknown direction"):
            scale_fingering("C", "major", 1, "sideways")

    def test_invalid_key(self):
        with pytest.raises(ValueError, match="Unknown key"):
            base_fingering("Fb", "major")
