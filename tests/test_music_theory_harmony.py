"""
Tests for core/music_theory/harmony.py — degree chords and progressions.

Validates:
    - chord_at_degree: labels, roots, qualities, spelling, forced dominants
    - diatonic_chords: table qualities per mode
    - progression catalog: YAML loading, lookup, default fallback
    - resolve_progression: forced qualities applied per step
"""

import pytest

from core.music_theory.harmony import (
    available_progressions,
    chord_at_degree,
    diatonic_chords,
    get_progression,
    is_known_progression,
    resolve_progression,
)
from core.music_theory.pitch import KEYS, MODES, semitone_index

# ---------------------------------------------------------------------------
# chord_at_degree
# ---------------------------------------------------------------------------


class TestChordAtDegree:
    def test_c_major_tonic(self):
        chord = chord_at_degree("C", "major", 0)
        assert chord.degree == "I"
        assert chord.root == "C"
        assert chord.quality == "major"
        assert chord.notes == ("C", "E", "G")
        assert chord.index == 0

    def test_supertonic_is_minor(self):
        chord = chord_at_degree("C", "major", 1)
        assert chord.degree == "ii"
        assert chord.notes == ("D", "F", "A")
        assert chord.name == "Dm"

    def test_leading_tone_is_diminished(self):
        chord = chord_at_degree("C", "major", 6)
        assert chord.degree == "vii°"
        assert chord.notes == ("B", "D", "F")
        assert chord.name == "Bdim"

    def test_forced_dominant_seventh(self):
        chord = chord_at_degree("C", "major", 4, "dom7")
        assert chord.degree == "V7"
        assert chord.root == "G"
        assert chord.notes == ("G", "B", "D", "F")
        assert chord.name == "G7"

    def test_forced_dominant_on_non_dominant_degree_reads_v7(self):
        chord = chord_at_degree("C", "major", 1, "dom7")
        assert chord.degree == "V7"
        assert chord.notes == ("D", "F#", "A", "C")

    def test_flat_key_dominant_spelled_with_flats(self):
        chord = chord_at_degree("Bb", "major", 4, "dom7")
        assert chord.notes == ("F", "A", "C", "Eb")

    def test_minor_tonic(self):
        chord = chord_at_degree("A", "minor", 0)
        assert chord.degree == "i"
        assert chord.notes == ("A", "C", "E")

    def test_minor_dominant_is_major(self):
        chord = chord_at_degree("A", "minor", 4)
        assert chord.degree == "V"
        assert chord.quality == "major"
        assert chord.notes == ("E", "G#", "B")

    def test_minor_supertonic_is_diminished(self):
        chord = chord_at_degree("A", "minor", 1)
        assert chord.degree == "ii°"
        assert chord.notes == ("B", "D", "F")

    def test_degree_out_of_range(self):
        with pytest.raises(ValueError, match="degree_index"):
            chord_at_degree("C", "major", 7)

    def test_negative_degree(self):
        with pytest.raises(ValueError):
            chord_at_degree("C", "major", -1)

    def test_unknown_quality(self):
        with pytest.raises(ValueError, match="Unknown chord quality"):
            chord_at_degree("C", "major", 0, "sus4")

    def test_unknown_key(self):
        with pytest.raises(ValueError, match="Unknown key"):
            chord_at_degree("H", "major", 0)


class TestDegreeChordProperties:
    @pytest.mark.parametrize("key", KEYS)
    @pytest.mark.parametrize("mode", MODES)
    def test_tonic_root_is_key(self, key, mode):
        assert chord_at_degree(key, mode, 0).root == key

    @pytest.mark.parametrize("key", KEYS)
    def test_minor_dominant_is_major_triad(self, key):
        chord = chord_at_degree(key, "minor", 4)
        root, third, fifth = (semitone_index(n) for n in chord.notes)
        assert chord.quality == "major"
        assert (third - root) % 12 == 4
        assert (fifth - third) % 12 == 3


class TestDiatonicChords:
    def test_seven_chords(self):
        chords = diatonic_chords("C", "major")
        assert [c.root for c in chords] == ["C", "D", "E", "F", "G", "A", "B"]

    def test_major_qualities(self):
        qualities = [c.quality for c in diatonic_chords("D", "major")]
        assert qualities == ["major", "minor", "minor", "major", "major", "minor", "dim"]

    def test_minor_qualities(self):
        qualities = [c.quality for c in diatonic_chords("E", "minor")]
        assert qualities == ["minor", "dim", "major", "minor", "major", "major", "major"]

    def test_indices_match_positions(self):
        assert [c.index for c in diatonic_chords("Ab", "major")] == list(range(7))


# ---------------------------------------------------------------------------
# Progression catalog
# ---------------------------------------------------------------------------


class TestProgressionCatalog:
    def test_catalog_ids_in_order(self):
        ids = [p.id for p in available_progressions()]
        assert ids == ["I-IV-V7", "I-V-vi-IV", "ii-V-I", "I-vi-IV-V"]

    def test_first_progression_is_default(self):
        assert get_progression("no-such-progression").id == available_progressions()[0].id

    def test_known_ids(self):
        assert is_known_progression("ii-V-I") is True
        assert is_known_progression("I-II-III") is False

    def test_catalog_is_cached(self):
        assert available_progressions() is available_progressions()

    def test_forced_quality_loaded(self):
        steps = get_progression("I-IV-V7").steps
        assert [s.degree for s in steps] == [0, 3, 4]
        assert [s.quality for s in steps] == [None, None, "dom7"]


class TestResolveProgression:
    def test_g_major_i_iv_v7(self):
        chords = resolve_progression("G", "major", "I-IV-V7")
        assert [c.root for c in chords] == ["G", "C", "D"]
        assert chords[2].degree == "V7"
        assert chords[2].notes == ("D", "F#", "A", "C")

    def test_ii_v_i(self):
        chords = resolve_progression("C", "major", "ii-V-I")
        assert [c.name for c in chords] == ["Dm", "G7", "C"]

    def test_pop_progression_in_minor(self):
        chords = resolve_progression("A", "minor", "I-V-vi-IV")
        assert [c.name for c in chords] == ["Am", "E", "F", "Dm"]

    def test_unknown_id_falls_back_to_default(self):
        fallback = resolve_progression("C", "major", "does-not-exist")
        default = resolve_progression("C", "major", "I-IV-V7")
        assert fallback == default
