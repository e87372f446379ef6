"""
core/music_theory/ — Pure piano-practice theory engine.

Exports:
    Types:      ChordDegree, ProgressionDef, ProgressionStep, PitchedNote,
                Voicing, Fingering
    Pitch:      KEYS, MODES, uses_flats, semitone_index, validate_key, validate_mode
    Scales:     scale_notes, key_notes, key_signature_label
    Harmony:    chord_at_degree, diatonic_chords, resolve_progression,
                available_progressions, get_progression, is_known_progression
    Sequences:  scale_sequence, arpeggio_sequence, rotate_notes
    Octaves:    assign_octaves, absolute_pitch, pitched_sequence
    Fingering:  scale_fingering, base_fingering
    Voicing:    voice_lead, voice_leading_distance, total_movement
"""

from core.music_theory.fingering import base_fingering, scale_fingering
from core.music_theory.harmony import (
    available_progressions,
    chord_at_degree,
    diatonic_chords,
    get_progression,
    is_known_progression,
    resolve_progression,
)
from core.music_theory.octaves import absolute_pitch, assign_octaves, pitched_sequence
from core.music_theory.pitch import (
    KEYS,
    MODES,
    semitone_index,
    uses_flats,
    validate_key,
    validate_mode,
)
from core.music_theory.scales import key_notes, key_signature_label, scale_notes
from core.music_theory.sequences import (
    ARPEGGIO_TYPES,
    DIRECTIONS,
    arpeggio_sequence,
    rotate_notes,
    scale_sequence,
)
from core.music_theory.types import (
    ChordDegree,
    Fingering,
    PitchedNote,
    ProgressionDef,
    ProgressionStep,
    Voicing,
)
from core.music_theory.voicing import total_movement, voice_lead, voice_leading_distance

__all__ = [
    # Types
    "ChordDegree",
    "Fingering",
    "PitchedNote",
    "ProgressionDef",
    "ProgressionStep",
    "Voicing",
    # Pitch
    "KEYS",
    "MODES",
    "semitone_index",
    "uses_flats",
    "validate_key",
    "validate_mode",
    # Scales
    "scale_notes",
    "key_notes",
    "key_signature_label",
    # Harmony
    "chord_at_degree",
    "diatonic_chords",
    "resolve_progression",
    "available_progressions",
    "get_progression",
    "is_known_progression",
    # Sequences
    "ARPEGGIO_TYPES",
    "DIRECTIONS",
    "scale_sequence",
    "arpeggio_sequence",
    "rotate_notes",
    # Octaves
    "assign_octaves",
    "absolute_pitch",
    "pitched_sequence",
    # Fingering
    "scale_fingering",
    "base_fingering",
    # Voicing
    "voice_lead",
    "voice_leading_distance",
    "total_movement",
]
