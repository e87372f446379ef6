"""
core/practice/catalog.py — Fixed practice catalogs mapped onto the theory engine.

The application stores per-session completion flags against these catalog ids.
Each entry carries the engine parameters needed to produce its exercise, so the
catalog and the engine cannot drift apart.

Exports:
    FEEL_LABELS             feel rating → display label
    SCALE_VARIATIONS        scale / arpeggio practice variations
    CHORD_VOICING_STYLES    progression voicing styles

    get_scale_variation(variation_id) → ScaleVariation
    get_voicing_style(style_id) → ChordVoicingStyle
    render_scale_variation(key, mode, variation_id) → RenderedVariation
    render_voicing_style(key, mode, style_id, progression_id) → tuple[Voicing, ...]
"""

from __future__ import annotations

from dataclasses import dataclass

from core.config import DEFAULT_ENGINE_CONFIG, EngineConfig
from core.music_theory.fingering import scale_fingering
from core.music_theory.harmony import chord_at_degree, resolve_progression
from core.music_theory.octaves import pitched_sequence
from core.music_theory.sequences import (
    ARPEGGIO_TYPES,
    DIRECTIONS,
    OCTAVE_COUNTS,
    arpeggio_sequence,
    scale_sequence,
)
from core.music_theory.types import Fingering, PitchedNote, Voicing
from core.music_theory.voicing import voice_lead, voice_leading_distance

FEEL_LABELS: dict[int, str] = {
    1: "Struggle",
    2: "OK",
    3: "Solid",
}

VARIATION_KINDS: frozenset[str] = frozenset({"scale", "arpeggio"})
VOICING_STRATEGIES: frozenset[str] = frozenset({"root-position", "voice-led"})

# ---------------------------------------------------------------------------
# Catalog entries
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ScaleVariation:
    """A named scale or arpeggio exercise.

    Attributes:
        id:            Stable catalog id stored with session records
        name:          Display name
        description:   One-line practice instruction
        difficulty:    1 (easy) to 3 (hard)
        sort_order:    Display order
        kind:          "scale" or "arpeggio" (arpeggios use the tonic chord)
        octaves:       1 or 2
        direction:     "up" or "up-down"
        arpeggio_type: Arpeggio pattern; ignored for scales
    """

    id: int
    name: str
    description: str
    difficulty: int
    sort_order: int
    kind: str = "scale"
    octaves: int = 1
    direction: str = "up"
    arpeggio_type: str = "root"

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("ScaleVariation.name must not be empty")
        if not (1 <= self.difficulty <= 3):
            raise ValueError(f"ScaleVariation.difficulty must be in [1, 3], got {self.difficulty}")
        if self.kind not in VARIATION_KINDS:
            raise ValueError(f"ScaleVariation.kind must be one of {sorted(VARIATION_KINDS)}")
        if self.octaves not in OCTAVE_COUNTS:
            raise ValueError(f"ScaleVariation.octaves must be 1 or 2, got {self.octaves}")
        if self.direction not in DIRECTIONS:
            raise ValueError(f"ScaleVariation.direction must be one of {list(DIRECTIONS)}")
        if self.arpeggio_type not in ARPEGGIO_TYPES:
            raise ValueError(
                f"ScaleVariation.arpeggio_type must be one of {list(ARPEGGIO_TYPES)}"
            )


@dataclass(frozen=True)
class ChordVoicingStyle:
    """A named way of playing a progression."""

    id: int
    name: str
    description: str
    sort_order: int
    strategy: str = "voice-led"

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("ChordVoicingStyle.name must not be empty")
        if self.strategy not in VOICING_STRATEGIES:
            raise ValueError(
                f"ChordVoicingStyle.strategy must be one of {sorted(VOICING_STRATEGIES)}"
            )


SCALE_VARIATIONS: tuple[ScaleVariation, ...] = (
    ScaleVariation(
        id=1,
        name="One octave",
        description="Scale up and down one octave, hands separately",
        difficulty=1,
        sort_order=1,
        octaves=1,
        direction="up-down",
    ),
    ScaleVariation(
        id=2,
        name="Two octaves",
        description="Scale up and down two octaves without stopping at the top",
        difficulty=2,
        sort_order=2,
        octaves=2,
        direction="up-down",
    ),
    ScaleVariation(
        id=3,
        name="Arpeggio",
        description="Tonic arpeggio in root position over two octaves",
        difficulty=2,
        sort_order=3,
        kind="arpeggio",
        octaves=2,
        direction="up-down",
        arpeggio_type="root",
    ),
    ScaleVariation(
        id=4,
        name="Arpeggio inversions",
        description="Tonic arpeggio from the first inversion",
        difficulty=3,
        sort_order=4,
        kind="arpeggio",
        octaves=1,
        direction="up-down",
        arpeggio_type="first-inv",
    ),
    ScaleVariation(
        id=5,
        name="Broken chord",
        description="Tonic broken chord, turning back on the fifth",
        difficulty=1,
        sort_order=5,
        kind="arpeggio",
        octaves=1,
        direction="up",
        arpeggio_type="broken",
    ),
)

CHORD_VOICING_STYLES: tuple[ChordVoicingStyle, ...] = (
    ChordVoicingStyle(
        id=1,
        name="Root position",
        description="Every chord in root position from octave 4",
        sort_order=1,
        strategy="root-position",
    ),
    ChordVoicingStyle(
        id=2,
        name="Smooth voice leading",
        description="Inversions chosen to keep common tones and move by step",
        sort_order=2,
        strategy="voice-led",
    ),
)


# ---------------------------------------------------------------------------
# Lookup
# ---------------------------------------------------------------------------


def get_scale_variation(variation_id: int) -> ScaleVariation:
    """Return a scale variation by id.

    Raises:
        ValueError: If variation_id is not in SCALE_VARIATIONS
    """
    for variation in SCALE_VARIATIONS:
        if variation.id == variation_id:
            return variation
    valid = [v.id for v in SCALE_VARIATIONS]
    raise ValueError(f"Unknown scale variation {variation_id!r}. Valid: {valid}")


def get_voicing_style(style_id: int) -> ChordVoicingStyle:
    """Return a chord voicing style by id.

    Raises:
        ValueError: If style_id is not in CHORD_VOICING_STYLES
    """
    for style in CHORD_VOICING_STYLES:
        if style.id == style_id:
            return style
    valid = [s.id for s in CHORD_VOICING_STYLES]
    raise ValueError(f"Unknown voicing style {style_id!r}. Valid: {valid}")


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RenderedVariation:
    """The notes (and, for scales, fingering) of one variation in one key."""

    variation: ScaleVariation
    key: str
    mode: str
    notes: tuple[PitchedNote, ...]
    fingering: Fingering | None = None


def render_scale_variation(
    key: str,
    mode: str,
    variation_id: int,
    config: EngineConfig = DEFAULT_ENGINE_CONFIG,
) -> RenderedVariation:
    """Produce the pitched notes of a catalog variation for a key.

    Scale variations include the matching fingering; arpeggio variations use
    the tonic chord of the key and carry no fingering.
    """
    variation = get_scale_variation(variation_id)

    if variation.kind == "scale":
        names = scale_sequence(key, mode, variation.octaves, variation.direction)
        fingering = scale_fingering(key, mode, variation.octaves, variation.direction)
    else:
        tonic = chord_at_degree(key, mode, 0)
        names = arpeggio_sequence(
            tonic.notes, variation.octaves, variation.direction, variation.arpeggio_type
        )
        fingering = None

    return RenderedVariation(
        variation=variation,
        key=key,
        mode=mode,
        notes=pitched_sequence(names, config.start_octave),
        fingering=fingering,
    )


def render_voicing_style(
    key: str,
    mode: str,
    style_id: int,
    progression_id: str,
    config: EngineConfig = DEFAULT_ENGINE_CONFIG,
) -> tuple[Voicing, ...]:
    """Voice a progression the way a catalog voicing style prescribes."""
    style = get_voicing_style(style_id)
    chords = resolve_progression(key, mode, progression_id)

    if style.strategy == "voice-led":
        return voice_lead(chords, config)

    voicings: list[Voicing] = []
    previous: tuple[int, ...] | None = None
    for chord in chords:
        notes = pitched_sequence(chord.notes, config.start_octave)
        current = tuple(sorted((n.pitch for n in notes), reverse=True))
        movement = voice_leading_distance(previous, current) if previous is not None else 0
        voicings.append(
            Voicing(
                chord=chord,
                notes=notes,
                rotation=0,
                base_octave=config.start_octave,
                movement=movement,
            )
        )
        previous = current
    return tuple(voicings)
