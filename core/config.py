"""
Configuration dataclasses for the practice theory engine.

These immutable config objects keep the voice-leading search parameters out of
function signatures, so callers can define a standard configuration once and
reuse it across progressions.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class EngineConfig:
    """
    Configuration for voicing and octave placement.

    Attributes:
        pitch_low: Lowest absolute pitch (``octave*12 + semitone``) a voicing
            may contain. Defaults to 40 (E3).
        pitch_high: Highest absolute pitch a voicing may contain.
            Defaults to 79 (G6). Together with pitch_low this models a
            comfortable right-hand register.
        base_octaves: Candidate starting octaves tried for every inversion,
            in tie-break order.
        anchor_octave: Octave the first chord of a progression is pulled towards.
        inversion_weight: First-chord penalty per inversion step.
        octave_weight: First-chord penalty per octave away from anchor_octave.
        start_octave: Octave used for scale and arpeggio sequences.

    Example:
        >>> config = EngineConfig(pitch_low=36, pitch_high=84)
        >>> voicings = voice_lead(chords, config=config)
    """

    pitch_low: int = 40
    pitch_high: int = 79
    base_octaves: tuple[int, ...] = (3, 4)
    anchor_octave: int = 4
    inversion_weight: int = 1000
    octave_weight: int = 500
    start_octave: int = 4

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.pitch_low >= self.pitch_high:
            raise ValueError(
                f"pitch_low ({self.pitch_low}) must be less than pitch_high ({self.pitch_high})"
            )
        if not self.base_octaves:
            raise ValueError("base_octaves must not be empty")
        if self.inversion_weight < 0:
            raise ValueError(
                f"inversion_weight must be non-negative, got {self.inversion_weight}"
            )
        if self.octave_weight < 0:
            raise ValueError(f"octave_weight must be non-negative, got {self.octave_weight}")


DEFAULT_ENGINE_CONFIG = EngineConfig()
"""Default configuration: window [40, 79], base octaves 3 and 4, anchor octave 4."""

WIDE_RANGE_CONFIG = EngineConfig(pitch_low=24, pitch_high=96)
"""Wider window for two-hand voicings or demonstration material."""
