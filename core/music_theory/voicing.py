"""
core/music_theory/voicing.py — Voice leading optimizer.

voice_lead() picks, for every chord of a progression, the inversion and
octave placement that moves the voices least from the previous chord.

Algorithm (greedy, exhaustive per chord):
    For each chord:
        1. Enumerate every rotation (root position through n-1 inversions)
        2. For each rotation, try every base octave in config.base_octaves
        3. Assign octaves with the wraparound rule and compute absolute pitches
        4. Drop candidates outside [config.pitch_low, config.pitch_high]
        5. Score: first chord → rotation * 1000 + |octave - 4| * 500
                  later chords → voice_leading_distance(previous, candidate)
        6. Keep the lowest score; ties go to the earlier candidate
           (rotation ascending, then base octave ascending)

The search space is rotations × base octaves (at most 4 × 2 = 8 per chord), so
it is enumerated in full with no pruning beyond the range filter. If the range
filter rejects every candidate, the best candidate overall is used instead.

Scoring pairs voices from the top: both chords are sorted highest first and
compared soprano to soprano, alto to alto, and so on. Extra low voices of the
larger chord (a dominant seventh against a triad) are not scored.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from core.config import DEFAULT_ENGINE_CONFIG, EngineConfig
from core.music_theory.octaves import assign_octaves
from core.music_theory.sequences import rotate_notes
from core.music_theory.types import ChordDegree, PitchedNote, Voicing

# ---------------------------------------------------------------------------
# Candidates
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class _Candidate:
    """One (rotation, base octave) placement of a chord."""

    rotation: int
    base_octave: int
    notes: tuple[PitchedNote, ...]

    @property
    def pitches_desc(self) -> tuple[int, ...]:
        return tuple(sorted((n.pitch for n in self.notes), reverse=True))

    def in_range(self, low: int, high: int) -> bool:
        pitches = [n.pitch for n in self.notes]
        return min(pitches) >= low and max(pitches) <= high


def _generate_candidates(chord: ChordDegree, config: EngineConfig) -> list[_Candidate]:
    """Enumerate every rotation × base octave placement in tie-break order."""
    candidates: list[_Candidate] = []
    for rotation in range(len(chord.notes)):
        rotated = rotate_notes(chord.notes, rotation)
        for base_octave in config.base_octaves:
            octaves = assign_octaves(rotated, base_octave)
            notes = tuple(
                PitchedNote(name=name, octave=octave)
                for name, octave in zip(rotated, octaves, strict=True)
            )
            candidates.append(_Candidate(rotation=rotation, base_octave=base_octave, notes=notes))
    return candidates


# ---------------------------------------------------------------------------
# Scoring
# ---------------------------------------------------------------------------


def voice_leading_distance(previous: Sequence[int], current: Sequence[int]) -> int:
    """Total semitone displacement between two chords, paired from the top.

    Args:
        previous: Pitches of the previous chord, sorted highest first
        current:  Pitches of the candidate chord, sorted highest first

    Returns:
        Sum of |current[j] - previous[j]| over the shorter of the two lists

    Examples:
        >>> voice_leading_distance((55, 52, 48), (57, 53, 48))
        3
    """
    return sum(abs(c - p) for c, p in zip(current, previous, strict=False))


def _anchor_score(candidate: _Candidate, config: EngineConfig) -> int:
    """First-chord score: prefer root position, then the anchor octave."""
    return (
        candidate.rotation * config.inversion_weight
        + abs(candidate.base_octave - config.anchor_octave) * config.octave_weight
    )


def _score(
    candidate: _Candidate,
    previous: tuple[int, ...] | None,
    config: EngineConfig,
) -> int:
    if previous is None:
        return _anchor_score(candidate, config)
    return voice_leading_distance(previous, candidate.pitches_desc)


def _select(
    candidates: list[_Candidate],
    previous: tuple[int, ...] | None,
    config: EngineConfig,
) -> tuple[_Candidate, int]:
    """Return the best in-range candidate and its score.

    min() keeps the first of equal scores, which preserves enumeration order
    as the tie-break. Falls back to all candidates when none is in range.
    """
    in_range = [c for c in candidates if c.in_range(config.pitch_low, config.pitch_high)]
    pool = in_range or candidates
    scored = [(c, _score(c, previous, config)) for c in pool]
    return min(scored, key=lambda item: item[1])


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def voice_lead(
    chords: Sequence[ChordDegree],
    config: EngineConfig = DEFAULT_ENGINE_CONFIG,
) -> tuple[Voicing, ...]:
    """Choose an inversion and octave for every chord of a progression.

    Args:
        chords: ChordDegree sequence, e.g. from resolve_progression()
        config: Pitch window, base octaves and first-chord weights

    Returns:
        Tuple of Voicing objects, one per chord, in input order.
        Empty input returns an empty tuple.

    Examples:
        >>> voicings = voice_lead(resolve_progression("C", "major", "I-IV-V7"))
        >>> [v.notes[0].label for v in voicings]
        ['C4', 'C4', 'B3']
    """
    if not chords:
        return ()

    result: list[Voicing] = []
    previous: tuple[int, ...] | None = None

    for chord in chords:
        best, score = _select(_generate_candidates(chord, config), previous, config)
        current = best.pitches_desc
        movement = voice_leading_distance(previous, current) if previous is not None else 0

        result.append(
            Voicing(
                chord=chord,
                notes=best.notes,
                rotation=best.rotation,
                base_octave=best.base_octave,
                score=score,
                movement=movement,
            )
        )
        previous = current

    return tuple(result)


def total_movement(voicings: Sequence[Voicing]) -> int:
    """Return the summed voice movement across a voiced progression."""
    return sum(v.movement for v in voicings)
