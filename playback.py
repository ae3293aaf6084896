"""
Playback planning for scales and chords.

Nothing here produces sound. The functions turn pitches into timed note
events that an external tone engine schedules against its transport clock.
"""
from enum import Enum
from typing import Iterable, List, NamedTuple, Optional

from pitches import Pitch
from config import PlaybackConfig
from logger import StructuredLogger

logger = StructuredLogger.get_logger(__name__)


class PlaybackPattern(str, Enum):
    ASCENDING = "ascending"
    DESCENDING = "descending"
    BOTH = "both"  # up then down, top note played once


class NoteEvent(NamedTuple):
    """A single note for the tone engine. Times are in seconds from start."""
    pitch: Pitch
    time: float
    duration: float
    velocity: float


def arrange(pitches: Iterable[Pitch], pattern=PlaybackPattern.ASCENDING) -> List[Pitch]:
    """Order scale pitches for playback according to the pattern."""
    notes = list(pitches)
    pattern = PlaybackPattern(pattern)
    if pattern is PlaybackPattern.DESCENDING:
        return notes[::-1]
    if pattern is PlaybackPattern.BOTH:
        return notes + notes[-2::-1]
    return notes

def note_velocity(pitch: Pitch, config: Optional[PlaybackConfig] = None) -> float:
    """Velocity compensated by octave: low notes louder, high notes softer."""
    config = config or PlaybackConfig()
    return config.BASE_VELOCITY * config.OCTAVE_VELOCITY_SCALE.get(pitch.octave, 1.0)

def _beat_seconds(tempo: float) -> float:
    if tempo <= 0:
        raise ValueError(f"Tempo must be positive, got {tempo}")
    return 60.0 / tempo

def schedule_scale(pitches: Iterable[Pitch], pattern=PlaybackPattern.ASCENDING,
                   tempo: Optional[float] = None, config: Optional[PlaybackConfig] = None) -> List[NoteEvent]:
    """
    Schedule a scale as consecutive eighth notes.

    Args:
        pitches: Scale pitches, usually from scales.generate_scale
        pattern: PlaybackPattern or its string value
        tempo: Beats per minute, defaults to the configured tempo

    Returns:
        list: NoteEvent per arranged note, one eighth note apart
    """
    config = config or PlaybackConfig()
    eighth = _beat_seconds(config.DEFAULT_TEMPO if tempo is None else tempo) / 2
    events = [
        NoteEvent(pitch, index * eighth, eighth, note_velocity(pitch, config))
        for index, pitch in enumerate(arrange(pitches, pattern))
    ]
    logger.debug(f"Scheduled {len(events)} scale notes at {60 / (2 * eighth):g} BPM")
    return events

def schedule_chord(pitches: Iterable[Pitch], tempo: Optional[float] = None,
                   config: Optional[PlaybackConfig] = None) -> List[NoteEvent]:
    """Schedule a lightly arpeggiated chord, every note held for a half note."""
    config = config or PlaybackConfig()
    half = _beat_seconds(config.DEFAULT_TEMPO if tempo is None else tempo) * 2
    return [
        NoteEvent(pitch, index * config.CHORD_NOTE_DELAY, half, note_velocity(pitch, config))
        for index, pitch in enumerate(pitches)
    ]

def playback_duration(events: Iterable[NoteEvent]) -> float:
    """Time at which the last event stops sounding, 0.0 for no events."""
    return max((event.time + event.duration for event in events), default=0.0)
