from typing import NamedTuple, Tuple

from pitches import Pitch
from logger import StructuredLogger

logger = StructuredLogger.get_logger(__name__)


class Chord(NamedTuple):
    """A named piano voicing with a short teaching description."""
    name: str
    notes: Tuple[Pitch, ...]
    description: str


class UnknownChord(KeyError):
    """Raised when a chord name is not in the catalog."""


def _chord(name, notes, description):
    return Chord(name, tuple(Pitch.parse(n) for n in notes), description)

# Common piano chords, in menu order
CHORDS = (
    _chord("C Major", ["C3", "E3", "G3"], "The C major chord consists of C, E, and G notes."),
    _chord("G Major", ["G3", "B3", "D4"], "The G major chord consists of G, B, and D notes."),
    _chord("F Major", ["F3", "A3", "C4"], "The F major chord consists of F, A, and C notes."),
    _chord("A Minor", ["A3", "C4", "E4"], "The A minor chord consists of A, C, and E notes."),
    _chord("D Minor", ["D3", "F3", "A3"], "The D minor chord consists of D, F, and A notes."),
    _chord("E Minor", ["E3", "G3", "B3"], "The E minor chord consists of E, G, and B notes."),
    _chord("C Major (Lower)", ["C2", "E2", "G2"], "The C major chord in a lower octave."),
    _chord("G Major (Lower)", ["G2", "B2", "D3"], "The G major chord in a lower octave."),
    _chord("D Major", ["D3", "F#3", "A3"], "The D major chord consists of D, F#, and A notes."),
)

_CHORDS_BY_NAME = {chord.name: chord for chord in CHORDS}


def get_available_chords():
    """Return list of available chord names."""
    return [chord.name for chord in CHORDS]

def get_chord(name: str) -> Chord:
    if name not in _CHORDS_BY_NAME:
        logger.error(f"Unknown chord: {name}")
        raise UnknownChord(name)
    return _CHORDS_BY_NAME[name]
