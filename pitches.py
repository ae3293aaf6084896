import re
import numpy as np

from typing import Iterable, NamedTuple

from config import PlaybackConfig
from logger import StructuredLogger

logger = StructuredLogger.get_logger(__name__)

NOTE_NAMES = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]

# Flat spellings, display only
NOTE_ENHARMONICS = {
    "C#": "Db",
    "D#": "Eb",
    "F#": "Gb",
    "G#": "Ab",
    "A#": "Bb",
}

_PITCH_PATTERN = re.compile(r"(?P<name>.+?)(?P<octave>-?[0-9]+)")


class InvalidPitchClass(ValueError):
    """Raised when a note name is not one of the 12 pitch classes."""
    def __init__(self, name):
        self.name = name
        super().__init__(f"Invalid root note: {name!r}")


def list_pitch_classes():
    """Return the 12 pitch-class names in chromatic order."""
    return list(NOTE_NAMES)

def note_index(name: str) -> int:
    """Return the 0-11 index of a pitch-class name."""
    try:
        return NOTE_NAMES.index(name)
    except ValueError:
        logger.error(f"Invalid root note: {name}")
        raise InvalidPitchClass(name) from None

def note_name(index: int) -> str:
    """Return the pitch-class name for any integer, reduced mod 12."""
    return NOTE_NAMES[((index % 12) + 12) % 12]


class Pitch(NamedTuple):
    """A pitch class index (0-11) bound to an octave. Octaves change at C."""
    pitch_class: int
    octave: int

    @classmethod
    def from_name(cls, name: str, octave: int) -> "Pitch":
        return cls(note_index(name), octave)

    @classmethod
    def parse(cls, text: str) -> "Pitch":
        """
        Parse a rendered pitch such as "F#3" or "C-1".

        The octave is the trailing integer and the pitch class is whatever
        precedes it.

        Raises:
            InvalidPitchClass: if the text has no octave or an unknown prefix
        """
        match = _PITCH_PATTERN.fullmatch(text)
        if match is None:
            logger.error(f"Cannot parse pitch: {text}")
            raise InvalidPitchClass(text)
        return cls.from_name(match.group("name"), int(match.group("octave")))

    def normalized(self) -> "Pitch":
        """Same pitch with the class reduced to 0-11, carrying into the octave."""
        octave_shift, pitch_class = divmod(self.pitch_class, 12)
        return Pitch(pitch_class, self.octave + octave_shift)

    @property
    def name(self) -> str:
        return note_name(self.pitch_class)

    @property
    def midi_number(self) -> int:
        """MIDI note number, C4 = 60."""
        return 12 * (self.octave + 1) + self.pitch_class

    def __str__(self):
        pitch = self.normalized()
        return f"{pitch.name}{pitch.octave}"


def frequencies(pitches: Iterable[Pitch], reference: float = PlaybackConfig.REFERENCE_PITCH) -> np.ndarray:
    """
    Equal-tempered frequencies in Hz, with A4 tuned to `reference`.

    The CLI prints these next to each scheduled note; tone engines take
    them instead of note names.
    """
    midi = np.array([p.midi_number for p in pitches], dtype=np.float64)
    return reference * np.power(2.0, (midi - 69.0) / 12.0)
