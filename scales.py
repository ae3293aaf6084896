from typing import List, Tuple

from pitches import Pitch, note_index
from logger import StructuredLogger

logger = StructuredLogger.get_logger(__name__)

# Declaration order is the menu order
SCALES = {
    # Major scale and church modes
    "Major": (0, 2, 4, 5, 7, 9, 11),  # W-W-H-W-W-W-H
    "Minor": (0, 2, 3, 5, 7, 8, 10),  # W-H-W-W-H-W-W (natural minor)
    "Dorian": (0, 2, 3, 5, 7, 9, 10),
    "Phrygian": (0, 1, 3, 5, 7, 8, 10),
    "Lydian": (0, 2, 4, 6, 7, 9, 11),
    "Mixolydian": (0, 2, 4, 5, 7, 9, 10),
    "Locrian": (0, 1, 3, 5, 6, 8, 10),

    # Minor variants
    "Harmonic Minor": (0, 2, 3, 5, 7, 8, 11),
    "Melodic Minor": (0, 2, 3, 5, 7, 9, 11),  # ascending form

    # Pentatonic and blues
    "Major Pentatonic": (0, 2, 4, 7, 9),
    "Minor Pentatonic": (0, 3, 5, 7, 10),
    "Blues": (0, 3, 5, 6, 7, 10),
}


class UnknownMode(KeyError):
    """Raised when a mode name is not in the catalog."""
    def __init__(self, name):
        self.name = name
        super().__init__(name)

    def __str__(self):
        return f"Unknown mode: {self.name!r}"


def get_available_scales():
    """Return list of available scale names."""
    return list(SCALES.keys())

list_modes = get_available_scales

def get_scale_intervals(scale_name: str) -> Tuple[int, ...]:
    """Return the semitone offsets of a scale, raising UnknownMode if absent."""
    try:
        return SCALES[scale_name]
    except KeyError:
        logger.error(f"Unknown mode: {scale_name}")
        raise UnknownMode(scale_name) from None

def generate_scale(root_note: str, start_octave: int, scale_name: str) -> List[Pitch]:
    """
    Generate the pitches of a scale starting at the given root and octave.

    Args:
        root_note (str): Pitch-class name of the root, e.g. "F#"
        start_octave (int): Octave of the root; any integer is accepted
        scale_name (str): Key of SCALES

    Returns:
        list: One Pitch per interval, in interval order. Intervals that pass
        B land in the following octave.

    Raises:
        InvalidPitchClass: unknown root note
        UnknownMode: unknown scale name
    """
    root_index = note_index(root_note)
    intervals = get_scale_intervals(scale_name)

    scale_notes = []
    for interval in intervals:
        absolute = root_index + interval
        octave_shift, pitch_class = divmod(absolute, 12)
        scale_notes.append(Pitch(pitch_class, start_octave + octave_shift))

    logger.debug(f"{root_note}{start_octave} {scale_name}: {[str(p) for p in scale_notes]}")
    return scale_notes

def generate_scale_names(root_note: str, start_octave: int, scale_name: str) -> List[str]:
    """Same as generate_scale, rendered as plain strings like "C#4"."""
    return [str(pitch) for pitch in generate_scale(root_note, start_octave, scale_name)]
