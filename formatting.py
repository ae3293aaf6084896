import re

from typing import Union

from pitches import NOTE_ENHARMONICS, Pitch

_OCTAVE_SUFFIX = re.compile(r"-?\d+$")


def display_name(pitch: Union[Pitch, str], prefer_flats: bool = False) -> str:
    """
    Render a pitch for display, e.g. "D#3", or "Eb3" when flats are preferred.

    Natural notes have no flat spelling and are unaffected by prefer_flats.
    Rendered strings are parsed first, so "D#3" and Pitch(3, 3) behave alike.
    """
    if isinstance(pitch, str):
        pitch = Pitch.parse(pitch)
    pitch = pitch.normalized()
    name = pitch.name
    if prefer_flats:
        name = NOTE_ENHARMONICS.get(name, name)
    return f"{name}{pitch.octave}"

def format_scale_label(root_note: str, mode_name: str) -> str:
    """Human-readable scale label such as "C Major". The mode is not validated."""
    return f"{_OCTAVE_SUFFIX.sub('', root_note)} {mode_name}"
