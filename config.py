from typing import NamedTuple
from dataclasses import dataclass

class TheoryConfig(NamedTuple):
    """Music theory defaults used by the scale selector."""
    DEFAULT_OCTAVE: int = 3
    DEFAULT_MODE: str = "Major"
    PREFER_FLATS: bool = False

@dataclass
class PlaybackConfig:
    """Playback planning constants handed to the tone engine."""
    DEFAULT_TEMPO: int = 120 # BPM
    DEFAULT_PATTERN: str = "ascending"
    BASE_VELOCITY: float = 0.9
    CHORD_NOTE_DELAY: float = 0.1 # Seconds between arpeggiated chord notes
    REFERENCE_PITCH: float = 440.0 # A4 in Hz
    # Velocity multipliers per octave, low octaves boosted
    OCTAVE_VELOCITY_SCALE = {
        2: 1.4,
        3: 1.2,
        4: 0.8,
        5: 0.6,
    }


@dataclass
class LogConfig:
    """Logging configuration."""
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    enable_console: bool = True
    console_stream: str = "stdout" # "stdout" or "stderr"
    enable_file: bool = False
    file_path: str = "log.log"
