import argparse
import sys

from config import LogConfig, PlaybackConfig, TheoryConfig
from formatting import display_name, format_scale_label
from logger import LOG_LEVELS, StructuredLogger
from pitches import InvalidPitchClass, frequencies, list_pitch_classes
from playback import PlaybackPattern, playback_duration, schedule_scale
from scales import UnknownMode, generate_scale, get_available_scales

logger = StructuredLogger.get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    theory = TheoryConfig()
    playback = PlaybackConfig()
    parser = argparse.ArgumentParser(description="Print the notes of a scale.")
    parser.add_argument("root", nargs="?", help=f"Root note, one of {' '.join(list_pitch_classes())}")
    parser.add_argument("mode", nargs="*", help="Mode name, e.g. Major or Minor Pentatonic")
    parser.add_argument("--octave", type=int, default=theory.DEFAULT_OCTAVE)
    parser.add_argument("--flats", action="store_true", default=theory.PREFER_FLATS,
                        help="Spell black keys with flats")
    parser.add_argument("--pattern", choices=[p.value for p in PlaybackPattern],
                        help="Also print a playback schedule in this pattern")
    parser.add_argument("--tempo", type=float, default=playback.DEFAULT_TEMPO)
    parser.add_argument("--list-modes", action="store_true")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default="WARNING")
    return parser

def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    StructuredLogger.setup_logging(LogConfig(level=args.log_level, console_stream="stderr"))

    if args.list_modes:
        print("\n".join(get_available_scales()))
        return 0

    if args.root is None:
        print("error: a root note is required", file=sys.stderr)
        return 2
    mode = " ".join(args.mode) or TheoryConfig().DEFAULT_MODE

    try:
        scale = generate_scale(args.root, args.octave, mode)
    except (InvalidPitchClass, UnknownMode) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    print(format_scale_label(args.root, mode))
    print(" ".join(display_name(p, args.flats) for p in scale))

    if args.pattern:
        try:
            events = schedule_scale(scale, args.pattern, args.tempo)
        except ValueError as e:
            print(f"error: {e}", file=sys.stderr)
            return 2
        hz = frequencies(event.pitch for event in events)
        for event, freq in zip(events, hz):
            print(f"{event.time:6.3f}s  {display_name(event.pitch, args.flats):<4} {freq:8.2f}Hz "
                  f"dur={event.duration:.3f}s vel={event.velocity:.2f}")
        logger.info(f"Scale playback lasts {playback_duration(events):.3f}s")
    return 0


if __name__ == "__main__":
    sys.exit(main())
