from formatting import display_name, format_scale_label
from pitches import Pitch


class TestDisplayName:

    def test_prefer_flats(self):
        assert display_name(Pitch.from_name("D#", 3), prefer_flats=True) == "Eb3"

    def test_sharps_by_default(self):
        assert display_name(Pitch.from_name("D#", 3), prefer_flats=False) == "D#3"
        assert display_name(Pitch.from_name("A#", 2)) == "A#2"

    def test_naturals_unaffected(self):
        for name in ["C", "D", "E", "F", "G", "A", "B"]:
            assert display_name(Pitch.from_name(name, 3), prefer_flats=True) == f"{name}3"

    def test_accepts_rendered_string(self):
        assert display_name("G#4", prefer_flats=True) == "Ab4"
        assert display_name("C#-1", prefer_flats=True) == "Db-1"


class TestFormatScaleLabel:

    def test_label(self):
        assert format_scale_label("F#", "Dorian") == "F# Dorian"
        assert format_scale_label("C", "Major") == "C Major"

    def test_drops_octave(self):
        assert format_scale_label("A3", "Minor Pentatonic") == "A Minor Pentatonic"

    def test_mode_not_validated(self):
        assert format_scale_label("C", "Ionian-Bebop") == "C Ionian-Bebop"

    def test_out_of_range_class(self):
        assert display_name(Pitch(13, 3), prefer_flats=True) == "Db4"
        assert display_name(Pitch(-2, 3)) == "A#2"
