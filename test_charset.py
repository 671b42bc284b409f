import unittest
from unittest.mock import patch

from charset import CANVAS, CharacterSet, average_brightness
from fonts import discover_monospace


def fake_brightness(table):
    return patch('charset.average_brightness', side_effect=lambda c, font: table[c])


class ZeroSizeFont:
    def getbbox(self, char):
        return (0, 0, 0, 0)


class TestCharacterSet(unittest.TestCase):
    def test_sorted_and_unique(self):
        table = {'@': 0.6, '.': 0.05, ' ': 0.0, '+': 0.2}
        with fake_brightness(table):
            charset = CharacterSet('@.+ @..+', None)

        entries = list(charset.chars())
        self.assertEqual([c for c, _ in entries], [' ', '.', '+', '@'])
        self.assertEqual(len(charset), 4)
        brightness = [b for _, b in entries]
        self.assertEqual(brightness, sorted(brightness))

    def test_constructor_deduplicates(self):
        with fake_brightness({'a': 0.3, 'b': 0.1}) as measured:
            charset = CharacterSet(['a', 'b', 'a', 'a'], None)

        self.assertEqual(len(charset), 2)
        self.assertEqual(measured.call_count, 2)

    def test_single_entry_always_wins(self):
        with fake_brightness({' ': 0.0}):
            charset = CharacterSet(' ', None)

        for target in (-1.0, 0.0, 0.3, 1.0, 42.0):
            self.assertEqual(charset.nearest_brightness(target), ' ')

    def test_extremes(self):
        with fake_brightness({' ': 0.0, '░': 0.1, '▒': 0.25, '█': 0.5}):
            charset = CharacterSet(' ░▒█', None)

        self.assertEqual(charset.lowest_brightness(), (' ', 0.0))
        self.assertEqual(charset.highest_brightness(), ('█', 0.5))
        self.assertEqual(charset.nearest_brightness(charset.lowest_brightness()[1]), ' ')
        self.assertEqual(charset.nearest_brightness(charset.highest_brightness()[1]), '█')

    def test_lookup_takes_insertion_point(self):
        with fake_brightness({'a': 0.1, 'b': 0.5, 'c': 0.9}):
            charset = CharacterSet('abc', None)

        self.assertEqual(charset.nearest_brightness(0.0), 'a')
        self.assertEqual(charset.nearest_brightness(0.5), 'b')
        # 0.15 is closer to 'a' but the entry above the target is used
        self.assertEqual(charset.nearest_brightness(0.15), 'b')
        self.assertEqual(charset.nearest_brightness(2.0), 'c')

    def test_empty(self):
        charset = CharacterSet('', None)

        self.assertEqual(len(charset), 0)
        self.assertIsNone(charset.lowest_brightness())
        self.assertIsNone(charset.highest_brightness())
        self.assertIsNone(charset.nearest_brightness(0.5))


class TestAverageBrightness(unittest.TestCase):
    def test_zero_sized_glyph_is_dark(self):
        self.assertEqual(average_brightness('\x00', ZeroSizeFont()), 0.0)

    def test_real_font(self):
        font = discover_monospace()

        self.assertEqual(average_brightness(' ', font), 0.0)
        hash_brightness = average_brightness('#', font)
        dot_brightness = average_brightness('.', font)
        self.assertGreater(hash_brightness, dot_brightness)
        self.assertGreater(dot_brightness, 0.0)
        self.assertLess(hash_brightness, 1.0)

    def test_canvas_fits_glyphs(self):
        font = discover_monospace()
        left, top, right, bottom = font.getbbox('#')

        self.assertLessEqual(right - left, CANVAS)
        self.assertLessEqual(bottom - top, CANVAS)


if __name__ == '__main__':
    unittest.main()
