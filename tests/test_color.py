"""Tests for the Color value type and WCAG helpers."""

import dataclasses
import math
import unittest

from contrastpack.color import BLACK, WHITE, Color, InvalidColor, contrast_ratio, relative_luminance


class TestColorConstruction(unittest.TestCase):
    def test_from_rgb_extremes(self) -> None:
        self.assertEqual(Color.from_rgb(255, 255, 255).lightness, 100.0)
        self.assertEqual(Color.from_rgb(0, 0, 0).lightness, 0.0)
        self.assertEqual(Color.from_rgb(255, 255, 255), WHITE)

    def test_from_rgb_pure_red_is_midpoint(self) -> None:
        red = Color.from_rgb(255, 0, 0)
        self.assertAlmostEqual(red.lightness, 50.0)
        self.assertAlmostEqual(red.saturation, 100.0)
        self.assertAlmostEqual(red.hue, 0.0)

    def test_rejects_out_of_range_channels(self) -> None:
        with self.assertRaises(InvalidColor):
            Color(hue=0, saturation=0, lightness=101)
        with self.assertRaises(InvalidColor):
            Color(hue=0, saturation=-1, lightness=50)
        with self.assertRaises(InvalidColor):
            Color(hue=0, saturation=0, lightness=50, alpha=1.5)
        with self.assertRaises(InvalidColor):
            Color.from_rgb(256, 0, 0)

    def test_rejects_non_finite(self) -> None:
        with self.assertRaises(InvalidColor):
            Color(hue=0, saturation=0, lightness=math.nan)
        with self.assertRaises(InvalidColor):
            Color(hue=math.inf, saturation=0, lightness=50)

    def test_invalid_color_is_value_error(self) -> None:
        self.assertTrue(issubclass(InvalidColor, ValueError))

    def test_full_turn_hue_normalizes(self) -> None:
        self.assertEqual(Color(hue=360, saturation=50, lightness=50).hue, 0.0)

    def test_is_immutable(self) -> None:
        with self.assertRaises(dataclasses.FrozenInstanceError):
            WHITE.lightness = 10  # type: ignore[misc]


class TestColorAdjust(unittest.TestCase):
    def test_adjust_returns_new_color(self) -> None:
        base = Color(hue=200, saturation=40, lightness=50)
        darker = base.adjust(lightness=-12)
        self.assertEqual(darker.lightness, 38.0)
        self.assertEqual(base.lightness, 50.0)
        self.assertEqual(darker.hue, 200.0)
        self.assertEqual(darker.saturation, 40.0)

    def test_adjust_clamps_lightness(self) -> None:
        self.assertEqual(Color(hue=0, saturation=0, lightness=50).adjust(lightness=60).lightness, 100.0)
        self.assertEqual(Color(hue=0, saturation=0, lightness=20).adjust(lightness=-60).lightness, 0.0)

    def test_adjust_clamps_saturation_and_alpha(self) -> None:
        c = Color(hue=0, saturation=90, lightness=50, alpha=0.5).adjust(saturation=30, alpha=-2)
        self.assertEqual(c.saturation, 100.0)
        self.assertEqual(c.alpha, 0.0)

    def test_adjust_wraps_hue(self) -> None:
        c = Color(hue=350, saturation=50, lightness=50).adjust(hue=20)
        self.assertAlmostEqual(c.hue, 10.0)

    def test_adjust_rejects_non_finite_delta(self) -> None:
        with self.assertRaises(InvalidColor):
            WHITE.adjust(lightness=math.nan)


class TestColorFormatting(unittest.TestCase):
    def test_hex(self) -> None:
        self.assertEqual(WHITE.to_hex(), "#ffffff")
        self.assertEqual(BLACK.to_hex(), "#000000")
        self.assertEqual(Color.from_rgb(11, 94, 215).to_hex(), "#0b5ed7")

    def test_css_uses_rgba_for_translucent(self) -> None:
        c = Color(hue=0, saturation=0, lightness=0, alpha=0.5)
        self.assertEqual(c.to_css(), "rgba(0, 0, 0, 0.5)")
        self.assertEqual(str(WHITE), "#ffffff")

    def test_gray_lightness_to_rgb(self) -> None:
        # 88% of 255 = 224.4
        self.assertEqual(Color(hue=0, saturation=0, lightness=88).to_hex(), "#e0e0e0")


class TestWcag(unittest.TestCase):
    def test_black_white_ratio(self) -> None:
        self.assertAlmostEqual(contrast_ratio(BLACK, WHITE), 21.0, places=2)
        self.assertAlmostEqual(contrast_ratio(WHITE, BLACK), 21.0, places=2)

    def test_same_color_ratio_is_one(self) -> None:
        gray = Color(hue=0, saturation=0, lightness=50)
        self.assertAlmostEqual(contrast_ratio(gray, gray), 1.0)

    def test_luminance_monotonic(self) -> None:
        gray = Color(hue=0, saturation=0, lightness=47)
        self.assertGreater(relative_luminance(WHITE), relative_luminance(gray))
        self.assertGreater(relative_luminance(gray), relative_luminance(BLACK))


if __name__ == "__main__":
    unittest.main()
