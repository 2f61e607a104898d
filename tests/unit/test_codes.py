"""Component code tests"""

from unittest import TestCase

from resfind.codes import (INVALID, four_band_code, five_band_code, smd_code, four_band_colors,
                           significant_digits, component_codes, ComponentCode, legend)


class FourBandTestCase(TestCase):
    def test_values(self):
        for value, code in ((10, "Brown-Black-Black-Gold"),
                            (330, "Orange-Orange-Brown-Gold"),
                            (4700, "Yellow-Violet-Red-Gold"),
                            (10000, "Brown-Black-Orange-Gold"),
                            (820000, "Grey-Red-Yellow-Gold"),
                            (1e6, "Brown-Black-Green-Gold")):
            with self.subTest(value):
                self.assertEqual(four_band_code(value), code)

    def test_colors(self):
        self.assertEqual(four_band_colors(4700), ["Yellow", "Violet", "Red", "Gold"])

    def test_rounding_carry(self):
        # 99.6 rounds to 100, which needs the next multiplier
        self.assertEqual(four_band_code(99.6), "Brown-Black-Brown-Gold")
        self.assertEqual(four_band_code(995), "Brown-Black-Red-Gold")

    def test_round_half_away_from_zero(self):
        self.assertEqual(four_band_code(985), "White-White-Brown-Gold")

    def test_below_ten_ohms(self):
        """Values below 10 Ω use the lowest multiplier"""
        self.assertEqual(four_band_code(4.7), "Green-Black-Black-Gold")

    def test_saturation(self):
        self.assertEqual(four_band_code(1e12), "White-White-White-Gold")

    def test_invalid(self):
        for value in (0, -5, float("nan"), float("inf")):
            with self.subTest(value):
                self.assertEqual(four_band_code(value), INVALID)
        self.assertIsNone(four_band_colors(0))


class FiveBandTestCase(TestCase):
    def test_values(self):
        for value, code in ((100, "Brown-Black-Black-Black-Brown"),
                            (1000, "Brown-Black-Black-Brown-Brown"),
                            (4700, "Yellow-Violet-Black-Brown-Brown")):
            with self.subTest(value):
                self.assertEqual(five_band_code(value), code)

    def test_rounding_carry(self):
        self.assertEqual(five_band_code(9995), "Brown-Black-Black-Red-Brown")

    def test_invalid(self):
        self.assertEqual(five_band_code(-1), INVALID)


class SMDTestCase(TestCase):
    def test_values(self):
        for value, code in ((10, "100"),
                            (100, "101"),
                            (4700, "472"),
                            (10000, "103")):
            with self.subTest(value):
                self.assertEqual(smd_code(value), code)

    def test_r_notation(self):
        self.assertEqual(smd_code(4.7), "4R7")
        self.assertEqual(smd_code(1), "1R0")
        self.assertEqual(smd_code(0.47), "0R5")

    def test_r_notation_discards_carry(self):
        self.assertEqual(smd_code(9.96), "9R0")

    def test_invalid(self):
        self.assertEqual(smd_code(0), INVALID)
        self.assertEqual(smd_code(float("nan")), INVALID)


class SignificantDigitsTestCase(TestCase):
    def test_digits(self):
        self.assertEqual(significant_digits(4700, 2), (47, 2))
        self.assertEqual(significant_digits(4700, 3), (470, 1))
        self.assertEqual(significant_digits(99.6, 2), (10, 1))


class ComponentCodesTestCase(TestCase):
    def test_code(self):
        code = ComponentCode(4700)
        self.assertEqual(code.four_band, "Yellow-Violet-Red-Gold")
        self.assertEqual(code.five_band, "Yellow-Violet-Black-Brown-Brown")
        self.assertEqual(code.smd, "472")
        self.assertEqual(str(code), "4700.00 Ω: 4-band: Yellow-Violet-Red-Gold | "
                                    "5-band: Yellow-Violet-Black-Brown-Brown | SMD: 472")

    def test_distinct_values(self):
        codes = component_codes([100, 220, 100.004, 100])
        self.assertEqual([code.value for code in codes], [100, 220])

    def test_close_values_differ(self):
        self.assertEqual(len(component_codes([1.004, 1.006])), 2)

    def test_equality(self):
        self.assertEqual(ComponentCode(100), ComponentCode(100.001))
        self.assertNotEqual(ComponentCode(100), ComponentCode(101))


class LegendTestCase(TestCase):
    def test_legend(self):
        lines = legend()
        self.assertEqual(len(lines), 3)
        self.assertIn("Black=0", lines[0])
        self.assertIn("White=9", lines[1])
        self.assertEqual(lines[2], "Tolerance: Brown=1%, Red=2%, Gold=5%, Silver=10%")
