"""R-2R ladder tests"""

from unittest import TestCase

from resfind.misc import InvalidInputError
from resfind.ladder import compute_ladder, LadderSample


class LadderTestCase(TestCase):
    def test_eight_bit(self):
        spec = compute_ladder(10000, 8, 5.0)
        self.assertEqual(spec.r, 10000)
        self.assertEqual(spec.r2, 20000)
        self.assertEqual(spec.r_count, 7)
        self.assertEqual(spec.r2_count, 9)
        self.assertEqual(spec.total_resistors, 16)
        self.assertEqual(spec.levels, 256)
        self.assertAlmostEqual(spec.lsb, 0.01953125)
        self.assertAlmostEqual(spec.max_output, 4.98046875)
        self.assertEqual(spec.output_impedance, 10000)

    def test_component_codes(self):
        spec = compute_ladder(10000, 8)
        self.assertEqual(spec.r_codes.four_band, "Brown-Black-Orange-Gold")
        self.assertEqual(spec.r2_codes.smd, "203")

    def test_default_reference(self):
        self.assertEqual(compute_ladder(1000, 4).vref, 5.0)

    def test_sampled_codes(self):
        spec = compute_ladder(10000, 8)
        codes = [sample.code for sample in spec.samples]
        self.assertEqual(codes, [17 * k for k in range(16)])
        self.assertEqual(spec.samples[0].text, "00000000")
        self.assertEqual(spec.samples[-1].text, "11111111")
        self.assertAlmostEqual(spec.samples[-1].voltage, spec.max_output)
        self.assertEqual(spec.samples[0].voltage, 0)

    def test_full_table(self):
        spec = compute_ladder(10000, 3)
        self.assertEqual([sample.text for sample in spec.samples],
                         ["000", "001", "010", "011", "100", "101", "110", "111"])

    def test_wide_sample_count(self):
        spec = compute_ladder(10000, 24)
        self.assertEqual(len(spec.samples), 16)
        self.assertEqual(spec.samples[0].code, 0)
        self.assertEqual(spec.samples[-1].code, 2 ** 24 - 1)

    def test_voltage(self):
        spec = compute_ladder(10000, 8, 5.0)
        self.assertAlmostEqual(spec.voltage(128), 2.5)
        self.assertRaises(InvalidInputError, spec.voltage, 256)
        self.assertRaises(InvalidInputError, spec.voltage, -1)

    def test_invalid_input(self):
        self.assertRaises(InvalidInputError, compute_ladder, 10000, 1)
        self.assertRaises(InvalidInputError, compute_ladder, 10000, 25)
        self.assertRaises(InvalidInputError, compute_ladder, 10000, 2.5)
        self.assertRaises(InvalidInputError, compute_ladder, 0, 8)
        self.assertRaises(InvalidInputError, compute_ladder, -100, 8)

    def test_non_numeric_input(self):
        for bits in ("8.5", "eight", float("nan"), float("inf"), None):
            with self.subTest(bits):
                self.assertRaises(InvalidInputError, compute_ladder, 10000, bits)
        self.assertRaises(InvalidInputError, compute_ladder, "ten", 8)
        self.assertRaises(InvalidInputError, compute_ladder, 10000, 8, "five")

    def test_numeric_text_bits(self):
        self.assertEqual(compute_ladder(10000, "8").bits, 8)


class LadderSampleTestCase(TestCase):
    def test_binary_text(self):
        self.assertEqual(LadderSample(5, 12, 5.0).text, "000000000101")

    def test_hexadecimal_text(self):
        self.assertEqual(LadderSample(255, 13, 5.0).text, "0x00FF")
        self.assertEqual(LadderSample(2 ** 16 - 1, 16, 5.0).text, "0xFFFF")
        self.assertEqual(LadderSample(0, 24, 5.0).text, "0x000000")

    def test_unpacking(self):
        text, code, voltage = LadderSample(2, 2, 4.0)
        self.assertEqual(text, "10")
        self.assertEqual(code, 2)
        self.assertEqual(voltage, 2.0)
