"""Resistor color band and SMD codes"""

import math

# returned for values that have no code
INVALID = "(invalid)"

# digit and multiplier band colors (index == digit value, or power of ten for multipliers)
COLOR_NAMES = ["Black", "Brown", "Red", "Orange", "Yellow",
               "Green", "Blue", "Violet", "Grey", "White"]

# tolerance band colors, in percent
TOLERANCE_COLORS = {"Brown": 1, "Red": 2, "Gold": 5, "Silver": 10}

# tolerance bands assumed for standard (5%) and precision (1%) resistors
FOUR_BAND_TOLERANCE = "Gold"
FIVE_BAND_TOLERANCE = "Brown"

# largest power of ten a multiplier band or SMD code can express
MAX_EXPONENT = len(COLOR_NAMES) - 1

# values closer than this many decimal places are the same component value
VALUE_DECIMALS = 2


def _valid(ohms):
    return ohms > 0 and math.isfinite(ohms)


def _round(value):
    """Round half away from zero"""
    return int(math.floor(abs(value) + 0.5)) * (1 if value >= 0 else -1)


def _clamp_exponent(exponent):
    return max(0, min(MAX_EXPONENT, exponent))


def significant_digits(ohms, digits):
    """Significant figures and power of ten of a resistance

    The value is approximated as `significand * 10 ** exponent` where the significand has
    `digits` digits and the exponent is between 0 and 9. Values below 10 ** (digits - 1) ohms
    cannot be represented exactly and are clamped to exponent 0.

    Parameters
    ----------
    ohms : :class:`float`
        Resistance; must be positive.
    digits : :class:`int`
        Number of significant digits.

    Returns
    -------
    :class:`tuple`
        The significand and the exponent.
    """
    lower = 10 ** (digits - 1)
    upper = 10 ** digits

    exponent = _clamp_exponent(math.floor(math.log10(ohms)) - (digits - 1))
    significand = _round(ohms / 10 ** exponent)

    # rounding carry, e.g. 99.6 -> 100
    if significand >= upper:
        significand //= 10
        exponent += 1
    if significand < lower:
        significand *= 10
        exponent -= 1

    exponent = _clamp_exponent(exponent)

    if significand >= upper:
        # larger than the largest code: saturate
        significand = upper - 1

    return significand, exponent


def _digits(number, count):
    return [int(digit) for digit in str(number).zfill(count)]


def _band_colors(ohms, digits, tolerance):
    if not _valid(ohms):
        return None

    significand, exponent = significant_digits(ohms, digits)
    bands = [COLOR_NAMES[digit] for digit in _digits(significand, digits)]
    bands.append(COLOR_NAMES[exponent])
    bands.append(tolerance)
    return bands


def four_band_colors(ohms):
    """Band colors of a 5% resistor: two digits, multiplier and tolerance

    Returns None for values without a code.
    """
    return _band_colors(float(ohms), 2, FOUR_BAND_TOLERANCE)


def five_band_colors(ohms):
    """Band colors of a 1% resistor: three digits, multiplier and tolerance

    Returns None for values without a code.
    """
    return _band_colors(float(ohms), 3, FIVE_BAND_TOLERANCE)


def four_band_code(ohms):
    """4-band color code, e.g. "Yellow-Violet-Red-Gold" for 4.7 kΩ"""
    bands = four_band_colors(ohms)
    if bands is None:
        return INVALID
    return "-".join(bands)


def five_band_code(ohms):
    """5-band color code, e.g. "Yellow-Violet-Black-Brown-Brown" for 4.7 kΩ"""
    bands = five_band_colors(ohms)
    if bands is None:
        return INVALID
    return "-".join(bands)


def smd_code(ohms):
    """3-digit SMD code, e.g. "472" for 4.7 kΩ, or R notation below 10 Ω, e.g. "4R7"."""
    ohms = float(ohms)

    if not _valid(ohms):
        return INVALID

    if ohms < 10:
        whole = int(ohms)
        # first decimal only; a carry into the integer part is discarded
        fraction = _round((ohms - whole) * 10) % 10
        return f"{whole}R{fraction}"

    significand, exponent = significant_digits(ohms, 2)
    return f"{significand}{exponent}"


class ComponentCode:
    """Codes identifying a single resistor value"""
    def __init__(self, value):
        self.value = float(value)
        self.four_band = four_band_code(self.value)
        self.five_band = five_band_code(self.value)
        self.smd = smd_code(self.value)

    def __eq__(self, other):
        if not isinstance(other, ComponentCode):
            return NotImplemented
        return value_key(self.value) == value_key(other.value)

    def __hash__(self):
        return hash(value_key(self.value))

    def __str__(self):
        return (f"{self.value:.2f} Ω: 4-band: {self.four_band} | 5-band: {self.five_band} | "
                f"SMD: {self.smd}")

    def __repr__(self):
        return f"<ComponentCode {self}>"


def value_key(ohms):
    """Quantized value used to decide whether two resistors have the same value"""
    return round(float(ohms), VALUE_DECIMALS)


def component_codes(values):
    """Codes for each distinct value, in order of first appearance

    Values that are equal when rounded to 0.01 Ω are considered the same.
    """
    seen = set()
    codes = []

    for value in values:
        key = value_key(value)

        if key in seen:
            continue

        seen.add(key)
        codes.append(ComponentCode(value))

    return codes


def legend():
    """Color code reference lines"""
    digits = [f"{name}={digit}" for digit, name in enumerate(COLOR_NAMES)]
    tolerances = [f"{name}={percent}%" for name, percent in
                  sorted(TOLERANCE_COLORS.items(), key=lambda item: item[1])]
    return ["Digits: " + ", ".join(digits[:5]),
            "        " + ", ".join(digits[5:]),
            "Tolerance: " + ", ".join(tolerances)]
