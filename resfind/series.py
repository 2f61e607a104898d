"""Standard resistor series"""

import math
import logging

from .misc import InvalidInputError

LOGGER = logging.getLogger(__name__)


class Set:
    """Set of standard resistor values spanning a range of decades

    Parameters
    ----------
    series : :class:`str`, optional
        Series name, e.g. "E24" (case insensitive). Defaults to E24.
    max_exp : :class:`int`, optional
        Largest decade exponent; values go up to 9.1 * 10 ** max_exp for E24.
    min_exp : :class:`int`, optional
        Smallest decade exponent.
    """
    # base values for E192 (from which E96 and E48 are derived)
    VALUES_E192 = [
        1.00, 1.01, 1.02, 1.04, 1.05, 1.06, 1.07, 1.09, 1.10, 1.11, 1.13, 1.14,
        1.15, 1.17, 1.18, 1.20, 1.21, 1.23, 1.24, 1.26, 1.27, 1.29, 1.30, 1.32,
        1.33, 1.35, 1.37, 1.38, 1.40, 1.42, 1.43, 1.45, 1.47, 1.49, 1.50, 1.52,
        1.54, 1.56, 1.58, 1.60, 1.62, 1.64, 1.65, 1.67, 1.69, 1.72, 1.74, 1.76,
        1.78, 1.80, 1.82, 1.84, 1.87, 1.89, 1.91, 1.93, 1.96, 1.98, 2.00, 2.03,
        2.05, 2.08, 2.10, 2.13, 2.15, 2.18, 2.21, 2.23, 2.26, 2.29, 2.32, 2.34,
        2.37, 2.40, 2.43, 2.46, 2.49, 2.52, 2.55, 2.58, 2.61, 2.64, 2.67, 2.71,
        2.74, 2.77, 2.80, 2.84, 2.87, 2.91, 2.94, 2.98, 3.01, 3.05, 3.09, 3.12,
        3.16, 3.20, 3.24, 3.28, 3.32, 3.36, 3.40, 3.44, 3.48, 3.52, 3.57, 3.61,
        3.65, 3.70, 3.74, 3.79, 3.83, 3.88, 3.92, 3.97, 4.02, 4.07, 4.12, 4.17,
        4.22, 4.27, 4.32, 4.37, 4.42, 4.48, 4.53, 4.59, 4.64, 4.70, 4.75, 4.81,
        4.87, 4.93, 4.99, 5.05, 5.11, 5.17, 5.23, 5.30, 5.36, 5.42, 5.49, 5.56,
        5.62, 5.69, 5.76, 5.83, 5.90, 5.97, 6.04, 6.12, 6.19, 6.26, 6.34, 6.42,
        6.49, 6.57, 6.65, 6.73, 6.81, 6.90, 6.98, 7.06, 7.15, 7.23, 7.32, 7.41,
        7.50, 7.59, 7.68, 7.77, 7.87, 7.96, 8.06, 8.16, 8.25, 8.35, 8.45, 8.56,
        8.66, 8.76, 8.87, 8.98, 9.09, 9.20, 9.31, 9.42, 9.53, 9.65, 9.76, 9.88]

    # base values for E24 (from which E12, E6 and E3 are derived)
    VALUES_E24 = [
        1.0, 1.1, 1.2, 1.3, 1.5, 1.6, 1.8, 2.0, 2.2, 2.4, 2.7, 3.0,
        3.3, 3.6, 3.9, 4.3, 4.7, 5.1, 5.6, 6.2, 6.8, 7.5, 8.2, 9.1
    ]

    # series name: (base values, step)
    SERIES = {
        "E3": (VALUES_E24, 8),
        "E6": (VALUES_E24, 4),
        "E12": (VALUES_E24, 2),
        "E24": (VALUES_E24, 1),
        "E48": (VALUES_E192, 4),
        "E96": (VALUES_E192, 2),
        "E192": (VALUES_E192, 1),
    }

    def __init__(self, series=None, max_exp=6, min_exp=0):
        if series is None:
            LOGGER.info("using E24 series by default")
            series = "E24"

        self.series = self.format_name(series)
        self.max_exp = int(max_exp)
        self.min_exp = int(min_exp)

        if self.min_exp > self.max_exp:
            raise InvalidInputError("max_exp must be >= min_exp")

    @classmethod
    def format_name(cls, name):
        """Format and validate series name"""
        name = str(name).strip().upper()

        if not name.startswith("E"):
            name = "E" + name

        if name not in cls.SERIES:
            raise InvalidInputError(f"unrecognised resistor series '{name}' (choose from "
                                    f"{', '.join(cls.SERIES)})")

        return name

    @classmethod
    def names(cls):
        return list(cls.SERIES)

    def base_numbers(self):
        """Get set's numbers between 1 and 10"""
        values, step = self.SERIES[self.series]
        return values[::step]

    def values(self):
        """Set's values over its decades, ascending"""
        values = []

        for exp in range(self.min_exp, self.max_exp + 1):
            # round away representation error, e.g. 1.1 * 10 ** 2 = 110.00000000000001
            values.extend(round(base * 10 ** exp, 10) for base in self.base_numbers())

        return values

    def closest(self, resistance):
        """Value in set closest to specified resistance by ratio"""
        resistance = float(resistance)

        if resistance <= 0:
            raise InvalidInputError("resistance must be > 0")

        return min(self.values(), key=lambda value: abs(math.log(resistance / value)))

    def __len__(self):
        return len(self.base_numbers()) * (self.max_exp - self.min_exp + 1)

    def __iter__(self):
        return iter(self.values())

    def __repr__(self):
        return f"{self.series} series, 10^{self.min_exp} to 10^{self.max_exp}"


def e24_decades():
    """E24 values over the decades 1 Ω to 1 MΩ"""
    return Set("E24", max_exp=6, min_exp=0).values()
