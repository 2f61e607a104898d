"""Miscellaneous functions"""

import sys
import os
import abc
from progressbar import ProgressBar, Percentage, Bar, ETA


class InvalidInputError(ValueError):
    """Query input that no computation can be attempted for.

    Raised for an empty catalog, a non-positive target or base resistance, a negative tolerance
    or an out of range ladder width.
    """
    pass


class Singleton(abc.ABCMeta):
    """Metaclass implementing the singleton pattern

    This ensures that there is only ever one instance of a class that
    inherits this one.

    This is a subclass of ABCMeta so that it can be used as a metaclass of a
    subclass of an ABCMeta class.
    """

    # list of children by class
    _instances = {}

    def __call__(cls, *args, **kwargs):
        if cls not in cls._instances:
            cls._instances[cls] = super().__call__(*args, **kwargs)

        return cls._instances[cls]


def progress(sequence, total, print_progress=True, stream=None, update=1000):
    """Print progress of generator with known length.

    Parameters
    ----------
    sequence : iterable
        Sequence to report iteration progress for.
    total : int
        The number of items the sequence will contain.
    print_progress : bool, optional
        Whether to display the bar. If not, it is written to the null device.
    stream : :class:`io.IOBase`, optional
        Stream to print progress to. Defaults to stdout.
    update : int, optional
        The number of items to yield before next updating display.

    Yields
    ------
    object
        The items of the input sequence.
    """
    total = int(total)
    update = int(update)

    if total <= 0:
        raise ValueError("total must be > 0")

    if update <= 0:
        raise ValueError("update must be > 0")

    if not print_progress:
        # Null file.
        stream = open(os.devnull, "w")
    elif stream is None:
        stream = sys.stdout

    # Set up progress bar.
    widgets = ['Calculating: ', Percentage(), Bar(), ETA()]
    pbar = ProgressBar(widgets=widgets, max_value=100, fd=stream).start()

    count = 0

    try:
        for item in sequence:
            count += 1

            if count % update == 0:
                pbar.update(min(100, 100 * count // total))

            yield item
    finally:
        pbar.finish()

        if not print_progress:
            stream.close()
