"""Series/parallel network enumeration"""

import logging
from itertools import chain, islice

from .misc import InvalidInputError, progress
from .format import parse_resistance
from .network import Resistor, Collection

LOGGER = logging.getLogger(__name__)

# defaults
MAX_SIZE = 5
MAX_PER_SIZE = 10000


def leaves(catalog):
    """Wrap each catalog value as a single resistor network

    Parameters
    ----------
    catalog : iterable of :class:`float` or :class:`str`
        The available resistor values, in the order they should be combined.

    Returns
    -------
    :class:`list` of :class:`.Resistor`

    Raises
    ------
    :class:`.InvalidInputError`
        If the catalog is empty.
    """
    resistors = [Resistor(parse_resistance(value)) for value in catalog]

    if not resistors:
        raise InvalidInputError("catalog is empty")

    for resistor in resistors:
        if resistor.resistance <= 0:
            LOGGER.warning("catalog value %s is not positive; it is only combined in series",
                           resistor.expression)

    return resistors


class NetworkSet:
    """Networks grouped by the number of resistors they contain

    Each size has a bucket holding at most :attr:`max_per_size` networks in the order they were
    generated. Candidates generated after a bucket is full are dropped; the number dropped per
    size is available in :attr:`truncated`.
    """
    def __init__(self, max_size, max_per_size, canonical=False):
        self.max_size = int(max_size)
        self.max_per_size = int(max_per_size)
        self.canonical = bool(canonical)
        self.budget_exhausted = False

        self._buckets = {size: [] for size in range(1, self.max_size + 1)}
        # candidates generated and dropped, by size
        self.candidates = {size: 0 for size in self._buckets}
        self.truncated = {size: 0 for size in self._buckets}

    def bucket(self, size):
        """Networks containing the specified number of resistors"""
        try:
            return self._buckets[size]
        except KeyError:
            raise ValueError(f"size must be between 1 and {self.max_size}")

    def set_bucket(self, size, networks, candidates):
        self._buckets[size] = list(networks)
        self.candidates[size] = int(candidates)
        self.truncated[size] = self.candidates[size] - len(self._buckets[size])

        if self.truncated[size]:
            LOGGER.info("dropped %i of %i networks of size %i", self.truncated[size],
                        self.candidates[size], size)

    @property
    def sizes(self):
        return list(self._buckets)

    @property
    def counts(self):
        """Number of networks kept, by size"""
        return {size: len(networks) for size, networks in self._buckets.items()}

    @property
    def is_truncated(self):
        """Whether any candidate was dropped"""
        return any(self.truncated.values()) or self.budget_exhausted

    @property
    def n_truncated(self):
        return sum(self.truncated.values())

    def __iter__(self):
        return chain.from_iterable(self._buckets[size] for size in self.sizes)

    def __len__(self):
        return sum(self.counts.values())

    def __repr__(self):
        return f"<{self.__class__.__name__} {self.counts}>"


def enumerate_networks(catalog, max_size=MAX_SIZE, max_per_size=MAX_PER_SIZE, canonical=False,
                       node_budget=None, print_progress=False, stream=None):
    """Build every series and parallel network of up to `max_size` resistors

    Networks of size n are combinations of a network of size i with one of size n - i, for
    every i from 1 to n - 1. The combinations are generated in a fixed order: partition index
    ascending, then first network, then second network, with the series combination before the
    parallel one. When both networks come from the same bucket, each unordered pair is used
    once. Unless `canonical` is set, each asymmetric partition is visited from both sides, so
    the same pair of networks appears twice with its operands swapped.

    Parameters
    ----------
    catalog : iterable of :class:`float` or :class:`str`
        The available resistor values.
    max_size : :class:`int`, optional
        The largest number of resistors in a network.
    max_per_size : :class:`int`, optional
        The maximum number of networks kept for each size. Later candidates are dropped.
    canonical : :class:`bool`, optional
        Visit each unordered partition {i, n - i} once instead of twice.
    node_budget : :class:`int`, optional
        The maximum number of networks to generate across all sizes above 1.
    print_progress : :class:`bool`, optional
        Show a progress bar for each size.
    stream : :class:`io.IOBase`, optional
        Stream to print progress to.

    Returns
    -------
    :class:`NetworkSet`

    Raises
    ------
    :class:`.InvalidInputError`
        If the catalog is empty or a limit is less than 1.
    """
    max_size = int(max_size)
    max_per_size = int(max_per_size)

    if max_size < 1:
        raise InvalidInputError("maximum network size must be >= 1")
    if max_per_size < 1:
        raise InvalidInputError("maximum networks per size must be >= 1")
    if node_budget is not None:
        node_budget = int(node_budget)
        if node_budget < 0:
            raise InvalidInputError("node budget must be >= 0")

    resistors = leaves(catalog)

    networks = NetworkSet(max_size, max_per_size, canonical=canonical)
    networks.set_bucket(1, resistors[:max_per_size], len(resistors))

    LOGGER.info("enumerating networks of up to %i resistors from %i values", max_size,
                len(resistors))

    if max_size > 1 and _n_candidates(networks, 2, canonical) > max_per_size:
        LOGGER.info("catalog of %i values gives more pairs than the %i networks kept per size; "
                    "larger networks are built from the first pairs only", len(resistors),
                    max_per_size)

    generated = 0

    for size in range(2, max_size + 1):
        total = _n_candidates(networks, size, canonical)

        limit = max_per_size
        if node_budget is not None:
            limit = min(limit, node_budget - generated)

        candidates = _candidates(networks, size, canonical)

        if print_progress and total > 0:
            candidates = progress(candidates, total, stream=stream)

        bucket = list(islice(candidates, limit))
        # stop the generator (and progress bar) early
        candidates.close()

        if limit < max_per_size and len(bucket) == limit < total:
            if not networks.budget_exhausted:
                LOGGER.warning("node budget of %i networks exhausted at size %i", node_budget,
                               size)
            networks.budget_exhausted = True

        networks.set_bucket(size, bucket, total)
        generated += len(bucket)

        LOGGER.debug("size %i: kept %i of %i candidates", size, len(bucket), total)

    return networks


def _partitions(size, canonical):
    """Bucket size pairs combined to form networks of the specified size"""
    for first in range(1, size):
        second = size - first

        if canonical and first > second:
            continue

        yield first, second


def _candidates(networks, size, canonical):
    """Candidate networks of the specified size, in generation order"""
    for first_size, second_size in _partitions(size, canonical):
        first_bucket = networks.bucket(first_size)
        second_bucket = networks.bucket(second_size)
        same = first_size == second_size

        for first_index, first in enumerate(first_bucket):
            start = first_index if same else 0

            for second_index in range(start, len(second_bucket)):
                second = second_bucket[second_index]

                yield Collection(first, second, Collection.TYPE_SERIES)

                if first.resistance > 0 and second.resistance > 0:
                    yield Collection(first, second, Collection.TYPE_PARALLEL)


def _n_candidates(networks, size, canonical):
    """Number of candidates :func:`_candidates` yields for the specified size"""
    count = 0

    for first_size, second_size in _partitions(size, canonical):
        first_bucket = networks.bucket(first_size)
        second_bucket = networks.bucket(second_size)

        n_first = len(first_bucket)
        p_first = sum(1 for network in first_bucket if network.resistance > 0)

        if first_size == second_size:
            # unordered pairs including each network with itself
            count += n_first * (n_first + 1) // 2 + p_first * (p_first + 1) // 2
        else:
            n_second = len(second_bucket)
            p_second = sum(1 for network in second_bucket if network.resistance > 0)
            count += n_first * n_second + p_first * p_second

    return count
