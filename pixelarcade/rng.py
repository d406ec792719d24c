"""Seedable random number source."""

import random
import time


class Random:
    """A random number generator with inclusive integer and float ranges."""

    def __init__(self, seed=None):
        if seed is None:
            seed = int(time.time())
        self._prng = random.Random(seed)

    def int_in_range(self, low, high):
        """Return an integer in the closed range [low, high]."""
        return self._prng.randint(low, high)

    def float_in_range(self, low, high):
        """Return a float between low and high."""
        return self._prng.uniform(low, high)