"""Randomized traversal order for a quiz session."""
import random


def shuffle(items, rng: random.Random | None = None) -> list:
    """Return a uniformly random permutation of items without mutating it.

    Fisher-Yates over a copy: for i from len-1 down to 1, draw j in [0, i]
    and swap positions i and j.

    Args:
        items: Any sequence.
        rng: Random source; defaults to the module-level generator.
    """
    rng = rng or random
    result = list(items)
    for i in range(len(result) - 1, 0, -1):
        j = rng.randint(0, i)
        result[i], result[j] = result[j], result[i]
    return result
