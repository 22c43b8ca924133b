# lemonstand/rng.py
import math

from .config import DEFAULT_SEED

MASK_32 = 0xFFFFFFFF


class RandomStream:
    """
    Seeded xorshift32 generator.
    The same seed yields the same sequence on any conforming implementation,
    so every stochastic draw in the simulation goes through one instance.
    """

    def __init__(self, seed: int = DEFAULT_SEED):
        self.state = seed & MASK_32

    def next_uint(self) -> int:
        x = self.state
        x ^= (x << 13) & MASK_32
        x ^= x >> 17
        x ^= (x << 5) & MASK_32
        self.state = x
        return x

    def uniform(self, min_value: float = 0.0, max_value: float = 1.0) -> float:
        return min_value + (self.next_uint() / MASK_32) * (max_value - min_value)

    def integer(self, min_value: int, max_value: int) -> int:
        """Inclusive integer in [min_value, max_value]."""
        value = math.floor(self.uniform(min_value, max_value + 1))
        return min(value, max_value)

    def normal(self, mean: float = 0.0, stdev: float = 1.0) -> float:
        # Box-Muller, always two draws
        u = 1.0 - self.uniform()
        v = self.uniform()
        u = max(u, 1e-300)
        return math.sqrt(-2.0 * math.log(u)) * math.cos(2.0 * math.pi * v) * stdev + mean
