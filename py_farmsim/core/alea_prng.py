"""
Seedable random sources for the geography model and farm simulation.

AleaPRNG is Johannes Baagøe's Alea algorithm, the same generator the
browser game relies on, so a seed reproduces a farm exactly.
ConstantPRNG returns a fixed value and is used to switch jitter off.
"""


def _uint32(n):
    """Convert to unsigned 32-bit integer."""
    return int(n) & 0xFFFFFFFF


class AleaPRNG:
    """
    Alea PRNG seeded from a string, a number or a sequence of either.

    Every draw goes through random(); the helpers below are thin wrappers
    so call_count reflects the real number of values consumed.
    """

    def __init__(self, seed):
        """Initialize with seed string or number."""
        self.seed = seed
        self.call_count = 0

        if hasattr(seed, "__iter__") and not isinstance(seed, str):
            args = list(seed)
        else:
            args = [seed]

        mash_n = 0xEFC8249D

        def mash(data):
            nonlocal mash_n
            for char in str(data):
                mash_n = mash_n + ord(char)
                h = 0.02519603282416938 * mash_n
                mash_n = _uint32(h)
                h -= mash_n
                h *= mash_n
                mash_n = _uint32(h)
                h -= mash_n
                mash_n += h * 0x100000000  # 2^32
            return _uint32(mash_n) * 2.3283064365386963e-10  # 2^-32

        self.s0 = mash(" ")
        self.s1 = mash(" ")
        self.s2 = mash(" ")
        self.c = 1

        for arg in args:
            self.s0 -= mash(arg)
            if self.s0 < 0:
                self.s0 += 1
            self.s1 -= mash(arg)
            if self.s1 < 0:
                self.s1 += 1
            self.s2 -= mash(arg)
            if self.s2 < 0:
                self.s2 += 1

    def random(self) -> float:
        """Generate next random number in [0, 1)."""
        self.call_count += 1
        t = 2091639 * self.s0 + self.c * 2.3283064365386963e-10  # 2^-32
        self.s0 = self.s1
        self.s1 = self.s2
        self.c = int(t)
        self.s2 = t - self.c
        return self.s2

    def uniform(self, low: float, high: float) -> float:
        """Random float in [low, high)."""
        return low + self.random() * (high - low)

    def jitter(self, spread: float) -> float:
        """Symmetric perturbation in [-spread/2, spread/2)."""
        return (self.random() - 0.5) * spread

    def choice(self, seq):
        """Choose a random element from a non-empty sequence."""
        if not seq:
            raise IndexError("Cannot choose from an empty sequence")
        return seq[int(self.random() * len(seq))]


class ConstantPRNG(AleaPRNG):
    """
    Source that always yields the same value.

    With the default of 0.5 every jitter term collapses to zero and every
    uniform() draw lands on the midpoint of its range.
    """

    def __init__(self, value: float = 0.5):
        if not 0.0 <= value < 1.0:
            raise ValueError(f"Constant value must be in [0, 1), got {value}")
        self.seed = None
        self.value = value
        self.call_count = 0

    def random(self) -> float:
        self.call_count += 1
        return self.value
