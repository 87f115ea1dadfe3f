from typing import NamedTuple

UINT32_MASK = 0xFFFFFFFF

RAND_R_MULTIPLIER = 1103515245
RAND_R_INCREMENT = 12345
RAND_R_MAX = 0x7FFF


class RandR(NamedTuple):
    random: int
    seed: int


def rand_r(seed: int) -> RandR:
    """Take one step of the C library reentrant generator.

    next = seed * 1103515245 + 12345 (mod 2**32)
    random = (next / 65536) % 32768

    The seed is reduced to an unsigned 32-bit value before stepping, and
    the returned ``seed`` is the state a second call would continue from.
    """
    state = (((seed & UINT32_MASK) * RAND_R_MULTIPLIER) + RAND_R_INCREMENT) & UINT32_MASK
    return RandR(random=(state >> 16) & RAND_R_MAX, seed=state)
