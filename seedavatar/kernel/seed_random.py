"""
Seed stream: stable text digest + sine-mixed bounded values
"""

import math

MASK32 = 0xFFFFFFFF
SIGN32 = 0x80000000

def _utf16_units(text: str):
    # same units as JS charCodeAt: astral chars split into surrogate pairs
    for ch in text:
        cp = ord(ch)
        if cp > 0xFFFF:
            cp -= 0x10000
            yield 0xD800 + (cp >> 10)
            yield 0xDC00 + (cp & 0x3FF)
        else:
            yield cp

def to_int32(value: int) -> int:
    value &= MASK32
    return value - (1 << 32) if value & SIGN32 else value

def string_hash(text: str) -> int:
    """
    acc = acc * 31 + code, wrapping as signed 32-bit; returns abs(acc).
    "" -> 0, "A" -> 65, "AA" -> 2080.
    """
    acc = 0
    for code in _utf16_units(text or ""):
        acc = to_int32(acc * 31 + code)
    return abs(acc)

def seeded_random(seed: int, bound: int) -> int:
    """Integer in [0, bound) from frac(sin(seed) * 10000)."""
    if bound <= 0:
        raise ValueError(f"bound must be positive, got {bound}")
    x = math.sin(seed) * 10000
    return int(math.floor((x - math.floor(x)) * bound))
