"""xorshift128+ transitions, symbolic (z3) and concrete (python ints).

Every engine generates with the same recurrence. V8 hands its outputs out of a
LIFO cache, so the observed order is the reverse of the generation order and
the concrete V8 step is the exact inverse of the symbolic one. SpiderMonkey and
JavaScriptCore return values in generation order and add both state words.
"""
import enum

from z3 import LShR

from .constants import MASK64, SHIFT_A, SHIFT_B, SHIFT_C


class Replay(enum.Enum):
    REVERSE = "reverse"
    FORWARD = "forward"


def z3_xs128p_step(s0, s1):
    t = s0 ^ (s0 << SHIFT_A)
    t = t ^ LShR(t, SHIFT_B)
    t = t ^ s1
    t = t ^ LShR(s1, SHIFT_C)
    return s1, t


def py_xs128p_step(s0, s1):
    t = (s0 ^ (s0 << SHIFT_A)) & MASK64
    t = (t ^ (t >> SHIFT_B)) & MASK64
    t = (t ^ s1) & MASK64
    t = (t ^ (s1 >> SHIFT_C)) & MASK64
    return s1, t


def py_xs128p_reverse(s0, s1):
    """One V8 tick: returns (s0', s1', out) with out the pre-update s0."""
    out = s0
    u = (s1 ^ (s0 >> SHIFT_C)) & MASK64
    u = (u ^ s0) & MASK64
    u = (u ^ (u >> 17) ^ (u >> 34) ^ (u >> 51)) & MASK64
    u = (u ^ (u << 23) ^ (u << 46)) & MASK64
    return u, s0, out


def py_xs128p_forward(s0, s1):
    """One SpiderMonkey/JavaScriptCore tick: returns (s0', s1', out)."""
    s0, s1 = py_xs128p_step(s0, s1)
    return s0, s1, (s0 + s1) & MASK64


_CONCRETE_STEPS = {
    Replay.REVERSE: py_xs128p_reverse,
    Replay.FORWARD: py_xs128p_forward,
}


def py_xs128p_concrete(replay, s0, s1):
    return _CONCRETE_STEPS[replay](s0, s1)


class ConcreteGenerator:
    """A live generator: a 128-bit state plus the engine's stepping direction."""

    def __init__(self, replay, s0, s1):
        self.replay = replay
        self.s0 = s0 & MASK64
        self.s1 = s1 & MASK64

    @property
    def state(self):
        return self.s0, self.s1

    def next_word(self):
        self.s0, self.s1, out = py_xs128p_concrete(self.replay, self.s0, self.s1)
        return out

    def skip(self, n):
        for _ in range(n):
            self.next_word()

    def __repr__(self):
        return f"ConcreteGenerator({self.replay.name}, s0={self.s0:#018x}, s1={self.s1:#018x})"
