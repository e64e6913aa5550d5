import pytest

from jsrp.decoding import to_double
from jsrp.xorshift import ConcreteGenerator


@pytest.fixture
def simulate():
    """Draws ``count`` doubles from a known state the way ``rule``'s engine would."""

    def _simulate(rule, s0, s1, count):
        gen = ConcreteGenerator(rule.replay, s0, s1)
        return [to_double(rule.decoding, gen.next_word()) for _ in range(count)]

    return _simulate
