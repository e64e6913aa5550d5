import enum
from dataclasses import dataclass

from .decoding import Decoding
from .xorshift import Replay


@dataclass(frozen=True)
class EngineRule:
    """How one engine family turns xorshift128+ state into Math.random() values.

    ``replay`` is the order observed values are fed to the solver and the
    direction the concrete generator steps; ``decoding`` is the word/double
    conversion.
    """

    name: str
    replay: Replay
    decoding: Decoding

    def order(self, sequence):
        if self.replay is Replay.REVERSE:
            return tuple(reversed(sequence))
        return tuple(sequence)


V8 = EngineRule("V8", Replay.REVERSE, Decoding.DIVISION)
V8_LEGACY = EngineRule("V8 (binary cast)", Replay.REVERSE, Decoding.BINARY_CAST)
SPIDERMONKEY = EngineRule("SpiderMonkey", Replay.FORWARD, Decoding.LOW_BITS)
JAVASCRIPTCORE = EngineRule("JavaScriptCore", Replay.FORWARD, Decoding.LOW_BITS)


class NodeJsMajorVersion(enum.IntEnum):
    V0 = 0
    V4 = 4
    V5 = 5
    V6 = 6
    V7 = 7
    V8 = 8
    V9 = 9
    V10 = 10
    V11 = 11
    V12 = 12
    V13 = 13
    V14 = 14
    V15 = 15
    V16 = 16
    V17 = 17
    V18 = 18
    V19 = 19
    V20 = 20
    V21 = 21
    V22 = 22
    V23 = 23
    V24 = 24

    @classmethod
    def from_int(cls, value):
        try:
            return cls(value)
        except ValueError:
            return None

    @classmethod
    def parse(cls, text):
        """Accepts '22', 'v22' or 'V22'."""
        text = text.strip().lower().lstrip("v")
        version = cls.from_int(int(text)) if text.isdigit() else None
        if version is None:
            raise ValueError(f"unsupported Node.js major version: {text!r}")
        return version

    @property
    def rule(self):
        # Node 24 ships the V8 that switched to division-based doubles
        return V8 if self >= 24 else V8_LEGACY

    def __str__(self):
        return f"v{int(self)}"
