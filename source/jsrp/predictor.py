import copy
import numbers

from .budget import PredictionBudget
from .constants import MAX_NUM_PREDICTIONS
from .decoding import to_double
from .engines import JAVASCRIPTCORE, SPIDERMONKEY, V8, NodeJsMajorVersion
from .errors import InvalidSequenceError
from .solver import recover_state
from .xorshift import ConcreteGenerator


def _check_sequence(sequence):
    seq = tuple(sequence)
    if not seq:
        raise InvalidSequenceError("at least one observed value is required")
    for i, v in enumerate(seq):
        if isinstance(v, bool) or not isinstance(v, numbers.Real):
            raise InvalidSequenceError(f"sequence[{i}] is not a number: {v!r}")
        if not 0.0 <= v < 1.0:
            raise InvalidSequenceError(f"sequence[{i}] is outside [0, 1): {v!r}")
    return tuple(float(v) for v in seq)


def _check_node_sequence(sequence):
    seq = _check_sequence(sequence)
    if len(seq) > MAX_NUM_PREDICTIONS:
        raise InvalidSequenceError(
            f"sequence has {len(seq)} values, V8 only caches {MAX_NUM_PREDICTIONS}"
        )
    return seq


class _Run:
    """Observed sequence and live generator of one logical generator instance."""

    def __init__(self, sequence, generator=None):
        self.sequence = sequence
        self.generator = generator


class Predictor:
    """Recovers an engine's xorshift128+ state from observed Math.random() values.

    The solver runs once, on the first call to :meth:`predict_next`. The
    recovered state is fast-forwarded past the observed values and every call
    after that is a single concrete step.
    """

    rule = None

    def __init__(self, sequence):
        self._run = _Run(_check_sequence(sequence))

    @property
    def sequence(self):
        return self._run.sequence

    @property
    def is_solved(self):
        return self._run.generator is not None

    @property
    def state(self):
        """Current (s0, s1), or None before solving."""
        generator = self._run.generator
        return generator.state if generator else None

    def predict_next(self):
        self._solve_symbolic_state()
        return to_double(self.rule.decoding, self._run.generator.next_word())

    def _solve_symbolic_state(self):
        run = self._run
        if run.generator is not None:
            return
        s0, s1 = recover_state(run.sequence, self.rule)
        generator = ConcreteGenerator(self.rule.replay, s0, s1)
        generator.skip(len(run.sequence))
        run.generator = generator

    def __copy__(self):
        # an independent copy: same position, separate generator
        clone = self.__class__.__new__(self.__class__)
        clone.__dict__.update(self.__dict__)
        generator = self._run.generator
        clone._run = _Run(self._run.sequence, copy.copy(generator) if generator else None)
        return clone


class ChromePredictor(Predictor):
    rule = V8


class FirefoxPredictor(Predictor):
    rule = SPIDERMONKEY


class SafariPredictor(Predictor):
    rule = JAVASCRIPTCORE


class NodePredictor(Predictor):
    """Node.js predictor, bounded by V8's 64-value cache.

    Copies are handles on the same generator: they share the observed
    sequence, the recovered state and one :class:`PredictionBudget`, so a
    value drawn or a reset made through any handle is seen by all of them.
    """

    MAX_NUM_PREDICTIONS = MAX_NUM_PREDICTIONS

    def __init__(self, node_js_major_version, sequence):
        seq = _check_node_sequence(sequence)
        super().__init__(seq)
        self.node_js_major_version = NodeJsMajorVersion(node_js_major_version)
        self.rule = self.node_js_major_version.rule
        self.budget = PredictionBudget(len(seq), self.MAX_NUM_PREDICTIONS)

    def predict_next(self):
        self.budget.increment_prediction_count()
        return super().predict_next()

    def reset(self, new_sequence):
        """Starts over on a fresh sequence once the current state is used up.

        Before the budget is exhausted this does nothing, so a stray early call
        cannot throw away a good state.
        """
        if not self.budget.exhausted:
            return
        seq = _check_node_sequence(new_sequence)
        if not self.budget.reset_if_exhausted(len(seq)):
            return
        self._run.sequence = seq
        self._run.generator = None

    def __copy__(self):
        clone = self.__class__.__new__(self.__class__)
        clone.__dict__.update(self.__dict__)
        return clone


def create_predictor(environment, sequence, node_version=None):
    environment = environment.lower()
    if environment == "node":
        if node_version is None:
            raise ValueError("node predictions need a Node.js major version")
        return NodePredictor(node_version, sequence)
    if environment not in _PREDICTORS:
        raise ValueError(f"unknown environment: {environment!r}")
    return _PREDICTORS[environment](sequence)


def environment_label(predictor):
    if isinstance(predictor, NodePredictor):
        return f"Node.js {predictor.node_js_major_version}"
    for name, cls in _PREDICTORS.items():
        if isinstance(predictor, cls):
            return name.capitalize()
    raise ValueError(f"unknown predictor type: {type(predictor).__name__}")


_PREDICTORS = {
    "chrome": ChromePredictor,
    "firefox": FirefoxPredictor,
    "safari": SafariPredictor,
}

ENVIRONMENTS = ("node", "firefox", "chrome", "safari")
