import logging
import time

from z3 import BitVec, Context, Solver, Z3Exception, is_bv_value, sat

from .constants import SS_0_STR, SS_1_STR
from .decoding import mantissa_constraint
from .errors import (
    ConvertFailedError,
    EvalFailedError,
    InvalidSequenceError,
    MissingModelError,
    UnsatError,
)
from .xorshift import Replay, z3_xs128p_step

logger = logging.getLogger(__name__)


class SolverSession:
    """One-shot z3 session recovering a generator state for one engine rule.

    Each session owns a private z3 context, so nothing leaks between recovery
    attempts. Use it as a context manager; the solver is reset on exit whether
    solving succeeded or not.
    """

    def __init__(self, rule):
        self.rule = rule
        self.context = None
        self.solver = None
        self.sym_state_0 = None
        self.sym_state_1 = None

    def __enter__(self):
        self.context = Context()
        self.solver = Solver(ctx=self.context)
        self.sym_state_0 = BitVec(SS_0_STR, 64, ctx=self.context)
        self.sym_state_1 = BitVec(SS_1_STR, 64, ctx=self.context)
        return self

    def __exit__(self, exc_type, exc, tb):
        self.solver.reset()
        self.solver = None
        self.sym_state_0 = None
        self.sym_state_1 = None
        self.context = None
        return False

    def solve(self, sequence):
        """Returns (s0, s1) such that concrete replay reproduces ``sequence``."""
        s0, s1 = self.sym_state_0, self.sym_state_1
        for observed in self.rule.order(sequence):
            s0, s1 = z3_xs128p_step(s0, s1)
            self.solver.add(mantissa_constraint(self.rule.decoding, observed, s0, s1))

        logger.debug("%s: solving %d constraints", self.rule.name, len(sequence))
        start = time.time()
        result = self.solver.check()
        logger.debug("%s: solver returned %s in %.4fs", self.rule.name, result, time.time() - start)
        if result != sat:
            raise UnsatError()

        try:
            model = self.solver.model()
        except Z3Exception as exc:
            raise MissingModelError() from exc

        # V8 steps backwards through its cache, so the state to replay from is
        # the one reached after the last symbolic step. Forward engines replay
        # from the initial variables.
        if self.rule.replay is Replay.REVERSE:
            targets = ((SS_0_STR, s0), (SS_1_STR, s1))
        else:
            targets = ((SS_0_STR, self.sym_state_0), (SS_1_STR, self.sym_state_1))
        return tuple(_eval_u64(model, name, expr) for name, expr in targets)


def _eval_u64(model, name, expr):
    try:
        value = model.eval(expr, model_completion=True)
    except Z3Exception as exc:
        raise EvalFailedError(name) from exc
    if not is_bv_value(value):
        raise ConvertFailedError(name)
    return value.as_long()


def recover_state(sequence, rule):
    if not sequence:
        raise InvalidSequenceError("at least one observed value is required")
    with SolverSession(rule) as session:
        return session.solve(sequence)
