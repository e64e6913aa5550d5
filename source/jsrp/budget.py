import threading

from .constants import MAX_NUM_PREDICTIONS
from .errors import PredictionLimitError


class PredictionBudget:
    """Counts values drawn from one V8 generator state, observed and predicted.

    V8 reseeds once its 64-entry cache is spent, so nothing past that point can
    be predicted from the recovered state. One budget is shared by every handle
    on the same logical generator.
    """

    def __init__(self, used=0, maximum=MAX_NUM_PREDICTIONS):
        if not 0 <= used <= maximum:
            raise ValueError(f"budget of {maximum} cannot start at {used}")
        self.maximum = maximum
        self._used = used
        self._lock = threading.Lock()

    @property
    def used(self):
        with self._lock:
            return self._used

    @property
    def remaining(self):
        with self._lock:
            return self.maximum - self._used

    @property
    def exhausted(self):
        with self._lock:
            return self._used >= self.maximum

    def increment_prediction_count(self):
        with self._lock:
            if self._used >= self.maximum:
                raise PredictionLimitError()
            self._used += 1

    def reset_if_exhausted(self, used):
        """Restarts the count at ``used``; returns False and does nothing unless spent."""
        if not 0 <= used <= self.maximum:
            raise ValueError(f"budget of {self.maximum} cannot start at {used}")
        with self._lock:
            if self._used < self.maximum:
                return False
            self._used = used
            return True

    def __repr__(self):
        return f"PredictionBudget(used={self._used}, maximum={self.maximum})"
