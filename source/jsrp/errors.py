class PredictorError(Exception):
    pass


class InvalidSequenceError(PredictorError, ValueError):
    pass


class PredictionLimitError(PredictorError):
    def __init__(self, message="prediction limit reached for this generator state"):
        super().__init__(message)


class InitError(PredictorError):
    """The solver could not produce a generator state."""


class UnsatError(InitError):
    def __init__(self):
        super().__init__("Solver returned UNSAT")


class MissingModelError(InitError):
    def __init__(self):
        super().__init__("Failed to get model from solver")


class EvalFailedError(InitError):
    def __init__(self, field):
        self.field = field
        super().__init__(f"Failed to evaluate {field}")


class ConvertFailedError(InitError):
    def __init__(self, field):
        self.field = field
        super().__init__(f"Failed to convert {field} to u64")
