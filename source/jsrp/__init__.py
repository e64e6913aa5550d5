__version__ = "0.1.0"

from .budget import PredictionBudget
from .engines import (
    JAVASCRIPTCORE,
    SPIDERMONKEY,
    V8,
    V8_LEGACY,
    EngineRule,
    NodeJsMajorVersion,
)
from .errors import (
    ConvertFailedError,
    EvalFailedError,
    InitError,
    InvalidSequenceError,
    MissingModelError,
    PredictionLimitError,
    PredictorError,
    UnsatError,
)
from .predictor import (
    ChromePredictor,
    FirefoxPredictor,
    NodePredictor,
    Predictor,
    SafariPredictor,
    create_predictor,
)
from .solver import SolverSession, recover_state
