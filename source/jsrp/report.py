import json
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class PredictionResult:
    environment: str
    sequence: list
    predictions: list = field(default_factory=list)
    expected: list = None

    @property
    def is_accurate(self):
        if self.expected is None:
            return None
        return len(self.predictions) == len(self.expected) and all(
            p == e for p, e in zip(self.predictions, self.expected)
        )

    def to_dict(self):
        doc = {
            "environment": self.environment,
            "sequence": list(self.sequence),
            "predictions": list(self.predictions),
        }
        # expected/is_accurate only make sense when the caller gave values
        if self.expected is not None:
            doc["expected"] = list(self.expected)
            doc["is_accurate"] = self.is_accurate
        return doc

    def to_json(self):
        return json.dumps(self.to_dict(), indent=2)

    def export(self, path):
        Path(path).write_text(self.to_json() + "\n", encoding="utf-8")


def run_predictor(predictor, environment, num_predictions, expected=None):
    if expected is not None:
        num_predictions = len(expected)
    result = PredictionResult(environment, list(predictor.sequence), expected=expected)
    for _ in range(num_predictions):
        result.predictions.append(predictor.predict_next())
    return result
