from dataclasses import dataclass
from enum import Enum


class TotalScoreType(str, Enum):
    NORMAL = 'Normal'
    QUADRUPLE = 'Quadruple'
    HUNDRED = 'Hundred'


@dataclass(frozen=True)
class Prediction:
    time: str
    score_integer: int
    score_string: str
    score_type: TotalScoreType

    def to_dict(self):
        return {
            'time': self.time,
            'scoreInteger': self.score_integer,
            'scoreString': self.score_string,
            'scoreType': self.score_type.value,
        }


@dataclass(frozen=True)
class ScoreCount:
    hundred_count: int = 0
    quadruple_count: int = 0

    def to_dict(self):
        return {
            'hundredCount': self.hundred_count,
            'quadrupleCount': self.quadruple_count,
        }


@dataclass(frozen=True)
class PredictionCount:
    """Rare-score tallies for one span, under UTC and JST seeding."""
    start_time: str
    end_time: str
    utc: ScoreCount
    jst: ScoreCount

    def to_dict(self):
        return {
            'startTime': self.start_time,
            'endTime': self.end_time,
            'utc': self.utc.to_dict(),
            'jst': self.jst.to_dict(),
        }
