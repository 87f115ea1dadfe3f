from dataclasses import dataclass
from typing import Optional

from damscore.models import TotalScoreType
from .rand_r import UINT32_MASK, rand_r


class TotalScoreError(ValueError):
    """Base class for errors raised by the total score engine."""


class ArithmeticPreconditionError(TotalScoreError):
    pass


class InvalidWindowError(TotalScoreError):
    pass


@dataclass(frozen=True)
class ScoringConstants:
    # Raw scores at or below this are never randomized
    randomize_threshold: int = 99000
    # Randomized scores above this may be promoted to a perfect score
    hundred_points_threshold: int = 99990
    # Out of JUDGEMENT_SCALE
    hundred_points_probability: int = 500
    default_raw_score: int = 99999
    perfect_score: int = 100000


DEFAULT_CONSTANTS = ScoringConstants()

JUDGEMENT_SCALE = 1000


def _randomize(random_value: int, raw_score: int, constants: ScoringConstants) -> int:
    modulus = raw_score - constants.randomize_threshold
    if modulus <= 0:
        raise ArithmeticPreconditionError(
            f'raw score {raw_score} does not exceed randomize threshold '
            f'{constants.randomize_threshold}'
        )
    return (random_value % modulus) + constants.randomize_threshold


def derive_score(unix_seconds: int, raw_score: Optional[int] = None,
                 constants: ScoringConstants = DEFAULT_CONSTANTS) -> int:
    """Derive the total score shown for a performance at ``unix_seconds``.

    Scores at or below the randomize threshold pass through unchanged.
    Above it, the score is redrawn from ``rand_r(unix_seconds)``; a redrawn
    score above the 100-point threshold is promoted to a perfect score when
    the same random value lands in the lower half of its judgement range.
    """
    if raw_score is None:
        raw_score = constants.default_raw_score
    if raw_score <= constants.randomize_threshold:
        return raw_score

    random_value = (rand_r(unix_seconds).random + unix_seconds) & UINT32_MASK
    result = _randomize(random_value, raw_score, constants)
    if result > constants.hundred_points_threshold:
        judgement = random_value % JUDGEMENT_SCALE
        if judgement < constants.hundred_points_probability:
            result = constants.perfect_score
    return result


def classify_score(score: int, constants: ScoringConstants = DEFAULT_CONSTANTS) -> TotalScoreType:
    if score == constants.perfect_score:
        return TotalScoreType.HUNDRED
    if constants.hundred_points_threshold < score < constants.perfect_score:
        return TotalScoreType.QUADRUPLE
    return TotalScoreType.NORMAL


def format_score(score: int) -> str:
    """Render thousandths of a point as ``"<integer>.<fractional3>"``."""
    return f'{score // 1000}.{score % 1000:03d}'
