"""Total score prediction services.

Pure domain logic reproducing the scoring machine's time-seeded total
score. Imported by HTTP routes and socket handlers, which own parsing,
admission control and logging.
"""

from .rand_r import RandR, rand_r
from .scoring import (
    DEFAULT_CONSTANTS,
    ArithmeticPreconditionError,
    InvalidWindowError,
    ScoringConstants,
    TotalScoreError,
    classify_score,
    derive_score,
    format_score,
)
from .prediction import count_by_window, iter_predictions, predict, span_count
