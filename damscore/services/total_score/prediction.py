from datetime import datetime, timedelta, timezone
from typing import Iterator, List

from damscore.models import Prediction, PredictionCount, ScoreCount, TotalScoreType
from .scoring import (
    DEFAULT_CONSTANTS,
    InvalidWindowError,
    ScoringConstants,
    classify_score,
    derive_score,
    format_score,
)

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
ONE_SECOND = timedelta(seconds=1)
# The scoring machine's clock runs on Japan Standard Time
JST_OFFSET = timedelta(hours=9)


def as_utc(instant: datetime) -> datetime:
    """Return an aware UTC datetime; naive values are taken to be UTC."""
    if instant.tzinfo is None:
        return instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(timezone.utc)


def unix_seconds(instant: datetime) -> int:
    return (as_utc(instant) - EPOCH) // ONE_SECOND


def to_iso(instant: datetime) -> str:
    utc = as_utc(instant)
    return f"{utc.strftime('%Y-%m-%dT%H:%M:%S')}.{utc.microsecond // 1000:03d}Z"


def _seed_for(instant: datetime, use_jst_offset: bool) -> int:
    if use_jst_offset:
        return unix_seconds(instant + JST_OFFSET)
    return unix_seconds(instant)


def iter_predictions(start_time: datetime, time_limit: int, use_jst_offset: bool = True,
                     include_normal: bool = True, include_quadruple: bool = True,
                     include_hundred: bool = True,
                     constants: ScoringConstants = DEFAULT_CONSTANTS) -> Iterator[Prediction]:
    """Yield one prediction per second of the window, in chronological order.

    Only seconds whose score type is enabled by the include flags are
    yielded. The reported time is always the caller's instant; the JST
    offset only shifts the seed.
    """
    if time_limit <= 0:
        raise InvalidWindowError(f'time limit must be positive, got {time_limit}')
    start = as_utc(start_time)
    enabled = {
        TotalScoreType.NORMAL: include_normal,
        TotalScoreType.QUADRUPLE: include_quadruple,
        TotalScoreType.HUNDRED: include_hundred,
    }
    for i in range(time_limit):
        time = start + i * ONE_SECOND
        score = derive_score(_seed_for(time, use_jst_offset), constants=constants)
        score_type = classify_score(score, constants)
        if enabled[score_type]:
            yield Prediction(
                time=to_iso(time),
                score_integer=score,
                score_string=format_score(score),
                score_type=score_type,
            )


def predict(start_time: datetime, time_limit: int, use_jst_offset: bool = True,
            include_normal: bool = True, include_quadruple: bool = True,
            include_hundred: bool = True,
            constants: ScoringConstants = DEFAULT_CONSTANTS) -> List[Prediction]:
    if time_limit <= 0:
        raise InvalidWindowError(f'time limit must be positive, got {time_limit}')
    return list(iter_predictions(
        start_time, time_limit, use_jst_offset,
        include_normal, include_quadruple, include_hundred, constants,
    ))


def span_count(time_span: int, time_limit: int) -> int:
    if time_span <= 0:
        raise InvalidWindowError(f'time span must be positive, got {time_span}')
    if time_limit <= 0:
        raise InvalidWindowError(f'time limit must be positive, got {time_limit}')
    return -(-time_limit // time_span)


def _count_span(span_start: datetime, length: int, use_jst_offset: bool,
                constants: ScoringConstants) -> ScoreCount:
    hundred = 0
    quadruple = 0
    for j in range(length):
        score = derive_score(_seed_for(span_start + j * ONE_SECOND, use_jst_offset), constants=constants)
        score_type = classify_score(score, constants)
        if score_type is TotalScoreType.HUNDRED:
            hundred += 1
        elif score_type is TotalScoreType.QUADRUPLE:
            quadruple += 1
    return ScoreCount(hundred_count=hundred, quadruple_count=quadruple)


def count_by_window(start_time: datetime, time_span: int, time_limit: int,
                    constants: ScoringConstants = DEFAULT_CONSTANTS) -> List[PredictionCount]:
    """Count hundred and quadruple scores per span of the window.

    The window is cut into ``time_span``-second spans; the last span is
    truncated to the remainder. Each second is simulated twice, once seeded
    with its UTC time and once with its JST-shifted time.
    """
    spans = span_count(time_span, time_limit)
    start = as_utc(start_time)
    remainder = time_limit % time_span

    result = []
    for i in range(spans):
        span_start = start + i * time_span * ONE_SECOND
        length = remainder if i == spans - 1 and remainder else time_span
        result.append(PredictionCount(
            start_time=to_iso(span_start),
            end_time=to_iso(span_start + length * ONE_SECOND),
            utc=_count_span(span_start, length, False, constants),
            jst=_count_span(span_start, length, True, constants),
        ))
    return result
