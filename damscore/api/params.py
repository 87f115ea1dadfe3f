from collections.abc import Mapping
from datetime import datetime, timedelta

from damscore.services.total_score.prediction import EPOCH, JST_OFFSET, as_utc, span_count

_TRUE = {'true', '1', 'yes', 'on'}
_FALSE = {'false', '0', 'no', 'off'}


class ParameterError(ValueError):
    pass


def parse_start_time(value) -> datetime:
    if not value:
        raise ParameterError('startTime is required')
    text = str(value).strip()
    if text.endswith(('Z', 'z')):
        text = text[:-1] + '+00:00'
    try:
        instant = as_utc(datetime.fromisoformat(text))
    except (ValueError, OverflowError):
        raise ParameterError(f'startTime is not an ISO-8601 date: {value}')
    if instant < EPOCH:
        raise ParameterError('startTime must not be before 1970-01-01T00:00:00Z')
    return instant


def parse_positive_int(name: str, value, maximum=None) -> int:
    if value is None or value == '':
        raise ParameterError(f'{name} is required')
    if isinstance(value, bool):
        raise ParameterError(f'{name} must be an integer')
    if isinstance(value, float) and not value.is_integer():
        raise ParameterError(f'{name} must be an integer')
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ParameterError(f'{name} must be an integer')
    if number < 1:
        raise ParameterError(f'{name} must be at least 1')
    if maximum is not None and number > maximum:
        raise ParameterError(f'{name} must be at most {maximum}')
    return number


def parse_bool(name: str, value, default: bool = True) -> bool:
    if value is None or value == '':
        return default
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise ParameterError(f'{name} must be a boolean')


def _check_window_fits(start_time: datetime, time_limit: int) -> None:
    # Seeds run up to the JST-shifted end of the window
    try:
        start_time + timedelta(seconds=time_limit) + JST_OFFSET
    except OverflowError:
        raise ParameterError('startTime plus timeLimit is past the last representable date')


def _as_mapping(data) -> Mapping:
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ParameterError('request must be an object')
    return data


def parse_prediction_params(data, max_time_limit: int) -> dict:
    """Map request keys onto ``predict`` keyword arguments."""
    data = _as_mapping(data)
    params = {
        'start_time': parse_start_time(data.get('startTime')),
        'time_limit': parse_positive_int('timeLimit', data.get('timeLimit'), max_time_limit),
        'use_jst_offset': parse_bool('isJst', data.get('isJst')),
        'include_normal': parse_bool('includeNormal', data.get('includeNormal')),
        'include_quadruple': parse_bool('includeQuadruple', data.get('includeQuadruple')),
        'include_hundred': parse_bool('include100', data.get('include100')),
    }
    _check_window_fits(params['start_time'], params['time_limit'])
    return params


def parse_count_params(data, max_time_limit: int, max_time_spans: int) -> dict:
    """Map request keys onto ``count_by_window`` keyword arguments."""
    data = _as_mapping(data)
    params = {
        'start_time': parse_start_time(data.get('startTime')),
        'time_span': parse_positive_int('timeSpan', data.get('timeSpan')),
        'time_limit': parse_positive_int('timeLimit', data.get('timeLimit'), max_time_limit),
    }
    if span_count(params['time_span'], params['time_limit']) > max_time_spans:
        raise ParameterError(f'timeLimit / timeSpan must not exceed {max_time_spans} spans')
    _check_window_fits(params['start_time'], params['time_limit'])
    return params
