from flask_socketio import emit
from damscore import socketio
from flask import current_app
from damscore.api.params import ParameterError, parse_count_params, parse_prediction_params
from damscore.services.total_score import TotalScoreError, count_by_window, predict


def handle_connect():
    emit('connected', {'message': 'Connected to /ws'})


def handle_predict(data):
    cfg = current_app.config
    try:
        params = parse_prediction_params(data, int(cfg.get('MAX_TIME_LIMIT', 86400)))
        predictions = predict(**params)
    except (ParameterError, TotalScoreError) as exc:
        emit('error', {'message': str(exc)})
        return
    current_app.logger.info(f"[ws-predict] limit={params['time_limit']} results={len(predictions)}")
    emit('predictions', {'predictions': [p.to_dict() for p in predictions]})


def handle_count(data):
    cfg = current_app.config
    try:
        params = parse_count_params(
            data,
            int(cfg.get('MAX_TIME_LIMIT', 86400)),
            int(cfg.get('MAX_TIME_SPANS', 1440)),
        )
        counts = count_by_window(**params)
    except (ParameterError, TotalScoreError) as exc:
        emit('error', {'message': str(exc)})
        return
    current_app.logger.info(f"[ws-count] span={params['time_span']} limit={params['time_limit']} spans={len(counts)}")
    emit('prediction_counts', {'counts': [c.to_dict() for c in counts]})


def handle_ping(data):
    emit('pong', data or {})


def register_socketio_handlers(testing: bool = False) -> None:
    """Register Socket.IO event handlers.

    Always register on namespace '/ws'. When testing is True, also mirror
    handlers on the default namespace '/' to accommodate the test harness.
    """
    # Primary namespace
    socketio.on_event('connect', handle_connect, namespace='/ws')
    socketio.on_event('predict', handle_predict, namespace='/ws')
    socketio.on_event('count', handle_count, namespace='/ws')
    socketio.on_event('ping', handle_ping, namespace='/ws')

    if testing:
        # Test-only mirror on default namespace
        socketio.on_event('connect', handle_connect, namespace='/')
        socketio.on_event('predict', handle_predict, namespace='/')
        socketio.on_event('count', handle_count, namespace='/')
        socketio.on_event('ping', handle_ping, namespace='/')
