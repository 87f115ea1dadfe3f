import time

from flask import Blueprint, current_app, jsonify, request

from damscore.api.params import ParameterError, parse_count_params, parse_prediction_params
from damscore.services.total_score import TotalScoreError, count_by_window, predict

total_score = Blueprint('total_score', __name__)


@total_score.route('/predictions', methods=['GET'])
def get_predictions():
    cfg = current_app.config
    try:
        params = parse_prediction_params(request.args, int(cfg.get('MAX_TIME_LIMIT', 86400)))
    except ParameterError as exc:
        return jsonify({'error': str(exc)}), 400

    start = time.perf_counter()
    try:
        predictions = predict(**params)
    except TotalScoreError as exc:
        return jsonify({'error': str(exc)}), 400
    elapsed_ms = (time.perf_counter() - start) * 1000.0
    current_app.logger.debug(
        f"[predict] start={params['start_time'].isoformat()} limit={params['time_limit']} "
        f"jst={params['use_jst_offset']} results={len(predictions)} {elapsed_ms:.0f}ms"
    )
    return jsonify([p.to_dict() for p in predictions])


@total_score.route('/prediction-counts', methods=['GET'])
def get_prediction_counts():
    cfg = current_app.config
    try:
        params = parse_count_params(
            request.args,
            int(cfg.get('MAX_TIME_LIMIT', 86400)),
            int(cfg.get('MAX_TIME_SPANS', 1440)),
        )
    except ParameterError as exc:
        return jsonify({'error': str(exc)}), 400

    start = time.perf_counter()
    try:
        counts = count_by_window(**params)
    except TotalScoreError as exc:
        return jsonify({'error': str(exc)}), 400
    elapsed_ms = (time.perf_counter() - start) * 1000.0
    current_app.logger.debug(
        f"[count] start={params['start_time'].isoformat()} span={params['time_span']} "
        f"limit={params['time_limit']} spans={len(counts)} {elapsed_ms:.0f}ms"
    )
    return jsonify([c.to_dict() for c in counts])
