def _events(sio_client, name):
    return [pkt for pkt in sio_client.get_received('/ws') if pkt['name'] == name]


def test_socket_connect(sio_client):
    # Ensure we are connected to /ws
    if not sio_client.is_connected('/ws'):
        sio_client.connect(namespace='/ws')
    assert sio_client.is_connected('/ws')
    received = sio_client.get_received('/ws')
    assert any(pkt['name'] == 'connected' for pkt in received)


def test_socket_predict(sio_client):
    sio_client.get_received('/ws')  # flush
    sio_client.emit('predict', {
        'startTime': '2022-01-01T00:00:00Z',
        'timeLimit': 3,
        'isJst': False,
    }, namespace='/ws')
    (pkt,) = _events(sio_client, 'predictions')
    predictions = pkt['args'][0]['predictions']
    assert [p['scoreInteger'] for p in predictions] == [99822, 99678, 99734]


def test_socket_count(sio_client):
    sio_client.get_received('/ws')  # flush
    sio_client.emit('count', {
        'startTime': '2022-01-01T00:00:00Z',
        'timeSpan': 10,
        'timeLimit': 25,
    }, namespace='/ws')
    (pkt,) = _events(sio_client, 'prediction_counts')
    counts = pkt['args'][0]['counts']
    assert [c['utc']['hundredCount'] for c in counts] == [0, 0, 1]


def test_socket_invalid_request_reports_error(sio_client):
    sio_client.get_received('/ws')  # flush
    sio_client.emit('predict', {'timeLimit': 3}, namespace='/ws')
    (pkt,) = _events(sio_client, 'error')
    assert 'startTime' in pkt['args'][0]['message']


def test_socket_ping(sio_client):
    sio_client.get_received('/ws')  # flush
    sio_client.emit('ping', {'n': 1}, namespace='/ws')
    (pkt,) = _events(sio_client, 'pong')
    assert pkt['args'][0] == {'n': 1}


def test_socket_non_object_payload_reports_error(sio_client):
    sio_client.get_received('/ws')  # flush
    sio_client.emit('predict', 'hello', namespace='/ws')
    (pkt,) = _events(sio_client, 'error')
    assert pkt['args'][0]['message'] == 'request must be an object'
    sio_client.emit('count', ['2022-01-01T00:00:00Z'], namespace='/ws')
    (pkt,) = _events(sio_client, 'error')
    assert pkt['args'][0]['message'] == 'request must be an object'


def test_socket_fractional_time_limit_reports_error(sio_client):
    sio_client.get_received('/ws')  # flush
    sio_client.emit('predict', {
        'startTime': '2022-01-01T00:00:00Z',
        'timeLimit': 1.9,
    }, namespace='/ws')
    (pkt,) = _events(sio_client, 'error')
    assert 'timeLimit' in pkt['args'][0]['message']
    # integral floats are accepted
    sio_client.emit('predict', {
        'startTime': '2022-01-01T00:00:00Z',
        'timeLimit': 2.0,
        'isJst': False,
    }, namespace='/ws')
    (pkt,) = _events(sio_client, 'predictions')
    assert len(pkt['args'][0]['predictions']) == 2
