def test_index(client):
    res = client.get('/')
    assert res.status_code == 200
    assert 'message' in res.get_json()


def test_healthz(client, coordinator):
    coordinator.join('s1', 'Ava')
    data = client.get('/healthz').get_json()
    assert data == {'status': 'ok', 'phase': 'capture', 'participants': 1}


def test_state_matches_socket_snapshot(client, sio_client):
    sio_client.emit('join', 'Ava')
    data = client.get('/api/survey/state').get_json()
    assert data['phase'] == 'capture'
    assert [p['name'] for p in data['participants'].values()] == ['Ava']
    assert data['detectionLedger'] == {'Ava': {'captured': False, 'recaptured': False}}
    assert data['estimatorResult']['estimate'] is None


def test_estimate_endpoint(client, coordinator):
    coordinator.join('s1', 'Ava')
    coordinator.move('s1', 400, 400)
    coordinator.detection_trigger('s1', 1)
    coordinator.advance_phase('s1')
    coordinator.detection_trigger('s1', 1)
    data = client.get('/api/survey/estimate').get_json()
    assert data['M'] == 1
    assert data['C'] == 1
    assert data['R'] == 1
    assert data['estimate'] == 1
    assert data['observedTotal'] == 1


def test_config_endpoint(client):
    data = client.get('/api/survey/config').get_json()
    assert data['detectionRadius'] == 50.0
    assert data['detectionTolerance'] == 10.0
    assert data['mapWidth'] == 2000
    assert data['detectors'][0] == {'id': 1, 'x': 400.0, 'y': 400.0}
    assert len(data['palette']) == 9


def test_cli_estimate(flask_app):
    runner = flask_app.test_cli_runner()
    result = runner.invoke(args=['estimate', '10', '8', '4'])
    assert result.exit_code == 0
    assert 'N = 20' in result.output

    result = runner.invoke(args=['estimate', '5', '3', '0'])
    assert 'N = undefined' in result.output

    result = runner.invoke(args=['estimate', '2', '3', '4'])
    assert result.exit_code != 0


def test_cli_detectors(flask_app):
    result = flask_app.test_cli_runner().invoke(args=['detectors'])
    assert result.exit_code == 0
    assert 'detector 3: x=1000 y=1000' in result.output
