"""Tests for the JSON routes — Flask test client on a temp DB."""
from conftest import make_scoresheet
from models import game as game_model


def _payload(n_back=3, progress=0.85, scoresheet=None, **extra):
    body = {
        'gameInfo': {'nBack': n_back, 'levelProgress': progress,
                     'tags': ['position'], 'durationSeconds': 100},
        'scoresheet': make_scoresheet(hits=10, non_targets=30) if scoresheet is None else scoresheet,
    }
    body.update(extra)
    return body


def test_health(client):
    assert client.get('/').get_json() == {'status': 'ok'}


def test_complete_levels_up(client):
    resp = client.post('/game/complete', json=_payload())
    assert resp.status_code == 200
    data = resp.get_json()
    assert data['progression']['event'] == 'advance'
    assert data['settings']['nBack'] == 4
    assert data['settings']['levelProgress'] == 0.0
    assert data['analytics']['last_game']['status'] == 'completed'
    assert data['analytics']['play_time'] == '1m 40s'
    statuses = sorted(g['status'] for g in game_model.get_history())
    assert statuses == ['completed', 'tombstone']


def test_complete_aborted_skips_progression(client):
    resp = client.post('/game/complete', json=_payload(status='aborted'))
    data = resp.get_json()
    assert data['progression'] is None
    assert data['settings']['nBack'] == 2
    assert game_model.count() == 1


def test_complete_rejects_tombstone_status(client):
    resp = client.post('/game/complete', json=_payload(status='tombstone'))
    assert resp.status_code == 400
    assert 'error' in resp.get_json()
    assert game_model.count() == 0
    assert client.get('/game/settings').get_json()['levelProgress'] == 0.0


def test_complete_with_progression_disabled(client):
    client.post('/settings/', json={'enableAutoProgression': False})
    data = client.post('/game/complete', json=_payload()).get_json()
    assert data['progression'] is None
    assert data['settings']['levelProgress'] == 0.0
    assert game_model.count() == 1


def test_complete_tally_game(client):
    body = {
        'gameInfo': {'mode': 'tally', 'tags': []},
        'scoresheet': [{'success': True, 'count': 2}, {'success': False}],
        'kind': 'tally',
    }
    data = client.post('/game/complete', json=body).get_json()
    assert data['progression'] is None
    assert data['analytics']['last_game']['scores']['tally']['possible'] == 2


def test_complete_rejects_non_json(client):
    resp = client.post('/game/complete', data='nope', content_type='text/plain')
    assert resp.status_code == 400


def test_complete_rejects_missing_scoresheet(client):
    resp = client.post('/game/complete', json={'gameInfo': {'nBack': 2}})
    assert resp.status_code == 400


def test_complete_rejects_missing_n_back(client):
    resp = client.post('/game/complete', json={'gameInfo': {'tags': []}, 'scoresheet': []})
    assert resp.status_code == 400


def test_complete_rejects_unknown_kind(client):
    resp = client.post('/game/complete', json=_payload(kind='chess'))
    assert resp.status_code == 400


def test_game_settings_route(client):
    data = client.get('/game/settings').get_json()
    assert data['trialTime'] == 2500


def test_settings_toggle(client):
    assert client.get('/settings/').get_json() == {'enableAutoProgression': True}
    resp = client.post('/settings/', json={'enableAutoProgression': False})
    assert resp.get_json() == {'enableAutoProgression': False}
    assert client.post('/settings/', json={}).status_code == 400


def test_dashboard(client):
    client.post('/game/complete', json=_payload(progress=0.2))
    data = client.get('/dashboard/').get_json()
    assert data['last_game']['n_back'] == 3
    assert len(data['recent_games']) == 1
    assert data['play_time'] == '1m 40s'


def test_dashboard_history(client):
    client.post('/game/complete', json=_payload())
    data = client.get('/dashboard/history?page=1').get_json()
    assert len(data['games']) == 2
    assert data['total_pages'] == 1
