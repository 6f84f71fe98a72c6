"""
Test suite for the Flask API.

Tests cover:
- Maze, state, solve and race endpoints
- The visualizer page
- No-cache and CORS headers
- Unknown algorithms and routes
- Configuration from mappings and the environment
"""

import pytest

from mazeapp import Cell, ConfigurationError, create_app, deserialize_state

from conftest import assert_valid_path


class TestEndpoints:
    def test_index_page(self, client):
        res = client.get('/')
        assert res.status_code == 200
        assert b"Escape The Grid" in res.data

    def test_index_page_replays_the_race(self, client):
        html = client.get('/').get_data(as_text=True)
        assert '/api/race' in html
        assert 'requestAnimationFrame' in html
        for element in ('stopBtn', 'resumeBtn', 'clearLogBtn', 'winner', 'log'):
            assert f'id="{element}"' in html

    def test_state(self, client):
        res = client.get('/api/state')
        assert res.status_code == 200
        assert res.mimetype == 'application/json'
        data = res.get_json()
        assert (data['rows'], data['cols']) == (25, 38)
        assert data['start'] == {'x': 1, 'y': 1}
        assert data['goal'] == {'x': 23, 'y': 36}
        assert 'path' not in data

    def test_generate_replaces_maze(self, app, client):
        store = app.extensions['maze_store']
        before = client.get('/api/state').get_json()
        version = store.version
        res = client.get('/api/generate')
        assert res.status_code == 200
        assert store.version == version + 1
        after = client.get('/api/state').get_json()
        assert after == res.get_json()
        assert after['maze'] != before['maze']

    def test_generate_accepts_post(self, client):
        assert client.post('/api/generate').status_code == 200

    @pytest.mark.parametrize("algorithm", ["BFS", "AStar", "astar"])
    def test_solve(self, client, algorithm):
        res = client.get(f'/api/solve/{algorithm}')
        assert res.status_code == 200
        data = res.get_json()
        state = deserialize_state(data)
        path = [Cell(c["x"], c["y"]) for c in data["path"]]
        assert path
        assert_valid_path(state, path)
        assert data['pathLength'] == len(path)
        assert data['visitedNodes'] == len(data['visitedOrder'])
        assert data['timeMs'] >= 0

    def test_solvers_agree_on_current_maze(self, client):
        bfs = client.get('/api/solve/BFS').get_json()
        astar = client.get('/api/solve/AStar').get_json()
        assert bfs['maze'] == astar['maze']
        assert bfs['pathLength'] == astar['pathLength']

    def test_race(self, client):
        state = client.get('/api/state').get_json()
        res = client.get('/api/race')
        assert res.status_code == 200
        data = res.get_json()
        assert data['maze'] == state['maze']
        assert set(data['results']) == {'BFS', 'AStar'}
        assert data['winner'] in data['results']
        assert data['fastest'] in data['results']
        assert data['sameLength'] is True
        bfs, astar = data['results']['BFS'], data['results']['AStar']
        if bfs['visitedNodes'] != astar['visitedNodes']:
            fewer = min(data['results'].values(), key=lambda r: r['visitedNodes'])
            assert data['winner'] == fewer['algorithm']
        assert f"Both shortest path length = {bfs['pathLength']}" in data['summary']

    def test_healthz(self, client):
        assert client.get('/healthz').get_json() == {'status': 'ok'}


class TestErrors:
    def test_unknown_algorithm_is_404(self, client):
        res = client.get('/api/solve/DFS')
        assert res.status_code == 404
        assert 'DFS' in res.get_json()['error']

    def test_unknown_route_is_404(self, client):
        res = client.get('/api/nowhere')
        assert res.status_code == 404
        assert 'error' in res.get_json()

    def test_no_static_route(self, app, client):
        assert app.static_folder is None
        assert client.get('/static/script.js').status_code == 404

    def test_bad_dimensions_fail_at_startup(self):
        with pytest.raises(ConfigurationError):
            create_app({'MAZE_ROWS': 2})


class TestHeaders:
    @pytest.mark.parametrize("url", ['/api/state', '/api/generate', '/api/solve/BFS', '/api/race', '/api/solve/DFS'])
    def test_no_cache(self, client, url):
        res = client.get(url)
        assert res.headers['Cache-Control'] == 'no-store, no-cache, must-revalidate, max-age=0'
        assert res.headers['Pragma'] == 'no-cache'
        assert res.headers['Expires'] == '0'

    def test_cors(self, client):
        res = client.get('/api/state', headers={'Origin': 'http://example.com'})
        # flask-cors 6 echoes the origin instead of sending a wildcard
        assert res.headers['Access-Control-Allow-Origin'] in ('*', 'http://example.com')


class TestConfig:
    def test_mapping_overrides_size(self):
        app = create_app({'MAZE_ROWS': 11, 'MAZE_COLS': 15, 'MAZE_SEED': 1})
        data = app.test_client().get('/api/state').get_json()
        assert (data['rows'], data['cols']) == (11, 15)

    def test_environment_overrides_size(self, monkeypatch):
        monkeypatch.setenv('MAZEAPP_MAZE_ROWS', '9')
        monkeypatch.setenv('MAZEAPP_MAZE_SEED', '4')
        app = create_app()
        assert app.config['MAZE_SEED'] == 4
        data = app.test_client().get('/api/state').get_json()
        assert data['rows'] == 9

    def test_seeded_apps_serve_same_maze(self):
        a = create_app({'MAZE_SEED': 5}).test_client().get('/api/state').get_json()
        b = create_app({'MAZE_SEED': 5}).test_client().get('/api/state').get_json()
        assert a['maze'] == b['maze']
