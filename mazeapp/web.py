"""
Maze Visualizer backend (Flask).
Endpoints:
  GET      /                      -> visualizer page
  GET|POST /api/generate          -> new maze: { rows, cols, maze: [[0/1]], start, goal }
  GET      /api/state             -> the current maze, same shape
  GET      /api/solve/<algorithm> -> current maze plus
                                     { algorithm, path, visitedNodes, timeMs, pathLength, visitedOrder }
  GET      /api/race              -> current maze plus { results: {BFS: ..., AStar: ...},
                                     winner, fastest, sameLength, summary }
  GET      /healthz               -> { status: "ok" }
algorithm is BFS or AStar.
"""
from flask import Flask, jsonify, render_template
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from .config import Config
from .errors import ConfigurationError, UnknownAlgorithmError
from .generator import MazeGenerator
from .race import race
from .serializer import serialize_race, serialize_state
from .solvers import SOLVERS, get_solver
from .store import MazeStore

NO_CACHE_HEADERS = {
    "Cache-Control": "no-store, no-cache, must-revalidate, max-age=0",
    "Pragma": "no-cache",
    "Expires": "0",
}


def create_app(config=None, store=None):
    app = Flask(__name__, template_folder="templates", static_folder=None)
    app.config.from_object(Config)
    app.config.from_prefixed_env("MAZEAPP")
    if config:
        app.config.from_mapping(config)
    app.json.sort_keys = False
    CORS(app)

    if store is None:
        generator = MazeGenerator(
            rows=int(app.config["MAZE_ROWS"]),
            cols=int(app.config["MAZE_COLS"]),
            braid_probability=float(app.config["MAZE_BRAID_PROBABILITY"]),
            seed=app.config["MAZE_SEED"],
        )
        store = MazeStore(generator)
    # initialize maze at server start
    state = store.regenerate()
    app.extensions["maze_store"] = store
    app.logger.info("maze %dx%d ready", state.rows, state.cols)

    register_routes(app, store)
    return app


def register_routes(app, store):
    @app.after_request
    def no_cache(response):
        # the maze changes under the client; cached records desync grid and path
        response.headers.update(NO_CACHE_HEADERS)
        return response

    @app.route('/')
    @app.route('/index.html')
    def index():
        return render_template('index.html')

    @app.route('/api/generate', methods=['GET', 'POST'])
    def api_generate():
        state = store.regenerate()
        app.logger.info("generated %dx%d maze", state.rows, state.cols)
        return jsonify(serialize_state(state))

    @app.route('/api/state')
    def api_state():
        return jsonify(serialize_state(store.snapshot()))

    @app.route('/api/solve/<algorithm>')
    def api_solve(algorithm):
        solver = get_solver(algorithm)
        state = store.snapshot()
        result = solver.solve(state)
        app.logger.info("%s: visited %d, path %d, %.3f ms",
                        result.algorithm, result.visited_count,
                        result.path_length, result.elapsed_ms)
        return jsonify(serialize_state(state, result))

    @app.route('/api/race')
    def api_race():
        state = store.snapshot()
        summary = race(state, list(SOLVERS.values()))
        app.logger.info("%s", summary.describe())
        return jsonify(serialize_race(state, summary))

    @app.route('/healthz')
    def healthz():
        return jsonify({'status': 'ok'})

    @app.errorhandler(UnknownAlgorithmError)
    def unknown_algorithm(err):
        app.logger.warning("%s", err)
        return jsonify({'error': str(err)}), 404

    @app.errorhandler(ConfigurationError)
    def bad_configuration(err):
        app.logger.error("maze configuration error: %s", err)
        return jsonify({'error': str(err)}), 500

    @app.errorhandler(HTTPException)
    def http_error(err):
        return jsonify({'error': err.description}), err.code
