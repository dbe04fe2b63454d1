import logging

from flask import Blueprint, Flask, current_app, jsonify, request
from flask_cors import CORS
from flask_socketio import SocketIO, emit

from config import load_config
from stats import (
    MAX_DIFFICULTY_LENGTH,
    MAX_NAME_LENGTH,
    MAX_TIME_TAKEN_SECONDS,
    StatsError,
    StatsStore,
)
from sudoku import generate

logger = logging.getLogger(__name__)

DEFAULT_DIFFICULTY = 'medium'

bp = Blueprint('sudoku', __name__)
socketio = SocketIO(cors_allowed_origins="*")


def _store():
    return current_app.extensions['stats_store']


def _valid_stat(player_name, difficulty, time_taken):
    if not isinstance(player_name, str) or not player_name.strip():
        return False
    if len(player_name.strip()) > MAX_NAME_LENGTH:
        return False
    if not isinstance(difficulty, str) or len(difficulty) > MAX_DIFFICULTY_LENGTH:
        return False
    # bool is an int subclass
    if isinstance(time_taken, bool) or not isinstance(time_taken, int):
        return False
    return 0 < time_taken <= MAX_TIME_TAKEN_SECONDS


@bp.route("/")
def index():
    return current_app.send_static_file("index.html")


@bp.route("/generate", methods=['GET'])
def generate_puzzle():
    difficulty = request.args.get('difficulty') or DEFAULT_DIFFICULTY
    puzzle, solution = generate(difficulty)
    logger.debug("Generated %s puzzle", difficulty)
    return jsonify({"puzzle": puzzle, "solution": solution})


@bp.route("/stats", methods=['GET'])
def get_stats():
    try:
        stats = _store().get_top_stats()
    except StatsError:
        logger.exception("Failed to load stats")
        return jsonify({"error": "internal server error"}), 500
    return jsonify(stats)


@bp.route("/stats", methods=['POST'])
def save_stats():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "wrong request"}), 400

    player_name = data.get('playerName')
    difficulty = data.get('difficulty') or ''
    time_taken = data.get('timeTakenSeconds')

    if not _valid_stat(player_name, difficulty, time_taken):
        return jsonify({"error": "player name and time must be specified"}), 400

    store = _store()
    try:
        store.save_stat(player_name.strip(), difficulty, time_taken)
        leaderboard = store.get_top_stats()
    except StatsError:
        logger.exception("Failed to save stat")
        return jsonify({"error": "internal server error"}), 500

    socketio.emit('leaderboard', {"stats": leaderboard})
    return jsonify({"status": "success"}), 201


@socketio.on('leaderboard')
def on_leaderboard(data=None):
    try:
        stats = _store().get_top_stats()
    except StatsError:
        logger.exception("Failed to load stats")
        emit('error', {"message": "internal server error"})
        return
    emit('leaderboard', {"stats": stats})


def create_app(config=None, store=None):
    config = config or load_config()

    app = Flask(__name__, static_folder=config.static_dir, static_url_path='')
    CORS(app)

    if store is None:
        store = StatsStore(config.db_dsn)
        store.migrate()
    app.extensions['stats_store'] = store
    app.config['SUDOKU'] = config

    app.register_blueprint(bp)
    socketio.init_app(app, async_mode=config.socketio_async_mode)
    return app

