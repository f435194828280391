import io

from flask import Blueprint, request, jsonify, Response, current_app, g

from gateway.auth import admin_required, owner_required
from gateway.exceptions import MissingParameter, InvalidParameter
from gateway.player_registry import PlayerRegistry
from gateway.players_csv import export_players, parse_players

bp = Blueprint('players', __name__)


def get_registry() -> PlayerRegistry:
    return current_app.registry


def require_args(*names):
    values = [request.args.get(name) for name in names]
    missing = [name for name, value in zip(names, values) if not value]
    if missing:
        raise MissingParameter(*missing)
    return values


def plain_text(value) -> Response:
    return Response(str(value), mimetype='text/plain')

# --- Registration ---

@bp.route('/player/register', methods=['POST'])
def register():
    """Register a player; the response body is their generated password."""
    email, pseudo = require_args('email', 'pseudo')
    _, password = get_registry().register(email, pseudo, request.args.get('serverURL'))
    return plain_text(password)

@bp.route('/player/register-with-score', methods=['POST'])
@admin_required
def register_with_score():
    email, pseudo, raw_score = require_args('email', 'pseudo', 'score')
    try:
        score = int(raw_score)
    except ValueError:
        raise InvalidParameter('score', f"{raw_score!r} is not an integer")

    _, password = get_registry().register(email, pseudo, request.args.get('serverURL'), score=score)
    return plain_text(password)

# --- Players table ---

@bp.route('/players.csv', methods=['GET'])
@admin_required
def players_as_csv():
    body = export_players(get_registry().records())
    return Response(body, content_type='text/csv')

@bp.route('/players.csv', methods=['POST'])
@admin_required
def import_players_csv():
    upload = request.files.get('file')
    if upload is not None:
        stream = upload.stream
    else:
        body = request.get_data()
        if not body:
            raise MissingParameter('file')
        stream = io.BytesIO(body)

    get_registry().bulk_import(parse_players(stream))
    return '', 204

# --- Session lifecycle ---

@bp.route('/player/pause', methods=['POST'])
@owner_required
def pause():
    get_registry().pause(request.args['email'])
    return '', 204

@bp.route('/player/resume', methods=['POST'])
@owner_required
def resume():
    get_registry().resume(request.args['email'])
    return '', 204

@bp.route('/player/unregister', methods=['POST'])
@owner_required
def unregister():
    get_registry().unregister(request.args['email'], removed_by_admin=g.is_admin)
    return '', 204

@bp.route('/player/reset', methods=['POST'])
@owner_required
def reset():
    cause = 'administrator request' if g.is_admin else 'player request'
    get_registry().reset(request.args['email'], cause=cause)
    return '', 204

# --- Read-only views ---

@bp.route('/player/info', methods=['GET'])
@owner_required
def player_info():
    return jsonify(get_registry().get_player_info(request.args['email']).to_dict())

@bp.route('/leaderboard', methods=['GET'])
def leaderboard():
    return jsonify([info.to_dict() for info in get_registry().leaderboard()])
