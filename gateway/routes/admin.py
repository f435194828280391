from flask import Blueprint

from gateway.auth import admin_required
from gateway.routes.players import get_registry, plain_text, require_args

bp = Blueprint('admin', __name__, url_prefix='/admin')


@bp.route('/maxNumberOfUsers', methods=['GET'])
@admin_required
def get_max_number_of_users():
    return plain_text(get_registry().max_number_of_users)

@bp.route('/increaseMaxNumberOfUsers', methods=['GET'])
@admin_required
def increase_max_number_of_users():
    return plain_text(get_registry().increase_max_number_of_users())

@bp.route('/decreaseMaxNumberOfUsers', methods=['GET'])
@admin_required
def decrease_max_number_of_users():
    return plain_text(get_registry().decrease_max_number_of_users())

@bp.route('/removeElevatorGame', methods=['POST'])
@admin_required
def remove_elevator_game():
    """Force-remove a player's game."""
    email, = require_args('email')
    get_registry().unregister(email, removed_by_admin=True)
    return '', 204
