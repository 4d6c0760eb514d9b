from flask import Blueprint, jsonify, request

from poker_api.errors import error_builder
from poker_api.repositories import games as games_repository
from poker_api.repositories.members import validate_members
from poker_api.repositories.rows import has_duplicates
from .common import check_cards, check_non_negative_ints, check_strings, first_error, get_attributes, is_non_negative_int

games = Blueprint('games', __name__)

BET_FIELDS = ('minimumBet', 'maximumBet', 'betPool')
GAME_NOT_FOUND = 'A game with the specified ID was not found.'


def _check_bet_range(attributes):
    low, high = attributes.get('minimumBet'), attributes.get('maximumBet')
    if is_non_negative_int(low) and is_non_negative_int(high) and low > high:
        return "'minimumBet' cannot be greater than 'maximumBet'."
    return None


@games.route('', methods=['GET'])
def list_games():
    return jsonify(games_repository.get_games(request.args.to_dict()))


@games.route('', methods=['POST'])
def create_game():
    attributes, error = get_attributes('game')
    if error:
        return error
    message = first_error(
        check_strings(attributes, ('round',), required=True),
        check_non_negative_ints(attributes, BET_FIELDS),
        _check_bet_range(attributes),
        check_cards(attributes, 'tableCards'),
    )
    if message:
        return error_builder(400, message)

    member_ids = attributes.get('memberIds') or []
    if not isinstance(member_ids, list) or not all(is_non_negative_int(m) for m in member_ids):
        return error_builder(400, "'memberIds' must be a list of member ids.")
    if has_duplicates(member_ids):
        return error_builder(400, "'memberIds' contains the same member more than once.")
    if not validate_members(member_ids):
        return error_builder(400, "'memberIds' references members that do not exist.")

    return jsonify(games_repository.post_game(attributes)), 201


@games.route('/<int:game_id>', methods=['GET'])
def get_game(game_id):
    result = games_repository.get_game_by_id(game_id)
    if not result:
        return error_builder(404, GAME_NOT_FOUND)
    return jsonify(result)


@games.route('/<int:game_id>', methods=['PATCH'])
def update_game(game_id):
    attributes, error = get_attributes('game')
    if error:
        return error
    if not games_repository.validate_game(game_id):
        return error_builder(404, GAME_NOT_FOUND)
    message = first_error(
        check_strings(attributes, ('round',)),
        check_non_negative_ints(attributes, BET_FIELDS),
        _check_bet_range(attributes),
        check_cards(attributes, 'tableCards'),
    )
    if message:
        return error_builder(400, message)

    if not games_repository.patch_game(game_id, attributes):
        return error_builder(404, GAME_NOT_FOUND)
    return jsonify(games_repository.get_game_by_id(game_id))
