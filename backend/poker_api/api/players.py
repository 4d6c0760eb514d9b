from flask import Blueprint, jsonify, request

from poker_api.errors import error_builder
from poker_api.repositories import players as players_repository
from poker_api.repositories.games import validate_game
from poker_api.repositories.members import validate_members
from .common import check_cards, check_non_negative_ints, check_strings, first_error, get_attributes, is_non_negative_int

players = Blueprint('players', __name__)

GAME_NOT_FOUND = 'A game with the specified ID was not found.'
PLAYER_NOT_FOUND = 'A player with the specified ID was not found in this game.'


def _check_player_attributes(attributes):
    return first_error(
        check_non_negative_ints(attributes, ('playerBet',)),
        check_strings(attributes, ('playerStatus',)),
        check_cards(attributes, 'playerCards'),
    )


@players.route('', methods=['GET'])
def list_players(game_id):
    result = players_repository.get_players_by_game_id(game_id, request.args.to_dict())
    if result is None:
        return error_builder(404, GAME_NOT_FOUND)
    return jsonify(result)


@players.route('', methods=['POST'])
def create_player(game_id):
    attributes, error = get_attributes('player')
    if error:
        return error
    if not validate_game(game_id):
        return error_builder(404, GAME_NOT_FOUND)
    message = _check_player_attributes(attributes)
    if message:
        return error_builder(400, message)

    # A seat may be opened without a member
    member_id = attributes.get('memberId')
    if member_id is not None:
        if not is_non_negative_int(member_id):
            return error_builder(400, "'memberId' must be a member id.")
        if not validate_members([member_id]):
            return error_builder(400, 'A member with the specified memberId does not exist.')

    return jsonify(players_repository.post_player_by_game_id(game_id, attributes)), 201


@players.route('/<int:player_id>', methods=['GET'])
def get_player(game_id, player_id):
    result = players_repository.get_player_by_game_id_and_player_id(game_id, player_id)
    if not result:
        return error_builder(404, PLAYER_NOT_FOUND)
    return jsonify(result)


@players.route('/<int:player_id>', methods=['PATCH'])
def update_player(game_id, player_id):
    attributes, error = get_attributes('player')
    if error:
        return error
    if not players_repository.get_player_by_game_id_and_player_id(game_id, player_id):
        return error_builder(404, PLAYER_NOT_FOUND)
    message = _check_player_attributes(attributes)
    if message:
        return error_builder(400, message)

    if not players_repository.patch_player(player_id, attributes):
        return error_builder(404, PLAYER_NOT_FOUND)
    return jsonify(players_repository.get_player_by_game_id_and_player_id(game_id, player_id))


@players.route('/<int:player_id>', methods=['DELETE'])
def delete_player(game_id, player_id):
    if not players_repository.get_player_by_game_id_and_player_id(game_id, player_id):
        return error_builder(404, PLAYER_NOT_FOUND)
    players_repository.delete_player_by_player_id(player_id)
    return '', 204
