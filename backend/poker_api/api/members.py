from flask import Blueprint, jsonify, request

from poker_api.errors import error_builder
from poker_api.repositories import members as members_repository
from poker_api.repositories.games import get_games_by_member_id
from .common import check_non_negative_ints, check_strings, first_error, get_attributes

members = Blueprint('members', __name__)

MEMBER_NOT_FOUND = 'A member with the specified ID was not found.'


def _conflict(attributes, exclude_id=None):
    taken = members_repository.find_conflicts(
        attributes.get('memberNickname'), attributes.get('memberEmail'), exclude_id=exclude_id,
    )
    if taken:
        return error_builder(409, f"Already in use by another member: {', '.join(taken)}.")
    return None


@members.route('', methods=['GET'])
def list_members():
    return jsonify(members_repository.get_members(request.args.to_dict()))


@members.route('', methods=['POST'])
def create_member():
    attributes, error = get_attributes('member')
    if error:
        return error
    message = first_error(
        check_strings(attributes, ('memberNickname', 'memberEmail'), required=True),
        check_strings(attributes, ('memberPassword',)),
    )
    if message:
        return error_builder(400, message)
    conflict = _conflict(attributes)
    if conflict:
        return conflict
    return jsonify(members_repository.post_member(attributes)), 201


@members.route('/<int:member_id>', methods=['GET'])
def get_member(member_id):
    result = members_repository.get_member_by_id(member_id)
    if not result:
        return error_builder(404, MEMBER_NOT_FOUND)
    return jsonify(result)


@members.route('/<int:member_id>', methods=['PATCH'])
def update_member(member_id):
    attributes, error = get_attributes('member')
    if error:
        return error
    if not members_repository.get_member_by_id(member_id):
        return error_builder(404, MEMBER_NOT_FOUND)
    message = first_error(
        check_strings(attributes, ('memberNickname', 'memberEmail', 'memberPassword')),
        check_non_negative_ints(attributes, ('memberLevel', 'memberExpOverLevel')),
    )
    if message:
        return error_builder(400, message)
    conflict = _conflict(attributes, exclude_id=member_id)
    if conflict:
        return conflict

    if not members_repository.patch_member(member_id, attributes):
        return error_builder(404, MEMBER_NOT_FOUND)
    return jsonify(members_repository.get_member_by_id(member_id))


@members.route('/<int:member_id>', methods=['DELETE'])
def delete_member(member_id):
    if not members_repository.delete_member(member_id):
        return error_builder(404, MEMBER_NOT_FOUND)
    return '', 204


@members.route('/<int:member_id>/games', methods=['GET'])
def list_member_games(member_id):
    if not members_repository.get_member_by_id(member_id):
        return error_builder(404, MEMBER_NOT_FOUND)
    return jsonify(get_games_by_member_id(member_id))
