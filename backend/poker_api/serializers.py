"""JSON:API serializers for merged game, member and player rows.

Repositories hand over rows straight from the database, where money, bets and
levels are text. Serializers coerce those to integers, rename columns to the
camel case attribute names, and wrap everything in a ``{links, data}``
envelope.
"""
from typing import Any, Dict, Iterable, List, Mapping, Optional

from flask import current_app


def _base_path() -> str:
    return current_app.config.get('API_BASE_PATH', '/v1').rstrip('/')


def _to_int(value: Any) -> Optional[int]:
    return None if value is None else int(value)


def _envelope(self_link: str, data) -> Dict[str, Any]:
    return {'links': {'self': self_link}, 'data': data}


def _resource(resource_type: str, resource_id, self_link: str, attributes: Dict[str, Any]) -> Dict[str, Any]:
    return {
        'type': resource_type,
        'id': str(resource_id),
        'links': {'self': self_link},
        'attributes': attributes,
    }


def _narrow(resources: List[Dict[str, Any]], query: Optional[Mapping[str, Any]], fields: Iterable[str]):
    """Keep resources whose attributes equal every supported, non-empty query value."""
    if not query:
        return resources
    wanted = {field: query[field] for field in fields if query.get(field)}
    return [
        r for r in resources
        if all(r['attributes'].get(field) == value for field, value in wanted.items())
    ]


# Games

def game_self_link(game_id) -> str:
    return f'{_base_path()}/games/{game_id}'


def _game_resource(row: Mapping[str, Any]) -> Dict[str, Any]:
    return _resource('game', row['game_id'], game_self_link(row['game_id']), {
        'round': row['round'],
        'minimumBet': _to_int(row['minimum_bet']),
        'maximumBet': _to_int(row['maximum_bet']),
        'betPool': _to_int(row['bet_pool']),
        'tableCards': [card.to_dict() for card in row['table_cards']],
    })


def serialize_games(rows: Iterable[Mapping[str, Any]], query=None) -> Dict[str, Any]:
    resources = _narrow([_game_resource(row) for row in rows], query, ('round',))
    return _envelope(f'{_base_path()}/games', resources)


def serialize_game(row: Mapping[str, Any]) -> Dict[str, Any]:
    return _envelope(game_self_link(row['game_id']), _game_resource(row))


# Members

def member_self_link(member_id) -> str:
    return f'{_base_path()}/members/{member_id}'


def _member_resource(row: Mapping[str, Any]) -> Dict[str, Any]:
    return _resource('member', row['member_id'], member_self_link(row['member_id']), {
        'memberNickname': row['member_nickname'],
        'memberEmail': row['member_email'],
        'memberLevel': _to_int(row['member_level']),
        'memberExpOverLevel': _to_int(row['member_exp_over_level']),
    })


def serialize_members(rows: Iterable[Mapping[str, Any]], query=None) -> Dict[str, Any]:
    resources = _narrow(
        [_member_resource(row) for row in rows], query, ('memberNickname', 'memberEmail'),
    )
    return _envelope(f'{_base_path()}/members', resources)


def serialize_member(row: Mapping[str, Any]) -> Dict[str, Any]:
    return _envelope(member_self_link(row['member_id']), _member_resource(row))


# Players

def players_self_link(game_id) -> str:
    return f'{_base_path()}/games/{game_id}/players'


def _player_resource(row: Mapping[str, Any], game_id) -> Dict[str, Any]:
    member_id = row['member_id']
    return _resource('player', row['player_id'], f"{players_self_link(game_id)}/{row['player_id']}", {
        'memberId': None if member_id is None else str(member_id),
        'memberNickname': row['member_nickname'],
        'memberLevel': _to_int(row['member_level']),
        'memberExpOverLevel': _to_int(row['member_exp_over_level']),
        'playerBet': _to_int(row['player_bet']),
        'playerStatus': row['player_status'],
        'playerCards': [card.to_dict() for card in row['player_cards']],
    })


def serialize_players(rows: Iterable[Mapping[str, Any]], query, game_id) -> Dict[str, Any]:
    resources = _narrow(
        [_player_resource(row, game_id) for row in rows], query, ('playerStatus', 'memberNickname'),
    )
    return _envelope(players_self_link(game_id), resources)


def serialize_player(row: Mapping[str, Any], game_id) -> Dict[str, Any]:
    resource = _player_resource(row, game_id)
    return _envelope(resource['links']['self'], resource)
