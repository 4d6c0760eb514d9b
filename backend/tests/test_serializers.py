from poker_api.repositories.rows import Card
from poker_api.serializers import (
    serialize_game, serialize_games, serialize_member, serialize_members, serialize_player, serialize_players,
)

RAW_MEMBERS = [
    {'member_id': 1, 'member_nickname': 'J', 'member_email': 'abc@efg.com',
     'member_level': '20', 'member_exp_over_level': '0'},
    {'member_id': 2, 'member_nickname': 'John Wick', 'member_email': 'wickj@oregonstate.edu',
     'member_level': '200', 'member_exp_over_level': '114514'},
]

MERGED_PLAYER = {
    'player_id': 1, 'game_id': 1, 'member_id': 1, 'member_nickname': 'J', 'member_level': '20',
    'member_exp_over_level': '0', 'player_bet': '123', 'player_status': 'checked',
    'card_number': 'A', 'suit': 'spades',
    'player_cards': [Card('A', 'spades'), Card('8', 'hearts')],
}


def test_serialize_game(flask_app):
    row = {
        'game_id': 1, 'round': 'blind', 'minimum_bet': '100', 'maximum_bet': '200', 'bet_pool': '1000',
        'card_number': '2', 'suit': 'spades', 'table_cards': [Card('2', 'spades')],
    }
    assert serialize_game(row) == {
        'links': {'self': '/v1/games/1'},
        'data': {
            'type': 'game',
            'id': '1',
            'links': {'self': '/v1/games/1'},
            'attributes': {
                'round': 'blind',
                'minimumBet': 100,
                'maximumBet': 200,
                'betPool': 1000,
                'tableCards': [{'cardNumber': '2', 'cardSuit': 'spades'}],
            },
        },
    }


def test_serialize_games_empty_table(flask_app):
    row = {
        'game_id': 3, 'round': 'river', 'minimum_bet': '10000', 'maximum_bet': '20000',
        'bet_pool': '1040000', 'card_number': None, 'suit': None, 'table_cards': [],
    }
    result = serialize_games([row])
    assert result['links'] == {'self': '/v1/games'}
    assert result['data'][0]['attributes']['tableCards'] == []
    assert result['data'][0]['attributes']['betPool'] == 1040000


def test_serialize_member_coerces_numbers(flask_app):
    data = serialize_member(RAW_MEMBERS[1])['data']
    assert data['id'] == '2'
    assert data['links']['self'] == '/v1/members/2'
    assert data['attributes'] == {
        'memberNickname': 'John Wick',
        'memberEmail': 'wickj@oregonstate.edu',
        'memberLevel': 200,
        'memberExpOverLevel': 114514,
    }


def test_serialize_members_narrows_on_query(flask_app):
    result = serialize_members(RAW_MEMBERS, {'memberNickname': 'J', 'memberEmail': 'abc@efg.com'})
    assert [m['id'] for m in result['data']] == ['1']
    assert len(serialize_members(RAW_MEMBERS, {'memberNickname': ''})['data']) == 2
    assert serialize_members(RAW_MEMBERS, {'memberEmail': 'nobody@example.com'})['data'] == []


def test_serialize_player(flask_app):
    assert serialize_player(MERGED_PLAYER, 1) == {
        'links': {'self': '/v1/games/1/players/1'},
        'data': {
            'type': 'player',
            'id': '1',
            'links': {'self': '/v1/games/1/players/1'},
            'attributes': {
                'memberId': '1',
                'memberNickname': 'J',
                'memberLevel': 20,
                'memberExpOverLevel': 0,
                'playerBet': 123,
                'playerStatus': 'checked',
                'playerCards': [
                    {'cardNumber': 'A', 'cardSuit': 'spades'},
                    {'cardNumber': '8', 'cardSuit': 'hearts'},
                ],
            },
        },
    }


def test_serialize_players_seat_without_member(flask_app):
    seat = dict(MERGED_PLAYER, player_id=2, member_id=None, member_nickname=None,
                member_level=None, member_exp_over_level=None, player_status='waiting', player_cards=[])
    result = serialize_players([MERGED_PLAYER, seat], {'playerStatus': 'waiting'}, 1)
    assert result['links'] == {'self': '/v1/games/1/players'}
    assert len(result['data']) == 1
    attributes = result['data'][0]['attributes']
    assert attributes['memberId'] is None
    assert attributes['memberLevel'] is None
    assert attributes['playerCards'] == []
