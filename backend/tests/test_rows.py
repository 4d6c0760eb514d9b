import math

import pytest

from poker_api.errors import ContractViolationError
from poker_api.repositories.rows import (
    Card, database_name, has_duplicates, is_truthy_or_zero, merge_rows, pick_truthy_or_zero, single_result,
)


def _game_row(game_id, number, suit, round_label='river', minimum='1000', maximum='2000', pool='104000'):
    return {
        'game_id': game_id, 'round': round_label, 'minimum_bet': minimum, 'maximum_bet': maximum,
        'bet_pool': pool, 'card_number': number, 'suit': suit,
    }


RAW_GAMES = [
    _game_row(1, '2', 'spades', 'blind', '100', '200', '1000'),
    _game_row(2, '8', 'diamonds'),
    _game_row(2, '9', 'diamonds'),
    _game_row(2, '10', 'diamonds'),
    _game_row(2, 'J', 'diamonds'),
    _game_row(2, 'Q', 'diamonds'),
    _game_row(3, None, None, 'river', '10000', '20000', '1040000'),
]


def test_merge_groups_cards_in_first_seen_order():
    merged = merge_rows(RAW_GAMES, 'game_id', 'table_cards')
    assert [game['game_id'] for game in merged] == [1, 2, 3]
    assert merged[0]['table_cards'] == [Card('2', 'spades')]
    assert [card.number for card in merged[1]['table_cards']] == ['8', '9', '10', 'J', 'Q']
    assert merged[1]['bet_pool'] == '104000'


def test_merge_null_card_gives_empty_list():
    merged = merge_rows(RAW_GAMES, 'game_id', 'table_cards')
    assert merged[2]['table_cards'] == []


def test_merge_is_idempotent():
    once = merge_rows(RAW_GAMES, 'game_id', 'table_cards')
    assert merge_rows(once, 'game_id', 'table_cards') == once


def test_merge_keeps_parent_order_when_rows_interleave():
    rows = [
        {'player_id': 2, 'card_number': 'A', 'suit': 'spades'},
        {'player_id': 1, 'card_number': '8', 'suit': 'hearts'},
        {'player_id': 2, 'card_number': 'K', 'suit': 'clubs'},
    ]
    merged = merge_rows(rows, 'player_id', 'player_cards')
    assert [p['player_id'] for p in merged] == [2, 1]
    assert merged[0]['player_cards'] == [Card('A', 'spades'), Card('K', 'clubs')]


def test_merge_empty_input():
    assert merge_rows([], 'game_id', 'table_cards') == []


def test_merge_does_not_mutate_input():
    rows = [_game_row(1, '2', 'spades')]
    merge_rows(rows, 'game_id', 'table_cards')
    assert 'table_cards' not in rows[0]


def test_card_to_dict():
    assert Card('A', 'spades').to_dict() == {'cardNumber': 'A', 'cardSuit': 'spades'}


def test_single_result_classification():
    assert single_result([]) is None
    assert single_result([{'player_id': 1}]) == {'player_id': 1}
    with pytest.raises(ContractViolationError):
        single_result([{'player_id': 1}, {'player_id': 2}])


def test_has_duplicates():
    assert has_duplicates([1, 4, 2, 3, 7, 6, 200]) is False
    assert has_duplicates([3, 5, 3, 2, 4, 6]) is True
    assert has_duplicates([]) is False


@pytest.mark.parametrize('value', [0, 1, 'a', 'abc', '0', 'false', [], [1, 2, 3], {'a': 'b'}, {}, 0.0, True])
def test_truthy_or_zero_keeps(value):
    assert is_truthy_or_zero(value)


@pytest.mark.parametrize('value', [False, '', None, math.nan])
def test_truthy_or_zero_drops(value):
    assert not is_truthy_or_zero(value)


def test_pick_truthy_or_zero():
    picked = pick_truthy_or_zero({'playerBet': 0, 'statusId': None, 'memberEmail': '', 'memberLevel': 3})
    assert picked == {'playerBet': 0, 'memberLevel': 3}


@pytest.mark.parametrize('name, expected', [
    ('abc', 'ABC'),
    ('abcDef', 'ABC_DEF'),
    ('abcDefJsk', 'ABC_DEF_JSK'),
    ('ABCHH', 'ABCHH'),
    ('AbChC', 'AB_CH_C'),
    ('memberNickname', 'MEMBER_NICKNAME'),
    ('memberExpOverLevel', 'MEMBER_EXP_OVER_LEVEL'),
])
def test_database_name(name, expected):
    assert database_name(name) == expected
