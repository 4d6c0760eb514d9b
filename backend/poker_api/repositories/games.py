from flask import current_app
from sqlalchemy import delete, func, insert, select, update

from poker_api.models import Card, CardNumber, CardSuit, Game, Player, Round, Status, TableCard
from poker_api.serializers import serialize_game, serialize_games
from .cards import insert_cards, lookup_reference_id
from .connection import connection_scope
from .rows import column_map, merge_rows, pick_truthy_or_zero, single_result, storage_values

PATCHABLE_COLUMNS = column_map(Game.__table__, ('roundId', 'minimumBet', 'maximumBet', 'betPool'))


def _games_query():
    """One row per (game, table card); games without cards get one null-card row."""
    return (
        select(
            Game.id.label('game_id'),
            Round.round,
            Game.minimum_bet,
            Game.maximum_bet,
            Game.bet_pool,
            CardNumber.card_number,
            CardSuit.suit,
        )
        .select_from(Game)
        .join(Round, Game.round_id == Round.id)
        .outerjoin(TableCard, TableCard.game_id == Game.id)
        .outerjoin(Card, TableCard.card_id == Card.id)
        .outerjoin(CardNumber, Card.card_number_id == CardNumber.id)
        .outerjoin(CardSuit, Card.card_suit_id == CardSuit.id)
        .order_by(Game.id, TableCard.id)
    )


def _fetch_games(stmt, connection=None):
    with connection_scope(connection) as conn:
        rows = conn.execute(stmt).mappings().all()
    return merge_rows(rows, 'game_id', 'table_cards')


def get_games(query=None):
    """Return all games, optionally only those in ``query['round']``."""
    stmt = _games_query()
    round_label = query.get('round') if query else None
    if round_label:
        stmt = stmt.where(Round.round == round_label)
    return serialize_games(_fetch_games(stmt), query)


def get_game_by_id(game_id):
    """Return the game envelope, or ``None`` when no such game exists."""
    game = single_result(_fetch_games(_games_query().where(Game.id == game_id)))
    if game is None:
        return None
    return serialize_game(game)


def get_games_by_member_id(member_id):
    """Return the games in which the member holds a seat."""
    seats = select(Player.game_id).where(Player.member_id == member_id)
    games = _fetch_games(_games_query().where(Game.id.in_(seats)))
    current_app.logger.debug(f"[games] member={member_id} raw games={games}")
    return serialize_games(games)


def validate_game(game_id, connection=None):
    with connection_scope(connection) as conn:
        count = conn.execute(select(func.count()).select_from(Game).where(Game.id == game_id)).scalar_one()
    return count == 1


def post_game(attributes):
    """Create a game with its table cards and a waiting seat per member id."""
    with connection_scope() as conn:
        round_id = lookup_reference_id(Round.round, attributes['round'], conn)
        game_id = conn.execute(
            insert(Game).values(
                round_id=round_id,
                minimum_bet=str(attributes.get('minimumBet') or 0),
                maximum_bet=str(attributes.get('maximumBet') or 0),
                bet_pool=str(attributes.get('betPool') or 0),
            )
        ).inserted_primary_key[0]
        insert_cards(TableCard, 'game_id', game_id, attributes.get('tableCards') or [], conn)

        member_ids = attributes.get('memberIds') or []
        if member_ids:
            waiting_id = lookup_reference_id(Status.status, 'waiting', conn)
            conn.execute(insert(Player), [
                {'member_id': member_id, 'game_id': game_id, 'player_bet': '0', 'status_id': waiting_id}
                for member_id in member_ids
            ])
    current_app.logger.info(f"[games] created game={game_id} seats={len(member_ids)}")
    return get_game_by_id(game_id)


def patch_game(game_id, attributes):
    """Apply a partial update; ``tableCards`` replaces the whole table.

    Returns ``True`` when nothing but cards (or nothing at all) was supplied,
    otherwise whether the game row was updated.
    """
    # roundId is only ever derived from round
    attributes = {name: value for name, value in attributes.items() if name != 'roundId'}
    table_cards = attributes.pop('tableCards', None)
    round_label = attributes.pop('round', None)
    with connection_scope() as conn:
        if round_label:
            attributes['roundId'] = lookup_reference_id(Round.round, round_label, conn)

        if table_cards is not None:
            conn.execute(delete(TableCard).where(TableCard.game_id == game_id))
            insert_cards(TableCard, 'game_id', game_id, table_cards, conn)

        filtered = pick_truthy_or_zero(
            {name: value for name, value in attributes.items() if name in PATCHABLE_COLUMNS}
        )
        if not filtered:
            return True
        updated = conn.execute(
            update(Game).where(Game.id == game_id).values(storage_values(PATCHABLE_COLUMNS, filtered))
        ).rowcount
    current_app.logger.info(f"[games] patched game={game_id} fields={sorted(filtered)}")
    return updated > 0
