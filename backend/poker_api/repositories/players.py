from flask import current_app
from sqlalchemy import delete, insert, select, update

from poker_api.models import Card, CardNumber, CardSuit, Member, Player, PlayerCard, Status
from poker_api.serializers import serialize_player, serialize_players
from .cards import insert_cards, lookup_reference_id
from .connection import connection_scope
from .games import validate_game
from .rows import column_map, merge_rows, pick_truthy_or_zero, single_result, storage_values

PATCHABLE_COLUMNS = column_map(Player.__table__, ('playerBet', 'statusId'))


def _players_query():
    """One row per (player, held card).

    Members are outer joined so that seats without a member are listed too.
    """
    return (
        select(
            Player.id.label('player_id'),
            Player.game_id,
            Player.member_id,
            Member.member_nickname,
            Member.member_level,
            Member.member_exp_over_level,
            Player.player_bet,
            Status.status.label('player_status'),
            CardNumber.card_number,
            CardSuit.suit,
        )
        .select_from(Player)
        .join(Status, Status.id == Player.status_id)
        .outerjoin(Member, Member.id == Player.member_id)
        .outerjoin(PlayerCard, PlayerCard.player_id == Player.id)
        .outerjoin(Card, PlayerCard.card_id == Card.id)
        .outerjoin(CardNumber, Card.card_number_id == CardNumber.id)
        .outerjoin(CardSuit, Card.card_suit_id == CardSuit.id)
        .order_by(Player.id, PlayerCard.id)
    )


def get_players_by_game_id(game_id, query=None):
    """Return the players seated at a game, or ``None`` when the game is missing."""
    with connection_scope() as conn:
        if not validate_game(game_id, conn):
            return None
        rows = conn.execute(_players_query().where(Player.game_id == game_id)).mappings().all()
    return serialize_players(merge_rows(rows, 'player_id', 'player_cards'), query, game_id)


def get_player_by_game_id_and_player_id(game_id, player_id):
    with connection_scope() as conn:
        rows = conn.execute(
            _players_query().where(Player.game_id == game_id, Player.id == player_id)
        ).mappings().all()
    player = single_result(merge_rows(rows, 'player_id', 'player_cards'))
    if player is None:
        return None
    return serialize_player(player, game_id)


def clean_player_cards_by_player_id(player_id, connection):
    return connection.execute(delete(PlayerCard).where(PlayerCard.player_id == player_id))


def delete_player_by_player_id(player_id, connection=None):
    """Delete a player's hand and then the player.

    Runs in the caller's transaction when *connection* is given.
    """
    with connection_scope(connection) as conn:
        clean_player_cards_by_player_id(player_id, conn)
        deleted = conn.execute(delete(Player).where(Player.id == player_id)).rowcount
    current_app.logger.info(f"[players] deleted player={player_id} rows={deleted}")
    return deleted > 0


def delete_players_by_member_id(member_id, connection):
    seats = select(Player.id).where(Player.member_id == member_id)
    connection.execute(delete(PlayerCard).where(PlayerCard.player_id.in_(seats)))
    connection.execute(delete(Player).where(Player.member_id == member_id))


def post_player_by_game_id(game_id, attributes):
    """Seat a new player at a game, deal the given hand and return the player."""
    with connection_scope() as conn:
        status_id = lookup_reference_id(Status.status, attributes.get('playerStatus') or 'waiting', conn)
        player_id = conn.execute(
            insert(Player).values(
                member_id=attributes.get('memberId'),
                game_id=game_id,
                player_bet=str(attributes.get('playerBet') or 0),
                status_id=status_id,
            )
        ).inserted_primary_key[0]
        insert_cards(PlayerCard, 'player_id', player_id, attributes.get('playerCards') or [], conn)
    current_app.logger.info(f"[players] created player={player_id} game={game_id}")
    return get_player_by_game_id_and_player_id(game_id, player_id)


def patch_player(player_id, attributes):
    """Apply a partial update to a player.

    ``playerCards``, when present, replaces the whole hand; an empty list
    leaves the player holding nothing. Everything happens in one transaction.
    """
    # statusId is only ever derived from playerStatus
    attributes = {name: value for name, value in attributes.items() if name != 'statusId'}
    player_cards = attributes.pop('playerCards', None)
    status = attributes.pop('playerStatus', None)
    with connection_scope() as conn:
        if status:
            attributes['statusId'] = lookup_reference_id(Status.status, status, conn)

        if player_cards is not None:
            clean_player_cards_by_player_id(player_id, conn)
            insert_cards(PlayerCard, 'player_id', player_id, player_cards, conn)

        filtered = pick_truthy_or_zero(
            {name: value for name, value in attributes.items() if name in PATCHABLE_COLUMNS}
        )
        if not filtered:
            return True
        updated = conn.execute(
            update(Player).where(Player.id == player_id).values(storage_values(PATCHABLE_COLUMNS, filtered))
        ).rowcount
    current_app.logger.info(f"[players] patched player={player_id} fields={sorted(filtered)}")
    return updated > 0
