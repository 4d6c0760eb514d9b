"""Reference data lookups: cards, rounds and player statuses."""
from typing import Iterable, List, Mapping

from sqlalchemy import insert, select

from poker_api.errors import UnknownReferenceError
from poker_api.models import Card, CardNumber, CardSuit


def lookup_card_ids(cards: Iterable[Mapping[str, str]], connection) -> List[int]:
    """Return the card id for each ``{cardNumber, cardSuit}`` pair, in order."""
    card_ids = []
    for card in cards:
        stmt = (
            select(Card.id)
            .join(CardNumber, Card.card_number_id == CardNumber.id)
            .join(CardSuit, Card.card_suit_id == CardSuit.id)
            .where(CardNumber.card_number == card['cardNumber'], CardSuit.suit == card['cardSuit'])
        )
        card_id = connection.execute(stmt).scalar_one_or_none()
        if card_id is None:
            raise UnknownReferenceError(f"Unknown card {card['cardNumber']} of {card['cardSuit']}.")
        card_ids.append(card_id)
    return card_ids


def insert_cards(join_table, owner_column: str, owner_id: int, cards, connection) -> None:
    """Attach *cards* to an owner row through *join_table* (table or player cards)."""
    card_ids = lookup_card_ids(cards, connection)
    if not card_ids:
        return
    connection.execute(
        insert(join_table),
        [{owner_column: owner_id, 'card_id': card_id} for card_id in card_ids],
    )


def lookup_reference_id(label_column, label: str, connection) -> int:
    """Resolve a round or status label (e.g. ``Round.round``) to its id."""
    model = label_column.class_
    reference_id = connection.execute(
        select(model.id).where(label_column == label)
    ).scalar_one_or_none()
    if reference_id is None:
        raise UnknownReferenceError(f"Unknown {label_column.key} '{label}'.")
    return reference_id
