from poker_api import db

ROUNDS = ('blind', 'flop', 'turn', 'river', 'showdown')
PLAYER_STATUSES = ('waiting', 'checked', 'raised', 'called', 'folded')
CARD_NUMBERS = ('2', '3', '4', '5', '6', '7', '8', '9', '10', 'J', 'Q', 'K', 'A')
CARD_SUITS = ('clubs', 'diamonds', 'hearts', 'spades')


class Round(db.Model):
    __tablename__ = 'round'
    id = db.Column(db.Integer, primary_key=True)
    round = db.Column(db.String(32), unique=True, nullable=False)


class Status(db.Model):
    __tablename__ = 'status'
    id = db.Column(db.Integer, primary_key=True)
    status = db.Column(db.String(32), unique=True, nullable=False)


class CardNumber(db.Model):
    __tablename__ = 'card_number'
    id = db.Column(db.Integer, primary_key=True)
    card_number = db.Column(db.String(2), unique=True, nullable=False)


class CardSuit(db.Model):
    __tablename__ = 'card_suit'
    id = db.Column(db.Integer, primary_key=True)
    suit = db.Column(db.String(16), unique=True, nullable=False)


class Card(db.Model):
    __tablename__ = 'card'
    id = db.Column(db.Integer, primary_key=True)
    card_number_id = db.Column(db.Integer, db.ForeignKey('card_number.id'), nullable=False)
    card_suit_id = db.Column(db.Integer, db.ForeignKey('card_suit.id'), nullable=False)

    __table_args__ = (
        db.UniqueConstraint('card_number_id', 'card_suit_id', name='uq_card_number_suit'),
    )


class Game(db.Model):
    __tablename__ = 'game'
    id = db.Column(db.Integer, primary_key=True)
    round_id = db.Column(db.Integer, db.ForeignKey('round.id'), nullable=False)
    # Money columns are text; the serializer coerces them to integers
    minimum_bet = db.Column(db.String(32), nullable=False, default='0')
    maximum_bet = db.Column(db.String(32), nullable=False, default='0')
    bet_pool = db.Column(db.String(32), nullable=False, default='0')


class Member(db.Model):
    __tablename__ = 'member'
    id = db.Column(db.Integer, primary_key=True)
    member_nickname = db.Column(db.String(64), unique=True, nullable=False, index=True)
    member_email = db.Column(db.String(256), unique=True, nullable=False, index=True)
    member_password_hash = db.Column(db.String(256), nullable=True)
    member_level = db.Column(db.String(32), nullable=False, default='1')
    member_exp_over_level = db.Column(db.String(32), nullable=False, default='0')


class Player(db.Model):
    __tablename__ = 'player'
    id = db.Column(db.Integer, primary_key=True)
    # Nullable: a seat can be opened before a member takes it
    member_id = db.Column(db.Integer, db.ForeignKey('member.id'), nullable=True)
    game_id = db.Column(db.Integer, db.ForeignKey('game.id'), nullable=False)
    player_bet = db.Column(db.String(32), nullable=False, default='0')
    status_id = db.Column(db.Integer, db.ForeignKey('status.id'), nullable=False)


class TableCard(db.Model):
    __tablename__ = 'table_card'
    id = db.Column(db.Integer, primary_key=True)
    game_id = db.Column(db.Integer, db.ForeignKey('game.id'), nullable=False, index=True)
    card_id = db.Column(db.Integer, db.ForeignKey('card.id'), nullable=False)


class PlayerCard(db.Model):
    __tablename__ = 'player_card'
    id = db.Column(db.Integer, primary_key=True)
    player_id = db.Column(db.Integer, db.ForeignKey('player.id'), nullable=False, index=True)
    card_id = db.Column(db.Integer, db.ForeignKey('card.id'), nullable=False)


def seed_reference_data():
    """Insert rounds, statuses and the 52-card deck if they are missing."""
    if Round.query.first() is None:
        db.session.add_all(Round(round=label) for label in ROUNDS)
    if Status.query.first() is None:
        db.session.add_all(Status(status=label) for label in PLAYER_STATUSES)
    if Card.query.first() is None:
        numbers = [CardNumber(card_number=n) for n in CARD_NUMBERS]
        suits = [CardSuit(suit=s) for s in CARD_SUITS]
        db.session.add_all(numbers + suits)
        db.session.flush()
        db.session.add_all(
            Card(card_number_id=number.id, card_suit_id=suit.id)
            for suit in suits
            for number in numbers
        )
    db.session.commit()
