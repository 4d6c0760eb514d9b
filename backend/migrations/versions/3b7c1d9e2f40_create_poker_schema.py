"""create poker schema and seed reference data

Revision ID: 3b7c1d9e2f40
Revises:
Create Date: 2026-10-19 00:00:00

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3b7c1d9e2f40'
down_revision = None
branch_labels = None
depends_on = None

ROUNDS = ('blind', 'flop', 'turn', 'river', 'showdown')
PLAYER_STATUSES = ('waiting', 'checked', 'raised', 'called', 'folded')
CARD_NUMBERS = ('2', '3', '4', '5', '6', '7', '8', '9', '10', 'J', 'Q', 'K', 'A')
CARD_SUITS = ('clubs', 'diamonds', 'hearts', 'spades')


def upgrade():
    round_table = op.create_table(
        'round',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('round', sa.String(length=32), nullable=False, unique=True),
    )
    status_table = op.create_table(
        'status',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('status', sa.String(length=32), nullable=False, unique=True),
    )
    number_table = op.create_table(
        'card_number',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('card_number', sa.String(length=2), nullable=False, unique=True),
    )
    suit_table = op.create_table(
        'card_suit',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('suit', sa.String(length=16), nullable=False, unique=True),
    )
    card_table = op.create_table(
        'card',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('card_number_id', sa.Integer(), sa.ForeignKey('card_number.id'), nullable=False),
        sa.Column('card_suit_id', sa.Integer(), sa.ForeignKey('card_suit.id'), nullable=False),
        sa.UniqueConstraint('card_number_id', 'card_suit_id', name='uq_card_number_suit'),
    )
    op.create_table(
        'game',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('round_id', sa.Integer(), sa.ForeignKey('round.id'), nullable=False),
        sa.Column('minimum_bet', sa.String(length=32), nullable=False),
        sa.Column('maximum_bet', sa.String(length=32), nullable=False),
        sa.Column('bet_pool', sa.String(length=32), nullable=False),
    )
    op.create_table(
        'member',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('member_nickname', sa.String(length=64), nullable=False),
        sa.Column('member_email', sa.String(length=256), nullable=False),
        sa.Column('member_password_hash', sa.String(length=256), nullable=True),
        sa.Column('member_level', sa.String(length=32), nullable=False),
        sa.Column('member_exp_over_level', sa.String(length=32), nullable=False),
    )
    op.create_index('ix_member_member_nickname', 'member', ['member_nickname'], unique=True)
    op.create_index('ix_member_member_email', 'member', ['member_email'], unique=True)
    op.create_table(
        'player',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('member_id', sa.Integer(), sa.ForeignKey('member.id'), nullable=True),
        sa.Column('game_id', sa.Integer(), sa.ForeignKey('game.id'), nullable=False),
        sa.Column('player_bet', sa.String(length=32), nullable=False),
        sa.Column('status_id', sa.Integer(), sa.ForeignKey('status.id'), nullable=False),
    )
    op.create_table(
        'table_card',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('game_id', sa.Integer(), sa.ForeignKey('game.id'), nullable=False),
        sa.Column('card_id', sa.Integer(), sa.ForeignKey('card.id'), nullable=False),
    )
    op.create_index('ix_table_card_game_id', 'table_card', ['game_id'])
    op.create_table(
        'player_card',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('player_id', sa.Integer(), sa.ForeignKey('player.id'), nullable=False),
        sa.Column('card_id', sa.Integer(), sa.ForeignKey('card.id'), nullable=False),
    )
    op.create_index('ix_player_card_player_id', 'player_card', ['player_id'])

    op.bulk_insert(round_table, [{'id': i, 'round': label} for i, label in enumerate(ROUNDS, 1)])
    op.bulk_insert(status_table, [{'id': i, 'status': label} for i, label in enumerate(PLAYER_STATUSES, 1)])
    op.bulk_insert(number_table, [{'id': i, 'card_number': n} for i, n in enumerate(CARD_NUMBERS, 1)])
    op.bulk_insert(suit_table, [{'id': i, 'suit': s} for i, s in enumerate(CARD_SUITS, 1)])
    op.bulk_insert(card_table, [
        {'card_number_id': number_id, 'card_suit_id': suit_id}
        for suit_id in range(1, len(CARD_SUITS) + 1)
        for number_id in range(1, len(CARD_NUMBERS) + 1)
    ])


def downgrade():
    op.drop_index('ix_player_card_player_id', table_name='player_card')
    op.drop_table('player_card')
    op.drop_index('ix_table_card_game_id', table_name='table_card')
    op.drop_table('table_card')
    op.drop_table('player')
    op.drop_index('ix_member_member_email', table_name='member')
    op.drop_index('ix_member_member_nickname', table_name='member')
    op.drop_table('member')
    op.drop_table('game')
    op.drop_table('card')
    op.drop_table('card_suit')
    op.drop_table('card_number')
    op.drop_table('status')
    op.drop_table('round')
