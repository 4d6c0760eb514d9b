from flask import current_app
from sqlalchemy import delete, func, insert, or_, select, update

from poker_api import bcrypt
from poker_api.models import Member
from poker_api.serializers import serialize_member, serialize_members
from .connection import connection_scope
from .players import delete_players_by_member_id
from .rows import column_map, pick_truthy_or_zero, single_result, storage_values

PATCHABLE_COLUMNS = column_map(
    Member.__table__,
    ('memberNickname', 'memberEmail', 'memberPasswordHash', 'memberLevel', 'memberExpOverLevel'),
)

_MEMBER_QUERY = select(
    Member.id.label('member_id'),
    Member.member_nickname,
    Member.member_email,
    Member.member_level,
    Member.member_exp_over_level,
).order_by(Member.id)


def _hash_password(password):
    return bcrypt.generate_password_hash(password).decode('utf-8')


def get_members(query=None):
    """Return members, filtered on ``memberNickname`` and ``memberEmail`` when given."""
    query = query or {}
    stmt = _MEMBER_QUERY
    if query.get('memberNickname'):
        stmt = stmt.where(Member.member_nickname == query['memberNickname'])
    if query.get('memberEmail'):
        stmt = stmt.where(Member.member_email == query['memberEmail'])
    with connection_scope() as conn:
        rows = conn.execute(stmt).mappings().all()
    return serialize_members(rows, query)


def get_member_by_id(member_id):
    with connection_scope() as conn:
        rows = conn.execute(_MEMBER_QUERY.where(Member.id == member_id)).mappings().all()
    member = single_result(rows)
    if member is None:
        return None
    return serialize_member(member)


def validate_members(member_ids, connection=None):
    """Return True when every id in *member_ids* belongs to an existing member."""
    member_ids = list(member_ids)
    if not member_ids:
        return True
    with connection_scope(connection) as conn:
        count = conn.execute(
            select(func.count()).select_from(Member).where(Member.id.in_(member_ids))
        ).scalar_one()
    return count == len(member_ids)


def find_conflicts(nickname=None, email=None, exclude_id=None):
    """Return the attribute names whose value another member already uses."""
    clauses = []
    if nickname:
        clauses.append(Member.member_nickname == nickname)
    if email:
        clauses.append(Member.member_email == email)
    if not clauses:
        return []
    stmt = select(Member.member_nickname, Member.member_email).where(or_(*clauses))
    if exclude_id is not None:
        stmt = stmt.where(Member.id != exclude_id)
    with connection_scope() as conn:
        rows = conn.execute(stmt).all()

    conflicts = []
    if nickname and any(row.member_nickname == nickname for row in rows):
        conflicts.append('memberNickname')
    if email and any(row.member_email == email for row in rows):
        conflicts.append('memberEmail')
    return conflicts


def post_member(attributes):
    """Create a member at level 1 with no experience and return it."""
    password = attributes.get('memberPassword')
    with connection_scope() as conn:
        member_id = conn.execute(
            insert(Member).values(
                member_nickname=attributes['memberNickname'],
                member_email=attributes['memberEmail'],
                member_password_hash=_hash_password(password) if password else None,
                member_level='1',
                member_exp_over_level='0',
            )
        ).inserted_primary_key[0]
    current_app.logger.info(f"[members] created member={member_id}")
    return get_member_by_id(member_id)


def patch_member(member_id, attributes):
    attributes = {name: value for name, value in attributes.items() if name != 'memberPasswordHash'}
    password = attributes.pop('memberPassword', None)
    if password:
        attributes['memberPasswordHash'] = _hash_password(password)

    filtered = pick_truthy_or_zero(
        {name: value for name, value in attributes.items() if name in PATCHABLE_COLUMNS}
    )
    if not filtered:
        return True
    with connection_scope() as conn:
        updated = conn.execute(
            update(Member).where(Member.id == member_id).values(storage_values(PATCHABLE_COLUMNS, filtered))
        ).rowcount
    current_app.logger.info(f"[members] patched member={member_id} fields={sorted(filtered)}")
    return updated > 0


def delete_member(member_id):
    """Delete a member together with their seats and the cards in those seats."""
    with connection_scope() as conn:
        delete_players_by_member_id(member_id, conn)
        deleted = conn.execute(delete(Member).where(Member.id == member_id)).rowcount
    current_app.logger.info(f"[members] deleted member={member_id} rows={deleted}")
    return deleted > 0
