"""Helpers shared by the repositories.

Join queries return one flat row per (parent, card) pair. The functions here
fold those rows back into one row per parent, classify by-id results, and
decide which client attributes a patch is allowed to write.
"""
import math
import re
from typing import Any, Dict, Iterable, List, Mapping, NamedTuple, Optional

from sqlalchemy import String

from poker_api.errors import ContractViolationError


class Card(NamedTuple):
    number: str
    suit: str

    def to_dict(self) -> Dict[str, str]:
        return {'cardNumber': self.number, 'cardSuit': self.suit}


def merge_rows(rows: Iterable[Mapping[str, Any]], key: str, cards_field: str) -> List[Dict[str, Any]]:
    """Group *rows* by ``row[key]`` and collect their cards under *cards_field*.

    Parents keep the order in which they were first seen, and cards keep row
    order. A row with a null ``card_number`` adds no card, so a parent whose
    outer join matched nothing ends up with an empty list. Rows that were
    already merged contribute their existing card list, which makes merging
    idempotent.
    """
    merged: Dict[Any, Dict[str, Any]] = {}
    for row in rows:
        parent_id = row[key]
        if cards_field in row:
            cards = list(row[cards_field])
        elif row.get('card_number') is not None:
            cards = [Card(row['card_number'], row['suit'])]
        else:
            cards = []

        parent = merged.get(parent_id)
        if parent is None:
            parent = dict(row)
            parent[cards_field] = []
            merged[parent_id] = parent
        parent[cards_field].extend(cards)
    return list(merged.values())


def single_result(merged: List[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """Return the only merged row, ``None`` when there is none.

    More than one row for a unique id means the query or the merge is broken,
    so that raises instead of picking one.
    """
    if not merged:
        return None
    if len(merged) > 1:
        raise ContractViolationError('Expect a single object but got multiple results.')
    return merged[0]


def has_duplicates(ids: Iterable[Any]) -> bool:
    ids = list(ids)
    return len(set(ids)) < len(ids)


def is_truthy_or_zero(value: Any) -> bool:
    """Patch inclusion rule: skip None, False, '' and NaN but keep 0."""
    if value is None or value is False:
        return False
    if isinstance(value, float) and math.isnan(value):
        return False
    if isinstance(value, str):
        return value != ''
    return True


def pick_truthy_or_zero(attributes: Mapping[str, Any]) -> Dict[str, Any]:
    return {name: value for name, value in attributes.items() if is_truthy_or_zero(value)}


_SEGMENT = re.compile(r'[A-Z]?[a-z0-9]+|[A-Z]+(?![a-z])')


def database_name(name: str) -> str:
    """Translate a camel case attribute name to its upper snake case column.

    ``memberNickname`` becomes ``MEMBER_NICKNAME``. A run of capitals stays
    one segment unless a capital starts a new lower case word, so ``ABCHH``
    is unchanged and ``AbChC`` becomes ``AB_CH_C``.
    """
    return '_'.join(_SEGMENT.findall(name)).upper()


def column_map(table, names: Iterable[str]):
    """Map each external attribute name to its column on *table*.

    Raises ``KeyError`` at import time if a name has no matching column.
    """
    return {name: table.c[database_name(name).lower()] for name in names}


def storage_values(columns, attributes: Mapping[str, Any]) -> Dict[str, Any]:
    """Turn allow-listed attributes into UPDATE values; text columns get ``str``."""
    values = {}
    for name, value in attributes.items():
        column = columns[name]
        values[column.name] = str(value) if isinstance(column.type, String) else value
    return values
