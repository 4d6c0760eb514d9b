"""Request parsing and validation shared by the blueprints."""
from flask import request

from poker_api.errors import error_builder
from poker_api.repositories.rows import has_duplicates


def get_attributes(resource_type):
    """Return ``(attributes, None)`` for a JSON:API body, or ``(None, error response)``."""
    body = request.get_json(silent=True)
    data = body.get('data') if isinstance(body, dict) else None
    if not isinstance(data, dict) or data.get('type') != resource_type:
        return None, error_builder(400, f"Request body must contain a '{resource_type}' resource under 'data'.")
    attributes = data.get('attributes') or {}
    if not isinstance(attributes, dict):
        return None, error_builder(400, "'attributes' must be an object.")
    return attributes, None


def is_non_negative_int(value):
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def check_non_negative_ints(attributes, names):
    for name in names:
        if name in attributes and attributes[name] is not None and not is_non_negative_int(attributes[name]):
            return f"'{name}' must be a non-negative integer."
    return None


def check_strings(attributes, names, required=False):
    for name in names:
        value = attributes.get(name)
        if value is None:
            if required:
                return f"'{name}' is required."
            continue
        if not isinstance(value, str) or (required and not value):
            return f"'{name}' must be a non-empty string." if required else f"'{name}' must be a string."
    return None


def check_cards(attributes, name):
    """Validate a list of ``{cardNumber, cardSuit}`` objects with no repeats."""
    if name not in attributes or attributes[name] is None:
        return None
    cards = attributes[name]
    if not isinstance(cards, list):
        return f"'{name}' must be a list."
    for card in cards:
        if not (isinstance(card, dict)
                and isinstance(card.get('cardNumber'), str)
                and isinstance(card.get('cardSuit'), str)):
            return f"Every entry of '{name}' needs a 'cardNumber' and a 'cardSuit'."
    if has_duplicates((card['cardNumber'], card['cardSuit']) for card in cards):
        return f"'{name}' contains the same card more than once."
    return None


def first_error(*messages):
    return next((message for message in messages if message), None)
