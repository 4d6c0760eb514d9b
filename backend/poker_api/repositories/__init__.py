"""Data access for games, members and players.

Each module issues SQLAlchemy Core queries through a scoped connection,
folds join rows back into parent entities and hands them to the serializers.
Handlers in ``poker_api.api`` import the functions from the modules directly.
"""
