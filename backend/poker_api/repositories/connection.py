from contextlib import contextmanager

from poker_api import db


@contextmanager
def connection_scope(connection=None):
    """Yield a connection inside a transaction.

    Without *connection* a new one is checked out with ``engine.begin()``: it
    commits when the block exits cleanly, rolls back on an exception and is
    always returned to the pool. A *connection* passed in belongs to the
    caller, who decides when to commit, so it is yielded untouched.
    """
    if connection is not None:
        yield connection
        return
    with db.engine.begin() as conn:
        yield conn
