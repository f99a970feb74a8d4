"""FastAPI dependencies exposing DB sessions to route handlers.

`get_db_write` is for handlers that persist changes (food tagging);
`get_db_read` routes lookups to the read engine when one is configured.
"""

from .database import get_read_session, get_write_session


def get_db_write():
    """Yield a write-capable session, closed after the request."""
    yield from get_write_session()


def get_db_read():
    """Yield a read-only session, closed after the request."""
    yield from get_read_session()
