"""Engine construction for the caretrack database.

Bootstrap, the ``db`` commands and the tests all get their engines from
:func:`make_engine`. On SQLite that is where the connection PRAGMAs live:
without ``foreign_keys=ON`` deleting a patient would leave its caring
sessions behind.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import create_engine, event
from sqlalchemy.engine import URL, make_url

if TYPE_CHECKING:
    from sqlite3 import Connection as SQLiteConnection

    from sqlalchemy.engine import Engine

SQLITE_NAMES = {"sqlite", "sqlite+pysqlite"}

#: Run in order on every new SQLite connection.
SQLITE_PRAGMAS = (
    "foreign_keys=ON",
    "journal_mode=WAL",
    "synchronous=NORMAL",
    "temp_store=MEMORY",
    # two shells on one file wait for each other instead of failing
    "busy_timeout=5000",
)


def is_sqlite(url: str | URL) -> bool:
    """True when ``url`` (string or :class:`URL`) names a SQLite database."""
    return make_url(str(url)).get_backend_name() in SQLITE_NAMES


def make_engine(url: str | URL, *, echo: bool = False) -> Engine:
    """Create an Engine for ``url``, applying :data:`SQLITE_PRAGMAS` on SQLite.

    Args:
        url: Database connection URL.
        echo: Log every SQL statement when True.
    """
    engine = create_engine(url, echo=echo)

    if is_sqlite(url):

        @event.listens_for(engine, "connect")
        def _apply_pragmas(dbapi_conn: SQLiteConnection, _conn_record) -> None:
            cur = dbapi_conn.cursor()
            try:
                for pragma in SQLITE_PRAGMAS:
                    cur.execute(f"PRAGMA {pragma};")
            finally:
                cur.close()

    return engine
