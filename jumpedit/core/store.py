"""
Label Store — SQLite key-value table for labels and the default editor

One table, one row per key. Labels map to encoded "<jump path>:::<shell dir>"
values; the reserved "default-editor" key maps to an editor command line.
Keys and values are kept as BLOBs in filesystem encoding, so arguments that
are not valid UTF-8 (surrogate-escaped by Python) round-trip unchanged.

Opened once per invocation and closed before the process exits, so no
handle is ever held while the calling shell runs an editor.
"""

import logging
import os
import sqlite3
from enum import Enum
from pathlib import Path
from typing import Iterator, Optional, Tuple

from ..errors import StoreError


logger = logging.getLogger(__name__)


class PutMode(Enum):
    """Write semantics for put()."""
    INSERT = "insert"    # Never overwrite an existing key
    REPLACE = "replace"  # Overwrite unconditionally


class LabelStore:
    """
    SQLite-backed store.

    Keys and values are opaque strings, stored through os.fsencode and
    read back through os.fsdecode. scan_all() iterates in
    implementation-defined order.
    """

    def __init__(self, path: Path):
        self.path = Path(path)
        self.conn = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.conn = sqlite3.connect(str(self.path))
            self._init_schema()
        except (OSError, sqlite3.Error) as e:
            raise StoreError(f"Can't open database {self.path}: {e}") from e
        logger.debug("opened store %s", self.path)

    def _init_schema(self):
        self.conn.executescript("""
            CREATE TABLE IF NOT EXISTS records (
                key BLOB PRIMARY KEY,
                value BLOB NOT NULL
            );
        """)
        self.conn.commit()

    def __enter__(self) -> 'LabelStore':
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def close(self):
        """Close the connection. Safe to call twice."""
        if self.conn is not None:
            self.conn.close()
            self.conn = None
            logger.debug("closed store %s", self.path)

    def get(self, key: str) -> Optional[str]:
        """Value for `key`, or None if absent."""
        try:
            row = self.conn.execute(
                "SELECT value FROM records WHERE key = ?", (os.fsencode(key),)
            ).fetchone()
        except (sqlite3.Error, UnicodeError) as e:
            raise StoreError(f"could not fetch {key!r}: {e}") from e
        return os.fsdecode(row[0]) if row else None

    def put(self, key: str, value: str, mode: PutMode = PutMode.INSERT) -> bool:
        """
        Store a value.

        Args:
            key: Record key
            value: Record value
            mode: INSERT keeps an existing record, REPLACE overwrites it

        Returns:
            True if stored, False if INSERT found the key already present
        """
        if mode is PutMode.REPLACE:
            sql = "INSERT OR REPLACE INTO records (key, value) VALUES (?, ?)"
        else:
            sql = "INSERT OR IGNORE INTO records (key, value) VALUES (?, ?)"

        try:
            cursor = self.conn.execute(sql, (os.fsencode(key), os.fsencode(value)))
            self.conn.commit()
        except (sqlite3.Error, UnicodeError) as e:
            raise StoreError(f"could not store value for {key!r}: {e}") from e

        stored = cursor.rowcount > 0
        logger.debug("put %s mode=%s stored=%s", key, mode.value, stored)
        return stored

    def delete(self, key: str) -> bool:
        """Delete `key`. Returns False if it was not present."""
        try:
            cursor = self.conn.execute("DELETE FROM records WHERE key = ?", (os.fsencode(key),))
            self.conn.commit()
        except (sqlite3.Error, UnicodeError) as e:
            raise StoreError(f"could not delete {key!r}: {e}") from e
        return cursor.rowcount > 0

    def scan_all(self) -> Iterator[Tuple[str, str]]:
        """Lazily yield every (key, value) pair."""
        try:
            cursor = self.conn.execute("SELECT key, value FROM records")
            for key, value in cursor:
                yield os.fsdecode(key), os.fsdecode(value)
        except sqlite3.Error as e:
            raise StoreError(f"could not scan records: {e}") from e

    def is_empty(self) -> bool:
        """True if the store holds no records at all."""
        try:
            row = self.conn.execute("SELECT 1 FROM records LIMIT 1").fetchone()
        except sqlite3.Error as e:
            raise StoreError(f"could not scan records: {e}") from e
        return row is None
