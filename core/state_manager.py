"""
Persistent game state.

Thin accessor over the SQLite database holding:
- the singleton player record (location, health)
- the inventory (unique item names)
- the append-only command log
"""

import logging
import sqlite3
from typing import List, Optional

from game.models.player import Player, LogEntry, DEFAULT_HEALTH
from game.world.data import START_ROOM

logger = logging.getLogger(__name__)

RECENT_LOG_LIMIT = 8


class StoreUnavailable(RuntimeError):
    """The database could not be opened or prepared."""


def connect(database: str) -> sqlite3.Connection:
    """Open a database connection, raising StoreUnavailable on failure."""
    try:
        conn = sqlite3.connect(database, timeout=10.0)  # 10 second timeout
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA journal_mode=WAL")
    except sqlite3.Error as e:
        logger.error(f"Could not open database {database}: {e}")
        raise StoreUnavailable(str(e)) from e
    return conn


class GameStateStore:
    """
    Reads and writes the player, inventory and command log.

    Write methods return a boolean instead of raising, so a failed
    statement can be reported to the player as a message.
    """

    def __init__(self, conn: sqlite3.Connection):
        self._conn = conn

    @classmethod
    def open(cls, database: str) -> "GameStateStore":
        store = cls(connect(database))
        store.init_schema()
        return store

    def close(self) -> None:
        self._conn.close()

    def init_schema(self) -> None:
        """Create the tables if they are missing."""
        try:
            cursor = self._conn.cursor()
            cursor.execute(
                """
                CREATE TABLE IF NOT EXISTS player (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    location TEXT NOT NULL DEFAULT 'start',
                    health INTEGER NOT NULL DEFAULT 100
                )
                """
            )
            cursor.execute(
                """
                CREATE TABLE IF NOT EXISTS inventory (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    item_name TEXT UNIQUE NOT NULL
                )
                """
            )
            cursor.execute(
                """
                CREATE TABLE IF NOT EXISTS command_log (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    command_text TEXT NOT NULL,
                    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
                )
                """
            )
            self._conn.commit()
        except sqlite3.Error as e:
            logger.error(f"Could not create schema: {e}")
            raise StoreUnavailable(str(e)) from e

    def _execute(self, sql: str, params: tuple = ()) -> bool:
        try:
            self._conn.execute(sql, params)
            self._conn.commit()
            return True
        except sqlite3.Error as e:
            logger.warning(f"Statement failed ({sql.split()[0]}): {e}")
            self._conn.rollback()
            return False

    # --- Player ---

    def get_player(self) -> Player:
        """
        Return the player record, creating it on first access.

        If the table cannot be read at all, a default player standing in
        the start room is returned.
        """
        try:
            row = self._conn.execute(
                "SELECT id, location, health FROM player ORDER BY id ASC LIMIT 1"
            ).fetchone()
            if row is None:
                logger.info("No player record found, creating one")
                self._conn.execute(
                    "INSERT INTO player (location, health) VALUES (?, ?)",
                    (START_ROOM, DEFAULT_HEALTH),
                )
                self._conn.commit()
                row = self._conn.execute(
                    "SELECT id, location, health FROM player ORDER BY id ASC LIMIT 1"
                ).fetchone()
        except sqlite3.Error as e:
            logger.warning(f"Could not read player record: {e}")
            row = None
        if row is None:
            return Player(location=START_ROOM, health=DEFAULT_HEALTH, id=1)
        return Player(location=row["location"], health=row["health"], id=row["id"])

    def set_location(self, location: str) -> bool:
        return self._execute(
            "UPDATE player SET location = ? "
            "WHERE id = (SELECT id FROM player ORDER BY id ASC LIMIT 1)",
            (location,),
        )

    # --- Inventory ---

    def add_item(self, item_name: str) -> bool:
        return self._execute("INSERT INTO inventory (item_name) VALUES (?)", (item_name,))

    def remove_item(self, item_name: str) -> bool:
        return self._execute("DELETE FROM inventory WHERE item_name = ?", (item_name,))

    def has_item(self, item_name: str) -> bool:
        try:
            row = self._conn.execute(
                "SELECT 1 FROM inventory WHERE item_name = ? LIMIT 1", (item_name,)
            ).fetchone()
        except sqlite3.Error as e:
            logger.warning(f"Could not check inventory for '{item_name}': {e}")
            return False
        return row is not None

    def list_inventory(self) -> List[str]:
        try:
            rows = self._conn.execute(
                "SELECT item_name FROM inventory ORDER BY item_name ASC"
            ).fetchall()
        except sqlite3.Error as e:
            logger.warning(f"Could not list inventory: {e}")
            return []
        return [row["item_name"] for row in rows]

    def clear_inventory(self) -> bool:
        return self._execute("DELETE FROM inventory")

    # --- Command log ---

    def log_command(self, command_text: str) -> bool:
        return self._execute("INSERT INTO command_log (command_text) VALUES (?)", (command_text,))

    def get_recent_log(self, limit: Optional[int] = None) -> List[LogEntry]:
        """Most recent log entries, newest first."""
        if limit is None:
            limit = RECENT_LOG_LIMIT
        try:
            rows = self._conn.execute(
                "SELECT command_text, created_at FROM command_log ORDER BY id DESC LIMIT ?",
                (limit,),
            ).fetchall()
        except sqlite3.Error as e:
            logger.warning(f"Could not read command log: {e}")
            return []
        return [LogEntry(command_text=row["command_text"], created_at=str(row["created_at"])) for row in rows]

    def clear_log(self) -> bool:
        return self._execute("DELETE FROM command_log")
