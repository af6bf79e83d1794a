"""Thread-safe cache of fuel tanks and users, persisted in SQLite."""

from __future__ import annotations

import sqlite3
import threading
from collections.abc import Iterable

from fuelflux.models import FuelTankItem, UserItem

_SCHEMA = (
    "CREATE TABLE IF NOT EXISTS fuel_tanks (number INTEGER PRIMARY KEY, volume REAL);"
    "CREATE TABLE IF NOT EXISTS users (uid TEXT PRIMARY KEY, roleId INTEGER, allowance REAL);"
)


class Cache:
    """In-memory mirror of the fuel tank and user tables, backed by a SQLite file."""

    def __init__(self, db_path: str) -> None:
        self._lock = threading.Lock()
        self._fuel_tanks: list[FuelTankItem] = []
        self._users: dict[str, UserItem] = {}
        try:
            self._conn: sqlite3.Connection | None = sqlite3.connect(
                str(db_path), check_same_thread=False
            )
        except sqlite3.Error as exc:
            raise RuntimeError("Failed to open SQLite DB") from exc
        try:
            self._conn.executescript(_SCHEMA)
        except sqlite3.Error as exc:
            self._conn.close()
            self._conn = None
            raise RuntimeError(f"Failed to create schema: {exc}") from exc
        self.load()

    def update_fuel_tanks(self, tanks: Iterable[FuelTankItem]) -> None:
        """Replace the cached fuel tanks."""
        with self._lock:
            self._fuel_tanks = list(tanks)

    def fuel_tanks(self) -> list[FuelTankItem]:
        """Return a copy of the cached fuel tanks."""
        with self._lock:
            return list(self._fuel_tanks)

    def update_users(self, users: Iterable[UserItem]) -> None:
        """Replace the cached users; of duplicate uids the first one wins."""
        with self._lock:
            self._users = {}
            for user in users:
                self._users.setdefault(user.uid, user)

    def user(self, uid: str) -> UserItem | None:
        """Return the cached user with this uid, or None."""
        with self._lock:
            return self._users.get(uid)

    def load(self) -> None:
        """Reload the in-memory state from the database."""
        with self._lock:
            conn = self._connection()
            self._fuel_tanks = [
                FuelTankItem(int(number), float(volume))
                for number, volume in conn.execute("SELECT number, volume FROM fuel_tanks")
            ]
            self._users = {}
            for uid, role_id, allowance in conn.execute(
                "SELECT uid, roleId, allowance FROM users"
            ):
                self._users.setdefault(
                    uid,
                    UserItem(
                        uid,
                        int(role_id or 0),
                        None if allowance is None else float(allowance),
                    ),
                )

    def save(self) -> None:
        """Write the in-memory state to the database in one transaction."""
        with self._lock:
            conn = self._connection()
            with conn:
                conn.execute("DELETE FROM fuel_tanks")
                conn.executemany(
                    "INSERT INTO fuel_tanks(number, volume) VALUES(?, ?)",
                    [(t.number, float(t.volume)) for t in self._fuel_tanks],
                )
                conn.execute("DELETE FROM users")
                conn.executemany(
                    "INSERT INTO users(uid, roleId, allowance) VALUES(?, ?, ?)",
                    [
                        (
                            u.uid,
                            u.role_id,
                            None if u.allowance is None else float(u.allowance),
                        )
                        for u in self._users.values()
                    ],
                )

    def close(self) -> None:
        """Save the state and close the database; calling it again does nothing."""
        if self._conn is None:
            return
        self.save()
        with self._lock:
            self._conn.close()
            self._conn = None

    def __enter__(self) -> Cache:
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def _connection(self) -> sqlite3.Connection:
        if self._conn is None:
            raise RuntimeError("Cache is closed")
        return self._conn