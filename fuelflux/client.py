"""Pump client: HTTP calls, the local cache, the offline queue and background sync."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Any

from fuelflux.cache import Cache
from fuelflux.http_client import HttpClient
from fuelflux.models import FuelTankItem, UserItem
from fuelflux.offline_queue import OfflineQueue, QueueItem

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://fuelflux.example.com:8087"

_AUTHORIZE = "/api/pump/authorize"
_DEAUTHORIZE = "/api/pump/deauthorize"
_FUEL_INTAKE = "/api/pump/fuelintake"
_REFUEL = "/api/pump/refuel"
_USERS = "/api/pump/user"
_HEALTH = "/health"


@dataclass
class ClientConfig:
    """Settings for a Client: server URL, cache file and refresh period in seconds."""

    base_url: str = DEFAULT_BASE_URL
    db_path: str = "fuelflux_cache.db"
    cache_refresh: float = 60.0


def _as_str(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"expected a string, got {value!r}")
    return value


def _as_int(value: Any) -> int:
    if isinstance(value, (str, bool)) or value is None:
        raise TypeError(f"expected a number, got {value!r}")
    return int(value)


def _as_float(value: Any) -> float:
    if isinstance(value, (str, bool)) or value is None:
        raise TypeError(f"expected a number, got {value!r}")
    return float(value)


def _allowance(data: dict[str, Any]) -> float | None:
    value = data.get("Allowance")
    return None if value is None else _as_float(value)


def _parse_tank(data: dict[str, Any]) -> FuelTankItem:
    return FuelTankItem(number=_as_int(data["number"]), volume=_as_float(data["volume"]))


def _parse_user(data: dict[str, Any]) -> UserItem:
    return UserItem(
        uid=_as_str(data["Uid"]),
        role_id=_as_int(data["RoleId"]),
        allowance=_allowance(data),
    )


class Client:
    """High-level pump API that caches data, queues requests while offline and syncs in the background."""

    def __init__(self, config: ClientConfig | None = None) -> None:
        self._config = config if config is not None else ClientConfig()
        self._http = HttpClient(self._config.base_url)
        self._cache = Cache(self._config.db_path)
        self._queue = OfflineQueue()
        self._token = ""
        self._closed = False
        self._stop = threading.Event()
        self._thread = threading.Thread(
            target=self._background_loop, name="fuelflux-sync", daemon=True
        )
        self._thread.start()

    def authorize(self, controller_uid: str, user_uid: str) -> bool:
        """Open a session for a user at a pump controller; return True on success."""
        request = {"PumpControllerUid": controller_uid, "UserUid": user_uid}
        try:
            reply = self._http.post(_AUTHORIZE, request)
            self._token = _as_str(reply["Token"])

            if "FuelTanks" in reply:
                tanks = [_parse_tank(item) for item in reply["FuelTanks"] or []]
                self._cache.update_fuel_tanks(tanks)

            session_user = UserItem(
                uid=user_uid,
                role_id=_as_int(reply["RoleId"]),
                allowance=_allowance(reply),
            )
            self._cache.update_users([session_user])
            self._cache.save()
            return True
        except Exception as exc:
            logger.error("[fuelflux] authorize failed: %s", exc)
            return False

    def deauthorize(self) -> None:
        """Close the current session; server errors are ignored and the token is dropped."""
        try:
            self._http.post(_DEAUTHORIZE, {}, self._token)
        except Exception:
            pass
        self._token = ""

    def report_fuel_intake(self, tank_number: int, intake_volume: float) -> bool:
        """Report fuel delivered into a tank; False means the report was queued."""
        body = {"TankNumber": tank_number, "IntakeVolume": intake_volume}
        return self._send_or_queue(_FUEL_INTAKE, body)

    def report_refuel(self, tank_number: int, fuel_volume: float) -> bool:
        """Report fuel dispensed from a tank; False means the report was queued."""
        body = {"TankNumber": tank_number, "FuelVolume": fuel_volume}
        return self._send_or_queue(_REFUEL, body)

    def sync_users(self, first: int = 0, number: int = 100) -> None:
        """Fetch a page of users from the server and replace the cached users with it."""
        try:
            reply = self._http.get(f"{_USERS}?first={first}&number={number}", self._token)
            if not isinstance(reply, list):
                return
            users = [_parse_user(item) for item in reply]
            self._cache.update_users(users)
            self._cache.save()
        except Exception as exc:
            logger.error("[fuelflux] syncUsers failed: %s", exc)

    def sync_fuel_tanks(self) -> None:
        """Refresh fuel tanks; the server API has no listing, so tanks come from authorize()."""

    def close(self) -> None:
        """Stop background sync, persist the cache and release connections."""
        if self._closed:
            return
        self._closed = True
        self._stop.set()
        self._thread.join()
        self._cache.close()
        self._http.close()

    def __enter__(self) -> Client:
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def _send_or_queue(self, endpoint: str, body: dict[str, Any]) -> bool:
        if self._network_ok():
            try:
                self._http.post(endpoint, body, self._token)
                return True
            except Exception:
                pass
        self._queue.enqueue(QueueItem("POST", endpoint, body, self._token))
        return False

    def _network_ok(self) -> bool:
        try:
            self._http.get(_HEALTH)
            return True
        except Exception:
            return False

    def _flush_queue(self) -> None:
        while (item := self._queue.try_pop()) is not None:
            try:
                if item.method == "POST":
                    self._http.post(item.endpoint, item.body, item.token)
                else:
                    self._http.get(item.endpoint, item.token)
            except Exception:
                self._queue.enqueue(item)
                break

    def _background_loop(self) -> None:
        while not self._stop.wait(self._config.cache_refresh):
            if not self._network_ok():
                continue
            self._flush_queue()
            self.sync_users()