"""Value types shared by the cache and the client."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FuelTankItem:
    """A fuel tank identified by its number, with its current volume."""

    number: int = 0
    volume: float = 0.0


@dataclass(frozen=True)
class UserItem:
    """A pump user with a role and an optional fuel allowance."""

    uid: str = ""
    role_id: int = 0
    allowance: float | None = None