import dataclasses

import pytest

from fuelflux.models import FuelTankItem, UserItem


def test_fuel_tank_defaults():
    tank = FuelTankItem()
    assert (tank.number, tank.volume) == (0, 0.0)


def test_user_defaults():
    user = UserItem()
    assert user.uid == ""
    assert user.role_id == 0
    assert user.allowance is None


def test_fuel_tank_equality_by_value():
    assert FuelTankItem(3, 12.5) == FuelTankItem(number=3, volume=12.5)
    assert FuelTankItem(3, 12.5) != FuelTankItem(4, 12.5)


def test_user_is_immutable():
    user = UserItem("u-1", 2, 50.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        user.role_id = 5  # type: ignore[misc]
    assert user == UserItem("u-1", 2, 50.0)
    assert user.role_id == 2


def test_user_replace_keeps_other_fields():
    user = UserItem("u-1", 2, None)
    changed = dataclasses.replace(user, allowance=7.5)
    assert changed.uid == "u-1"
    assert changed.role_id == 2
    assert changed.allowance == 7.5
    assert user.allowance is None