"""Ship equipment that can be bought at a station."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from trispace.cargo import CARGO_HOLD_SIZE_LARGE, CargoHold

NUM_EQUIPMENT_TYPES = 8

_OWNED_TEXT = "OWN"
_NOT_OWNED_TEXT = " / "


class EquipmentType(enum.IntEnum):
    """Items sold by the equipment shop."""

    FUEL = 0
    CARGO30 = 1
    LASER_MK_II = 2
    LASER_MK_III = 3
    MINING_LASER = 4
    DOCKING_COMPUTER = 5
    FUEL_SCOOPS = 6
    MISSILE = 7


_PRICES = {
    EquipmentType.FUEL: 2,
    EquipmentType.CARGO30: 1500,
    EquipmentType.LASER_MK_II: 2000,
    EquipmentType.LASER_MK_III: 4000,
    EquipmentType.MINING_LASER: 2000,
    EquipmentType.DOCKING_COMPUTER: 450,
    EquipmentType.FUEL_SCOOPS: 800,
    EquipmentType.MISSILE: 100,
}

_NAMES = {
    EquipmentType.FUEL: "Fuel (0.5)",
    EquipmentType.CARGO30: "Cargo hold (30)",
    EquipmentType.LASER_MK_II: "Laser MkII",
    EquipmentType.LASER_MK_III: "Laser MkIII",
    EquipmentType.MINING_LASER: "Mining laser",
    EquipmentType.DOCKING_COMPUTER: "Docking computer",
    EquipmentType.FUEL_SCOOPS: "Fuel scoops",
    EquipmentType.MISSILE: "Missile",
}

# Weapon numbers carried by a ship and the equipment that provides them.
_WEAPONS = {
    EquipmentType.LASER_MK_II: 1,
    EquipmentType.LASER_MK_III: 2,
    EquipmentType.MINING_LASER: 3,
}
_WEAPON_ITEMS = {weapon: item for item, weapon in _WEAPONS.items()}


@dataclass(kw_only=True)
class Ship:
    """The parts of a ship that equipment changes."""

    weapon_type: int = 0
    missiles: int = 0
    max_missiles: int


@dataclass(kw_only=True)
class Player:
    """The player's ship, hold, fuel and installed extras."""

    ship: Ship
    hold: CargoHold = field(default_factory=CargoHold)
    fuel: float = 0.0
    max_fuel: float
    has_autodock: bool = False
    has_fuel_scoops: bool = False


def price_for_equipment(equipment_type: EquipmentType) -> int:
    """Shop price of an item."""
    return _PRICES[EquipmentType(equipment_type)]


def name_for_equipment(equipment_type: EquipmentType) -> str:
    """Display name of an item."""
    return _NAMES[EquipmentType(equipment_type)]


def equipment_status(player: Player, equipment_type: EquipmentType) -> str:
    """Short text telling how much of an item the player has."""
    equipment_type = EquipmentType(equipment_type)
    if equipment_type is EquipmentType.FUEL:
        return f"{player.fuel:2.1f}"
    if equipment_type is EquipmentType.MISSILE:
        return f"{player.ship.missiles:1d}/{player.ship.max_missiles:1d}"

    if equipment_type is EquipmentType.CARGO30:
        owned = player.hold.size >= CARGO_HOLD_SIZE_LARGE
    elif equipment_type in _WEAPONS:
        owned = player.ship.weapon_type == _WEAPONS[equipment_type]
    elif equipment_type is EquipmentType.DOCKING_COMPUTER:
        owned = player.has_autodock
    else:
        owned = player.has_fuel_scoops
    return _OWNED_TEXT if owned else _NOT_OWNED_TEXT


def _pay(player: Player, amount: int) -> None:
    player.hold.money = (player.hold.money - amount) & 0xFFFF


def buy_equipment(player: Player, equipment_type: EquipmentType) -> bool:
    """Buy an item; False if the player cannot afford it.

    Buying a weapon trades in the current one at full price. Items the
    player already has in full are not charged for.
    """
    equipment_type = EquipmentType(equipment_type)
    price = _PRICES[equipment_type]
    if player.hold.money < price:
        return False

    if equipment_type in _WEAPONS:
        old_item = _WEAPON_ITEMS.get(player.ship.weapon_type)
        if old_item is not None:
            player.hold.money = (player.hold.money + _PRICES[old_item]) & 0xFFFF
        player.ship.weapon_type = _WEAPONS[equipment_type]
        _pay(player, price)
    elif equipment_type is EquipmentType.FUEL:
        if player.fuel < player.max_fuel:
            player.fuel = min(player.fuel + 1, player.max_fuel)
            _pay(player, price)
    elif equipment_type is EquipmentType.CARGO30:
        if player.hold.size != CARGO_HOLD_SIZE_LARGE:
            player.hold.size = CARGO_HOLD_SIZE_LARGE
            _pay(player, price)
    elif equipment_type is EquipmentType.DOCKING_COMPUTER:
        if not player.has_autodock:
            player.has_autodock = True
            _pay(player, price)
    elif equipment_type is EquipmentType.FUEL_SCOOPS:
        if not player.has_fuel_scoops:
            player.has_fuel_scoops = True
            _pay(player, price)
    elif equipment_type is EquipmentType.MISSILE:
        if player.ship.missiles < player.ship.max_missiles:
            player.ship.missiles += 1
            _pay(player, price)
    return True