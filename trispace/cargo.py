"""Trade goods, their prices and the cargo holds that carry them."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

NUM_CARGO_TYPES = 14
CARGO_HOLD_SIZE_NORM = 25
CARGO_HOLD_SIZE_LARGE = 30
CARGO_LIMIT = 99

STATION_MONEY = 50000
STATION_SIZE = 65535
STATION_STOCK = 99


class CargoType(enum.IntEnum):
    """Kinds of goods that can be traded."""

    FOOD = 0
    TEXTILES = 1
    LIQUOR = 2
    FURS = 3
    RADIOACTIVES = 4
    LUXURIES = 5
    # Technical goods
    COMPUTERS = 6
    MACHINERY = 7
    # Mineable goods
    GOLD = 8
    PLATINUM = 9
    DILITHIUM = 10
    # Illegal goods
    SLAVES = 11
    FIREARMS = 12
    NARCOTICS = 13


_NAMES = {
    CargoType.FOOD: "Food",
    CargoType.TEXTILES: "Textiles",
    CargoType.LIQUOR: "Liquor",
    CargoType.FURS: "Furs",
    CargoType.RADIOACTIVES: "Radioactives",
    CargoType.LUXURIES: "Luxuries",
    CargoType.COMPUTERS: "Computers",
    CargoType.MACHINERY: "Machinery",
    CargoType.GOLD: "Gold",
    CargoType.PLATINUM: "Platinum",
    CargoType.DILITHIUM: "Dilithium",
    CargoType.SLAVES: "Slaves",
    CargoType.FIREARMS: "Firearms",
    CargoType.NARCOTICS: "Narcotics",
}

_LITRE_GOODS = frozenset({CargoType.LIQUOR})
_KILOGRAM_GOODS = frozenset({CargoType.GOLD, CargoType.PLATINUM, CargoType.DILITHIUM})
_ILLEGAL_GOODS = frozenset({CargoType.SLAVES, CargoType.FIREARMS, CargoType.NARCOTICS})


@dataclass(frozen=True)
class SystemCharacteristics:
    """The properties of a star system that drive its market prices."""

    tech_level: int
    government: int
    water_diff: int
    tree_diff: int
    max_tech_level: int
    max_government: int


def _u8(value: float) -> int:
    """Truncate to an integer and wrap into an unsigned byte."""
    return int(value) & 0xFF


def price_for_cargo(cargo_type: CargoType, chars: SystemCharacteristics) -> int:
    """Price of one unit of cargo in a system, as an unsigned byte."""
    tech = chars.tech_level
    gov = chars.government
    max_tech = chars.max_tech_level
    max_gov = chars.max_government
    low_tech_ratio = (max_tech - tech) / max_tech
    tech_ratio = tech / max_tech

    match CargoType(cargo_type):
        case CargoType.FOOD:
            return _u8(5 + chars.water_diff + tech // 4)
        case CargoType.TEXTILES:
            return _u8(7 + chars.tree_diff + tech // 4)
        case CargoType.LIQUOR:
            return _u8(10 - gov * 2)
        case CargoType.FURS:
            return _u8(7 + tech_ratio * 5)
        case CargoType.RADIOACTIVES:
            return _u8(20 + tech_ratio * 10)
        case CargoType.LUXURIES:
            return _u8(60 + low_tech_ratio * 60)
        case CargoType.COMPUTERS:
            return _u8(50 + (max_tech - tech) * 5)
        case CargoType.MACHINERY:
            return _u8(55 + (max_tech - tech) * 3)
        case CargoType.GOLD:
            return _u8(45 + low_tech_ratio * 30)
        case CargoType.PLATINUM:
            return _u8(55 + low_tech_ratio * 30)
        case CargoType.DILITHIUM:
            return _u8(10 + tech_ratio * 90)
        case CargoType.SLAVES:
            return _u8(50 + (gov / max_gov) * 150.0)
        case CargoType.FIREARMS:
            return _u8(20 + (max_tech / tech) * 40 + (gov / max_gov) * 40)
        case CargoType.NARCOTICS:
            return _u8(10 + (max_tech / tech) * 20 + (gov / max_gov) * 40)
    return 0


def name_for_cargo(cargo_type: CargoType) -> str:
    """Display name of a cargo type."""
    return _NAMES[CargoType(cargo_type)]


def unit_for_cargo(cargo_type: CargoType) -> str:
    """Unit in which a cargo type is measured."""
    cargo_type = CargoType(cargo_type)
    if cargo_type in _LITRE_GOODS:
        return "l"
    if cargo_type in _KILOGRAM_GOODS:
        return "kg"
    return "t"


def is_cargo_illegal(cargo_type: CargoType) -> bool:
    """Whether carrying this cargo attracts the police."""
    return CargoType(cargo_type) in _ILLEGAL_GOODS


@dataclass
class CargoHold:
    """A store of goods and credits with a fixed capacity."""

    size: int = CARGO_HOLD_SIZE_NORM
    cargo: list[int] = field(default_factory=lambda: [0] * NUM_CARGO_TYPES)
    money: int = 0

    def used(self) -> int:
        """Number of cargo units held, as an unsigned byte."""
        return sum(self.cargo) & 0xFF


def transfer_cargo(
    seller: CargoHold,
    buyer: CargoHold,
    cargo_type: CargoType,
    chars: SystemCharacteristics,
    limit: bool,
) -> bool:
    """Move one unit from seller to buyer at the system's price.

    Fails if the buyer cannot pay or has no room, or the seller has none.
    With limit set, the buyer's stock of the good is capped at 99.
    """
    cost = price_for_cargo(cargo_type, chars)
    if buyer.money >= cost and buyer.used() < buyer.size and seller.cargo[cargo_type] > 0:
        buyer.money = (buyer.money - cost) & 0xFFFF
        seller.money = (seller.money + cost) & 0xFFFF
        seller.cargo[cargo_type] -= 1
        buyer.cargo[cargo_type] = (buyer.cargo[cargo_type] + 1) & 0xFF
        if limit and buyer.cargo[cargo_type] > CARGO_LIMIT:
            buyer.cargo[cargo_type] = CARGO_LIMIT
        return True
    return False


def create_station_hold() -> CargoHold:
    """A fresh, fully stocked station market."""
    return CargoHold(
        size=STATION_SIZE,
        cargo=[STATION_STOCK] * NUM_CARGO_TYPES,
        money=STATION_MONEY,
    )