import pytest

from trispace.cargo import (
    CargoHold,
    CargoType,
    SystemCharacteristics,
    create_station_hold,
    is_cargo_illegal,
    name_for_cargo,
    price_for_cargo,
    transfer_cargo,
    unit_for_cargo,
)


def _chars(tech=5, gov=3):
    return SystemCharacteristics(
        tech_level=tech,
        government=gov,
        water_diff=2,
        tree_diff=1,
        max_tech_level=10,
        max_government=7,
    )


def test_names_match_types():
    assert name_for_cargo(CargoType.FOOD) == "Food"
    assert name_for_cargo(CargoType.DILITHIUM) == "Dilithium"
    assert name_for_cargo(CargoType.NARCOTICS) == "Narcotics"


def test_units():
    assert unit_for_cargo(CargoType.LIQUOR) == "l"
    assert unit_for_cargo(CargoType.GOLD) == "kg"
    assert unit_for_cargo(CargoType.PLATINUM) == "kg"
    assert unit_for_cargo(CargoType.SLAVES) == "t"
    assert unit_for_cargo(CargoType.FOOD) == "t"


def test_illegal_goods():
    illegal = {c for c in CargoType if is_cargo_illegal(c)}
    assert illegal == {CargoType.SLAVES, CargoType.FIREARMS, CargoType.NARCOTICS}


@pytest.mark.parametrize("cargo_type", list(CargoType))
def test_prices_are_bytes(cargo_type):
    price = price_for_cargo(cargo_type, _chars())
    assert 0 <= price <= 255


def test_prices_at_max_tech():
    chars = _chars(tech=10, gov=0)
    assert price_for_cargo(CargoType.COMPUTERS, chars) == 50
    assert price_for_cargo(CargoType.LUXURIES, chars) == 60
    assert price_for_cargo(CargoType.SLAVES, chars) == 50


def test_technical_goods_cheaper_with_higher_tech():
    low = _chars(tech=2)
    high = _chars(tech=9)
    assert price_for_cargo(CargoType.COMPUTERS, high) < price_for_cargo(CargoType.COMPUTERS, low)
    assert price_for_cargo(CargoType.MACHINERY, high) < price_for_cargo(CargoType.MACHINERY, low)


def test_liquor_price_wraps_as_byte():
    assert price_for_cargo(CargoType.LIQUOR, _chars(gov=6)) == 254


def test_firearms_zero_tech_raises():
    with pytest.raises(ZeroDivisionError):
        price_for_cargo(CargoType.FIREARMS, _chars(tech=0))


def test_station_hold():
    hold = create_station_hold()
    assert hold.money == 50000
    assert hold.size == 65535
    assert hold.cargo == [99] * len(CargoType)


def test_used_counts_units():
    hold = CargoHold(size=30)
    hold.cargo[CargoType.GOLD] = 4
    hold.cargo[CargoType.FOOD] = 6
    assert hold.used() == hold.cargo[CargoType.GOLD] + hold.cargo[CargoType.FOOD]


def test_transfer_conserves_money_and_goods():
    chars = _chars()
    station = create_station_hold()
    player = CargoHold(size=25, money=1000)
    total_money = station.money + player.money
    total_gold = station.cargo[CargoType.GOLD] + player.cargo[CargoType.GOLD]
    assert transfer_cargo(station, player, CargoType.GOLD, chars, False)
    assert station.money + player.money == total_money
    assert station.cargo[CargoType.GOLD] + player.cargo[CargoType.GOLD] == total_gold
    assert player.money == 1000 - price_for_cargo(CargoType.GOLD, chars)
    assert player.used() == 1


def test_transfer_fails_without_money():
    station = create_station_hold()
    player = CargoHold(size=25, money=0)
    assert not transfer_cargo(station, player, CargoType.FOOD, _chars(), False)
    assert player.used() == 0
    assert station.money == 50000


def test_transfer_fails_when_full():
    station = create_station_hold()
    player = CargoHold(size=25, money=10000)
    player.cargo[CargoType.FOOD] = 25
    assert not transfer_cargo(station, player, CargoType.TEXTILES, _chars(), False)
    assert player.cargo[CargoType.TEXTILES] == 0


def test_transfer_fails_without_stock():
    seller = CargoHold(size=25, money=0)
    buyer = create_station_hold()
    assert not transfer_cargo(seller, buyer, CargoType.FURS, _chars(), True)
    assert buyer.cargo[CargoType.FURS] == 99


def test_selling_to_station_is_capped():
    chars = _chars()
    player = CargoHold(size=25, money=0)
    player.cargo[CargoType.FOOD] = 3
    station = create_station_hold()
    assert transfer_cargo(player, station, CargoType.FOOD, chars, True)
    assert station.cargo[CargoType.FOOD] == 99
    assert player.cargo[CargoType.FOOD] == 2
    assert player.money == price_for_cargo(CargoType.FOOD, chars)