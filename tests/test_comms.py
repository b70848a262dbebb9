import random
import re

import pytest

from trispace.comms import (
    COMM_FLASHES,
    DAMAGE_COMMS,
    HEADER_INCOMING,
    INTRO_COMMS,
    SPECIAL_COMMS,
    STATION_LAND_CLEAR,
    CommSender,
    Comms,
    CommType,
    SystemComm,
)


def test_idle_shows_nothing():
    comms = Comms(random.Random(1))
    comms.calc(100)
    assert comms.ticks == 0
    assert comms.visible_text() is None


def test_system_message_visible_at_start():
    comms = Comms(random.Random(1))
    comms.set_system_message(SystemComm.AUTODOCK_ENABLED)
    assert comms.visible_text() == ("SYSTEM:", "Autodocking enabled.")


def test_message_flashes_then_stops():
    comms = Comms(random.Random(1))
    comms.set_system_message(SystemComm.MISSILES_EMPTY)
    shown = []
    for _ in range(400):
        shown.append(comms.visible_text())
        comms.calc(10)
    assert shown[0] == ("SYSTEM:", "Missiles depleted.")
    assert None in shown
    assert shown[-1] is None
    assert comms.ticks == 0
    assert comms.flash_index >= len(COMM_FLASHES)


def test_gap_between_flashes_hidden():
    comms = Comms(random.Random(1))
    comms.set_system_message(SystemComm.FUEL_SCOOPS_DONE)
    comms.calc(COMM_FLASHES[0][1] + 10)
    assert comms.visible_text() is None
    assert comms.visible_text() is None
    comms.calc(COMM_FLASHES[1][0] - COMM_FLASHES[0][1])
    assert comms.visible_text() == ("SYSTEM:", "Fuel tanks full.")


@pytest.mark.parametrize("sender", list(CommSender))
def test_intro_message_from_list(sender):
    comms = Comms(random.Random(7))
    comms.set_message(sender, CommType.INTRO)
    assert comms.header == HEADER_INCOMING
    assert comms.message in INTRO_COMMS[sender]


def test_damage_message_from_list():
    comms = Comms(random.Random(3))
    comms.set_message(CommSender.POLICE, CommType.DAMAGE)
    assert comms.message == "Cease your attacks!"
    comms.set_message(CommSender.ENEMY, CommType.DAMAGE)
    assert comms.message in DAMAGE_COMMS[CommSender.ENEMY]


def test_special_police_message():
    comms = Comms(random.Random(5))
    comms.set_message(CommSender.POLICE, CommType.SPECIAL)
    assert comms.message in SPECIAL_COMMS[CommSender.POLICE]
    assert comms.visible_text() == (HEADER_INCOMING, comms.message)


@pytest.mark.parametrize("sender", [CommSender.ENEMY, CommSender.ALIEN])
def test_special_without_messages_raises(sender):
    comms = Comms(random.Random(5))
    with pytest.raises(ValueError):
        comms.set_message(sender, CommType.SPECIAL)


def test_station_landing_message():
    comms = Comms(random.Random(11))
    for _ in range(30):
        comms.set_station_message(STATION_LAND_CLEAR)
        match = re.fullmatch(r"Cleared to land in bay (\d+)\.", comms.message)
        assert match is not None
        assert 1 <= int(match.group(1)) <= 6
        assert comms.header == HEADER_INCOMING
        assert comms.ticks == 1


def test_same_seed_same_messages():
    first = Comms(random.Random(42))
    second = Comms(random.Random(42))
    for comms in (first, second):
        comms.set_message(CommSender.ENEMY, CommType.INTRO)
    assert first.message == second.message