"""Flashing radio messages shown at the top and bottom of the screen."""

from __future__ import annotations

import enum
import random

from trispace.util import randr


class CommSender(enum.IntEnum):
    """Who a message comes from."""

    ENEMY = 0
    POLICE = 1
    ALIEN = 2


class CommType(enum.IntEnum):
    """Why a message is sent."""

    INTRO = 0
    DAMAGE = 1
    SPECIAL = 2


class SystemComm(enum.IntEnum):
    """Messages from the ship's own systems."""

    AUTODOCK_ENABLED = 0
    FUEL_SCOOPS_DONE = 1
    MISSILES_EMPTY = 2


STATION_LAND_CLEAR = 0

INTRO_COMMS: dict[CommSender, tuple[str, ...]] = {
    CommSender.ENEMY: ("Prepare to die!", "Accept your fate!", "That ship is scrap."),
    CommSender.POLICE: (
        "Prepare to be boarded.",
        "Shut down your engines.",
        "Surrender your ship.",
        "You're breaking the law!",
    ),
    CommSender.ALIEN: ("%!& #&%[$   [$!%+#", "#+*$!% §$%&'+#"),
}

DAMAGE_COMMS: dict[CommSender, tuple[str, ...]] = {
    CommSender.ENEMY: ("You'll pay for that!", "Ow!", "Arrr!"),
    CommSender.POLICE: ("Cease your attacks!",),
    CommSender.ALIEN: ("$%&%!", "#*!$"),
}

SPECIAL_COMMS: dict[CommSender, tuple[str, ...]] = {
    CommSender.ENEMY: (),
    CommSender.POLICE: ("Illegal goods detected!", "You're carrying illegal goods."),
    CommSender.ALIEN: (),
}

SYSTEM_COMMS: dict[SystemComm, str] = {
    SystemComm.AUTODOCK_ENABLED: "Autodocking enabled.",
    SystemComm.FUEL_SCOOPS_DONE: "Fuel tanks full.",
    SystemComm.MISSILES_EMPTY: "Missiles depleted.",
}

HEADER_INCOMING = "INCOMING TRANSMISSION"
HEADER_INTERNAL = "SYSTEM:"

# Time windows (ms since the message arrived) during which it is shown.
COMM_FLASHES: tuple[tuple[int, int], ...] = (
    (0, 75),
    (125, 200),
    (250, 325),
    (400, 1700),
)

_LISTS = {
    CommType.INTRO: INTRO_COMMS,
    CommType.DAMAGE: DAMAGE_COMMS,
    CommType.SPECIAL: SPECIAL_COMMS,
}


class Comms:
    """The current message and its flashing state."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()
        self.ticks = 0
        self.flash_index = 0
        self.header = ""
        self.message = ""

    def _start(self, header: str) -> None:
        self.ticks = 1
        self.flash_index = 0
        self.header = header

    def _pick(self, messages: tuple[str, ...]) -> str:
        return messages[randr(len(messages) - 1, self._rng)]

    def calc(self, ticks: int) -> None:
        """Advance a running message by a number of milliseconds."""
        if self.ticks:
            self.ticks += ticks

    def visible_text(self) -> tuple[str, str] | None:
        """(header, message) if the message is shown this frame, else None.

        Each call also advances the flash sequence, as drawing a frame does.
        """
        if not self.ticks:
            return None
        if self.flash_index >= len(COMM_FLASHES):
            self.ticks = 0
            return None
        start, end = COMM_FLASHES[self.flash_index]
        if self.ticks < start:
            return None
        if self.ticks > end:
            self.flash_index += 1
            return None
        return self.header, self.message

    def set_message(self, sender: CommSender, comm_type: CommType) -> None:
        """Start a random message from another ship.

        Raises ValueError if the sender has no message of that kind.
        """
        sender = CommSender(sender)
        messages = _LISTS[CommType(comm_type)][sender]
        if not messages:
            raise ValueError(f"{sender.name} has no {CommType(comm_type).name} messages")
        self._start(HEADER_INCOMING)
        # An intro line is always drawn first; it is then replaced.
        self.message = self._pick(INTRO_COMMS[sender])
        self.message = self._pick(messages)

    def set_station_message(self, index: int) -> None:
        """Start a message from the space station."""
        self._start(HEADER_INCOMING)
        if index == STATION_LAND_CLEAR:
            self.message = f"Cleared to land in bay {randr(5, self._rng) + 1}."

    def set_system_message(self, comm: SystemComm) -> None:
        """Start a message from the ship's own systems."""
        self._start(HEADER_INTERNAL)
        self.message = SYSTEM_COMMS[SystemComm(comm)]