"""Short-lived animated sprite effects such as explosions and sparks."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from trispace.util import Vec3

MAX_EFFECTS = 64
FRAMES_PER_ROW = 8
FRAME_PIXELS = 32


class EffectType(enum.Enum):
    """Kinds of effect that can be spawned."""

    EXPLOSION = 0
    SPARKS = 1


@dataclass(frozen=True)
class _EffectTemplate:
    start_frame: int
    frames: int
    frame_time: int
    life: int
    size: float


_TEMPLATES = {
    EffectType.EXPLOSION: _EffectTemplate(start_frame=0, frames=8, frame_time=100, life=800, size=1.5),
    EffectType.SPARKS: _EffectTemplate(start_frame=8, frames=8, frame_time=50, life=400, size=0.75),
}


@dataclass
class Effect:
    """One animated sprite; it is alive while life is above zero."""

    position: Vec3 = field(default_factory=Vec3)
    frames: int = 0
    start_frame: int = 0
    frame_index: int = 0
    frame_time: int = 1
    life: int = 0
    size: float = 0.0

    @property
    def alive(self) -> bool:
        return self.life != 0

    def texture_offset(self) -> tuple[int, int]:
        """Pixel offset of the current frame in the effect texture."""
        return (
            (self.frame_index % FRAMES_PER_ROW) * FRAME_PIXELS,
            (self.frame_index // FRAMES_PER_ROW) * FRAME_PIXELS,
        )


class EffectPool:
    """A fixed number of effect slots that are reused once an effect ends."""

    def __init__(self, capacity: int = MAX_EFFECTS) -> None:
        self.effects = [Effect() for _ in range(capacity)]

    def create(self, position: Vec3, effect_type: EffectType) -> bool:
        """Start an effect in the first free slot; False if every slot is busy."""
        for effect in self.effects:
            if effect.alive:
                continue
            template = _TEMPLATES[effect_type]
            effect.position = position
            effect.start_frame = template.start_frame
            effect.frame_index = template.start_frame
            effect.frames = template.frames
            effect.frame_time = template.frame_time
            effect.life = template.life
            effect.size = template.size
            return True
        return False

    def calc(self, ticks: int) -> None:
        """Advance all live effects by a number of milliseconds."""
        for effect in self.effects:
            if not effect.alive:
                continue
            effect.life -= ticks
            elapsed_frames = int(effect.life / effect.frame_time)
            effect.frame_index = (
                effect.start_frame + effect.frames - 1 - elapsed_frames
            ) & 0xFF
            if effect.life < 0:
                effect.life = 0

    def active(self) -> list[Effect]:
        """The effects that are currently alive."""
        return [effect for effect in self.effects if effect.alive]