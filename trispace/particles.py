"""Particle emitters that move a fixed number of particles until they die out."""

from __future__ import annotations

from dataclasses import dataclass, field

from trispace.util import Vec3

NUM_PARTICLES = 64
MAX_EMITTERS = 4


@dataclass
class Particles:
    """The particles of one emitter."""

    positions: list[Vec3] = field(default_factory=lambda: [Vec3()] * NUM_PARTICLES)
    directions: list[Vec3] = field(default_factory=lambda: [Vec3()] * NUM_PARTICLES)
    lives: list[int] = field(default_factory=lambda: [0] * NUM_PARTICLES)
    exists: bool = False


class ParticleSystem:
    """A fixed set of emitter slots."""

    def __init__(self, max_emitters: int = MAX_EMITTERS) -> None:
        self.emitters = [Particles() for _ in range(max_emitters)]

    def create_emitter(self, position: Vec3) -> Particles | None:
        """Place all particles of a free emitter at position; None if no slot is free."""
        for emitter in self.emitters:
            if emitter.exists:
                continue
            emitter.positions = [position] * NUM_PARTICLES
            emitter.exists = True
            return emitter
        return None

    def calc(self, steps: int) -> None:
        """Move every particle and retire emitters whose particles have all expired."""
        for emitter in self.emitters:
            if not emitter.exists:
                continue
            emitter.positions = [
                pos + direction for pos, direction in zip(emitter.positions, emitter.directions)
            ]
            emitter.lives = [life - steps for life in emitter.lives]
            if not any(life > 0 for life in emitter.lives):
                emitter.exists = False

    def active(self) -> list[Particles]:
        """Emitters that are currently running."""
        return [emitter for emitter in self.emitters if emitter.exists]