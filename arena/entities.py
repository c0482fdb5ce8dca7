"""
last_stander module: arena/entities.py

The things living in the arena: the AI shooter ("borg") and the mobs chasing it.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional
import math

from pygame.math import Vector2

import config
from arena.geometry import angle_from, heading_vector, wrap_angle
from neural.brain import Brain, Inputs


@dataclass
class Weapon:
    repeat_seconds: float = config.WEAPON_REPEAT_SECONDS
    cooldown: float = 0.0
    # absolute, radians
    aim: float = 0.0

    def tick(self, dt: float) -> None:
        self.cooldown = max(0.0, self.cooldown - dt)

    def trigger(self) -> bool:
        if self.cooldown > 0.0:
            return False
        self.cooldown = self.repeat_seconds
        return True


@dataclass
class Borg:
    brain: Brain
    position: Vector2 = field(default_factory=lambda: Vector2(0.0, 0.0))
    heading: float = 0.0
    speed: float = config.BORG_SPEED
    rotation_speed: float = config.BORG_ROTATION_SPEED
    radius: float = config.BORG_RADIUS
    life: int = config.START_LIFE
    time_alive: float = 0.0
    score: int = 0
    weapon: Weapon = field(default_factory=Weapon)

    # set from the brain's outputs every tick
    angvel: float = 0.0
    linvel: Vector2 = field(default_factory=lambda: Vector2(0.0, 0.0))

    @property
    def alive(self) -> bool:
        return self.life > 0

    def move(self, dt: float) -> None:
        self.heading += self.angvel * dt
        self.position += self.linvel * dt


@dataclass
class Mob:
    position: Vector2
    heading: float = 0.0
    speed: float = config.MOB_SPEED
    rotation_speed: float = config.MOB_ROTATION_SPEED
    radius: float = config.MOB_RADIUS
    damage: int = config.MOB_DAMAGE
    life: int = 1
    # bred from the mob gene pool; None walks straight at the target
    brain: Optional[Brain] = None
    time_alive: float = 0.0

    @property
    def alive(self) -> bool:
        return self.life > 0

    def steer(self, target: Vector2) -> float:
        """Heading offset from the brain, radians."""
        if self.brain is None:
            return 0.0
        bearing = angle_from(self.position, self.heading, target)
        outputs = self.brain.process(Inputs(
            relative_bearing_to_nearest_target=bearing / math.pi,
            time_survived=self.time_alive,
        ))
        return outputs.aim_bearing_relative * math.pi

    def chase(self, target: Vector2, dt: float, offset: float = 0.0) -> None:
        # turn toward the target, limited by rotation speed, then walk forward
        bearing = wrap_angle(angle_from(self.position, self.heading, target) + offset)
        max_turn = self.rotation_speed * dt
        self.heading += math.copysign(min(abs(bearing), max_turn), bearing)
        self.position += heading_vector(self.heading) * self.speed * dt
