"""
last_stander module: arena/arena.py

Headless arena driver. Each tick:
- mobs arrive as a Poisson process whose rate doubles every MOB_DOUBLING_SECONDS
- the borg's brain reads the bearing to the nearest mob and decides
- outputs are applied: turning, walking, aiming, firing
- mobs chase the borg, steered by their own bred brains when a mob pool is given
- contact costs the borg a life and kills the mob; dead mobs return to their pool
"""

from __future__ import annotations
from typing import List, Optional
import logging
import math

import numpy as np
from pygame.math import Vector2

import config
from arena.entities import Borg, Mob
from arena.geometry import angle_from, get_nearest, heading_vector, ray_hits_circle
from evolution.gene_pool import GenePool
from neural.brain import Brain, Inputs, Outputs

logger = logging.getLogger(__name__)


class Arena:
    def __init__(
        self,
        brain: Brain,
        width: float = config.ARENA_W,
        height: float = config.ARENA_H,
        rng: Optional[np.random.Generator] = None,
        mob_pool: Optional[GenePool] = None,
    ) -> None:
        self.width = width
        self.height = height
        self.borg = Borg(brain=brain)
        self.mobs: List[Mob] = []
        # mobs breed too when a pool is given
        self.mob_pool = mob_pool
        # kinda reflects how often mobs spawn
        self.mob_virility = 0.0
        self.time = 0.0
        self.kills = 0
        self.rng = rng if rng is not None else np.random.default_rng()

    @property
    def over(self) -> bool:
        return not self.borg.alive

    def spawn_rate(self) -> float:
        """Mobs per second."""
        return config.MOB_BASE_SPAWN_RATE * 2.0 ** (self.mob_virility / config.MOB_DOUBLING_SECONDS)

    def spawn_mobs(self, dt: float) -> int:
        self.mob_virility += dt
        expected = dt * self.spawn_rate()
        count = int(self.rng.poisson(expected))
        spawned = 0
        for _ in range(count):
            x, y = self.rng.uniform(-0.5, 0.5, size=2)
            # keep the middle of the arena clear
            if abs(x) > config.SPAWN_CLEAR_ZONE or abs(y) > config.SPAWN_CLEAR_ZONE:
                position = Vector2(float(x) * self.width, float(y) * self.height)
                heading = float(self.rng.uniform(-math.pi, math.pi))
                brain = self.mob_pool.spawn() if self.mob_pool is not None else None
                self.mobs.append(Mob(position=position, heading=heading, brain=brain))
                spawned += 1
        return spawned

    def sense(self) -> Inputs:
        borg = self.borg
        nearest = get_nearest(borg.position, [m.position for m in self.mobs])
        if nearest is None:
            nearest = Vector2(0.0, 0.0)
        rot = angle_from(borg.position, borg.heading, nearest)
        return Inputs(
            relative_bearing_to_nearest_target=rot / math.pi,
            time_survived=borg.time_alive,
        )

    def apply(self, outputs: Outputs) -> None:
        borg = self.borg
        borg.angvel = outputs.turn_rate
        forward = borg.speed if outputs.advance else 0.0
        borg.linvel = heading_vector(borg.heading) * forward
        borg.weapon.aim = borg.heading + outputs.aim_bearing_relative * math.pi
        if outputs.fire and borg.weapon.trigger():
            self.fire()

    def fire(self) -> Optional[Mob]:
        borg = self.borg
        direction = heading_vector(borg.weapon.aim)
        hit = None
        hit_distance = math.inf
        for mob in self.mobs:
            distance = ray_hits_circle(borg.position, direction, mob.position, mob.radius)
            if distance is not None and distance < hit_distance:
                hit, hit_distance = mob, distance
        if hit is not None:
            hit.life = 0
            borg.score += 1
            self.kills += 1
        return hit

    def think(self) -> Outputs:
        outputs = self.borg.brain.process(self.sense())
        self.apply(outputs)
        return outputs

    def hold_borg(self) -> None:
        # stop at arena edges
        borg = self.borg
        half_w = self.width / 2.0
        half_h = self.height / 2.0
        # only while still heading outward
        if borg.position.x < -half_w and borg.linvel.x < 0.0:
            borg.position.x = -half_w
            borg.linvel.x = 0.0
        elif borg.position.x > half_w and borg.linvel.x > 0.0:
            borg.position.x = half_w
            borg.linvel.x = 0.0
        if borg.position.y < -half_h and borg.linvel.y < 0.0:
            borg.position.y = -half_h
            borg.linvel.y = 0.0
        elif borg.position.y > half_h and borg.linvel.y > 0.0:
            borg.position.y = half_h
            borg.linvel.y = 0.0

    def retire_dead_mobs(self) -> int:
        """Drop dead mobs, preserving the bred ones with their lifetime."""
        survivors: List[Mob] = []
        retired = 0
        for mob in self.mobs:
            if mob.alive:
                survivors.append(mob)
                continue
            retired += 1
            # a mob shot on its first tick has nothing to report
            if self.mob_pool is not None and mob.brain is not None and mob.time_alive > 0.0:
                self.mob_pool.preserve(mob.brain, mob.time_alive)
        self.mobs = survivors
        return retired

    def resolve_contacts(self) -> None:
        borg = self.borg
        for mob in self.mobs:
            if not mob.alive:
                continue
            if borg.position.distance_to(mob.position) <= borg.radius + mob.radius:
                mob.life = 0
                borg.life -= mob.damage
                logger.debug("Borg hit at %.2fs, %d lives left", self.time, borg.life)
                if not borg.alive:
                    break

    def step(self, dt: float = config.TICK_SECONDS) -> None:
        if self.over:
            return
        self.time += dt
        self.spawn_mobs(dt)

        borg = self.borg
        borg.weapon.tick(dt)
        self.think()
        borg.move(dt)
        self.hold_borg()

        for mob in self.mobs:
            if mob.alive:
                mob.chase(borg.position, dt, offset=mob.steer(borg.position))
        self.resolve_contacts()
        self.retire_dead_mobs()

        borg.time_alive += dt
        for mob in self.mobs:
            mob.time_alive += dt
