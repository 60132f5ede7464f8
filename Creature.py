import math

import numpy as np

import config
import Neurons
from Genome import Genome
from nNet import Network, bound


class CreatureError(RuntimeError):
    pass


class Creature:
    '''
        A creature controlled by a feedforward network. The genome and the
        network are inherited with slight variations whenever it reproduces.

        Creature(grid, rng) builds a fully random creature;
        Creature(grid, rng, parent=p, max_variance=v) builds an offspring of p.
    '''

    def __init__(self, grid, rng=None, parent=None, max_variance=0.0) -> None:
        if max_variance < 0:
            raise ValueError("max_variance must not be negative")
        self.grid = grid
        self.rng = rng if rng is not None else np.random.default_rng()
        self.alive = True
        self.age = 0
        self.children = 0
        self.linear_velocity = 0.0
        self.angular_velocity = 0.0
        self.reproduction_cooldown = config.REPRODUCTION_COOLDOWN

        if parent is None:
            self.genome = Genome.random(self.rng)
            self._derive()
            self.generation = 0
            self.x = float(self.rng.uniform(0, grid.size_x))
            self.y = float(self.rng.uniform(0, grid.size_y))
            self.x, self.y = grid.wrap(self.x, self.y)
            self.angle = float(self.rng.uniform(0, 360))
            self.health = self.max_health
            self.energy = self.max_energy
            self.network = Network(len(Neurons.LAYER_SIZES), Neurons.LAYER_SIZES, self.rng)
            Neurons.label(self.network)
            memory = self.rng.random(2)
        else:
            self.genome = parent.genome.inherit(max_variance, self.rng)
            self._derive()
            self.generation = parent.generation + 1
            jitter = self.rng.uniform(-config.OFFSPRING_JITTER, config.OFFSPRING_JITTER, 2)
            self.x, self.y = grid.wrap(parent.x + jitter[0], parent.y + jitter[1])
            self.angle = parent.angle
            # half of the parent's reserves
            self.health = bound(0.0, self.max_health, parent.health / 2)
            self.energy = bound(0.0, self.max_energy, parent.energy / 2)
            self.network = Network.inherit(parent.network, max_variance, self.rng)
            memory = (parent.memory_a, parent.memory_b)

        self.memory_a, self.memory_b = float(memory[0]), float(memory[1])
        self.vision_distance = self.size
        self._sense()
        self._think()

    def _derive(self):
        self.max_energy = self.genome.max_energy
        self.max_health = self.genome.max_health
        self.energy_use_rate = self.genome.energy_use_rate

    @property
    def size(self):
        return self.genome.size

    @property
    def radius(self):
        return self.genome.size

    @property
    def position(self):
        return (self.x, self.y)

    @property
    def color(self):
        g = self.genome
        return tuple(int(bound(0, 255, c)) for c in (g.red, g.green, g.blue))

    @property
    def vision_point(self):
        rad = math.radians(self.angle)
        return self.grid.wrap(self.x + self.vision_distance * math.cos(rad),
                              self.y + self.vision_distance * math.sin(rad))

    def _check_alive(self):
        if not self.alive:
            raise CreatureError("Operation on a dead creature.")

    def _sense(self):
        self.ground_color = self.grid.get_tile_color(self.x, self.y)
        vx, vy = self.vision_point
        self.vision_color = self.grid.get_tile_color(vx, vy)

    def _think(self):
        self.network.reset_network()
        self.network.input_layer().input(Neurons.sense_all(self))
        self.network.transfer_data()

    def update(self):
        '''
            Advances this creature by one tick. Returns False when it died
            during the update; the caller must then drop it.
        '''
        self._check_alive()
        # reserves drained since the last tick: no eating out of it
        if self.energy <= 0 or self.health <= 0:
            self.alive = False
            return False
        out = Neurons.read_all(self.network)
        g = self.genome

        self.angular_velocity = g.max_angular_velocity * out["angular_velocity"]
        self.angle = (self.angle + self.angular_velocity) % 360
        self.linear_velocity = max(0.0, g.max_linear_velocity * out["linear_velocity"])

        energy_decrease = self.energy_use_rate + (self.grid.get_tile_energy_rate(self.x, self.y)
                                                  * self.linear_velocity * self.size
                                                  * config.MOVEMENT_COST_SCALING)

        rad = math.radians(self.angle)
        self.x, self.y = self.grid.wrap(self.x + self.linear_velocity * math.cos(rad),
                                        self.y + self.linear_velocity * math.sin(rad))

        self.health = bound(0.0, self.max_health, self.health + config.CREATURE_HEALTH_REGENERATION_RATE)

        energy = self.energy - energy_decrease
        if out["eat"] > config.EAT_THRESHOLD:
            energy += self.grid.eat(self.x, self.y) - config.EAT_COST
        self.energy = bound(0.0, self.max_energy, energy)

        self.reproduction_cooldown = max(0, self.reproduction_cooldown - 1)
        self.age += 1

        if self.energy <= 0 or self.health <= 0:
            self.alive = False
            return False

        self.vision_distance = bound(self.size, config.CREATURE_VISION_DISTANCE_MAX,
                                     out["vision_distance"] * config.CREATURE_VISION_DISTANCE_MAX)
        self._sense()
        self.memory_a = out["memory_a"]
        self.memory_b = out["memory_b"]
        self._think()
        return True

    def should_reproduce(self):
        self._check_alive()
        if self.reproduction_cooldown > 0:
            return False
        out = Neurons.read_all(self.network)
        return (out["reproduce"] > config.REPRODUCE_THRESHOLD
                and self.health > config.REPRODUCE_HEALTH_FRACTION * self.max_health
                and self.energy > config.REPRODUCE_ENERGY_FRACTION * self.max_energy)

    def reproduce(self):
        self._check_alive()
        variance = self.genome.genetic_variance
        if self.rng.random() < config.LARGE_MUTATION_CHANCE:
            variance *= config.LARGE_MUTATION_FACTOR
        child = Creature(self.grid, self.rng, parent=self, max_variance=variance)

        self.energy /= 2
        self.health /= 2
        self.reproduction_cooldown = config.REPRODUCTION_COOLDOWN // 2
        self.children += 1
        return child

    def __repr__(self) -> str:
        return (f"Creature(gen={self.generation}, pos=({self.x:.1f}, {self.y:.1f}), "
                f"energy={self.energy:.1f}/{self.max_energy:.1f}, health={self.health:.1f}/{self.max_health:.1f})")
