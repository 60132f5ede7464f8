import numpy as np

import config
from nNet import sigmoid


class SensoryNeuron:
    name = None

    def sense(self, creature):
        raise NotImplementedError

    def isInput(self):
        return 1

    def isOutput(self):
        return 0


class ResponseNeuron:
    name = None

    def read(self, value):
        return float(sigmoid(value, 1, 1, 0, 0))

    def isInput(self):
        return 0

    def isOutput(self):
        return 1


'''
    Sensory Neurons
'''
class Speedometer(SensoryNeuron):
    name = "linear_velocity"

    def sense(self, creature):
        return creature.linear_velocity / config.CREATURE_LINEAR_V_MAX

class Compass(SensoryNeuron):
    name = "angle"

    def sense(self, creature):
        return creature.angle / 360

class Skin(SensoryNeuron):
    name = "health"

    def sense(self, creature):
        return creature.health / creature.max_health

class Stomach(SensoryNeuron):
    name = "energy"

    def sense(self, creature):
        return creature.energy / creature.max_energy

class Feet(SensoryNeuron):
    '''Color channel of the tile under the creature.'''
    def __init__(self, channel) -> None:
        self.channel = channel
        self.name = f"ground_{('red', 'green', 'blue')[channel]}"

    def sense(self, creature):
        return creature.ground_color[self.channel] / 255

class Eye(SensoryNeuron):
    '''Color channel of the tile at the end of the vision ray.'''
    def __init__(self, channel) -> None:
        self.channel = channel
        self.name = f"vision_{('red', 'green', 'blue')[channel]}"

    def sense(self, creature):
        return creature.vision_color[self.channel] / 255

class Focus(SensoryNeuron):
    name = "vision_distance"

    def sense(self, creature):
        return creature.vision_distance / config.CREATURE_VISION_DISTANCE_MAX

class Recall(SensoryNeuron):
    def __init__(self, slot) -> None:
        self.slot = slot
        self.name = f"memory_{slot}"

    def sense(self, creature):
        return getattr(creature, f"memory_{self.slot}")


'''
Response neurons
'''
class Rudder(ResponseNeuron):
    '''Turn rate as a fraction of max angular velocity, in (-1, 1).'''
    name = "angular_velocity"

    def read(self, value):
        return float(sigmoid(value, 1, 2, 0, 0) - 1)

class Legs(ResponseNeuron):
    name = "linear_velocity"

class Mouth(ResponseNeuron):
    name = "eat"

class Womb(ResponseNeuron):
    name = "reproduce"

class Memory(ResponseNeuron):
    def __init__(self, slot) -> None:
        self.name = f"memory_{slot}"

class Lens(ResponseNeuron):
    name = "vision_distance"


# Index order is the network wiring; feeding and reading both go through these tuples.
SENSORY_NEURONS = (
    Speedometer(),  # 0
    Compass(),      # 1
    Skin(),         # 2
    Stomach(),      # 3
    Feet(0),        # 4
    Feet(1),        # 5
    Feet(2),        # 6
    Eye(0),         # 7
    Eye(1),         # 8
    Eye(2),         # 9
    Focus(),        # 10
    Recall("a"),    # 11
    Recall("b"),    # 12
)

RESPONSE_NEURONS = (
    Rudder(),       # 0
    Legs(),         # 1
    Mouth(),        # 2
    Womb(),         # 3
    Memory("a"),    # 4
    Memory("b"),    # 5
    Lens(),         # 6
)

INPUT_NAMES = [n.name for n in SENSORY_NEURONS]
OUTPUT_NAMES = [n.name for n in RESPONSE_NEURONS]
INPUT_SIZE = len(SENSORY_NEURONS)
OUTPUT_SIZE = len(RESPONSE_NEURONS)
LAYER_SIZES = [INPUT_SIZE, config.HIDDEN_SIZE, OUTPUT_SIZE]


def sense_all(creature):
    return np.array([n.sense(creature) for n in SENSORY_NEURONS], dtype=float)


def read_all(network):
    outputs = network.output_layer().values
    return {n.name: n.read(outputs[i]) for i, n in enumerate(RESPONSE_NEURONS)}


def label(network):
    '''Name the input and output nodes after the neurons wired to them.'''
    network.input_layer().set_names(INPUT_NAMES)
    network.output_layer().set_names(OUTPUT_NAMES)
