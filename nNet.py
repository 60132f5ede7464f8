import numpy as np


def sigmoid(value, x_scale=1.0, y_scale=1.0, x_shift=0.0, y_shift=0.0):
    '''
        y_scale / (1 + e^-(x_scale*value - x_shift)) + y_shift
        Works on scalars and numpy arrays.
    '''
    return y_scale / (1 + np.exp(-(x_scale * value - x_shift))) + y_shift


def bound(lower, upper, value):
    return min(upper, max(lower, value))


def interpolate(percent, min_value, max_value):
    return min_value + percent * (max_value - min_value)


class NetworkConstructionError(ValueError):
    pass


class NeuralNetworkError(RuntimeError):
    pass


def _rng(rng):
    return rng if rng is not None else np.random.default_rng()


class Edge:
    '''
        Connection from source to destination in the next layer. Weight and
        bias read and write the source layer's matrices.
    '''
    __slots__ = ("source", "destination")

    def __init__(self, source: 'Node', destination: 'Node') -> None:
        self.source = source
        self.destination = destination

    @property
    def weight(self):
        return float(self.source.layer.weights[self.source.index, self.destination.index])

    @weight.setter
    def weight(self, w):
        self.source.layer.weights[self.source.index, self.destination.index] = w

    @property
    def bias(self):
        return float(self.source.layer.biases[self.source.index, self.destination.index])

    @bias.setter
    def bias(self, b):
        self.source.layer.biases[self.source.index, self.destination.index] = b

    def transfer(self, value):
        self.destination.value += sigmoid(value, self.weight, 1, self.bias, 0)

    def __repr__(self) -> str:
        return f"Edge(weight={self.weight:.3f}, bias={self.bias:.3f})"


class Node:
    '''
        View onto one slot of a Layer; values live in the layer arrays.
    '''
    __slots__ = ("layer", "index")

    def __init__(self, layer: 'Layer', index: int) -> None:
        self.layer = layer
        self.index = index

    @property
    def value(self):
        return float(self.layer.values[self.index])

    @value.setter
    def value(self, v):
        self.layer.values[self.index] = v

    @property
    def default(self):
        return float(self.layer.defaults[self.index])

    @property
    def name(self):
        return self.layer.names[self.index]

    @name.setter
    def name(self, name):
        self.layer.names[self.index] = name

    def has_name(self, name):
        if self.name is None:
            return False
        return self.name == name

    def reset_data(self):
        self.layer.values[self.index] = self.layer.defaults[self.index]

    @property
    def edges(self):
        layer = self.layer
        if layer.is_output:
            return []
        return [Edge(self, Node(layer.next, j)) for j in range(layer.next.size)]

    def transfer_data(self):
        value = self.value
        for e in self.edges:
            e.transfer(value)

    def __repr__(self) -> str:
        return f"Node(name={self.name!r}, value={self.value:.3f}, default={self.default:.3f})"


class Layer:
    def __init__(self, size, next_layer=None, rng=None):
        '''
            size: number of nodes in the layer
            next_layer: the following layer; None makes this an output layer
        '''
        if size < 1:
            raise NetworkConstructionError("Layer sizes must be at least one.")
        rng = _rng(rng)
        self.size = size
        self.next = next_layer
        self.is_output = next_layer is None
        self.defaults = rng.uniform(-1.0, 1.0, size)
        self.values = self.defaults.copy()
        self.names = [None] * size
        # weights[i, j] / biases[i, j]: edge from node i to node j of the next layer
        if self.is_output:
            self.weights = None
            self.biases = None
        else:
            self.weights = rng.uniform(-1.0, 1.0, (size, next_layer.size))
            self.biases = rng.uniform(-1.0, 1.0, (size, next_layer.size))

    @classmethod
    def inherit(cls, parent, next_layer, max_variance, rng=None):
        rng = _rng(rng)
        if (next_layer is None) != parent.is_output:
            raise NetworkConstructionError("Inherited layer must keep the parent's output role.")
        layer = cls(parent.size, next_layer, rng)
        layer.defaults = parent.defaults + rng.uniform(-max_variance, max_variance, parent.size)
        layer.values = layer.defaults.copy()
        layer.names = list(parent.names)
        if not layer.is_output:
            if parent.weights.shape != layer.weights.shape:
                raise NetworkConstructionError("Next layer does not match the parent's fan-out.")
            shape = parent.weights.shape
            layer.weights = parent.weights + rng.uniform(-max_variance, max_variance, shape)
            layer.biases = parent.biases + rng.uniform(-max_variance, max_variance, shape)
        return layer

    def __len__(self):
        return self.size

    def __iter__(self):
        return (Node(self, i) for i in range(self.size))

    @property
    def nodes(self):
        return list(self)

    def get(self, key):
        '''
            get(index) returns the node at index; get(name) returns the first
            node with that name, or None.
        '''
        if isinstance(key, str):
            for n in self:
                if n.has_name(key):
                    return n
            return None
        if not -self.size <= key < self.size:
            raise IndexError(f"Node index {key} out of range for layer of size {self.size}")
        return Node(self, key % self.size)

    def set_names(self, names):
        if len(names) != self.size:
            raise ValueError(f"Expected {self.size} names, got {len(names)}")
        self.names = list(names)

    def input(self, values):
        values = np.asarray(values, dtype=float)
        if values.shape != (self.size,):
            raise ValueError(f"Expected {self.size} input values, got {values.size}")
        self.values[:] = values

    @property
    def data(self):
        return self.values.copy()

    def reset_layer(self):
        self.values[:] = self.defaults

    def transfer_data(self):
        if self.is_output:
            return False
        contributions = sigmoid(self.values[:, None], self.weights, 1, self.biases, 0)
        self.next.values += contributions.sum(axis=0)
        return True


class Network:
    def __init__(self, num_layers, layer_sizes, rng=None):
        '''
            num_layers: number of layers including input and output layer
            layer_sizes: number of nodes in each layer
        '''
        if num_layers < 2:
            raise NetworkConstructionError("Must have at least 2 layers.")
        if len(layer_sizes) != num_layers:
            raise NetworkConstructionError("Number of layers must match size of layer_sizes.")
        if any(s < 1 for s in layer_sizes):
            raise NetworkConstructionError("Layer sizes must be at least one.")
        rng = _rng(rng)

        self.num_layers = num_layers
        self.layers = [None] * num_layers
        # built tail to head so every layer can wire edges into the next
        self.layers[-1] = Layer(layer_sizes[-1], rng=rng)
        for i in range(num_layers - 2, -1, -1):
            self.layers[i] = Layer(layer_sizes[i], self.layers[i + 1], rng)

    @classmethod
    def inherit(cls, parent, max_variance, rng=None):
        '''
            Copy of parent where every node default, edge weight and edge bias
            is offset by a uniform sample in [-max_variance, max_variance].
        '''
        if parent is None:
            raise NetworkConstructionError("Network cannot inherit from a missing network.")
        if max_variance < 0:
            raise NetworkConstructionError("max_variance must not be negative.")
        rng = _rng(rng)
        net = cls.__new__(cls)
        net.num_layers = parent.num_layers
        net.layers = [None] * parent.num_layers
        net.layers[-1] = Layer.inherit(parent.layers[-1], None, max_variance, rng)
        for i in range(parent.num_layers - 2, -1, -1):
            net.layers[i] = Layer.inherit(parent.layers[i], net.layers[i + 1], max_variance, rng)
        return net

    @property
    def layer_sizes(self):
        return [l.size for l in self.layers]

    def input_layer(self):
        return self.layers[0]

    def output_layer(self):
        return self.layers[-1]

    def layer_at(self, i):
        return self.layers[i]

    def reset_network(self):
        for l in self.layers:
            l.reset_layer()

    def transfer_data(self):
        # nothing moves unless every layer but the last can pass data on
        if any(l.is_output for l in self.layers[:-1]):
            raise NeuralNetworkError("Layer.transfer_data() called on an output layer.")
        for l in self.layers[:-1]:
            l.transfer_data()

    propagate = transfer_data

    def get_size(self):
        return sum(l.weights.size for l in self.layers[:-1])
