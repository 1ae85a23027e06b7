"""Exception hierarchy for simulation errors."""


class MultiverseException(RuntimeError):
    """Base class for every simulation error."""


class IndexOutOfRangeException(MultiverseException):
    """Raised when an index or ID is outside the valid range."""

    def __init__(self, message):
        super().__init__(f"Index out of range: {message}")


class EntityNotFoundException(MultiverseException):
    """Raised when a robot, layer or sensor cannot be found."""

    def __init__(self, entity_type, identifier):
        super().__init__(f"{entity_type} not found: {identifier}")
        self.entity_type = entity_type
        self.identifier = identifier


class NullPointerException(MultiverseException):
    """Raised when a required object is missing."""

    def __init__(self, object_name):
        super().__init__(f"Null pointer access: {object_name}")
        self.object_name = object_name


class InitializationException(MultiverseException):
    """Raised when a component fails to initialise."""

    def __init__(self, component):
        super().__init__(f"Initialization failed: {component}")
        self.component = component


class PhysicsException(MultiverseException):
    """Raised when a physics operation fails."""

    def __init__(self, message):
        super().__init__(f"Physics error: {message}")


class SensorException(MultiverseException):
    """Raised when a sensor operation fails."""

    def __init__(self, sensor_type, message):
        super().__init__(f"Sensor error ({sensor_type}): {message}")
        self.sensor_type = sensor_type