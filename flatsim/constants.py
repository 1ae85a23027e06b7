"""Visualisation and physics tuning constants."""

# Camera and visualisation settings
FOLLOW_CAM: bool = True
ROTATE_CAM: bool = False
DRAW_AXIS: bool = False

# Physics simulation parameters
LINEAR_DAMPING: float = 0.2
ANGULAR_DAMPING: float = 0.2
FORCE: float = 30.0  # base force for a typical wheel (0.2 m radius)
TORQUE: float = 10.0
FRICTION: float = 0.4  # base lateral friction
MAX_IMPULSE: float = 0.5  # base max impulse for lateral friction
BRAKE: float = 10.0
DRAG: float = 0.5  # velocity-dependent drag coefficient