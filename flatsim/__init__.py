"""Machine descriptions, JSON loading, tank and power models, and sensor data records for a flat-world robot simulator."""

__version__ = "0.1.0"