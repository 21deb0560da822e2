"""A fixed-shooter arcade game with alien waves, shield bases and a bonus UFO."""

__version__ = "0.1.0"