"""Version information for balena-fleet-cli."""

__version__ = "1.2.0"
