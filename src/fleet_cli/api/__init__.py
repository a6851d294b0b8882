"""API module - SDK client integration.

The SDK is imported lazily, on first access to the client names.
"""

__all__ = ["FleetClient", "initialize_client"]

from fleet_cli.core.lazy import make_getattr

__getattr__ = make_getattr(__name__, dict.fromkeys(__all__, "fleet_cli.api.client"))
