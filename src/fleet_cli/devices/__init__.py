"""Devices module - supported device type models and listing."""
