"""Pytest configuration and fixtures for fleet CLI tests"""
import logging
from unittest.mock import MagicMock

import pytest

from fleet_cli.api.client import FleetClient
from fleet_cli.core.colors import ConsoleColors
from fleet_cli.core.constants import ENV_VAR_MAPPING


@pytest.fixture
def device_type_payload():
    """Raw device types as returned by the SDK (unsorted, mixed states)"""
    return [
        {
            "slug": "raspberrypi4-64",
            "name": "Raspberry Pi 4 (using 64bit OS)",
            "aliases": ["raspberrypi4-64"],
            "arch": "aarch64",
            "state": "RELEASED",
            "isDependent": False,
        },
        {
            "slug": "intel-nuc",
            "name": "Intel NUC",
            "aliases": ["nuc", "intel-nuc"],
            "arch": "amd64",
            "state": "RELEASED",
        },
        {
            "slug": "edison",
            "name": "Intel Edison",
            "aliases": [],
            "arch": "i386",
            "state": "DISCONTINUED",
        },
        {
            "slug": "jetson-nano",
            "name": "Nvidia Jetson Nano",
            "arch": "aarch64",
            "state": "BETA",
        },
        {
            "slug": "raspberrypi3",
            "name": "Raspberry Pi 3",
            "aliases": ["raspberrypi3", "rpi3", "raspberry-pi3"],
            "arch": "armv7hf",
            "state": "RELEASED",
        },
    ]


@pytest.fixture
def variable_payload():
    """Raw environment variables as returned by the SDK, in API order"""
    return [
        {"id": 120, "name": "MQTT_HOST", "value": "broker.local", "application": {"__id": 7}},
        {"id": 101, "name": "DEBUG", "value": "1", "application": {"__id": 7}},
        {"id": 133, "name": "EMPTY", "value": "", "application": {"__id": 7}},
    ]


@pytest.fixture
def mock_sdk(device_type_payload, variable_payload):
    """Mock balena SDK instance wired with sample payloads"""
    sdk = MagicMock()
    sdk.auth.is_logged_in.return_value = True
    sdk.models.config.get_device_types.return_value = device_type_payload
    sdk.models.application.env_var.get_all_by_application.return_value = variable_payload
    sdk.models.application.config_var.get_all_by_application.return_value = [
        {"id": 5, "name": "RESIN_SUPERVISOR_POLL_INTERVAL", "value": "600000"}
    ]
    sdk.models.device.env_var.get_all_by_device.return_value = [{"id": 9, "name": "DEVICE_ONLY", "value": "yes"}]
    sdk.models.device.config_var.get_all_by_device.return_value = [
        {"id": 11, "name": "RESIN_HOST_CONFIG_gpu_mem", "value": "64"}
    ]
    return sdk


@pytest.fixture
def fleet_client(mock_sdk):
    """FleetClient backed by the mock SDK"""
    return FleetClient(mock_sdk)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every environment variable the CLI reads.

    Each variable is set before being deleted so monkeypatch restores the
    original state even when a .env file loads it during the test.
    """
    names = [env_var for env_vars in ENV_VAR_MAPPING.values() for env_var in env_vars]
    for name in [*names, "LOG_LEVEL", "NO_COLOR"]:
        monkeypatch.setenv(name, "unset")
        monkeypatch.delenv(name)
    yield


@pytest.fixture
def no_dotenv(tmp_path, monkeypatch):
    """Run from an empty directory so no .env file is picked up"""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture(autouse=True)
def plain_colors(monkeypatch):
    """Keep colors off so assertions see plain text"""
    monkeypatch.setattr(ConsoleColors, "_enabled", False)


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo handler changes made by setup_logging"""
    handlers = logging.root.handlers[:]
    level = logging.root.level
    yield
    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)
    for handler in handlers:
        logging.root.addHandler(handler)
    logging.root.setLevel(level)
