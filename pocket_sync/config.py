#!/usr/bin/env python3
"""
Static configuration for the Pocket API client.
Maps host platforms to pre-registered Pocket consumer keys.
"""

import os
import sys

# From https://getpocket.com/developer/apps/
PLATFORM_CONSUMER_KEYS = {
    "mac": "97653-12e003276f01f4288ac868c0",
    "windows": "97653-541365a3736338ca19dae55a",
    "linux": "97653-da7a5baf4f5172d3fce89c0a",
    "ios": "98643-0f7acf0859cccd827a59d02f",
    "android": "98644-7deaf66746d3a0457a1f7961",
}

SUPPORTED_PLATFORMS = tuple(PLATFORM_CONSUMER_KEYS)

DEFAULT_TIMEOUT = 30.0


def get_platform():
    """Return the supported platform identifier for this host."""
    override = os.getenv('POCKET_SYNC_PLATFORM')
    if override:
        platform = override.strip().lower()
        if platform not in PLATFORM_CONSUMER_KEYS:
            raise ValueError(
                f"Unsupported platform '{override}'. Must be one of: {list(SUPPORTED_PLATFORMS)}"
            )
        return platform

    if sys.platform == "darwin":
        return "mac"
    if sys.platform.startswith("win"):
        return "windows"
    return "linux"


def get_consumer_key(platform=None):
    """Resolve the consumer key, preferring POCKET_CONSUMER_KEY when set."""
    env_key = os.getenv('POCKET_CONSUMER_KEY')
    if env_key:
        return env_key
    return PLATFORM_CONSUMER_KEYS[platform or get_platform()]


def get_timeout():
    """Transport timeout in seconds."""
    value = os.getenv('POCKET_SYNC_TIMEOUT')
    if not value:
        return DEFAULT_TIMEOUT
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"POCKET_SYNC_TIMEOUT must be a number of seconds, got '{value}'")
