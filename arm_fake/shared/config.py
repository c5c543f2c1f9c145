"""Configuration helpers — read from environment variables."""

from __future__ import annotations

import os


def get_env(name: str, default: str | None = None) -> str:
    """Get an environment variable, raising if missing and no default."""
    value = os.environ.get(name, default)
    if value is None:
        raise RuntimeError(f"Missing required environment variable: {name}")
    return value


# Identity of the fake resource group (used to build provider resource IDs)
SUBSCRIPTION_ID = lambda: get_env("FAKE_SUBSCRIPTION_ID", "test-subscription-id")
RESOURCE_GROUP = lambda: get_env("FAKE_RESOURCE_GROUP", "test-asg")
VMSS_NAME = lambda: get_env("FAKE_VMSS_NAME", "agents")

DEFAULT_SKU_NAME = "Standard_D4_v2"
DEFAULT_CAPACITY = 3
