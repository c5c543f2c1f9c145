"""Unit tests for environment configuration helpers."""

from __future__ import annotations

import pytest

from arm_fake.shared import config


def test_get_env_returns_value(monkeypatch):
    monkeypatch.setenv("FAKE_RESOURCE_GROUP", "rg-prod")
    assert config.RESOURCE_GROUP() == "rg-prod"


def test_get_env_falls_back_to_default(monkeypatch):
    monkeypatch.delenv("FAKE_VMSS_NAME", raising=False)
    assert config.VMSS_NAME() == "agents"


def test_get_env_raises_when_missing_without_default(monkeypatch):
    monkeypatch.delenv("ARM_FAKE_UNSET", raising=False)
    with pytest.raises(RuntimeError, match="ARM_FAKE_UNSET"):
        config.get_env("ARM_FAKE_UNSET")
