"""Shared fixtures for unit tests — in-memory fakes only, no cloud access."""

import pytest
import sys
import os

# Add project root to path so arm_fake is importable
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

from arm_fake.backends.mock.deployments import InMemoryDeploymentStore


SAMPLE_TEMPLATE = {
    "$schema": "https://schema.management.azure.com/schemas/2015-01-01/deploymentTemplate.json#",
    "contentVersion": "1.0.0.0",
    "resources": [{"type": "Microsoft.Compute/virtualMachineScaleSets", "name": "agents"}],
}

SAMPLE_PARAMETERS = {"agentCount": {"value": 3}}


@pytest.fixture
def deployments():
    return InMemoryDeploymentStore()


@pytest.fixture
def seeded_deployments():
    return InMemoryDeploymentStore(
        {
            "cluster-bootstrap": {
                "parameters": SAMPLE_PARAMETERS,
                "template": SAMPLE_TEMPLATE,
            }
        }
    )
