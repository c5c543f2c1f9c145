"""Abstract interface for the resource manager deployments API.

Orchestration code depends only on this protocol, never on a concrete
client. Tests inject the in-memory fake from arm_fake/backends/mock/.
"""

from __future__ import annotations

from typing import Protocol


class DeploymentsClient(Protocol):
    """Create, read, update, delete and export template deployments.

    Lookups of a missing deployment raise DeploymentNotFoundError.
    """

    def get(self, deployment_name: str) -> dict:
        """Get a deployment record by name."""
        ...

    def export_template(self, deployment_name: str) -> dict:
        """Return the template of a deployment."""
        ...

    def create_or_update(
        self, deployment_name: str, parameters: dict, template: dict
    ) -> dict:
        """Create a deployment, or replace its parameters and template."""
        ...

    def list(self) -> list[dict]:
        """List all deployments, in no particular order."""
        ...

    def delete(self, deployment_name: str) -> None:
        """Delete a deployment by name."""
        ...
