"""Errors raised by deployment clients."""

from __future__ import annotations


class DeploymentNotFoundError(KeyError):
    """The named deployment does not exist."""

    def __init__(self, deployment_name: str, message: str | None = None):
        self.deployment_name = deployment_name
        self.message = message or f"deployment {deployment_name} not found"
        super().__init__(self.message)

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return self.message
