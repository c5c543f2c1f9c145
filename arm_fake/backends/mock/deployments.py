"""In-memory deployments client for testing."""

from __future__ import annotations

import copy
import logging
import threading

from arm_fake.core.errors import DeploymentNotFoundError

logger = logging.getLogger(__name__)


def _make_record(name: str, parameters, template) -> dict:
    return {
        "name": name,
        "properties": {
            "parameters": copy.deepcopy(parameters),
            "template": copy.deepcopy(template),
        },
    }


class InMemoryDeploymentStore:
    """Fake of the deployments API backed by a dict.

    Every operation holds one store-wide lock for its whole duration, so
    concurrent callers see operations in a single total order. Records go in
    and come out as deep copies.

    ``initial`` seeds the store: each value is either a full record (with a
    ``properties`` key) or a ``{"parameters": ..., "template": ...}`` dict.
    """

    def __init__(self, initial: dict[str, dict] | None = None):
        self._lock = threading.Lock()
        self._deployments: dict[str, dict] = {}
        self._calls: list[tuple[str, str | None]] = []

        for name, value in (initial or {}).items():
            props = value.get("properties") or value
            self._deployments[name] = _make_record(
                name, props.get("parameters"), props.get("template")
            )

    def get(self, deployment_name: str) -> dict:
        with self._lock:
            self._calls.append(("get", deployment_name))
            deploy = self._deployments.get(deployment_name)
            if deploy is None:
                raise DeploymentNotFoundError(deployment_name)
            return copy.deepcopy(deploy)

    def export_template(self, deployment_name: str) -> dict:
        with self._lock:
            self._calls.append(("export_template", deployment_name))
            deploy = self._deployments.get(deployment_name)
            if deploy is None:
                raise DeploymentNotFoundError(deployment_name)
            return copy.deepcopy(deploy["properties"]["template"])

    def create_or_update(
        self, deployment_name: str, parameters: dict, template: dict
    ) -> dict:
        with self._lock:
            self._calls.append(("create_or_update", deployment_name))
            record = _make_record(deployment_name, parameters, template)
            if deployment_name in self._deployments:
                logger.debug("Overwriting deployment %s", deployment_name)
            else:
                logger.debug("Creating deployment %s", deployment_name)
            self._deployments[deployment_name] = record
            return {"status_code": 200}

    def list(self) -> list[dict]:
        with self._lock:
            self._calls.append(("list", None))
            return [copy.deepcopy(d) for d in self._deployments.values()]

    def delete(self, deployment_name: str) -> None:
        with self._lock:
            self._calls.append(("delete", deployment_name))
            if deployment_name not in self._deployments:
                raise DeploymentNotFoundError(
                    deployment_name,
                    f"there is no such deployment with name {deployment_name}",
                )
            del self._deployments[deployment_name]
            logger.debug("Deleted deployment %s", deployment_name)

    # --- Test helpers ---

    @property
    def calls(self) -> list[tuple[str, str | None]]:
        """Snapshot of (operation, deployment_name) pairs, oldest first."""
        with self._lock:
            return list(self._calls)

    def __len__(self) -> int:
        with self._lock:
            return len(self._deployments)

    def __contains__(self, deployment_name: object) -> bool:
        with self._lock:
            return deployment_name in self._deployments
