"""Builders for scale set descriptors used in test fixtures."""

from __future__ import annotations

from arm_fake.shared import config

VMSS_VM_ID_FORMAT = (
    "/subscriptions/{subscription_id}/resourceGroups/{resource_group}"
    "/providers/Microsoft.Compute/virtualMachineScaleSets/{vmss_name}"
    "/virtualMachines/{index}"
)


def fake_vmss_with_tags(name: str, tags: dict[str, str | None]) -> dict:
    """Build a scale set descriptor with the default SKU and capacity.

    Tags are attached as given.
    """
    return {
        "name": name,
        "sku": {
            "name": config.DEFAULT_SKU_NAME,
            "capacity": config.DEFAULT_CAPACITY,
        },
        "tags": tags,
    }


def fake_vmss_vm_id(
    index: int,
    *,
    vmss_name: str | None = None,
    resource_group: str | None = None,
    subscription_id: str | None = None,
) -> str:
    """Provider resource ID of the index-th VM in a scale set."""
    return VMSS_VM_ID_FORMAT.format(
        subscription_id=subscription_id or config.SUBSCRIPTION_ID(),
        resource_group=resource_group or config.RESOURCE_GROUP(),
        vmss_name=vmss_name or config.VMSS_NAME(),
        index=index,
    )
