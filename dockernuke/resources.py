"""Removing every kind of Docker resource in one pass."""

from __future__ import annotations

from .client import Docker
from .containers import remove_all_containers
from .images import remove_all_images
from .networks import remove_all_networks
from .volumes import remove_all_volumes


def remove_all_resources(docker: Docker) -> dict[str, list[str]]:
    """Remove containers, images, volumes and networks, in that order.

    Stops at the first failure. Returns what was removed, keyed by resource kind.
    """
    removed = {"containers": remove_all_containers(docker)}
    removed["images"] = remove_all_images(docker)
    removed["volumes"] = remove_all_volumes(docker)
    removed["networks"] = remove_all_networks(docker)
    return removed