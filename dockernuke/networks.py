"""Removing Docker networks."""

from __future__ import annotations

from .client import Docker, DockerError
from .containers import stop_all_containers

DEFAULT_NETWORKS = frozenset({"bridge", "none", "host"})


def remove_all_networks(docker: Docker) -> list[str]:
    """Stop every container, then remove every network except the default ones.

    Returns the IDs of the networks removed, halting at the first failure.
    """
    stop_all_containers(docker)
    try:
        networks = docker.network_list()
    except DockerError as error:
        print(f"Error listing networks: {error}")
        raise
    removed = []
    for network in networks:
        if network.name in DEFAULT_NETWORKS:
            continue
        try:
            docker.network_remove(network.id)
        except DockerError as error:
            print(f"Error removing network {network.id}: {error}")
            raise
        print(f"Successfully removed network {network.id}")
        removed.append(network.id)
    return removed