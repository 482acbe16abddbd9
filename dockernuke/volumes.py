"""Removing Docker volumes."""

from __future__ import annotations

from .client import Docker, DockerError
from .containers import stop_all_containers


def remove_all_volumes(docker: Docker) -> list[str]:
    """Stop every container, then force-remove every volume; return the names removed."""
    stop_all_containers(docker)
    try:
        volumes = docker.volume_list()
    except DockerError as error:
        print(f"Error listing volumes: {error}")
        raise
    removed = []
    for volume in volumes:
        try:
            docker.volume_remove(volume.name, force=True)
        except DockerError as error:
            print(f"Error removing volume {volume.name}: {error}")
            raise
        print(f"Successfully removed volume {volume.name}")
        removed.append(volume.name)
    return removed