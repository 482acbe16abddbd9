"""Stopping and removing Docker containers."""

from __future__ import annotations

from .client import Docker, DockerError


def _list_containers(docker: Docker):
    try:
        return docker.container_list(all=True)
    except DockerError as error:
        print(f"Error listing containers: {error}")
        raise


def stop_all_containers(docker: Docker) -> list[str]:
    """Stop every container and return the IDs stopped, halting at the first failure."""
    stopped = []
    for container in _list_containers(docker):
        try:
            docker.container_stop(container.id)
        except DockerError as error:
            print(f"Error stopping container {container.id}: {error}")
            raise
        print(f"Successfully stopped container {container.id}")
        stopped.append(container.id)
    return stopped


def remove_all_containers(docker: Docker) -> list[str]:
    """Stop, then force-remove every container; return the IDs removed."""
    stop_all_containers(docker)
    removed = []
    for container in _list_containers(docker):
        print(container.id)
        try:
            docker.container_remove(container.id, force=True)
        except DockerError as error:
            print(f"Error removing container {container.id}: {error}")
            raise
        print(f"Successfully removed container {container.id}")
        removed.append(container.id)
    return removed