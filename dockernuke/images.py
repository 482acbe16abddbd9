"""Removing Docker images."""

from __future__ import annotations

from .client import Docker, DockerError, ImageSummary
from .containers import stop_all_containers


def _list_images(docker: Docker) -> list[ImageSummary]:
    try:
        return docker.image_list(all=True)
    except DockerError as error:
        print(f"Error listing images: {error}")
        raise


def _remove_image(docker: Docker, image_id: str) -> None:
    try:
        docker.image_remove(image_id, force=True)
    except DockerError as error:
        print(f"Error removing image {image_id}: {error}")
        raise


def remove_dangling_images(docker: Docker) -> list[str]:
    """Stop every container, then force-remove the images without repository tags.

    Returns the IDs of the images removed, halting at the first failure.
    """
    stop_all_containers(docker)
    removed = []
    for image in _list_images(docker):
        if image.repo_tags:
            continue
        _remove_image(docker, image.id)
        removed.append(image.id)
    return removed


def remove_all_images(docker: Docker) -> list[str]:
    """Stop every container, then force-remove every image; return the IDs removed."""
    stop_all_containers(docker)
    removed = []
    for image in _list_images(docker):
        _remove_image(docker, image.id)
        print(f"Successfully removed image {image.id}")
        removed.append(image.id)
    return removed