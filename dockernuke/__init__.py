"""Stop and remove Docker containers, images, volumes and networks over the Docker Engine API."""

__version__ = "0.1.0"