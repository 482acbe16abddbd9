# dockernuke

A small command-line tool that clears out a Docker engine: it stops
containers and then removes containers, images, volumes and networks. It talks
to the Docker Engine HTTP API directly and needs nothing beyond the Python
standard library.

## Installation

```
pip install .
```

## Usage

```
docker-nuke help
docker-nuke nuke [options]
```

`docker-nuke help` prints the list of subcommands. `docker-nuke nuke` takes
one or more of these options:

| Option         | What it does                                                       |
|----------------|--------------------------------------------------------------------|
| `--all`        | Removes containers, then images, then volumes, then networks       |
| `--containers` | Stops every container, then force-removes every container          |
| `--images`     | Stops every container, then force-removes images that have no tags |
| `--all-images` | Stops every container, then force-removes every image              |
| `--volumes`    | Stops every container, then force-removes every volume             |
| `--networks`   | Stops every container, then removes every non-default network      |

Options can be combined; they run in the order of the table:

```
docker-nuke nuke --containers --images
```

Flags may be written as `-name`, `--name` or `-name=value`, where the value is
a boolean such as `true`, `false`, `1` or `0`. Parsing stops at the first
argument that is not a flag, or after `--`.

The default networks `bridge`, `none` and `host` are never removed. Every step
prints what it stops and removes. Processing halts at the first error; the
error is printed and the command exits with status 1. An unknown subcommand,
an unknown flag, or `nuke` with no option also exits with status 1; in the
last two cases the usage of `nuke` is printed first.

**Warning:** the removals are forced and cannot be undone. Despite the wording
of the usage text, `--containers`, `--all-images` and `--volumes` act on every
container, image and volume, not only stopped or unused ones.

## Connecting to the daemon

The client is configured from the environment:

- `DOCKER_HOST` – daemon address, `unix://`, `tcp://`, `http://` or
  `https://`; defaults to `unix:///var/run/docker.sock`.
- `DOCKER_API_VERSION` – API version to put in request paths.
- `DOCKER_CERT_PATH` – directory holding `cert.pem`, `key.pem` and `ca.pem`
  for TLS.
- `DOCKER_TLS_VERIFY` – when set, the server certificate is checked against
  `ca.pem`.

## Use from Python

The removal steps can be called with any object that provides the
`dockernuke.client.Docker` interface, such as `dockernuke.client.DockerClient`:

```python
from dockernuke.client import DockerClient
from dockernuke.images import remove_dangling_images

removed_ids = remove_dangling_images(DockerClient.from_env())
```

The functions are `dockernuke.containers.stop_all_containers` and
`remove_all_containers`, `dockernuke.images.remove_dangling_images` and
`remove_all_images`, `dockernuke.volumes.remove_all_volumes`,
`dockernuke.networks.remove_all_networks`, and
`dockernuke.resources.remove_all_resources`. Each returns the IDs (volume
names for volumes) it acted on; `remove_all_resources` returns them in a dict
keyed by `containers`, `images`, `volumes` and `networks`. A failing Docker
call raises `dockernuke.client.DockerError`.

`dockernuke.cli.process_subcommand_args(args, docker)` runs a subcommand with
a client of your choosing, and `dockernuke.cli.main(argv)` returns the exit
status.