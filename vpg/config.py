"""System configuration model and TOML loading."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

DEFAULT_NUM_OF_CPUS = 2
DEFAULT_NUM_OF_CONTAINERS = 1
DEFAULT_CORES = 3


@dataclass
class ContainerConfig:
    """Settings of one container."""

    id: int
    num_of_cpus: int
    bsp: int
    cores: int


@dataclass
class SystemConfig:
    """Settings of the whole system."""

    version: float
    num_of_cpus: int
    num_of_containers: int
    containers: list[ContainerConfig] = field(default_factory=list)


class FormatError(Exception):
    """Base class for configuration format errors."""


class ParseError(FormatError):
    """The configuration text could not be understood."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"Parse error: {self.message}"


class KeyNotFoundError(FormatError):
    """A required key is missing from the configuration."""

    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Key not found: {self.key}"


def read_file(path: str | Path) -> str:
    """Return the whole text of the file at *path*."""
    return Path(path).read_text()


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _require_int(table: dict[str, Any], key: str) -> int:
    if key not in table:
        raise KeyNotFoundError(key)
    value = table[key]
    if not _is_int(value):
        raise ParseError(f"{key} is not an integer")
    return value


def _parse_container(container_id: int, table: dict[str, Any]) -> ContainerConfig:
    env = table.get("env")
    if isinstance(env, dict) and "num_of_cpus" in env:
        num_of_cpus = env["num_of_cpus"]
        if not _is_int(num_of_cpus):
            raise ParseError("num_of_cpus is not an integer")
        return ContainerConfig(
            id=container_id,
            num_of_cpus=num_of_cpus,
            bsp=_require_int(env, "bsp"),
            cores=DEFAULT_CORES,
        )

    # Without an [env] table carrying num_of_cpus, the literal key "env.bsp" is used.
    return ContainerConfig(
        id=container_id,
        num_of_cpus=0,
        bsp=_require_int(table, "env.bsp"),
        cores=DEFAULT_CORES,
    )


def parse_toml(text: str) -> SystemConfig:
    """Build a SystemConfig from TOML text."""
    try:
        table = tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        raise ParseError("Failed to parse TOML") from exc

    if "version" not in table:
        raise KeyNotFoundError("version")
    version = table["version"]
    if not isinstance(version, float):
        raise ParseError("version is not a float")

    containers = [
        _parse_container(container_id, table)
        for container_id in range(1, DEFAULT_NUM_OF_CONTAINERS + 1)
    ]
    return SystemConfig(
        version=version,
        num_of_cpus=DEFAULT_NUM_OF_CPUS,
        num_of_containers=DEFAULT_NUM_OF_CONTAINERS,
        containers=containers,
    )


def load_config(path: str | Path) -> SystemConfig:
    """Read and parse the TOML configuration file at *path*."""
    return parse_toml(read_file(path))