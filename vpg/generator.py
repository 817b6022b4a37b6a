"""Project generation from templates."""

from __future__ import annotations

import os
import shutil
import subprocess
from collections.abc import Iterable
from pathlib import Path

from vpg.config import SystemConfig

DEFAULT_ROOT = Path("../../proj")
DEFAULT_TEMPLATE_DIR = Path("template")
VIOLET_DEPENDENCY = "violet = { path = '../../violet' }"
NUM_OF_CPUS_PLACEHOLDER = "{{NUM_OF_CPUS}}"
NUM_OF_CPUS_VALUE = "12"


class GeneratorError(Exception):
    """Project generation failed."""


def replace_from_template(
    template_path: str | Path, replacements: Iterable[tuple[str, str]]
) -> str:
    """Return the template's text with each placeholder replaced, in order."""
    content = Path(template_path).read_text()
    for placeholder, replacement in replacements:
        content = content.replace(placeholder, replacement)
    return content


def append_to_file(path: str | Path, content: str) -> None:
    """Append *content* and a newline to an existing file."""
    fd = os.open(path, os.O_WRONLY | os.O_APPEND)
    with os.fdopen(fd, "w") as handle:
        handle.write(content + "\n")


def _create_project(path: Path) -> None:
    try:
        subprocess.run(["cargo", "new", str(path)], capture_output=True, check=False)
    except OSError as exc:
        raise GeneratorError(f"Failed to run cargo: {exc}") from exc


def _write_sources(path: Path, template_dir: Path) -> None:
    shutil.copy(template_dir / "main.rs", path / "src" / "main.rs")
    content = replace_from_template(
        template_dir / "setup.rs", [(NUM_OF_CPUS_PLACEHOLDER, NUM_OF_CPUS_VALUE)]
    )
    (path / "src" / "setup.rs").write_text(content)


def _write_build_config(path: Path, template_dir: Path) -> None:
    (path / ".cargo").mkdir(parents=True, exist_ok=True)
    shutil.copy(template_dir / ".cargo" / "config.toml", path / ".cargo" / "config.toml")
    shutil.copy(template_dir / "target.json", path / "target.json")
    shutil.copy(template_dir / "target.ld", path / "target.ld")


def generate(
    name: str,
    system: SystemConfig,
    root: str | Path | None = None,
    template_dir: str | Path | None = None,
) -> Path:
    """Create project *name* under *root* from the templates; return its path."""
    root = DEFAULT_ROOT if root is None else Path(root)
    template_dir = DEFAULT_TEMPLATE_DIR if template_dir is None else Path(template_dir)
    path = root / name

    if path.exists():
        raise GeneratorError(f"{path} already exists")

    _create_project(path)
    _write_sources(path, template_dir)
    append_to_file(path / "Cargo.toml", VIOLET_DEPENDENCY)
    _write_build_config(path, template_dir)
    return path