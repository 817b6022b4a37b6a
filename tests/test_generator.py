import subprocess
from pathlib import Path
from unittest import mock

import pytest

from vpg.config import ContainerConfig, SystemConfig
from vpg.generator import (
    GeneratorError,
    append_to_file,
    generate,
    replace_from_template,
)

SYSTEM = SystemConfig(
    version=0.5,
    num_of_cpus=2,
    num_of_containers=1,
    containers=[ContainerConfig(id=1, num_of_cpus=2, bsp=0, cores=3)],
)
CARGO_HEADER = '[package]\nname = "demo"\n\n[dependencies]\n'


def _fake_cargo(args, **kwargs):
    target = Path(args[-1])
    (target / "src").mkdir(parents=True)
    (target / "Cargo.toml").write_text(CARGO_HEADER)
    return subprocess.CompletedProcess(args, 0, b"", b"")


@pytest.fixture
def template_dir(tmp_path):
    tdir = tmp_path / "template"
    (tdir / ".cargo").mkdir(parents=True)
    (tdir / "main.rs").write_text("fn main() {}\n")
    (tdir / "setup.rs").write_text("pub const NUM_OF_CPUS: usize = {{NUM_OF_CPUS}};\n")
    (tdir / ".cargo" / "config.toml").write_text("[build]\n")
    (tdir / "target.json").write_text("{}\n")
    (tdir / "target.ld").write_text("SECTIONS {}\n")
    return tdir


def test_replace_from_template(tmp_path):
    template = tmp_path / "t.txt"
    template.write_text("a={{A}} b={{B}} a={{A}}")
    result = replace_from_template(template, [("{{A}}", "x"), ("{{B}}", "y")])
    assert result == "a=x b=y a=x"


def test_replace_applied_in_order(tmp_path):
    template = tmp_path / "t.txt"
    template.write_text("{{A}}")
    assert replace_from_template(template, [("{{A}}", "{{B}}"), ("{{B}}", "z")]) == "z"


def test_replace_without_replacements(tmp_path):
    template = tmp_path / "t.txt"
    template.write_text("unchanged {{X}}")
    assert replace_from_template(template, []) == "unchanged {{X}}"


def test_append_to_file(tmp_path):
    target = tmp_path / "f.txt"
    target.write_text("first\n")
    append_to_file(target, "second")
    assert target.read_text() == "first\nsecond\n"


def test_append_to_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        append_to_file(tmp_path / "absent.txt", "line")
    assert not (tmp_path / "absent.txt").exists()


def test_generate_creates_project(tmp_path, template_dir):
    root = tmp_path / "proj"
    with mock.patch("vpg.generator.subprocess.run", side_effect=_fake_cargo) as run:
        path = generate("demo", SYSTEM, root=root, template_dir=template_dir)

    assert path == root / "demo"
    assert run.call_args.args[0] == ["cargo", "new", str(root / "demo")]
    assert (path / "src" / "main.rs").read_text() == "fn main() {}\n"
    assert "{{NUM_OF_CPUS}}" not in (path / "src" / "setup.rs").read_text()
    assert "= 12;" in (path / "src" / "setup.rs").read_text()
    assert (path / "Cargo.toml").read_text() == (
        CARGO_HEADER + "violet = { path = '../../violet' }\n"
    )
    assert (path / ".cargo" / "config.toml").read_text() == "[build]\n"
    assert (path / "target.json").read_text() == "{}\n"
    assert (path / "target.ld").read_text() == "SECTIONS {}\n"


def test_generate_existing_path(tmp_path, template_dir):
    root = tmp_path / "proj"
    (root / "demo").mkdir(parents=True)
    with mock.patch("vpg.generator.subprocess.run") as run:
        with pytest.raises(GeneratorError) as info:
            generate("demo", SYSTEM, root=root, template_dir=template_dir)
    assert "already exists" in str(info.value)
    assert run.call_count == 0


def test_generate_without_cargo(tmp_path, template_dir):
    with mock.patch("vpg.generator.subprocess.run", side_effect=FileNotFoundError("cargo")):
        with pytest.raises(GeneratorError):
            generate("demo", SYSTEM, root=tmp_path / "proj", template_dir=template_dir)