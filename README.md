# vpg

`vpg` creates a new virtual machine project from a TOML system configuration.
It starts the project with `cargo new`. It then copies in source files built
from templates, appends a dependency line to the project's `Cargo.toml`, and
copies the build configuration, target and linker files.

## Installation

```
pip install .
```

Creating a project requires `cargo` on your `PATH`.

## Usage

```
vpg --name NAME [--qemu] <TOML file>
```

Options:

- `-n`, `--name NAME`: the name of the project to create. This option is required.
- `-q`, `--qemu`: accepted, but it does not change what is generated.
- `-h`, `--help`: print the help text and exit.

Exactly one TOML file must be given. The command exits with status 0 on
success and 1 on any error: a missing name or file, a file that cannot be
read, a configuration that cannot be parsed, or a project that cannot be
created.

The project is written to `../../proj/<NAME>`, relative to the current working
directory. If that path already exists, `vpg` reports an error and changes
nothing. Templates are read from the `template/` directory under the current
working directory.

## Templates

The template directory must hold:

- `main.rs`, copied to `src/main.rs`
- `setup.rs`, written to `src/setup.rs` with every `{{NUM_OF_CPUS}}` replaced by `12`
- `.cargo/config.toml`, copied to `.cargo/config.toml`
- `target.json` and `target.ld`, copied to the project's top directory

The line `violet = { path = '../../violet' }` is appended to the new
project's `Cargo.toml`.

## Configuration file

The configuration needs a floating-point `version` key and an `env` table that
gives the number of processors and the boot processor as integers:

```toml
version = 0.1

[env]
num_of_cpus = 2
bsp = 0
```

If `env` has no `num_of_cpus`, the boot processor is read instead from a
top-level key literally named `"env.bsp"`, and the container's processor count
is 0.

The parsed `SystemConfig` always has `num_of_cpus` 2 and a single
`ContainerConfig` with `id` 1 and `cores` 3. The configuration is only read
for validation: its values do not change the generated files.

## Library use

```python
from vpg.config import load_config
from vpg.generator import generate

system = load_config("system.toml")
path = generate("myvm", system, root="../../proj", template_dir="template")
```

- `vpg.config.read_file(path)` returns a file's text; `parse_toml(text)`
  builds a `SystemConfig` from a string; `load_config(path)` does both.
- `vpg.generator.generate(name, system, root=None, template_dir=None)` creates
  the project and returns its path. `replace_from_template(template_path,
  replacements)` returns a template's text with each `(placeholder,
  replacement)` pair applied in order. `append_to_file(path, content)` appends
  a line to an existing file.

Configuration errors raise `FormatError`, or its subclasses `ParseError` and
`KeyNotFoundError`. An existing project path, or `cargo` that cannot be run,
raises `GeneratorError`.

## What it does not do

- No templates are shipped with the package; they must be provided in the
  template directory.
- The output location and template directory cannot be chosen from the command
  line; use `generate` for that.
- The output of `cargo new` is not checked. If it fails, the later file
  copies fail with an `OSError`.