[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vpg"
version = "0.1.0"
description = "Generate virtual machine project skeletons from a TOML system configuration"
requires-python = ">=3.11"
dependencies = []
keywords = ["code-generator", "scaffolding", "toml", "hypervisor", "virtual-machine"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Code Generators",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
vpg = "vpg.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["vpg"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"
