"""Generate virtual machine project skeletons from a TOML system configuration."""

__version__ = "0.1.0"