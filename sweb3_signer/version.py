"""
Version information for sweb3-signer.

Installed distributions report their metadata version. A source checkout
that was never installed reads it from ``pyproject.toml`` instead.
"""
import importlib.metadata
import pathlib

import tomli

DISTRIBUTION = "sweb3-signer"
FALLBACK_VERSION = "0.2.0"
PYPROJECT_PATH = pathlib.Path(__file__).resolve().parent.parent / "pyproject.toml"


def read_pyproject_version(path: pathlib.Path = PYPROJECT_PATH) -> str:
    """Return ``[project].version`` from ``path``, or the fallback if unreadable."""
    try:
        with path.open("rb") as f:
            return tomli.load(f)["project"]["version"]
    except (FileNotFoundError, KeyError, tomli.TOMLDecodeError):
        return FALLBACK_VERSION


def get_version() -> str:
    try:
        return importlib.metadata.version(DISTRIBUTION)
    except importlib.metadata.PackageNotFoundError:
        return read_pyproject_version()


__version__ = get_version()
