"""
Tests for the version module.
"""
import re
from importlib import metadata as importlib_metadata
from unittest.mock import patch

from sweb3_signer import __version__
from sweb3_signer.version import (
    FALLBACK_VERSION,
    get_version,
    read_pyproject_version,
)


def test_version_format():
    """Test that the version string follows semantic versioning"""
    assert re.match(r'^\d+\.\d+\.\d+', __version__), "Version should follow semantic versioning"


@patch('importlib.metadata.version')
def test_version_from_metadata(mock_metadata_version):
    """When metadata lookup succeeds, version comes from metadata"""
    mock_metadata_version.return_value = "2.3.4"
    assert get_version() == "2.3.4"
    mock_metadata_version.assert_called_once_with("sweb3-signer")


@patch('sweb3_signer.version.read_pyproject_version', return_value="1.2.3")
@patch('importlib.metadata.version', side_effect=importlib_metadata.PackageNotFoundError)
def test_uninstalled_checkout_reads_pyproject(mock_metadata_version, mock_read):
    assert get_version() == "1.2.3"
    mock_read.assert_called_once_with()


def test_pyproject_version(tmp_path):
    pyproject = tmp_path / "pyproject.toml"
    pyproject.write_text('[project]\nname = "sweb3-signer"\nversion = "1.2.3"\n')
    assert read_pyproject_version(pyproject) == "1.2.3"


def test_pyproject_missing(tmp_path):
    assert read_pyproject_version(tmp_path / "pyproject.toml") == FALLBACK_VERSION


def test_pyproject_without_version(tmp_path):
    pyproject = tmp_path / "pyproject.toml"
    pyproject.write_text('[project]\nname = "sweb3-signer"\n')
    assert read_pyproject_version(pyproject) == FALLBACK_VERSION


def test_pyproject_malformed(tmp_path):
    pyproject = tmp_path / "pyproject.toml"
    pyproject.write_text('[project\nversion = ')
    assert read_pyproject_version(pyproject) == FALLBACK_VERSION
