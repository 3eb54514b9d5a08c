"""
Tests for the version reported by the package and replay-cli.
"""
import importlib
from importlib import metadata as importlib_metadata
from unittest.mock import patch

import pytest

import replay_sdk.version as vmod
from replay_sdk import __version__
from replay_sdk.cli import main


def test_cli_reports_package_version(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])

    assert exc_info.value.code == 0
    assert capsys.readouterr().out.strip() == f"replay-cli {__version__}"


def test_version_from_distribution_metadata():
    with patch("importlib.metadata.version", return_value="4.5.6") as mock_version:
        importlib.reload(vmod)
    try:
        mock_version.assert_called_once_with("replay-sdk")
        assert vmod.__version__ == "4.5.6"
    finally:
        importlib.reload(vmod)


def test_source_checkout_without_metadata():
    with patch("importlib.metadata.version", side_effect=importlib_metadata.PackageNotFoundError):
        importlib.reload(vmod)
    try:
        assert vmod.__version__ == "0.0.0+unknown"
    finally:
        importlib.reload(vmod)
