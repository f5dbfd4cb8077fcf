"""Pytest configuration and shared fixtures."""

import tempfile
from pathlib import Path

import pytest

from oraclemap.models.oracle_config import UNDEFINED_SCALE, OracleConfig


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def full_properties():
    """Every connector property with a non-default value where possible."""
    return {
        "oracle.auto-reconnect": "false",
        "oracle.max-reconnects": "5",
        "oracle.connection-timeout": "11s",
        "unsupported-type.handling-strategy": "FAIL",
        "oracle.synonyms.enabled": "true",
        "oracle.number.exceeds-limits": "ROUND",
        "oracle.number.default-type": "DECIMAL",
        "oracle.number.round-mode": "UP",
        "oracle.number.type.zero-scale-type": "INTEGER",
        "oracle.number.type.null-scale-type": "DOUBLE",
        "oracle.number.default-scale.ratio": str(UNDEFINED_SCALE),
        "oracle.number.default-scale.decimal": "14",
        "oracle.number.default-scale.double": "6",
    }


@pytest.fixture
def default_config():
    """OracleConfig with every setting at its default."""
    return OracleConfig()


@pytest.fixture
def properties_file(temp_dir):
    """Write a small .properties file and return its path."""
    path = temp_dir / "oracle.properties"
    path.write_text(
        "# Oracle connector\n"
        "oracle.number.round-mode=DOWN\n"
        "oracle.number.default-scale.decimal = 4\n"
        "! legacy comment\n"
        "\n"
        "unsupported-type.handling-strategy=CONVERT_TO_VARCHAR\n",
        encoding="utf-8",
    )
    return path
