"""Shared test fixtures for kubeseal-gen tests."""

import io
from unittest.mock import MagicMock, patch

import pytest


class RecordingSink:
    """Sink that keeps every payload written to it."""

    def __init__(self):
        self.writes: list[bytes] = []

    def write(self, data: bytes) -> None:
        self.writes.append(data)


@pytest.fixture
def recording_sink():
    """Sink capturing the rendered manifest instead of sealing it."""
    return RecordingSink()


@pytest.fixture
def empty_stdin():
    """Standard input that is already at end of input."""
    return io.StringIO("")


@pytest.fixture
def mock_subprocess():
    """Mock subprocess.run for command execution."""
    with patch("subprocess.run") as mock:
        mock.return_value = MagicMock(returncode=0, stdout=b"", stderr=b"")
        yield mock


@pytest.fixture
def mock_which():
    """Mock shutil.which so kubeseal appears to be installed."""
    with patch("kubeseal_gen.secrets.sealing.shutil.which") as mock:
        mock.return_value = "/usr/local/bin/kubeseal"
        yield mock


@pytest.fixture
def tls_files(tmp_path):
    """Certificate and key files with known DER/PEM-like prefixes."""
    cert = tmp_path / "server.crt"
    key = tmp_path / "server.key"
    cert.write_bytes(bytes([0x30, 0x82, 0x03, 0x0A, 0x30, 0x82]))
    key.write_bytes(bytes([0x2D, 0x2D, 0x2D, 0x2D, 0x2D, 0x42, 0x45, 0x47, 0x49, 0x4E]))
    return cert, key


@pytest.fixture
def config_json(tmp_path):
    """A config.json file with a small JSON payload."""
    path = tmp_path / "config.json"
    path.write_bytes(b'{"a": 1}')
    return path
