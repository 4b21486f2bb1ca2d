"""Tests for secrets/sealing.py module."""

import io
import subprocess
from unittest.mock import patch

import pytest

from kubeseal_gen.exceptions import SealerSpawnError, SealingError, SecretIOError
from kubeseal_gen.secrets.sealing import EchoSink, KubesealSink


class TestBuildCommand:
    """Tests for kubeseal command construction."""

    def test_default_command(self):
        """Test the bare command only asks for YAML output."""
        assert KubesealSink().build_command() == ["kubeseal", "--format=yaml"]

    def test_certificate(self):
        """Test offline sealing passes the certificate."""
        cmd = KubesealSink(certificate="cert.pem").build_command("/usr/bin/kubeseal")
        assert cmd == ["/usr/bin/kubeseal", "--format=yaml", "--cert=cert.pem"]

    def test_controller_flags(self):
        """Test controller name and namespace are passed through."""
        cmd = KubesealSink(controller_name="sealed-secrets", controller_namespace="kube-system").build_command()
        assert "--controller-name=sealed-secrets" in cmd
        assert "--controller-namespace=kube-system" in cmd


class TestKubesealSinkWrite:
    """Tests for piping manifests into kubeseal."""

    def test_writes_manifest_as_input(self, mock_which, mock_subprocess):
        """Test the manifest is passed as stdin in one piece."""
        KubesealSink().write(b"apiVersion: v1\n")

        mock_subprocess.assert_called_once_with(
            ["/usr/local/bin/kubeseal", "--format=yaml"],
            input=b"apiVersion: v1\n",
            stdout=None,
            check=True,
        )

    def test_binary_not_found(self, mock_subprocess):
        """Test a missing binary raises SealerSpawnError before running anything."""
        with patch("kubeseal_gen.secrets.sealing.shutil.which", return_value=None):
            with pytest.raises(SealerSpawnError, match="not found"):
                KubesealSink().write(b"data")
        mock_subprocess.assert_not_called()

    def test_spawn_failure(self, mock_which, mock_subprocess):
        """Test OS-level spawn failures raise SealerSpawnError."""
        mock_subprocess.side_effect = PermissionError(13, "Permission denied")
        with pytest.raises(SealerSpawnError, match="Permission denied"):
            KubesealSink().write(b"data")

    def test_non_zero_exit(self, mock_which, mock_subprocess):
        """Test kubeseal failures raise SealingError."""
        mock_subprocess.side_effect = subprocess.CalledProcessError(1, "kubeseal")
        with pytest.raises(SealingError, match="exit code 1"):
            KubesealSink().write(b"data")

    def test_output_file(self, mock_which, mock_subprocess, tmp_path):
        """Test sealed output is redirected to the output file."""
        output = tmp_path / "sealed.yaml"
        KubesealSink(output=output).write(b"data")

        assert output.exists()
        stdout = mock_subprocess.call_args.kwargs["stdout"]
        assert str(stdout.name) == str(output)

    def test_output_file_removed_on_failure(self, mock_which, mock_subprocess, tmp_path):
        """Test partial output is cleaned up when kubeseal fails."""
        output = tmp_path / "sealed.yaml"
        mock_subprocess.side_effect = subprocess.CalledProcessError(2, "kubeseal")

        with pytest.raises(SealingError):
            KubesealSink(output=output).write(b"data")

        assert not output.exists()

    def test_output_file_unwritable(self, mock_which, mock_subprocess, tmp_path):
        """Test an unwritable output path raises SecretIOError."""
        output = tmp_path / "missing-dir" / "sealed.yaml"
        with pytest.raises(SecretIOError, match="Cannot write to output path"):
            KubesealSink(output=output).write(b"data")
        mock_subprocess.assert_not_called()

    def test_paths_with_markup_characters(self, mock_which, mock_subprocess, tmp_path):
        """Test certificate and output paths with square brackets are reported verbatim."""
        output = tmp_path / "[b]" / "[/x]sealed.yaml"
        output.parent.mkdir(parents=True)

        KubesealSink(certificate="[/x]cert.pem", output=output).write(b"data")

        assert output.exists()
        assert "--cert=[/x]cert.pem" in mock_subprocess.call_args[0][0]

    def test_repr(self):
        """Test repr shows the configured binary and certificate."""
        assert repr(KubesealSink(certificate="c.pem")) == (
            "KubesealSink(binary='kubeseal', certificate='c.pem', output=None)"
        )


class TestEchoSink:
    """Tests for the dry-run sink."""

    def test_writes_to_stream(self):
        """Test bytes are written unchanged."""
        stream = io.BytesIO()
        EchoSink(stream).write(b"apiVersion: v1\n")
        assert stream.getvalue() == b"apiVersion: v1\n"

    def test_write_failure(self):
        """Test stream errors raise SecretIOError."""

        class BrokenStream(io.BytesIO):
            def write(self, data):
                raise BrokenPipeError(32, "Broken pipe")

        with pytest.raises(SecretIOError):
            EchoSink(BrokenStream()).write(b"data")
