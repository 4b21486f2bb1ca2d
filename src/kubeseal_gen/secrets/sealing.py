"""Secret sealing sinks.

A sink accepts the fully rendered manifest as one byte string. The
KubesealSink hands it to the kubeseal binary, which encrypts it and writes
the SealedSecret; the EchoSink prints the plain manifest for --dry-run.
"""

import contextlib
import shutil
import subprocess
import sys
from pathlib import Path
from typing import BinaryIO, Protocol

from icecream import ic

from kubeseal_gen import console
from kubeseal_gen.exceptions import SealerSpawnError, SealingError, SecretIOError

# CLI flag constant for kubeseal commands
_FORMAT_YAML = "--format=yaml"

_INSTALL_HINT = "See: https://github.com/bitnami-labs/sealed-secrets#installation"


class SecretSink(Protocol):
    """Anything that accepts a rendered manifest."""

    def write(self, data: bytes) -> None:
        """Consume the manifest, raising a KubesealGenError on failure."""
        ...


class KubesealSink:
    """Seal manifests by piping them through the kubeseal binary.

    Attributes:
        binary: Name or path of the kubeseal binary.
        certificate: Certificate for offline sealing, if any.
        controller_name: Name of the SealedSecrets controller, if not the default.
        controller_namespace: Namespace of the controller, if not the default.
        output: File receiving the sealed secret; stdout when None.

    """

    def __init__(
        self,
        *,
        binary: str = "kubeseal",
        certificate: str | None = None,
        controller_name: str | None = None,
        controller_namespace: str | None = None,
        output: Path | None = None,
    ) -> None:
        self.binary = binary
        self.certificate = certificate
        self.controller_name = controller_name
        self.controller_namespace = controller_namespace
        self.output = output

    def __repr__(self) -> str:
        """Return a detailed string representation for debugging."""
        return f"KubesealSink(binary={self.binary!r}, certificate={self.certificate!r}, output={self.output!r})"

    def _resolve_binary(self) -> str:
        """Locate the kubeseal binary.

        Raises:
            SealerSpawnError: If the binary is not found in PATH.

        """
        binary = shutil.which(self.binary)
        if binary is None:
            raise SealerSpawnError(
                f"{self.binary} binary not found. Please install kubeseal or ensure it's in your PATH. {_INSTALL_HINT}"
            )
        return binary

    def build_command(self, binary: str | None = None) -> list[str]:
        """Build the kubeseal command line.

        Args:
            binary: Resolved binary path; defaults to the configured name.

        Returns:
            List of command arguments ready for subprocess execution.

        """
        cmd: list[str] = [binary or self.binary, _FORMAT_YAML]

        if self.certificate:
            cmd.append(f"--cert={self.certificate}")
        if self.controller_name:
            cmd.append(f"--controller-name={self.controller_name}")
        if self.controller_namespace:
            cmd.append(f"--controller-namespace={self.controller_namespace}")

        return cmd

    def _run(self, cmd: list[str], data: bytes, stdout: BinaryIO | None) -> None:
        try:
            subprocess.run(cmd, input=data, stdout=stdout, check=True)
        except (FileNotFoundError, PermissionError) as err:
            raise SealerSpawnError(f"Failed to start {cmd[0]}: {err.strerror or err}") from err
        except subprocess.CalledProcessError as err:
            raise SealingError(f"Failed to seal secret with kubeseal (exit code {err.returncode})") from err

    def write(self, data: bytes) -> None:
        """Seal the manifest.

        Args:
            data: The rendered manifest.

        Raises:
            SealerSpawnError: If kubeseal cannot be started.
            SealingError: If kubeseal exits with a non-zero status.
            SecretIOError: If the output file cannot be opened.

        """
        cmd = self.build_command(self._resolve_binary())
        ic(cmd)

        if self.certificate:
            console.info(f"Sealing offline with certificate {console.highlight(self.certificate)}")

        if self.output is None:
            self._run(cmd, data, None)
            return

        try:
            f = self.output.open("wb")
        except OSError as err:
            raise SecretIOError(f"Cannot write to output path '{self.output}': {err.strerror or err}") from err

        try:
            with f:
                self._run(cmd, data, f)
        except (SealerSpawnError, SealingError):
            # Clean up partial output file on failure
            with contextlib.suppress(OSError):
                self.output.unlink(missing_ok=True)
            raise

        console.success(f"Saved to {console.highlight(str(self.output))}")


class EchoSink:
    """Write the plain manifest to a stream instead of sealing it."""

    def __init__(self, stream: BinaryIO | None = None) -> None:
        self.stream = stream

    def __repr__(self) -> str:
        """Return a detailed string representation for debugging."""
        return "EchoSink()"

    def write(self, data: bytes) -> None:
        """Write the manifest to the stream.

        Raises:
            SecretIOError: If the stream cannot be written.

        """
        console.warning("Dry run: writing the unsealed manifest")
        stream = self.stream if self.stream is not None else sys.stdout.buffer
        try:
            stream.write(data)
            stream.flush()
        except OSError as err:
            raise SecretIOError(f"Failed to write manifest: {err}") from err
