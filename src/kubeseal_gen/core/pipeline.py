"""Secret generation pipeline.

This module provides the SecretPipeline class which runs a single
generation: validate the configuration, resolve the credential, render
the manifest and hand it to a sink.
"""

import sys
from typing import TextIO

from icecream import ic

from kubeseal_gen import console
from kubeseal_gen.models import PlacementParams, SecretConfig
from kubeseal_gen.secrets.manifest import render_manifest, secret_type_for
from kubeseal_gen.secrets.resolver import resolve_credential
from kubeseal_gen.secrets.sealing import SecretSink


class SecretPipeline:
    """Generate a Secret manifest and pass it to a sink.

    Attributes:
        sink: Receives the rendered manifest.
        stdin: Stream used when a password is read from standard input.

    """

    def __init__(self, *, sink: SecretSink, stdin: TextIO | None = None) -> None:
        """Initialize the pipeline.

        Args:
            sink: Receives the rendered manifest, usually a KubesealSink.
            stdin: Stream for password input; defaults to sys.stdin.

        """
        self.sink = sink
        self.stdin: TextIO = stdin if stdin is not None else sys.stdin

    def __repr__(self) -> str:
        """Return a detailed string representation for debugging."""
        return f"SecretPipeline(sink={self.sink!r})"

    def build_manifest(self, config: SecretConfig) -> str:
        """Validate the configuration and render the manifest.

        Placement is validated before any credential is resolved, so a
        missing name fails without reading files or standard input.

        Args:
            config: Parsed configuration for this run.

        Returns:
            The rendered manifest.

        Raises:
            ConfigurationError: If the configuration is invalid.

        """
        return self._render(config, config.placement())

    def _render(self, config: SecretConfig, placement: PlacementParams) -> str:
        ic(placement, config.variant)

        credential = resolve_credential(config.variant, self.stdin)
        ic(credential.section, credential.keys)

        return render_manifest(config.variant, credential, placement)

    def run(self, config: SecretConfig) -> None:
        """Build the manifest and write it to the sink in one piece.

        Args:
            config: Parsed configuration for this run.

        """
        placement = config.placement()
        console.action(
            f"Generating secret {console.highlight(placement.name)} in namespace {console.highlight(placement.namespace)}"
        )

        manifest = self._render(config, placement)

        console.step("Writing manifest")
        self.sink.write(manifest.encode("utf-8"))

        console.summary_panel(
            "Secret Generated",
            {
                "Name": placement.name,
                "Namespace": placement.namespace,
                "Type": secret_type_for(config.variant).value,
            },
        )
