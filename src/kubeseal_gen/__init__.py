"""kubeseal-gen: generate Kubernetes secrets and seal them with kubeseal.

This package builds a Secret manifest from a generated password, a
username/password pair, a file or a TLS certificate/key pair, and pipes
it through kubeseal so only the sealed form is written out.

Example usage:
    from kubeseal_gen import KubesealSink, SecretConfig, SecretPipeline, UserPassSource

    config = SecretConfig(variant=UserPassSource(username="admin"), secret_name="db-auth")
    SecretPipeline(sink=KubesealSink(certificate="my-cert.crt")).run(config)
"""

__version__ = "0.1.0"

from kubeseal_gen.cli import cli
from kubeseal_gen.core.pipeline import SecretPipeline
from kubeseal_gen.exceptions import (
    ConfigurationError,
    GenerationError,
    KubesealGenError,
    MissingSecretNameError,
    PathError,
    SealerSpawnError,
    SealingError,
    SecretFileNotFoundError,
    SecretIOError,
)
from kubeseal_gen.models import (
    FileSource,
    GeneratedPassword,
    LiteralPassword,
    PlacementParams,
    SecretConfig,
    StdinPassword,
    TlsSource,
    UserPassSource,
)
from kubeseal_gen.secrets.sealing import EchoSink, KubesealSink

__all__ = [
    # Version
    "__version__",
    # Main CLI
    "cli",
    # Classes
    "SecretPipeline",
    "KubesealSink",
    "EchoSink",
    # Models
    "SecretConfig",
    "PlacementParams",
    "UserPassSource",
    "FileSource",
    "TlsSource",
    "GeneratedPassword",
    "StdinPassword",
    "LiteralPassword",
    # Exceptions
    "KubesealGenError",
    "ConfigurationError",
    "MissingSecretNameError",
    "GenerationError",
    "SecretIOError",
    "SecretFileNotFoundError",
    "PathError",
    "SealerSpawnError",
    "SealingError",
]
