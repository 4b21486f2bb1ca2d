"""Custom exceptions for kubeseal-gen.

This module defines the exception hierarchy used throughout the application.
Every error is fatal to a run; the CLI turns them into a message and a
non-zero exit status.
"""


class KubesealGenError(Exception):
    """Base exception for all kubeseal-gen errors.

    All custom exceptions in this package inherit from this class,
    allowing callers to catch all kubeseal-gen errors with a single
    except clause if desired.
    """

    pass


class ConfigurationError(KubesealGenError):
    """Raised when the parsed configuration is not usable.

    This can occur when:
    - The secret name or namespace is not a valid Kubernetes name
    - Only one of the custom username/password keys is supplied
    """

    pass


class MissingSecretNameError(ConfigurationError):
    """Raised when no secret name was supplied.

    The name is optional while parsing and checked afterwards, so this is
    reported as a usage error rather than a generic configuration error.
    """

    pass


class GenerationError(KubesealGenError):
    """Raised when a password cannot be generated under the requested policy.

    This typically means the requested length is shorter than the number
    of character classes that must each appear at least once.
    """

    pass


class SecretIOError(KubesealGenError):
    """Raised when reading secret material or writing to the sealer fails.

    This can occur when:
    - A file cannot be opened or read
    - Standard input is closed before a line is read
    - The output file for the sealed secret cannot be written
    """

    pass


class SecretFileNotFoundError(SecretIOError):
    """Raised when a file given as secret material does not exist."""

    pass


class PathError(KubesealGenError):
    """Raised when a field key cannot be derived from a file path.

    For example the filesystem root, or a path ending in '..'.
    """

    pass


class SealerSpawnError(KubesealGenError):
    """Raised when the kubeseal binary cannot be started.

    This can occur when:
    - The binary is not installed
    - The binary is not in the system PATH
    - The binary is not executable
    """

    pass


class SealingError(KubesealGenError):
    """Raised when kubeseal exits with a non-zero status."""

    pass
