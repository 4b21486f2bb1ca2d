"""Data models for kubeseal-gen.

This module provides type-safe data structures for the application: the
credential source variants selected on the command line, the permissive
configuration produced by the CLI and the validated placement parameters
derived from it.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from kubeseal_gen.exceptions import ConfigurationError, MissingSecretNameError

DEFAULT_NAMESPACE = "default"
DEFAULT_PASSWORD_LENGTH = 16
MAX_PASSWORD_LENGTH = 255

# Kubernetes DNS subdomain name validation (RFC 1123)
_DNS_SUBDOMAIN_MAX_LENGTH = 253
_DNS_SUBDOMAIN_PATTERN = r"^[a-z0-9]([-a-z0-9]*[a-z0-9])?(\.[a-z0-9]([-a-z0-9]*[a-z0-9])?)*$"


def validate_k8s_name(name: str) -> bool | str:
    """Validate a Kubernetes resource name (DNS subdomain).

    Args:
        name: The name to validate.

    Returns:
        True if valid, or an error message string if invalid.

    """
    if not name:
        return "Name cannot be empty"
    if len(name) > _DNS_SUBDOMAIN_MAX_LENGTH:
        return f"Name must be {_DNS_SUBDOMAIN_MAX_LENGTH} characters or less"
    if not re.match(_DNS_SUBDOMAIN_PATTERN, name):
        return "Name must consist of lowercase alphanumeric characters, '-' or '.', and must start and end with an alphanumeric character"
    return True


class SecretType(str, Enum):
    """Kubernetes secret type discriminators.

    Inherits from str to allow direct use in YAML output.
    """

    BASIC_AUTH = "kubernetes.io/basic-auth"
    OPAQUE = "Opaque"
    TLS = "kubernetes.io/tls"


class SectionKind(str, Enum):
    """Manifest section holding the secret fields.

    STRING_DATA holds plaintext values, DATA holds base64 text.
    """

    STRING_DATA = "stringData"
    DATA = "data"


@dataclass(frozen=True, slots=True)
class GeneratedPassword:
    """Password generated at random with the given length."""

    length: int = DEFAULT_PASSWORD_LENGTH

    def __post_init__(self) -> None:
        if not 0 <= self.length <= MAX_PASSWORD_LENGTH:
            raise ConfigurationError(
                f"Generated secret length must be between 0 and {MAX_PASSWORD_LENGTH}, got {self.length}"
            )


@dataclass(frozen=True, slots=True)
class StdinPassword:
    """Password read from a single line of standard input."""


@dataclass(frozen=True, slots=True)
class LiteralPassword:
    """Password supplied verbatim by the caller."""

    value: str = field(repr=False)


PasswordSource = GeneratedPassword | StdinPassword | LiteralPassword


@dataclass(frozen=True, slots=True)
class UserPassSource:
    """Username/password pair, optionally stored under custom keys.

    Attributes:
        username: The username stored in the secret.
        password_source: Where the password comes from.
        username_key: Custom key for the username field.
        password_key: Custom key for the password field.

    """

    username: str
    password_source: PasswordSource = field(default_factory=GeneratedPassword)
    username_key: str | None = None
    password_key: str | None = None

    def __post_init__(self) -> None:
        if (self.username_key is None) != (self.password_key is None):
            raise ConfigurationError("Custom username and password keys must be supplied together")

    @property
    def has_custom_keys(self) -> bool:
        """Whether the fields are stored under caller-supplied keys."""
        return self.username_key is not None


@dataclass(frozen=True, slots=True)
class FileSource:
    """Contents of a single file, stored under the file's name."""

    path: Path


@dataclass(frozen=True, slots=True)
class TlsSource:
    """TLS certificate and private key pair."""

    cert_path: Path
    key_path: Path


SecretVariant = UserPassSource | FileSource | TlsSource


@dataclass(frozen=True, slots=True)
class PlacementParams:
    """Where the secret is placed in the cluster.

    Attributes:
        name: The name of the secret.
        namespace: The Kubernetes namespace for the secret.

    """

    name: str
    namespace: str = DEFAULT_NAMESPACE


@dataclass(frozen=True, slots=True)
class ResolvedCredential:
    """Secret material ready to be rendered.

    Attributes:
        fields: Field key to value, in rendering order.
        section: Which manifest section the fields belong to.

    """

    fields: dict[str, str] = field(repr=False)
    section: SectionKind

    @property
    def keys(self) -> list[str]:
        """Field keys in rendering order."""
        return list(self.fields)


@dataclass(frozen=True, slots=True)
class SecretConfig:
    """Configuration for a single run, as parsed from the command line.

    The secret name is allowed to be missing here; it is only required
    once the configuration is validated with placement().

    Attributes:
        variant: The selected credential source.
        secret_name: The name of the secret, if supplied.
        namespace: The Kubernetes namespace for the secret.

    """

    variant: SecretVariant
    secret_name: str | None = None
    namespace: str = DEFAULT_NAMESPACE

    def placement(self) -> PlacementParams:
        """Validate the placement part of the configuration.

        Returns:
            PlacementParams with a non-empty name and namespace.

        Raises:
            MissingSecretNameError: If no secret name was supplied.
            ConfigurationError: If the name or namespace is not a valid
                Kubernetes name.

        """
        if not self.secret_name:
            raise MissingSecretNameError("the following required arguments were not provided: --secret-name")

        for label, value in (("secret name", self.secret_name), ("namespace", self.namespace)):
            result = validate_k8s_name(value)
            if result is not True:
                raise ConfigurationError(f"Invalid {label} '{value}': {result}")

        return PlacementParams(name=self.secret_name, namespace=self.namespace)
