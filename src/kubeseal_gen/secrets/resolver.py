"""Credential resolution.

This module turns a credential source variant into the concrete field
values stored in the secret: plaintext for username/password pairs and
base64 text for file based variants.
"""

import base64
from pathlib import Path
from typing import TextIO, assert_never

from icecream import ic

from kubeseal_gen import console
from kubeseal_gen.exceptions import PathError, SecretFileNotFoundError, SecretIOError
from kubeseal_gen.models import (
    FileSource,
    GeneratedPassword,
    LiteralPassword,
    PasswordSource,
    ResolvedCredential,
    SecretVariant,
    SectionKind,
    StdinPassword,
    TlsSource,
    UserPassSource,
)
from kubeseal_gen.secrets.password import generate_password

DEFAULT_USERNAME_KEY = "username"
DEFAULT_PASSWORD_KEY = "password"
TLS_CERT_KEY = "tls.crt"
TLS_KEY_KEY = "tls.key"


def read_password_line(stream: TextIO) -> str:
    """Read a password from a single line of a text stream.

    Args:
        stream: The stream to read from, usually standard input.

    Returns:
        The line without its trailing newline.

    Raises:
        SecretIOError: If the stream cannot be read or decoded, or is already at
            end of input.

    """
    try:
        line = stream.readline()
    except (OSError, UnicodeDecodeError) as err:
        raise SecretIOError(f"Failed to read password from standard input: {err}") from err

    if not line:
        raise SecretIOError("Standard input was closed before a password line was read")

    return line.removesuffix("\n").removesuffix("\r")


def resolve_password(source: PasswordSource, stdin: TextIO) -> str:
    """Produce the password for a username/password secret.

    Args:
        source: Where the password comes from.
        stdin: Stream used by StdinPassword.

    Returns:
        The plaintext password.

    """
    match source:
        case GeneratedPassword(length=length):
            console.step(f"Generating a random password of length {console.highlight(str(length))}")
            return generate_password(length)
        case StdinPassword():
            console.step("Reading password from standard input")
            return read_password_line(stdin)
        case LiteralPassword(value=value):
            return value
        case _:
            assert_never(source)


def file_key(path: Path) -> str:
    """Derive the secret field key from a file path.

    Args:
        path: Path to the file.

    Returns:
        The final component of the path.

    Raises:
        PathError: If the path has no usable final component.

    """
    name = Path(path).name
    if name in ("", ".", ".."):
        raise PathError(f"Cannot extract filename from {path}")
    return name


def read_file_base64(path: Path) -> str:
    """Read a file and return its contents as base64 text.

    Args:
        path: Path to the file.

    Returns:
        Standard base64 with padding and without line breaks.

    Raises:
        SecretFileNotFoundError: If the file does not exist.
        SecretIOError: If the file cannot be read.

    """
    try:
        data = Path(path).read_bytes()
    except FileNotFoundError as err:
        raise SecretFileNotFoundError(f"File not found: {path}") from err
    except OSError as err:
        raise SecretIOError(f"Cannot read '{path}': {err.strerror or err}") from err

    ic(path, len(data))
    return base64.b64encode(data).decode("ascii")


def encode_file(path: Path) -> tuple[str, str]:
    """Encode a file as a (field key, base64 content) pair.

    The key is checked before the file is read, so a path without a
    filename fails with PathError even if it exists.
    """
    key = file_key(path)
    return key, read_file_base64(path)


def encode_tls_pair(cert_path: Path, key_path: Path) -> dict[str, str]:
    """Encode a certificate and private key under the fixed TLS keys."""
    return {
        TLS_CERT_KEY: read_file_base64(cert_path),
        TLS_KEY_KEY: read_file_base64(key_path),
    }


def resolve_userpass(source: UserPassSource, stdin: TextIO) -> ResolvedCredential:
    """Bind a username and its resolved password to their field keys.

    Args:
        source: The username/password variant.
        stdin: Stream used when the password is read from standard input.

    Returns:
        A plaintext credential with the username field first.

    """
    password = resolve_password(source.password_source, stdin)

    if source.has_custom_keys:
        username_key, password_key = source.username_key, source.password_key
    else:
        username_key, password_key = DEFAULT_USERNAME_KEY, DEFAULT_PASSWORD_KEY

    return ResolvedCredential(
        fields={username_key: source.username, password_key: password},
        section=SectionKind.STRING_DATA,
    )


def resolve_credential(variant: SecretVariant, stdin: TextIO) -> ResolvedCredential:
    """Resolve any credential source variant.

    Args:
        variant: The selected credential source.
        stdin: Stream used when a password is read from standard input.

    Returns:
        The resolved credential for the variant.

    """
    match variant:
        case UserPassSource():
            return resolve_userpass(variant, stdin)
        case FileSource(path=path):
            console.step(f"Encoding {console.highlight(str(path))}")
            key, content = encode_file(path)
            return ResolvedCredential(fields={key: content}, section=SectionKind.DATA)
        case TlsSource(cert_path=cert_path, key_path=key_path):
            console.step("Encoding TLS certificate and key")
            return ResolvedCredential(fields=encode_tls_pair(cert_path, key_path), section=SectionKind.DATA)
        case _:
            assert_never(variant)
