"""Secrets subpackage.

This package contains modules for password generation, credential
resolution, manifest rendering and sealing.
"""

from kubeseal_gen.secrets.manifest import build_manifest, render_manifest, secret_type_for
from kubeseal_gen.secrets.password import DEFAULT_POLICY, PasswordPolicy, generate_password
from kubeseal_gen.secrets.resolver import (
    encode_file,
    encode_tls_pair,
    read_password_line,
    resolve_credential,
    resolve_userpass,
)
from kubeseal_gen.secrets.sealing import EchoSink, KubesealSink, SecretSink

__all__ = [
    # password
    "DEFAULT_POLICY",
    "PasswordPolicy",
    "generate_password",
    # resolver
    "encode_file",
    "encode_tls_pair",
    "read_password_line",
    "resolve_credential",
    "resolve_userpass",
    # manifest
    "build_manifest",
    "render_manifest",
    "secret_type_for",
    # sealing
    "EchoSink",
    "KubesealSink",
    "SecretSink",
]
