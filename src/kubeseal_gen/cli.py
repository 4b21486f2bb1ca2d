#!/usr/bin/env python
"""Command-line interface for kubeseal-gen.

This module provides the main CLI entry point for the kubeseal-gen tool,
handling command-line argument parsing and turning it into a SecretConfig
for the generation pipeline.
"""

import sys
from pathlib import Path

import click
from icecream import ic

from kubeseal_gen import __version__
from kubeseal_gen.core.pipeline import SecretPipeline
from kubeseal_gen.exceptions import KubesealGenError, MissingSecretNameError
from kubeseal_gen.models import (
    DEFAULT_NAMESPACE,
    DEFAULT_PASSWORD_LENGTH,
    MAX_PASSWORD_LENGTH,
    FileSource,
    GeneratedPassword,
    PasswordSource,
    SecretConfig,
    SecretVariant,
    StdinPassword,
    TlsSource,
    UserPassSource,
)
from kubeseal_gen.secrets.sealing import EchoSink, KubesealSink, SecretSink


def _password_source(ctx: click.Context) -> PasswordSource:
    if ctx.obj["read_stdin"]:
        return StdinPassword()
    return GeneratedPassword(length=ctx.obj["length"])


def _build_sink(ctx: click.Context) -> SecretSink:
    if ctx.obj["dry_run"]:
        return EchoSink()
    return KubesealSink(
        certificate=ctx.obj["cert"],
        controller_name=ctx.obj["controller_name"],
        controller_namespace=ctx.obj["controller_namespace"],
        output=ctx.obj["output"],
    )


def generate_secret(ctx: click.Context, variant: SecretVariant) -> None:
    """Generate and seal a secret for the selected credential source.

    Args:
        ctx: Click context holding the global options.
        variant: The credential source chosen by the subcommand.

    Raises:
        click.UsageError: If the secret name was not supplied.
        click.ClickException: If generation or sealing fails.

    """
    try:
        config = SecretConfig(
            variant=variant,
            secret_name=ctx.obj["secret_name"],
            namespace=ctx.obj["secret_namespace"],
        )
        pipeline = SecretPipeline(sink=_build_sink(ctx), stdin=sys.stdin)
        ic(pipeline)
        pipeline.run(config)
    except MissingSecretNameError as e:
        raise click.UsageError(str(e), ctx=ctx) from None
    except KubesealGenError as e:
        raise click.ClickException(str(e)) from None


@click.group(help="Generate Kubernetes secrets and seal them with kubeseal", invoke_without_command=True)
@click.option("--version", "-v", required=False, is_flag=True, help="print version")
@click.option("--debug", required=False, is_flag=True, help="print debug information")
@click.option("--secret-name", "-s", required=False, help="name of the secret")
@click.option("--secret-namespace", "-n", default=DEFAULT_NAMESPACE, show_default=True, help="namespace of the secret")
@click.option(
    "--generated-secret-length",
    "-l",
    type=click.IntRange(0, MAX_PASSWORD_LENGTH),
    default=DEFAULT_PASSWORD_LENGTH,
    show_default=True,
    help="length of the generated password",
)
@click.option("--read-stdin", "-r", is_flag=True, default=False, help="read the password from one line of stdin")
@click.option("--cert", "-c", required=False, help="certificate to seal secret with")
@click.option("--controller-name", required=False, help="name of the SealedSecrets controller")
@click.option("--controller-namespace", required=False, help="namespace of the SealedSecrets controller")
@click.option(
    "--output",
    "-o",
    required=False,
    type=click.Path(dir_okay=False, path_type=Path),
    help="write the sealed secret to this file instead of stdout",
)
@click.option("--dry-run", is_flag=True, default=False, help="print the unsealed manifest instead of sealing it")
@click.pass_context
def cli(
    ctx: click.Context,
    version: bool,
    debug: bool,
    secret_name: str | None,
    secret_namespace: str,
    generated_secret_length: int,
    read_stdin: bool,
    cert: str | None,
    controller_name: str | None,
    controller_namespace: str | None,
    output: Path | None,
    dry_run: bool,
) -> None:
    """Collect global options for the secret subcommands.

    Args:
        ctx: Click context shared with the subcommands.
        version: Print version and exit.
        debug: Enable debug output.
        secret_name: Name of the secret; required, but checked after parsing.
        secret_namespace: Namespace of the secret.
        generated_secret_length: Length of generated passwords.
        read_stdin: Read the password from stdin instead of generating it.
        cert: Path to certificate for offline sealing.
        controller_name: Name of the SealedSecrets controller.
        controller_namespace: Namespace of the SealedSecrets controller.
        output: File receiving the sealed secret.
        dry_run: Print the plain manifest instead of sealing.

    """
    if not debug:
        ic.disable()

    if version:
        click.echo(__version__)
        ctx.exit()

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit()

    ctx.obj = {
        "secret_name": secret_name,
        "secret_namespace": secret_namespace,
        "length": generated_secret_length,
        "read_stdin": read_stdin,
        "cert": cert,
        "controller_name": controller_name,
        "controller_namespace": controller_namespace,
        "output": output,
        "dry_run": dry_run,
    }


@cli.command(help="username and password secret (kubernetes.io/basic-auth)")
@click.argument("username")
@click.pass_context
def userpass(ctx: click.Context, username: str) -> None:
    """Create a basic-auth secret."""
    generate_secret(ctx, UserPassSource(username=username, password_source=_password_source(ctx)))


@cli.command(name="file", help="secret holding the contents of a file (Opaque)")
@click.argument("path", metavar="FILE", type=click.Path(path_type=Path))
@click.pass_context
def file_command(ctx: click.Context, path: Path) -> None:
    """Create an Opaque secret from a file."""
    generate_secret(ctx, FileSource(path=path))


@cli.command(help="TLS certificate and key secret (kubernetes.io/tls)")
@click.option("--crt", "-c", required=True, type=click.Path(path_type=Path), help="certificate file")
@click.option("--key", "-k", required=True, type=click.Path(path_type=Path), help="private key file")
@click.pass_context
def tls(ctx: click.Context, crt: Path, key: Path) -> None:
    """Create a TLS secret."""
    generate_secret(ctx, TlsSource(cert_path=crt, key_path=key))


@cli.command(help="username and password stored under custom keys (Opaque)")
@click.argument("username")
@click.argument("alter_username_key")
@click.argument("alter_password_key")
@click.pass_context
def alteruserpass(ctx: click.Context, username: str, alter_username_key: str, alter_password_key: str) -> None:
    """Create an Opaque secret with custom username/password keys."""
    variant = UserPassSource(
        username=username,
        password_source=_password_source(ctx),
        username_key=alter_username_key,
        password_key=alter_password_key,
    )
    generate_secret(ctx, variant)


if __name__ == "__main__":
    cli()
