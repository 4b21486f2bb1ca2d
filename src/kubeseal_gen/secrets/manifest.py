"""Secret manifest rendering.

This module renders a resolved credential into a Kubernetes Secret manifest.
The document is emitted with PyYAML so keys and values containing YAML
special characters are quoted rather than breaking the document.
"""

import math
from typing import Any, assert_never

import yaml

from kubeseal_gen.models import (
    FileSource,
    PlacementParams,
    ResolvedCredential,
    SecretType,
    SecretVariant,
    TlsSource,
    UserPassSource,
)

API_VERSION = "v1"
KIND = "Secret"


def secret_type_for(variant: SecretVariant) -> SecretType:
    """Return the Kubernetes secret type for a credential source.

    Args:
        variant: The selected credential source.

    Returns:
        The type discriminator written to the manifest.

    """
    match variant:
        case UserPassSource():
            return SecretType.OPAQUE if variant.has_custom_keys else SecretType.BASIC_AUTH
        case FileSource():
            return SecretType.OPAQUE
        case TlsSource():
            return SecretType.TLS
        case _:
            assert_never(variant)


def build_manifest(
    variant: SecretVariant,
    credential: ResolvedCredential,
    placement: PlacementParams,
) -> dict[str, Any]:
    """Build the Secret manifest as an ordered mapping.

    Args:
        variant: The selected credential source.
        credential: The resolved field values.
        placement: Name and namespace of the secret.

    Returns:
        The manifest with keys in rendering order.

    """
    return {
        "apiVersion": API_VERSION,
        credential.section.value: dict(credential.fields),
        "kind": KIND,
        "metadata": {
            "name": placement.name,
            "namespace": placement.namespace,
        },
        "type": secret_type_for(variant).value,
    }


def render_manifest(
    variant: SecretVariant,
    credential: ResolvedCredential,
    placement: PlacementParams,
) -> str:
    """Render the Secret manifest as YAML text.

    Key order is preserved as built, and long values are never folded.
    """
    manifest = build_manifest(variant, credential, placement)
    return yaml.safe_dump(
        manifest,
        sort_keys=False,
        default_flow_style=False,
        allow_unicode=True,
        width=math.inf,
    )
