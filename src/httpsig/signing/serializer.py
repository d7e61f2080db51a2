"""
Signature serialization

Renders signature parameters in the draft-cavage wire format:

    keyId="...",algorithm="...",created=...,expires=...,headers="...",signature="..."

and maps them onto the ``Authorization`` or ``Signature`` header.
"""

import base64
import re
from typing import Dict, Tuple, Union

from .types import SignatureScheme, SignatureSpec

SIGNATURE_PREFIX = "Signature "

_PARAMETER_PATTERN = re.compile(r'\s*([A-Za-z]+)=(?:"([^"]*)"|([^",]*))\s*(?:,|$)')


def encode_digest(digest: bytes) -> str:
    """Base64-encode a raw digest"""
    return base64.b64encode(digest).decode("ascii")


def serialize_signature(spec: SignatureSpec, digest: bytes) -> str:
    """
    Serialize signature parameters.

    ``created`` and ``expires`` are only emitted when the matching
    pseudo-header is signed. ``headers`` lists every signed name, pseudo-headers
    included, space separated.

    Args:
        spec: Signature spec
        digest: Raw digest produced by the signer

    Returns:
        str: Parameter string, without the ``Signature `` scheme prefix
    """
    parts = [
        f'keyId="{spec.key_id}"',
        f'algorithm="{spec.algorithm.value}"',
    ]

    if spec.includes_created:
        parts.append(f"created={spec.created}")

    if spec.includes_expires:
        parts.append(f"expires={spec.expires}")

    parts.append(f'headers="{" ".join(spec.signed_headers)}"')
    parts.append(f'signature="{encode_digest(digest)}"')

    return ",".join(parts)


def format_signature_header(scheme: Union[str, SignatureScheme], parameters: str) -> Tuple[str, str]:
    """
    Map serialized parameters onto the header for a scheme.

    Args:
        scheme: Signature scheme
        parameters: Serialized parameter string

    Returns:
        tuple: Header name and header value
    """
    scheme = SignatureScheme.parse(scheme)

    if scheme is SignatureScheme.AUTHORIZATION:
        return scheme.header_name, SIGNATURE_PREFIX + parameters

    return scheme.header_name, parameters


def parse_signature_parameters(value: str) -> Dict[str, Union[str, int, list]]:
    """
    Parse a serialized signature back into its parameters.

    Accepts the value of either header; a leading ``Signature `` prefix is
    ignored. ``created`` and ``expires`` are returned as integers and
    ``headers`` as a list of names.

    Raises:
        ValueError: If the value is not a parameter list
    """
    if value.startswith(SIGNATURE_PREFIX):
        value = value[len(SIGNATURE_PREFIX):]

    parameters: Dict[str, Union[str, int, list]] = {}
    position = 0
    while position < len(value):
        match = _PARAMETER_PATTERN.match(value, position)
        if not match or match.end() == position:
            raise ValueError(f"Malformed signature parameters at offset {position}: {value!r}")

        name, quoted, bare = match.groups()
        raw = quoted if quoted is not None else bare.strip()
        if name in ("created", "expires"):
            parameters[name] = int(raw)
        elif name == "headers":
            parameters[name] = raw.split(" ") if raw else []
        else:
            parameters[name] = raw

        position = match.end()

    return parameters
