"""
Signing string construction for draft-cavage HTTP Signatures

The signing string is one ``name: value`` line per signed header, joined
with ``\\n`` and without a trailing newline. Pseudo-headers are resolved from
request metadata instead of request headers.
"""

from typing import Mapping, Optional, Sequence

from ..exceptions import SigningConfigError, MissingHeaderAtSignTimeError
from .headers import normalize_header_name
from .types import CREATED, EXPIRES, REQUEST_TARGET, SignatureSpec, SignableRequest


class SigningStringBuilder:
    """
    Builder for the canonical string to be signed
    """

    def __init__(
        self,
        method: str,
        path: str,
        header_values: Mapping[str, str],
        created: Optional[int] = None,
        expires: Optional[int] = None
    ):
        """
        Initialize signing string builder.

        Args:
            method: HTTP method of the request
            path: Request path used by (request-target)
            header_values: Header names mapped to a single value
            created: Creation timestamp for (created)
            expires: Expiry timestamp for (expires)
        """
        self.method = method
        self.path = path
        self.header_values = {normalize_header_name(k): v for k, v in header_values.items()}
        self.created = created
        self.expires = expires

    def build(self, ordered_names: Sequence[str]) -> str:
        """
        Build the signing string.

        Args:
            ordered_names: Header names to sign, in order

        Returns:
            str: Newline-joined signing string

        Raises:
            SigningConfigError: If (created) or (expires) lacks its timestamp
            MissingHeaderAtSignTimeError: If a header has no value
        """
        lines = []
        for name in ordered_names:
            normalized_name = normalize_header_name(name)
            lines.append(f"{normalized_name}: {self._resolve(normalized_name)}")

        return "\n".join(lines)

    def _resolve(self, name: str) -> str:
        if name == REQUEST_TARGET:
            return f"{self.method.lower()} {self.path}"

        if name == CREATED:
            if self.created is None:
                raise SigningConfigError(f"{CREATED} requested without a creation timestamp")
            return str(int(self.created))

        if name == EXPIRES:
            if self.expires is None:
                raise SigningConfigError(f"{EXPIRES} requested without an expiry timestamp")
            return str(int(self.expires))

        value = self.header_values.get(name)
        if value is None:
            raise MissingHeaderAtSignTimeError(name)

        return value


def build_signing_string(
    method: str,
    path: str,
    header_values: Mapping[str, str],
    ordered_names: Sequence[str],
    created: Optional[int] = None,
    expires: Optional[int] = None
) -> str:
    """
    Build the signing string for a set of headers.

    Args:
        method: HTTP method
        path: Request path
        header_values: Header names mapped to a single value
        ordered_names: Header names to sign, in order
        created: Creation timestamp for (created)
        expires: Expiry timestamp for (expires)

    Returns:
        str: Signing string
    """
    builder = SigningStringBuilder(method, path, header_values, created, expires)
    return builder.build(ordered_names)


def build_signing_string_for_request(request: SignableRequest, spec: SignatureSpec) -> str:
    """Build the signing string for a request and its signature spec"""
    return build_signing_string(
        request.method,
        request.path,
        request.headers.to_single_value_map(),
        spec.signed_headers,
        spec.created,
        spec.expires
    )
