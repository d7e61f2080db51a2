"""
Type definitions for HTTP signature generation

This module provides the enums, data classes and header container used by
the signature pipeline (draft-cavage HTTP Signatures with HMAC).
"""

import time
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple, Union, Callable
from collections.abc import Mapping as MappingABC
from dataclasses import dataclass, field
from enum import Enum

from ..exceptions import SigningConfigError, ErrorCodes


# Pseudo-headers
CREATED = "(created)"
EXPIRES = "(expires)"
REQUEST_TARGET = "(request-target)"

PSEUDO_HEADERS = frozenset({CREATED, EXPIRES, REQUEST_TARGET})

DEFAULT_HTTP_STATUS = 400


class SignatureAlgorithm(str, Enum):
    """Keyed-hash signature algorithms"""
    HMAC_SHA1 = "hmac-sha1"
    HMAC_SHA224 = "hmac-sha224"
    HMAC_SHA256 = "hmac-sha256"
    HMAC_SHA384 = "hmac-sha384"
    HMAC_SHA512 = "hmac-sha512"

    @property
    def hash_name(self) -> str:
        """Name of the underlying hash function, e.g. ``sha256``"""
        return self.value.split("-", 1)[1]

    @classmethod
    def parse(cls, value: Union[str, "SignatureAlgorithm"]) -> "SignatureAlgorithm":
        """
        Parse an algorithm from its enum name or wire name.

        Accepts ``HMAC_SHA256``, ``hmac-sha256`` and ``HMAC-SHA256``.

        Raises:
            SigningConfigError: If the algorithm is unknown
        """
        if isinstance(value, cls):
            return value

        if isinstance(value, str):
            normalized = value.strip().lower().replace("_", "-")
            for algorithm in cls:
                if algorithm.value == normalized:
                    return algorithm

        raise SigningConfigError(
            f"Unsupported algorithm: {value}",
            {"supported": [a.name for a in cls]}
        )


class SignatureScheme(str, Enum):
    """Outbound header carrying the serialized signature"""
    AUTHORIZATION = "AUTHORIZATION"
    SIGNATURE = "SIGNATURE"

    @property
    def header_name(self) -> str:
        return "Authorization" if self is SignatureScheme.AUTHORIZATION else "Signature"

    @classmethod
    def parse(cls, value: Union[str, "SignatureScheme"]) -> "SignatureScheme":
        if isinstance(value, cls):
            return value

        if isinstance(value, str):
            try:
                return cls(value.strip().upper())
            except ValueError:
                pass

        raise SigningConfigError(
            f"Unsupported signature scheme: {value}",
            {"supported": [s.value for s in cls]}
        )


class HeaderMap(MappingABC):
    """
    Case-insensitive, multi-valued header collection.

    Names are lower-cased on insertion and lookup. The original spelling of
    the first occurrence is kept for display. Item access returns the first
    value of a header.
    """

    def __init__(self, headers: Optional[Union[Mapping[str, str], Iterable[Tuple[str, str]]]] = None):
        self._values: Dict[str, List[str]] = {}
        self._names: Dict[str, str] = {}

        if headers is None:
            return

        items = headers.items() if isinstance(headers, MappingABC) else headers
        for name, value in items:
            self.add(name, value)

    @staticmethod
    def _key(name: str) -> str:
        return name.strip().lower()

    def add(self, name: str, value: str) -> None:
        """Append a value for the header, keeping existing ones"""
        key = self._key(name)
        if key not in self._values:
            self._values[key] = []
            self._names[key] = name.strip()
        self._values[key].append(value)

    def set(self, name: str, value: str) -> None:
        """Set the header, replacing every existing value"""
        key = self._key(name)
        self._values[key] = [value]
        self._names[key] = name.strip()

    def remove(self, name: str) -> None:
        key = self._key(name)
        self._values.pop(key, None)
        self._names.pop(key, None)

    def get_all(self, name: str) -> List[str]:
        return list(self._values.get(self._key(name), []))

    def names(self) -> List[str]:
        """Header names in their original spelling, in insertion order"""
        return list(self._names.values())

    def to_single_value_map(self) -> Dict[str, str]:
        """Lower-cased header names mapped to their first value"""
        return {key: values[0] for key, values in self._values.items() if values}

    def copy(self) -> "HeaderMap":
        copied = HeaderMap()
        for key, values in self._values.items():
            for value in values:
                copied.add(self._names[key], value)
        return copied

    def __getitem__(self, name: str) -> str:
        values = self._values.get(self._key(name))
        if not values:
            raise KeyError(name)
        return values[0]

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self._key(name) in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"HeaderMap({[(self._names[k], v) for k, vs in self._values.items() for v in vs]!r})"


@dataclass(frozen=True)
class SignatureSpec:
    """
    Immutable description of one signature, built once per request.

    Attributes:
        key_id: Opaque key identifier sent to the verifier
        algorithm: Keyed-hash algorithm
        signed_headers: Lower-cased header names to sign, in order
        secret: Raw key bytes
        created: Creation time in Unix seconds, required when (created) is signed
        expires: Expiry time in Unix seconds, required when (expires) is signed
    """
    key_id: str
    algorithm: SignatureAlgorithm
    signed_headers: Tuple[str, ...]
    secret: bytes = field(repr=False)
    created: Optional[int] = None
    expires: Optional[int] = None

    def __post_init__(self):
        """Reject inconsistent header/timestamp combinations"""
        if not self.key_id or not isinstance(self.key_id, str):
            raise SigningConfigError("Key ID must be a non-empty string")

        # keyId is emitted as a quoted string
        if '"' in self.key_id:
            raise SigningConfigError("Key ID must not contain double quotes", {"key_id": self.key_id})

        if not isinstance(self.algorithm, SignatureAlgorithm):
            raise SigningConfigError(f"Unsupported algorithm: {self.algorithm}")

        if not self.signed_headers:
            raise SigningConfigError("At least one header must be signed")

        if not isinstance(self.secret, bytes):
            raise SigningConfigError("Secret must be bytes")

        if CREATED in self.signed_headers and self.created is None:
            raise SigningConfigError(
                f"{CREATED} is signed but no creation timestamp was provided",
                {"header": CREATED}
            )

        if EXPIRES in self.signed_headers and self.expires is None:
            raise SigningConfigError(
                f"{EXPIRES} is signed but no expiry timestamp was provided",
                {"header": EXPIRES}
            )

        if self.created is not None and self.expires is not None and self.expires <= self.created:
            raise SigningConfigError(
                f"Expiry timestamp {self.expires} must be after creation timestamp {self.created}",
                {"created": self.created, "expires": self.expires}
            )

    @property
    def includes_created(self) -> bool:
        return CREATED in self.signed_headers

    @property
    def includes_expires(self) -> bool:
        return EXPIRES in self.signed_headers


def create_signature_spec(
    key_id: str,
    algorithm: Union[str, SignatureAlgorithm],
    signed_headers: Sequence[str],
    secret: Union[str, bytes],
    created: Optional[int] = None,
    expires: Optional[int] = None
) -> SignatureSpec:
    """
    Build a validated signature spec.

    Header names are lower-cased, the secret is UTF-8 encoded when given as
    a string and the algorithm is parsed from its name.

    Raises:
        SigningConfigError: If the combination of fields is inconsistent
    """
    if isinstance(secret, str):
        secret = secret.encode("utf-8")

    return SignatureSpec(
        key_id=key_id,
        algorithm=SignatureAlgorithm.parse(algorithm),
        signed_headers=tuple(name.strip().lower() for name in signed_headers),
        secret=secret,
        created=int(created) if created is not None else None,
        expires=int(expires) if expires is not None else None
    )


@dataclass
class RequestMetrics:
    """Observability sink attached to a request"""
    message: Optional[str] = None


@dataclass
class SignableRequest:
    """
    Outgoing request to be signed

    Attributes:
        method: HTTP method (GET, POST, etc.)
        path: Request path, including the query string if any
        headers: Request headers; plain dicts are converted to a HeaderMap
        timestamp: Request time in Unix seconds (current time if None)
        metrics: Observability sink for failure messages
    """
    method: str
    path: str
    headers: HeaderMap = field(default_factory=HeaderMap)
    timestamp: Optional[float] = None
    metrics: RequestMetrics = field(default_factory=RequestMetrics)

    def __post_init__(self):
        if not self.method:
            raise ValueError("Request method cannot be empty")

        if not isinstance(self.headers, HeaderMap):
            self.headers = HeaderMap(self.headers)


@dataclass
class SignatureResult:
    """
    Generated signature

    Attributes:
        header_name: Header to set (Authorization or Signature)
        header_value: Value for that header
        parameters: Serialized signature parameters, without scheme prefix
        signing_string: Canonical string that was signed
        spec: Signature spec used for this request
    """
    header_name: str
    header_value: str
    parameters: str
    signing_string: str
    spec: SignatureSpec


@dataclass(frozen=True)
class GenerationFailure:
    """Failure signal passed to the request pipeline"""
    message: str
    error_code: str = ErrorCodes.HTTP_SIGNATURE_IMPOSSIBLE_GENERATION
    http_status: int = DEFAULT_HTTP_STATUS


# Type aliases for convenience
Resolver = Callable[[str], str]
TimestampGenerator = Callable[[], int]
HeaderPairs = Iterable[Tuple[str, str]]


def generate_timestamp() -> int:
    """
    Generate current Unix timestamp.

    Returns:
        int: Current Unix timestamp (seconds since epoch)
    """
    return int(time.time())
