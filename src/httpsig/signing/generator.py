"""
Signature generation pipeline

Validates the request headers, builds the signature spec and signing
string, signs it and serializes the result onto the header chosen by the
configured scheme. Any failure is logged and reported as a
``SignatureGenerationError`` carrying a 400 failure; no header is set.
"""

import logging
from typing import List, Optional

from ..config.policy_config import GenerateSignatureConfig
from ..exceptions import (
    ERROR_MESSAGE,
    HttpSignatureError,
    MissingHeadersError,
    MissingDateError,
    SigningConfigError,
    SigningError,
    SignatureGenerationError,
)
from .headers import DATE_HEADER, normalize_header_name, validate_headers
from .resolvers import literal_resolver
from .serializer import serialize_signature, format_signature_header
from .signer import HmacSigner
from .signing_string import build_signing_string_for_request
from .types import (
    CREATED,
    EXPIRES,
    GenerationFailure,
    Resolver,
    SignableRequest,
    SignatureResult,
    SignatureSpec,
    TimestampGenerator,
    create_signature_spec,
    generate_timestamp,
)

logger = logging.getLogger(__name__)


class HttpSignatureGenerator:
    """
    Generates draft-cavage HTTP signatures for outgoing requests.

    One generator can serve many requests; it keeps no per-request state.
    """

    def __init__(
        self,
        config: GenerateSignatureConfig,
        resolver: Optional[Resolver] = None,
        timestamp_generator: Optional[TimestampGenerator] = None
    ):
        """
        Initialize the generator.

        Args:
            config: Static signature configuration
            resolver: Resolves the key id and secret expressions
            timestamp_generator: Clock used when a request has no timestamp
        """
        self.config = config
        self.resolver = resolver or literal_resolver
        self.timestamp_generator = timestamp_generator or generate_timestamp

    def sign(self, request: SignableRequest) -> SignatureResult:
        """
        Generate the signature and set its header on the request.

        The header is overwritten if already present; the header of the other
        scheme is left untouched.

        Raises:
            SignatureGenerationError: If the signature cannot be generated
        """
        result = self.generate(request)
        request.headers.set(result.header_name, result.header_value)
        return result

    def generate(self, request: SignableRequest) -> SignatureResult:
        """
        Generate the signature for a request without modifying it.

        Args:
            request: Request to sign

        Returns:
            SignatureResult: Header name, value and signing details

        Raises:
            SignatureGenerationError: If the signature cannot be generated
        """
        configured_headers = list(self.config.headers)

        try:
            validate_headers(request.headers.names(), configured_headers)
        except (MissingHeadersError, MissingDateError) as e:
            self._fail(e.message)

        try:
            spec = self.build_signature_spec(request, configured_headers)
            signing_string = build_signing_string_for_request(request, spec)
            digest = HmacSigner(spec).sign(signing_string)
        except SigningError as e:
            request.metrics.message = e.cause
            self._fail(f"{ERROR_MESSAGE} {e.cause}")
        except HttpSignatureError as e:
            self._fail(f"{ERROR_MESSAGE} {e.message}")

        parameters = serialize_signature(spec, digest)
        header_name, header_value = format_signature_header(self.config.scheme, parameters)

        logger.debug(f"Generated {spec.algorithm.value} signature for {request.method} {request.path} "
                     f"(key ID: {spec.key_id}, headers: {' '.join(spec.signed_headers)})")

        return SignatureResult(
            header_name=header_name,
            header_value=header_value,
            parameters=parameters,
            signing_string=signing_string,
            spec=spec
        )

    def build_signature_spec(self, request: SignableRequest, configured_headers: List[str]) -> SignatureSpec:
        """
        Build the signature spec for a request.

        Pseudo-headers enabled by the configuration flags are appended after
        the configured headers unless already listed there. When nothing would
        be signed, the Date header is signed instead. Timestamps are computed
        for whichever pseudo-headers end up signed. The key id and secret are
        resolved once each.

        Raises:
            SigningConfigError: If resolution fails or the resulting spec is inconsistent
        """
        signed_headers = [normalize_header_name(name) for name in configured_headers]
        if self.config.created and CREATED not in signed_headers:
            signed_headers.append(CREATED)
        if self.config.expires and EXPIRES not in signed_headers:
            signed_headers.append(EXPIRES)
        if not signed_headers:
            signed_headers.append(DATE_HEADER)

        created = None
        expires = None
        if CREATED in signed_headers or EXPIRES in signed_headers:
            timestamp = self._request_timestamp(request)
            if CREATED in signed_headers:
                created = timestamp
            if EXPIRES in signed_headers:
                expires = timestamp + self.config.validity_duration

        return create_signature_spec(
            key_id=self._resolve(self.config.key_id, "key id"),
            algorithm=self.config.algorithm,
            signed_headers=signed_headers,
            secret=self._resolve(self.config.secret, "secret"),
            created=created,
            expires=expires
        )

    def _resolve(self, expression: str, field_name: str) -> str:
        try:
            return self.resolver(expression)
        except SigningConfigError:
            raise
        except Exception as e:
            raise SigningConfigError(
                f"Unable to resolve {field_name}: {e}",
                {"field": field_name, "original_error": str(e)}
            ) from e

    def _request_timestamp(self, request: SignableRequest) -> int:
        if request.timestamp is not None:
            return int(request.timestamp)
        return int(self.timestamp_generator())

    def _fail(self, message: str) -> None:
        logger.warning(message)
        raise SignatureGenerationError(GenerationFailure(message=message))


def generate_signature(
    request: SignableRequest,
    config: GenerateSignatureConfig,
    resolver: Optional[Resolver] = None
) -> SignatureResult:
    """
    Sign a request with the given configuration.

    Sets the signature header on the request and returns the result.

    Raises:
        SignatureGenerationError: If the signature cannot be generated
    """
    return HttpSignatureGenerator(config, resolver).sign(request)
