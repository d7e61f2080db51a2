"""
HTTP Signature Generator - Signing Module

draft-cavage HTTP Signatures with HMAC. This module builds the signing
string for an outgoing request, computes its keyed-hash signature and
serializes it into the Authorization or Signature header.
"""

from .types import (
    CREATED,
    EXPIRES,
    REQUEST_TARGET,
    SignatureAlgorithm,
    SignatureScheme,
    HeaderMap,
    SignatureSpec,
    RequestMetrics,
    SignableRequest,
    SignatureResult,
    GenerationFailure,
    create_signature_spec,
    generate_timestamp,
)

from .headers import (
    validate_headers,
    find_missing_headers,
    is_pseudo_header,
    normalize_header_name,
)

from .signing_string import (
    SigningStringBuilder,
    build_signing_string,
)

from .signer import (
    HmacSigner,
    sign,
)

from .serializer import (
    SIGNATURE_PREFIX,
    serialize_signature,
    format_signature_header,
    parse_signature_parameters,
)

from .resolvers import (
    literal_resolver,
    create_template_resolver,
)

from .generator import (
    HttpSignatureGenerator,
    generate_signature,
)

from .integration import (
    HTTPSignatureAuth,
    sign_prepared_request,
    create_signing_session,
)

# Public API exports
__all__ = [
    # Pseudo-headers
    'CREATED',
    'EXPIRES',
    'REQUEST_TARGET',
    # Types
    'SignatureAlgorithm',
    'SignatureScheme',
    'HeaderMap',
    'SignatureSpec',
    'RequestMetrics',
    'SignableRequest',
    'SignatureResult',
    'GenerationFailure',
    'create_signature_spec',
    'generate_timestamp',
    # Header validation
    'validate_headers',
    'find_missing_headers',
    'is_pseudo_header',
    'normalize_header_name',
    # Signing string, signer and serializer
    'SigningStringBuilder',
    'build_signing_string',
    'HmacSigner',
    'sign',
    'SIGNATURE_PREFIX',
    'serialize_signature',
    'format_signature_header',
    'parse_signature_parameters',
    # Resolution
    'literal_resolver',
    'create_template_resolver',
    # Generation
    'HttpSignatureGenerator',
    'generate_signature',
    # HTTP Integration
    'HTTPSignatureAuth',
    'sign_prepared_request',
    'create_signing_session',
]
