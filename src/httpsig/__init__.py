"""
HTTP Signature Generator
draft-cavage HTTP Signatures (HMAC) for outgoing requests
"""

from .version import __version__
from .signing import (
    # Types
    SignatureAlgorithm,
    SignatureScheme,
    HeaderMap,
    SignatureSpec,
    RequestMetrics,
    SignableRequest,
    SignatureResult,
    GenerationFailure,
    create_signature_spec,
    # Core pipeline
    validate_headers,
    build_signing_string,
    HmacSigner,
    serialize_signature,
    format_signature_header,
    parse_signature_parameters,
    HttpSignatureGenerator,
    generate_signature,
    # Resolution
    literal_resolver,
    create_template_resolver,
    # HTTP Integration
    HTTPSignatureAuth,
    sign_prepared_request,
    create_signing_session,
)
from .config import (
    GenerateSignatureConfig,
    load_config_from_dict,
    load_config_from_json,
    load_config_from_file,
)
from .exceptions import (
    ErrorCodes,
    HttpSignatureError,
    MissingHeadersError,
    MissingDateError,
    SigningConfigError,
    MissingHeaderAtSignTimeError,
    SigningError,
    ConfigurationError,
    SignatureGenerationError,
)

__all__ = [
    '__version__',
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
    # Core pipeline
    'validate_headers',
    'build_signing_string',
    'HmacSigner',
    'serialize_signature',
    'format_signature_header',
    'parse_signature_parameters',
    'HttpSignatureGenerator',
    'generate_signature',
    # Resolution
    'literal_resolver',
    'create_template_resolver',
    # HTTP Integration
    'HTTPSignatureAuth',
    'sign_prepared_request',
    'create_signing_session',
    # Configuration
    'GenerateSignatureConfig',
    'load_config_from_dict',
    'load_config_from_json',
    'load_config_from_file',
    # Exceptions
    'ErrorCodes',
    'HttpSignatureError',
    'MissingHeadersError',
    'MissingDateError',
    'SigningConfigError',
    'MissingHeaderAtSignTimeError',
    'SigningError',
    'ConfigurationError',
    'SignatureGenerationError',
]
