"""
HTTP client integration for signature generation

This module connects the signature generator to the ``requests`` library,
enabling automatic signing of outbound requests through the standard
``auth`` hook.
"""

import logging
from email.utils import formatdate
from typing import Optional
from urllib.parse import urlsplit

import requests
from requests.auth import AuthBase
from requests.models import PreparedRequest

from ..config.policy_config import GenerateSignatureConfig
from .generator import HttpSignatureGenerator
from .types import HeaderMap, Resolver, SignableRequest, SignatureResult

logger = logging.getLogger(__name__)

_DEFAULT_PORTS = {'http': 80, 'https': 443}


def host_header_from_url(url: str) -> str:
    """
    Build a Host header value from a URL.

    User info is dropped and the port is kept only when it is not the
    default port of the scheme.
    """
    parts = urlsplit(url)
    host = parts.hostname or ''
    if ':' in host:
        host = f'[{host}]'
    if parts.port is not None and parts.port != _DEFAULT_PORTS.get(parts.scheme.lower()):
        host = f'{host}:{parts.port}'
    return host


class HTTPSignatureAuth(AuthBase):
    """
    ``requests`` authentication handler adding an HTTP signature.

    Usage:
        session.get(url, auth=HTTPSignatureAuth(config))

    A request that cannot be signed is never sent: the
    ``SignatureGenerationError`` propagates out of the ``requests`` call.
    """

    def __init__(
        self,
        config: GenerateSignatureConfig,
        resolver: Optional[Resolver] = None,
        add_date: bool = False
    ):
        """
        Initialize the authentication handler.

        Args:
            config: Signature configuration
            resolver: Resolves the key id and secret expressions
            add_date: Add a Date header to requests that lack one
        """
        self.config = config
        self.generator = HttpSignatureGenerator(config, resolver)
        self.add_date = add_date

    def __call__(self, prepared_request: PreparedRequest) -> PreparedRequest:
        self.sign(prepared_request)
        return prepared_request

    def sign(self, prepared_request: PreparedRequest) -> SignatureResult:
        """
        Sign a prepared request in place.

        Returns:
            SignatureResult: Generated signature

        Raises:
            SignatureGenerationError: If signing fails
        """
        if 'host' not in {k.lower() for k in prepared_request.headers.keys()}:
            prepared_request.headers['Host'] = host_header_from_url(prepared_request.url)

        if self.add_date and 'date' not in {k.lower() for k in prepared_request.headers.keys()}:
            prepared_request.headers['Date'] = formatdate(usegmt=True)

        signable_request = SignableRequest(
            method=prepared_request.method,
            path=prepared_request.path_url,
            headers=HeaderMap(prepared_request.headers.items())
        )

        result = self.generator.generate(signable_request)

        # requests headers are case-insensitive, assignment replaces any existing value
        prepared_request.headers[result.header_name] = result.header_value

        logger.debug(f"Signed {prepared_request.method} request to {prepared_request.url}")
        return result


def sign_prepared_request(
    prepared_request: PreparedRequest,
    config: GenerateSignatureConfig,
    resolver: Optional[Resolver] = None
) -> PreparedRequest:
    """
    Sign a prepared request.

    Args:
        prepared_request: Prepared request to sign
        config: Signature configuration
        resolver: Resolves the key id and secret expressions

    Returns:
        PreparedRequest: Request with the signature header set

    Raises:
        SignatureGenerationError: If signing fails
    """
    HTTPSignatureAuth(config, resolver).sign(prepared_request)
    return prepared_request


def create_signing_session(
    config: GenerateSignatureConfig,
    resolver: Optional[Resolver] = None,
    add_date: bool = False,
    **session_kwargs
) -> requests.Session:
    """
    Create a new session that signs every request.

    Args:
        config: Signature configuration
        resolver: Resolves the key id and secret expressions
        add_date: Add a Date header to requests that lack one
        **session_kwargs: Attributes to set on the session

    Returns:
        requests.Session: Session with signing authentication
    """
    session = requests.Session()

    # Apply session configuration
    for key, value in session_kwargs.items():
        if hasattr(session, key):
            setattr(session, key, value)

    session.auth = HTTPSignatureAuth(config, resolver, add_date=add_date)
    logger.info(f"Configured request signing for key ID expression: {config.key_id}")
    return session
