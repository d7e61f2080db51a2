#!/usr/bin/env python3
"""
HTTP Signature Generator - Request Signing Example

This example demonstrates how to generate draft-cavage HTTP signatures for
outgoing requests, both directly and through the ``requests`` integration.
"""

import os

import requests

from httpsig import (
    GenerateSignatureConfig,
    HttpSignatureGenerator,
    HTTPSignatureAuth,
    SignableRequest,
    SignatureGenerationError,
    create_template_resolver,
    parse_signature_parameters,
)


def basic_signing_example():
    """Demonstrate the basic signing workflow"""
    print("=== Basic Signing Example ===")

    config = GenerateSignatureConfig(
        key_id="example-client-001",
        secret="example-secret",
        headers=["Host", "Date"],
        validity_duration=30,
    )

    request = SignableRequest(
        method="GET",
        path="/api/resource?page=1",
        headers={"Host": "api.example.com", "Date": "Mon, 09 Jun 2025 15:00:00 GMT"},
    )

    result = HttpSignatureGenerator(config).sign(request)

    print("Signing string:")
    print(result.signing_string)
    print(f"\n{result.header_name}: {result.header_value}")

    parameters = parse_signature_parameters(result.header_value)
    print(f"\nSigned headers: {parameters['headers']}")
    print(f"Valid for {parameters['expires'] - parameters['created']} seconds")


def signature_scheme_example():
    """Demonstrate the Signature scheme and secrets read from the environment"""
    print("\n=== Signature Scheme Example ===")

    os.environ.setdefault("EXAMPLE_SIGNING_SECRET", "secret-from-environment")

    config = GenerateSignatureConfig.from_dict({
        "keyId": "example-client-002",
        "secret": "${EXAMPLE_SIGNING_SECRET}",
        "scheme": "SIGNATURE",
        "algorithm": "HMAC_SHA512",
        "created": True,
        "expires": False,
    })

    request = SignableRequest(
        method="POST",
        path="/api/orders",
        headers={"Date": "Mon, 09 Jun 2025 15:00:00 GMT"},
    )

    generator = HttpSignatureGenerator(config, create_template_resolver())
    result = generator.sign(request)
    print(f"{result.header_name}: {result.header_value}")


def failure_example():
    """Demonstrate the failure signal for a request missing a required header"""
    print("\n=== Failure Example ===")

    config = GenerateSignatureConfig(key_id="example", secret="secret", headers=["Host", "Digest"])
    request = SignableRequest(method="GET", path="/", headers={"Date": "Mon, 09 Jun 2025 15:00:00 GMT"})

    try:
        HttpSignatureGenerator(config).sign(request)
    except SignatureGenerationError as e:
        print(f"{e.failure.http_status} {e.failure.error_code}: {e.failure.message}")


def requests_integration_example():
    """Demonstrate signing a requests PreparedRequest without sending it"""
    print("\n=== requests Integration Example ===")

    config = GenerateSignatureConfig(key_id="example", secret="secret", headers=["Host", "Date"])
    prepared = requests.Request(
        "GET",
        "https://api.example.com/api/resource",
        auth=HTTPSignatureAuth(config, add_date=True),
    ).prepare()

    print(f"Authorization: {prepared.headers['Authorization']}")


if __name__ == "__main__":
    basic_signing_example()
    signature_scheme_example()
    failure_example()
    requests_integration_example()
