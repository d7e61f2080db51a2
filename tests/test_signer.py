"""
Test suite for the HMAC signer
"""

import hashlib
import hmac as std_hmac
from unittest.mock import patch

import pytest

from httpsig.exceptions import SigningError, ErrorCodes
from httpsig.signing import HmacSigner, SignatureAlgorithm, create_signature_spec, sign


def make_spec(algorithm=SignatureAlgorithm.HMAC_SHA256, secret="secret"):
    return create_signature_spec(
        key_id="keyId",
        algorithm=algorithm,
        signed_headers=["host"],
        secret=secret
    )


class TestHmacSigner:
    """Test HmacSigner"""

    @pytest.mark.parametrize("algorithm, digestmod", [
        (SignatureAlgorithm.HMAC_SHA1, hashlib.sha1),
        (SignatureAlgorithm.HMAC_SHA224, hashlib.sha224),
        (SignatureAlgorithm.HMAC_SHA256, hashlib.sha256),
        (SignatureAlgorithm.HMAC_SHA384, hashlib.sha384),
        (SignatureAlgorithm.HMAC_SHA512, hashlib.sha512),
    ])
    def test_digest_matches_hmac(self, algorithm, digestmod):
        """Test that each algorithm produces the standard HMAC digest"""
        signing_string = "host: example.org\n(created): 1749481200"
        expected = std_hmac.new(b"secret", signing_string.encode("utf-8"), digestmod).digest()

        assert HmacSigner(make_spec(algorithm)).sign(signing_string) == expected

    def test_known_vector(self):
        """RFC 4231 test case 2"""
        spec = make_spec(SignatureAlgorithm.HMAC_SHA256, secret="Jefe")
        digest = sign(spec, "what do ya want for nothing?")
        assert digest.hex() == "5bdcc146bf60754e6a042426089575c75a003f089d2739839dec58b964ec3843"

    def test_utf8_signing_string(self):
        signing_string = "x-name: Zoë"
        expected = std_hmac.new(b"secret", signing_string.encode("utf-8"), hashlib.sha256).digest()
        assert sign(make_spec(), signing_string) == expected

    def test_deterministic(self):
        spec = make_spec()
        assert sign(spec, "host: example.org") == sign(spec, "host: example.org")
        assert sign(spec, "host: example.org") != sign(spec, "host: example.com")

    def test_empty_secret(self):
        """Test that an empty key is rejected"""
        with pytest.raises(SigningError) as exc_info:
            sign(make_spec(secret=""), "host: example.org")

        assert exc_info.value.error_code == ErrorCodes.SIGNING_FAILED
        assert "Empty secret" in exc_info.value.cause

    def test_primitive_failure_is_wrapped(self):
        """Test that errors from the hashing primitive become SigningError"""
        with patch("httpsig.signing.signer.hmac.HMAC", side_effect=ValueError("exception-message")):
            with pytest.raises(SigningError) as exc_info:
                sign(make_spec(), "host: example.org")

        assert exc_info.value.cause == "exception-message"

    def test_digest_length(self):
        assert len(sign(make_spec(SignatureAlgorithm.HMAC_SHA256), "host: example.org")) == 32
        assert len(sign(make_spec(SignatureAlgorithm.HMAC_SHA512), "host: example.org")) == 64
