"""
HMAC signer

Computes the keyed-hash digest of a signing string with the ``cryptography``
package. Signing is synchronous and deterministic; failures are fatal to the
current request and are never retried.
"""

from cryptography.hazmat.primitives import hashes, hmac

from ..exceptions import SigningError
from .types import SignatureAlgorithm, SignatureSpec

_HASHES = {
    SignatureAlgorithm.HMAC_SHA1: hashes.SHA1,
    SignatureAlgorithm.HMAC_SHA224: hashes.SHA224,
    SignatureAlgorithm.HMAC_SHA256: hashes.SHA256,
    SignatureAlgorithm.HMAC_SHA384: hashes.SHA384,
    SignatureAlgorithm.HMAC_SHA512: hashes.SHA512,
}


class HmacSigner:
    """
    Keyed-hash signer bound to one signature spec
    """

    def __init__(self, spec: SignatureSpec):
        self.spec = spec

    def sign(self, signing_string: str) -> bytes:
        """
        Sign a signing string.

        Args:
            signing_string: Canonical string to sign

        Returns:
            bytes: Raw digest

        Raises:
            SigningError: If the key is empty or the digest cannot be computed
        """
        if not self.spec.secret:
            raise SigningError(
                f"Empty secret key for {self.spec.algorithm.value}",
                {"algorithm": self.spec.algorithm.value}
            )

        hash_class = _HASHES.get(self.spec.algorithm)
        if hash_class is None:
            raise SigningError(
                f"Unsupported algorithm: {self.spec.algorithm}",
                {"algorithm": str(self.spec.algorithm)}
            )

        try:
            context = hmac.HMAC(self.spec.secret, hash_class())
            context.update(signing_string.encode("utf-8"))
            return context.finalize()
        except (TypeError, ValueError, UnicodeError) as e:
            raise SigningError(str(e), {"algorithm": self.spec.algorithm.value, "original_error": str(e)})


def sign(spec: SignatureSpec, signing_string: str) -> bytes:
    """
    Sign a signing string with the algorithm and secret of a spec.

    Args:
        spec: Signature spec
        signing_string: Canonical string to sign

    Returns:
        bytes: Raw digest
    """
    return HmacSigner(spec).sign(signing_string)
