"""
Test suite for signature generation configuration
"""

import json

import pytest

from httpsig.config import (
    GenerateSignatureConfig,
    DEFAULT_VALIDITY_DURATION,
    load_config_from_dict,
    load_config_from_json,
    load_config_from_file,
)
from httpsig.exceptions import ConfigurationError, ErrorCodes
from httpsig.signing import SignatureAlgorithm, SignatureScheme


POLICY_DOCUMENT = {
    "keyId": "my-key",
    "secret": "my-secret",
    "scheme": "SIGNATURE",
    "algorithm": "HMAC_SHA512",
    "headers": ["Host", "Date"],
    "created": False,
    "expires": True,
    "validityDuration": 30,
}


class TestGenerateSignatureConfig:
    """Test configuration defaults and validation"""

    def test_defaults(self):
        config = GenerateSignatureConfig(key_id="keyId", secret="secret")

        assert config.scheme is SignatureScheme.AUTHORIZATION
        assert config.algorithm is SignatureAlgorithm.HMAC_SHA256
        assert config.headers == []
        assert config.created is True
        assert config.expires is True
        assert config.validity_duration == DEFAULT_VALIDITY_DURATION == 3

    def test_string_enums_coerced(self):
        config = GenerateSignatureConfig(key_id="k", secret="s", scheme="signature", algorithm="hmac-sha1")

        assert config.scheme is SignatureScheme.SIGNATURE
        assert config.algorithm is SignatureAlgorithm.HMAC_SHA1

    def test_headers_trimmed(self):
        config = GenerateSignatureConfig(key_id="k", secret="s", headers=[" Host ", "", "Date"])
        assert config.headers == ["Host", "Date"]

    def test_secret_not_in_repr(self):
        assert "top-secret" not in repr(GenerateSignatureConfig(key_id="k", secret="top-secret"))

    @pytest.mark.parametrize("kwargs", [
        {"key_id": "", "secret": "s"},
        {"key_id": "k", "secret": None},
        {"key_id": "k", "secret": "s", "algorithm": "rsa-sha256"},
        {"key_id": "k", "secret": "s", "scheme": "BEARER"},
        {"key_id": "k", "secret": "s", "headers": "Host"},
        {"key_id": "k", "secret": "s", "validity_duration": 0},
        {"key_id": "k", "secret": "s", "validity_duration": "3"},
        {"key_id": "k", "secret": "s", "validity_duration": True},
        {"key_id": "k", "secret": "s", "created": "false"},
        {"key_id": "k", "secret": "s", "expires": 0},
        {"key_id": "k", "secret": "s", "expires": False, "headers": ["(expires)"], "validity_duration": 0},
    ])
    def test_invalid(self, kwargs):
        with pytest.raises(ConfigurationError):
            GenerateSignatureConfig(**kwargs)

    def test_validity_ignored_without_expires(self):
        config = GenerateSignatureConfig(key_id="k", secret="s", expires=False, validity_duration=0)
        assert config.validity_duration == 0


class TestConfigLoading:
    """Test loading configuration documents"""

    def test_from_dict_camel_case(self):
        config = load_config_from_dict(POLICY_DOCUMENT)

        assert config.key_id == "my-key"
        assert config.secret == "my-secret"
        assert config.scheme is SignatureScheme.SIGNATURE
        assert config.algorithm is SignatureAlgorithm.HMAC_SHA512
        assert config.headers == ["Host", "Date"]
        assert config.created is False
        assert config.expires is True
        assert config.validity_duration == 30

    def test_from_dict_snake_case(self):
        config = load_config_from_dict({"key_id": "k", "secret": "s", "validity_duration": 5})
        assert config.validity_duration == 5

    def test_unknown_key(self):
        with pytest.raises(ConfigurationError) as exc_info:
            load_config_from_dict({"keyId": "k", "secret": "s", "unknown": 1})
        assert exc_info.value.error_code == ErrorCodes.INVALID_FORMAT

    def test_not_an_object(self):
        with pytest.raises(ConfigurationError) as exc_info:
            load_config_from_json("[]")
        assert exc_info.value.error_code == ErrorCodes.INVALID_FORMAT

    def test_string_flag_rejected(self):
        with pytest.raises(ConfigurationError) as exc_info:
            load_config_from_json('{"keyId": "k", "secret": "s", "created": "false"}')
        assert exc_info.value.details == {"created": "false"}

    def test_from_json(self):
        config = load_config_from_json(json.dumps(POLICY_DOCUMENT))
        assert config.key_id == "my-key"

    def test_invalid_json(self):
        with pytest.raises(ConfigurationError) as exc_info:
            load_config_from_json("{not json")
        assert exc_info.value.error_code == ErrorCodes.PARSE_ERROR

    def test_from_file(self, tmp_path):
        path = tmp_path / "signing.json"
        path.write_text(json.dumps(POLICY_DOCUMENT), encoding="utf-8")

        config = load_config_from_file(path)

        assert config.algorithm is SignatureAlgorithm.HMAC_SHA512

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError) as exc_info:
            load_config_from_file(tmp_path / "missing.json")
        assert exc_info.value.error_code == ErrorCodes.FILE_ERROR

    def test_to_dict_omits_secret(self):
        data = load_config_from_dict(POLICY_DOCUMENT).to_dict()

        assert "secret" not in data
        assert data == {key: value for key, value in POLICY_DOCUMENT.items() if key != "secret"}
