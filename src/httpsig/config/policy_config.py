"""
Signature generation configuration

Static configuration for the signature generator. Documents use the
camelCase keys of the gateway policy format (``keyId``, ``validityDuration``)
or their snake_case equivalents.
"""

import json
from typing import Dict, List, Optional, Any, Union
from dataclasses import dataclass, field, asdict
from pathlib import Path

from ..exceptions import ConfigurationError, ErrorCodes, SigningConfigError
from ..signing.types import SignatureAlgorithm, SignatureScheme

DEFAULT_VALIDITY_DURATION = 3

_KEY_ALIASES = {
    "keyId": "key_id",
    "validityDuration": "validity_duration",
}


@dataclass
class GenerateSignatureConfig:
    """
    Configuration for signature generation

    Attributes:
        key_id: Key id expression, resolved once per request
        secret: Secret expression, resolved once per request
        scheme: Header carrying the signature
        algorithm: Keyed-hash algorithm
        headers: Headers the request must carry and that are signed, in order
        created: Sign the (created) pseudo-header
        expires: Sign the (expires) pseudo-header
        validity_duration: Seconds between created and expires
    """
    key_id: str
    secret: str = field(repr=False)
    scheme: SignatureScheme = SignatureScheme.AUTHORIZATION
    algorithm: SignatureAlgorithm = SignatureAlgorithm.HMAC_SHA256
    headers: List[str] = field(default_factory=list)
    created: bool = True
    expires: bool = True
    validity_duration: int = DEFAULT_VALIDITY_DURATION

    def __post_init__(self):
        """Validate and coerce configuration values"""
        if not self.key_id or not isinstance(self.key_id, str):
            raise ConfigurationError("Key ID must be a non-empty string")

        if self.secret is None or not isinstance(self.secret, str):
            raise ConfigurationError("Secret must be a string")

        try:
            self.scheme = SignatureScheme.parse(self.scheme)
            self.algorithm = SignatureAlgorithm.parse(self.algorithm)
        except SigningConfigError as e:
            raise ConfigurationError(e.message, ErrorCodes.INVALID_CONFIG, e.details)

        if self.headers is None:
            self.headers = []

        if isinstance(self.headers, str) or not all(isinstance(h, str) for h in self.headers):
            raise ConfigurationError("Headers must be a list of header names")

        self.headers = [h.strip() for h in self.headers if h.strip()]

        for flag in ("created", "expires"):
            if not isinstance(getattr(self, flag), bool):
                raise ConfigurationError(
                    f"'{flag}' must be a boolean, got {getattr(self, flag)!r}",
                    ErrorCodes.INVALID_CONFIG,
                    {flag: getattr(self, flag)}
                )

        if isinstance(self.validity_duration, bool) or not isinstance(self.validity_duration, int):
            raise ConfigurationError("Validity duration must be an integer number of seconds")

        signs_expires = self.expires or "(expires)" in (h.lower() for h in self.headers)
        if signs_expires and self.validity_duration <= 0:
            raise ConfigurationError(
                f"Validity duration must be positive, got {self.validity_duration}",
                ErrorCodes.INVALID_CONFIG,
                {"validity_duration": self.validity_duration}
            )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'GenerateSignatureConfig':
        """Load configuration from a dictionary"""
        if not isinstance(data, dict):
            raise ConfigurationError("Configuration must be a JSON object", ErrorCodes.INVALID_FORMAT)

        kwargs = {_KEY_ALIASES.get(key, key): value for key, value in data.items()}
        try:
            return cls(**kwargs)
        except TypeError as e:
            raise ConfigurationError(f"Invalid configuration format: {e}", ErrorCodes.INVALID_FORMAT)

    @classmethod
    def from_json(cls, json_string: str) -> 'GenerateSignatureConfig':
        """Load configuration from JSON string"""
        try:
            data = json.loads(json_string)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Failed to parse configuration JSON: {e}", ErrorCodes.PARSE_ERROR)
        return cls.from_dict(data)

    @classmethod
    def from_file(cls, file_path: Union[str, Path]) -> 'GenerateSignatureConfig':
        """Load configuration from file"""
        try:
            path = Path(file_path)
            with open(path, 'r', encoding='utf-8') as f:
                json_string = f.read()
        except OSError as e:
            raise ConfigurationError(f"Failed to read configuration file: {e}", ErrorCodes.FILE_ERROR)
        return cls.from_json(json_string)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the camelCase document format, without the secret"""
        data = asdict(self)
        data.pop("secret")
        data["scheme"] = self.scheme.value
        data["algorithm"] = self.algorithm.name
        return {
            {v: k for k, v in _KEY_ALIASES.items()}.get(key, key): value
            for key, value in data.items()
        }


def load_config_from_dict(data: Dict[str, Any]) -> GenerateSignatureConfig:
    """Load configuration from a dictionary"""
    return GenerateSignatureConfig.from_dict(data)


def load_config_from_json(json_string: str) -> GenerateSignatureConfig:
    """Load configuration from JSON string"""
    return GenerateSignatureConfig.from_json(json_string)


def load_config_from_file(file_path: Union[str, Path]) -> GenerateSignatureConfig:
    """Load configuration from file"""
    return GenerateSignatureConfig.from_file(file_path)
