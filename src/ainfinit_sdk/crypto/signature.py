"""
Request Signature Service
Builds the Authorization header value expected by the Ainfinit platform

Every signed call carries a token derived from the merchant credentials and
the current wall-clock time in milliseconds:

1. ``{"merchant_code": m, "timestamp": t}`` is serialized as compact JSON
2. that JSON is AES-ECB encrypted with the secret key and base64 encoded,
   giving ``nonce_str``
3. ``{"merchant_code": m, "nonce_str": n, "timestamp": t}`` is serialized as
   compact JSON and base64 encoded, giving the header value

Key order and the absence of whitespace are part of the wire contract.
"""

import base64
import json
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Union

from ainfinit_sdk.crypto.aes_ecb import EncryptUtil, encrypt_ecb
from ainfinit_sdk.exceptions import EncodingError, ValidationError


Clock = Callable[[], int]


def current_timestamp_ms() -> int:
    """Current wall-clock time in milliseconds since the Unix epoch"""
    return int(time.time() * 1000)


# Characters the platform's serializer escapes inside JSON strings
_HTML_SAFE_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def _compact_json(payload: Dict[str, Any]) -> bytes:
    try:
        text = json.dumps(payload, separators=(",", ":"), ensure_ascii=False)
        for char, escape in _HTML_SAFE_ESCAPES.items():
            text = text.replace(char, escape)
        return text.encode("utf-8")
    except (TypeError, ValueError) as e:
        raise EncodingError(
            f"Failed to serialize signature payload: {e}", code="ENCODING01", cause=e
        ) from e


@dataclass(frozen=True)
class Credentials:
    """Merchant credentials issued by the platform"""
    merchant_code: str
    secret_key: str

    def __post_init__(self) -> None:
        if not self.merchant_code:
            raise ValidationError("merchant_code cannot be empty", field="merchant_code")
        if not self.secret_key:
            raise ValidationError("secret_key cannot be empty", field="secret_key")

    def __repr__(self) -> str:
        return f"Credentials(merchant_code={self.merchant_code!r}, secret_key='[REDACTED]')"


@dataclass(frozen=True)
class SignaturePayload:
    """Inner payload that gets encrypted into ``nonce_str``"""
    merchant_code: str
    timestamp: int

    def to_json(self) -> bytes:
        return _compact_json({
            "merchant_code": self.merchant_code,
            "timestamp": self.timestamp,
        })


@dataclass(frozen=True)
class AuthToken:
    """Outer token sent, base64 encoded, as the Authorization header"""
    merchant_code: str
    nonce_str: str
    timestamp: int

    def to_json(self) -> bytes:
        return _compact_json({
            "merchant_code": self.merchant_code,
            "nonce_str": self.nonce_str,
            "timestamp": self.timestamp,
        })

    def encode(self) -> str:
        return base64.b64encode(self.to_json()).decode("ascii")


def _key_bytes(secret_key: Union[str, bytes]) -> bytes:
    if isinstance(secret_key, bytes):
        return secret_key
    return secret_key.encode("utf-8")


def build_auth_token(
    merchant_code: str,
    secret_key: Union[str, bytes],
    timestamp_ms: int,
) -> AuthToken:
    """
    Build the structured token for one request

    Args:
        merchant_code: Merchant identifier
        secret_key: AES key (16, 24 or 32 bytes, used without normalization)
        timestamp_ms: Milliseconds since the Unix epoch

    Returns:
        AuthToken holding the encrypted nonce

    Raises:
        ValidationError: If the merchant code or secret key is empty
        EncodingError: If the payload cannot be serialized
        CryptoError: If the cipher cannot be initialized with the key
    """
    if not merchant_code:
        raise ValidationError("merchant_code cannot be empty", field="merchant_code")
    if not secret_key:
        raise ValidationError("secret_key cannot be empty", field="secret_key")

    inner = SignaturePayload(merchant_code=merchant_code, timestamp=timestamp_ms)
    ciphertext = encrypt_ecb(inner.to_json(), _key_bytes(secret_key))
    nonce_str = base64.b64encode(ciphertext).decode("ascii")

    return AuthToken(
        merchant_code=merchant_code,
        nonce_str=nonce_str,
        timestamp=timestamp_ms,
    )


def generate_signature(
    merchant_code: str,
    secret_key: Union[str, bytes],
    timestamp_ms: int,
) -> str:
    """
    Generate the Authorization header value

    Pure and deterministic: identical inputs always give identical output.

    Example:
        >>> generate_signature("merchant", "4UafmbIJroNY2lXX", 1557218157315)[:24]
        'eyJtZXJjaGFudF9jb2RlIjoi'
    """
    return build_auth_token(merchant_code, secret_key, timestamp_ms).encode()


class SignatureGenerator:
    """
    Signature generator bound to one set of credentials

    Each call to :meth:`generate` reads the clock afresh; nothing is cached
    between requests.
    """

    def __init__(
        self,
        credentials: Credentials,
        clock: Optional[Clock] = None,
    ) -> None:
        self.credentials = credentials
        self._clock = clock or current_timestamp_ms
        self._encrypt_util = EncryptUtil(
            credentials.merchant_code, credentials.secret_key
        )

    def generate(self, timestamp_ms: Optional[int] = None) -> str:
        """Signature for ``timestamp_ms``, or for the current time when omitted"""
        if timestamp_ms is None:
            timestamp_ms = self._clock()
        return generate_signature(
            self.credentials.merchant_code,
            self.credentials.secret_key,
            timestamp_ms,
        )

    def decode(self, signature: str) -> AuthToken:
        """
        Parse a header value back into its token fields

        Raises:
            EncodingError: If the value is not base64-encoded token JSON
        """
        try:
            data = json.loads(base64.b64decode(signature, validate=True))
            return AuthToken(
                merchant_code=data["merchant_code"],
                nonce_str=data["nonce_str"],
                timestamp=data["timestamp"],
            )
        except (ValueError, KeyError, TypeError) as e:
            raise EncodingError(
                "Signature is not a valid auth token", code="ENCODING04", cause=e
            ) from e

    def decrypt_nonce(self, nonce_str: str) -> SignaturePayload:
        """Decrypt a ``nonce_str`` into the payload it was built from"""
        text = self._encrypt_util.decrypt(nonce_str)
        try:
            data = json.loads(text)
            return SignaturePayload(
                merchant_code=data["merchant_code"], timestamp=data["timestamp"]
            )
        except (ValueError, KeyError, TypeError) as e:
            raise EncodingError(
                "Nonce does not contain a signature payload", code="ENCODING04", cause=e
            ) from e
