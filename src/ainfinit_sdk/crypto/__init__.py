"""
Cryptographic utilities for request signing
"""

from ainfinit_sdk.crypto.aes_ecb import (
    BLOCK_SIZE,
    EncryptUtil,
    decrypt_ecb,
    encrypt_ecb,
    normalize_key,
    pkcs5_pad,
    pkcs5_unpad,
)
from ainfinit_sdk.crypto.signature import (
    AuthToken,
    Credentials,
    SignatureGenerator,
    SignaturePayload,
    build_auth_token,
    current_timestamp_ms,
    generate_signature,
)

__all__ = [
    "BLOCK_SIZE",
    "EncryptUtil",
    "decrypt_ecb",
    "encrypt_ecb",
    "normalize_key",
    "pkcs5_pad",
    "pkcs5_unpad",
    "AuthToken",
    "Credentials",
    "SignatureGenerator",
    "SignaturePayload",
    "build_auth_token",
    "current_timestamp_ms",
    "generate_signature",
]
