"""
AES-ECB helpers used by the Ainfinit request signature

The platform encrypts short JSON payloads with AES in ECB mode and PKCS#5
padding, then transports the ciphertext as standard base64. Encryption uses
the secret key bytes exactly as given (16, 24 or 32 bytes select AES-128,
AES-192 or AES-256). Decryption normalizes the key to 16 bytes first.
"""

import base64
import binascii
from typing import Union

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from ainfinit_sdk.exceptions import CryptoError, EncodingError


# AES block size in bytes
BLOCK_SIZE = 16

# Key length used by the decryption path
DECRYPT_KEY_SIZE = 16


def _to_bytes(value: Union[str, bytes]) -> bytes:
    if isinstance(value, bytes):
        return value
    return value.encode("utf-8")


def pkcs5_pad(data: bytes) -> bytes:
    """
    Apply PKCS#5 padding for a 16-byte block

    A full block of ``0x10`` is appended when ``data`` is already aligned.
    """
    padder = padding.PKCS7(BLOCK_SIZE * 8).padder()
    return padder.update(data) + padder.finalize()


def pkcs5_unpad(data: bytes) -> bytes:
    """
    Strip PKCS#5 padding

    Raises:
        CryptoError: If the trailing bytes are not valid padding
    """
    unpadder = padding.PKCS7(BLOCK_SIZE * 8).unpadder()
    try:
        return unpadder.update(data) + unpadder.finalize()
    except ValueError as e:
        raise CryptoError("Invalid PKCS#5 padding", code="CRYPTO03", cause=e) from e


def normalize_key(key: Union[str, bytes], size: int = DECRYPT_KEY_SIZE) -> bytes:
    """Truncate or right-pad ``key`` with zero bytes to exactly ``size`` bytes"""
    raw = _to_bytes(key)
    if len(raw) >= size:
        return raw[:size]
    return raw + b"\x00" * (size - len(raw))


def _cipher(key: bytes) -> Cipher:
    try:
        return Cipher(algorithms.AES(key), modes.ECB())
    except ValueError as e:
        raise CryptoError(
            f"Invalid AES key length: {len(key)} bytes (expected 16, 24 or 32)",
            code="CRYPTO01",
            cause=e,
            details={"key_length": len(key)},
        ) from e


def encrypt_ecb(plaintext: bytes, key: bytes) -> bytes:
    """
    Pad and encrypt ``plaintext`` with AES-ECB

    Args:
        plaintext: Raw bytes to encrypt
        key: AES key, used as-is

    Returns:
        Ciphertext, always a non-zero multiple of 16 bytes

    Raises:
        CryptoError: If the key length is not a valid AES key size
    """
    encryptor = _cipher(key).encryptor()
    return encryptor.update(pkcs5_pad(plaintext)) + encryptor.finalize()


def decrypt_ecb(ciphertext: bytes, key: bytes) -> bytes:
    """
    Decrypt AES-ECB ciphertext without removing padding

    Raises:
        CryptoError: If the key is invalid or the ciphertext is not block aligned
    """
    if not ciphertext or len(ciphertext) % BLOCK_SIZE != 0:
        raise CryptoError(
            f"Ciphertext length {len(ciphertext)} is not a multiple of {BLOCK_SIZE}",
            code="CRYPTO02",
        )
    decryptor = _cipher(key).decryptor()
    return decryptor.update(ciphertext) + decryptor.finalize()


class EncryptUtil:
    """
    Base64 string encryption bound to a merchant's secret key

    Example:
        >>> util = EncryptUtil("merchant", "4UafmbIJroNY2lXX")
        >>> token = util.encrypt('{"a":1}')
        >>> util.decrypt(token)
        '{"a":1}'
    """

    def __init__(self, merchant_code: str, secret_key: Union[str, bytes]) -> None:
        self.merchant_code = merchant_code
        self._secret_key = _to_bytes(secret_key)

    def encrypt(self, data: Union[str, bytes]) -> str:
        """Encrypt ``data`` with the raw secret key and return standard base64"""
        ciphertext = encrypt_ecb(_to_bytes(data), self._secret_key)
        return base64.b64encode(ciphertext).decode("ascii")

    def decrypt(self, data: str) -> str:
        """
        Decrypt a base64 string produced by :meth:`encrypt`

        The key is normalized to 16 bytes before use.

        Raises:
            EncodingError: If ``data`` is not valid base64 or the plaintext is not UTF-8
            CryptoError: If the ciphertext or padding is invalid
        """
        try:
            ciphertext = base64.b64decode(data, validate=True)
        except (binascii.Error, ValueError) as e:
            raise EncodingError("Invalid base64 input", code="ENCODING02", cause=e) from e

        plaintext = pkcs5_unpad(decrypt_ecb(ciphertext, normalize_key(self._secret_key)))
        try:
            return plaintext.decode("utf-8")
        except UnicodeDecodeError as e:
            raise EncodingError(
                "Decrypted data is not valid UTF-8", code="ENCODING03", cause=e
            ) from e
