"""
Signed and optionally encrypted cookie values.

An encoded value has the form ``payload.timestamp.signature`` where
``payload`` is the base64url encoded (and, with a block key, AES-GCM
sealed) data. The signature is an HMAC-SHA256 salted with the cookie
name, so a value only decodes under the name it was issued for.
"""
import hashlib
import logging
import secrets

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM
from itsdangerous import BadData, SignatureExpired, TimestampSigner
from itsdangerous.encoding import base64_decode, base64_encode

from .abc import ICodec
from .consts import DEFAULT_CODEC_MAX_AGE, DEFAULT_CODEC_MAX_LENGTH
from .errors import CodecConfigError, DecodeError, EncodeError

logger = logging.getLogger(__name__)

BLOCK_KEY_SIZES = (16, 24, 32)
NONCE_SIZE = 12
TAG_SIZE = 16


class SecureCookieCodec(ICodec):
    def __init__(
        self,
        hash_key: bytes,
        block_key: bytes | None = None,
        *,
        max_age: int | None = DEFAULT_CODEC_MAX_AGE,
        max_length: int = DEFAULT_CODEC_MAX_LENGTH,
    ) -> None:
        if not hash_key:
            raise CodecConfigError("Hash key is not set")
        if block_key is not None and len(block_key) not in BLOCK_KEY_SIZES:
            raise CodecConfigError(
                f"Block key must be 16, 24 or 32 bytes long, got {len(block_key)}"
            )
        self._hash_key = hash_key
        self._aead = AESGCM(block_key) if block_key is not None else None
        self.max_age = max_age if max_age is not None and max_age > 0 else None
        self.max_length = max_length
        logger.debug(
            "Secure cookie codec (encrypted=%s, max_age=%s, max_length=%d)",
            self.encrypted,
            self.max_age,
            self.max_length,
        )

    @property
    def encrypted(self) -> bool:
        return self._aead is not None

    def encode(self, name: str, payload: bytes) -> str:
        if not isinstance(payload, (bytes, bytearray)):
            raise EncodeError(f"Payload must be bytes, got {type(payload).__name__}")
        data = bytes(payload)
        if self._aead is not None:
            data = self._encrypt(name, data)
        value = self._signer(name).sign(base64_encode(data)).decode("ascii")
        if len(value) > self.max_length:
            raise EncodeError(
                f"Encoded value is too long ({len(value)} > {self.max_length})"
            )
        return value

    def decode(self, name: str, value: str, length: int) -> bytes:
        if len(value) > self.max_length:
            raise DecodeError("Value is too long")
        signer = self._signer(name)
        signed = value.encode("utf-8", errors="replace")

        # itsdangerous compares decoded signatures, which ignores the unused
        # trailing bits of the last base64 character
        message, sep, signature = signed.rpartition(b".")
        if not sep or not secrets.compare_digest(
            signer.get_signature(message), signature
        ):
            raise DecodeError("Signature does not match")

        try:
            data = base64_decode(signer.unsign(signed, max_age=self.max_age))
        except SignatureExpired as ex:
            raise DecodeError("Timestamp expired") from ex
        except BadData as ex:
            raise DecodeError("Malformed value") from ex

        if self._aead is not None:
            data = self._decrypt(name, data)
        if len(data) != length:
            raise DecodeError(f"Expected {length} bytes, got {len(data)}")
        return data

    def _signer(self, name: str) -> TimestampSigner:
        return TimestampSigner(
            self._hash_key, salt=name, digest_method=hashlib.sha256
        )

    def _encrypt(self, name: str, data: bytes) -> bytes:
        nonce = secrets.token_bytes(NONCE_SIZE)
        return nonce + self._aead.encrypt(nonce, data, name.encode())

    def _decrypt(self, name: str, data: bytes) -> bytes:
        if len(data) < NONCE_SIZE + TAG_SIZE:
            raise DecodeError("Encrypted value is too short")
        nonce, sealed = data[:NONCE_SIZE], data[NONCE_SIZE:]
        try:
            return self._aead.decrypt(nonce, sealed, name.encode())
        except InvalidTag as ex:
            raise DecodeError("Decryption failed") from ex
