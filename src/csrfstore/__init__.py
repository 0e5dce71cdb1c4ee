from .abc import ICodec, ITokenStore
from .codec import SecureCookieCodec
from .config import StoreConfig
from .consts import DEFAULT_COOKIE_NAME, DEFAULT_MAX_AGE, TOKEN_LENGTH
from .errors import (
    CodecConfigError,
    CodecError,
    DecodeError,
    EncodeError,
    EncodingError,
    InvalidTokenError,
    NotFoundError,
    StoreConfigError,
    TokenStoreError,
)
from .storage import CookieTokenStore

__all__ = (
    "ICodec",
    "ITokenStore",
    "SecureCookieCodec",
    "StoreConfig",
    "CookieTokenStore",
    "DEFAULT_COOKIE_NAME",
    "DEFAULT_MAX_AGE",
    "TOKEN_LENGTH",
    "TokenStoreError",
    "NotFoundError",
    "InvalidTokenError",
    "EncodingError",
    "CodecError",
    "CodecConfigError",
    "EncodeError",
    "DecodeError",
    "StoreConfigError",
)
