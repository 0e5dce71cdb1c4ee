__all__ = (
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


class TokenStoreError(Exception):
    default_reason = ""

    def __init__(self, reason: str | None = None) -> None:
        self.reason = reason if reason is not None else self.default_reason
        super().__init__(self.reason)

    def __repr__(self) -> str:
        class_name = self.__class__.__name__
        return f"{class_name}(reason={self.reason!r})"


class NotFoundError(TokenStoreError):
    default_reason = "CSRF cookie not set"


class InvalidTokenError(TokenStoreError):
    default_reason = "CSRF cookie could not be decoded"


class EncodingError(TokenStoreError):
    default_reason = "CSRF cookie could not be encoded"


class CodecError(Exception):
    pass


class CodecConfigError(CodecError):
    pass


class EncodeError(CodecError):
    pass


class DecodeError(CodecError):
    pass


class StoreConfigError(ValueError):
    pass
