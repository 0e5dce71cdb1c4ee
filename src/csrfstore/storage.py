import logging
import time
import typing as t
from email.utils import formatdate

from .abc import ICodec, ITokenStore
from .codec import SecureCookieCodec
from .config import StoreConfig
from .consts import EXPIRED, TOKEN_LENGTH
from .errors import CodecError, EncodingError, InvalidTokenError, NotFoundError

logger = logging.getLogger(__name__)


class CookieTokenStore(ITokenStore):
    """
    Keep the CSRF token in a signed cookie on the client side.

    Nothing is stored on the server: the token travels back and forth in
    the cookie named by the configuration.
    """

    def __init__(self, config: StoreConfig, codec: ICodec | None = None):
        self.config = config
        if codec is None:
            codec = SecureCookieCodec(
                config.hash_key, config.block_key, max_age=config.max_age
            )
        self.codec = codec
        logger.debug(
            "Cookie token store: name=%s max_age=%d",
            config.cookie_name,
            config.max_age,
        )

    @classmethod
    def from_properties(cls, props: t.Mapping[str, t.Any]) -> "CookieTokenStore":
        return cls(StoreConfig.from_properties(props))

    def get(self, request) -> bytes:
        name = self.config.cookie_name
        try:
            value = request.cookies[name]
        except KeyError:
            raise NotFoundError() from None
        try:
            return self.codec.decode(name, value, TOKEN_LENGTH)
        except CodecError:
            raise InvalidTokenError() from None

    def save(self, token: bytes, response) -> None:
        name = self.config.cookie_name
        try:
            value = self.codec.encode(name, token)
        except CodecError as ex:
            raise EncodingError(str(ex)) from ex

        max_age = self.config.max_age
        if max_age > 0:
            expires = formatdate(time.time() + max_age, usegmt=True)
        else:
            expires = EXPIRED

        response.set_cookie(
            name,
            value,
            max_age=self.cookie_max_age(max_age),
            expires=expires,
            **self.config.cookie_params,
        )
        logger.debug("Set cookie %s (expires=%s)", name, expires)

    @staticmethod
    def cookie_max_age(max_age: int) -> int | None:
        # zero means a session cookie without Max-Age
        if max_age > 0:
            return max_age
        if max_age < 0:
            return 0
        return None
