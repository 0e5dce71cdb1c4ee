import abc


class ITokenStore(metaclass=abc.ABCMeta):
    @abc.abstractmethod
    def get(self, request) -> bytes:
        """
        Return the token saved for the client of `request`.

        Raise NotFoundError when nothing was saved and InvalidTokenError
        when the stored value can not be recovered.
        """
        pass  # pragma: no cover

    @abc.abstractmethod
    def save(self, token: bytes, response) -> None:
        """Persist `token` and write the reference to it into `response`."""
        pass  # pragma: no cover


class ICodec(metaclass=abc.ABCMeta):
    @abc.abstractmethod
    def encode(self, name: str, payload: bytes) -> str:
        pass  # pragma: no cover

    @abc.abstractmethod
    def decode(self, name: str, value: str, length: int) -> bytes:
        pass  # pragma: no cover
