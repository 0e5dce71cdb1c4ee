import dataclasses as dc
import time
import types
import typing as t
from datetime import datetime, timezone

from .consts import (
    DEFAULT_COOKIE_NAME,
    DEFAULT_COOKIE_PARAMS,
    DEFAULT_MAX_AGE,
    CookieParams,
)
from .errors import StoreConfigError


def _as_key(value: str | bytes | None) -> bytes | None:
    if value is None or isinstance(value, bytes):
        return value
    return value.encode("utf-8")


@dc.dataclass(frozen=True, slots=True)
class StoreConfig:
    """
    Cookie token store settings.

    Set once when the application starts and shared read-only by all
    requests afterwards.
    """

    hash_key: bytes
    block_key: bytes | None = None
    cookie_name: str = DEFAULT_COOKIE_NAME
    max_age: int = DEFAULT_MAX_AGE
    cookie_params: t.Mapping[str, t.Any] = dc.field(
        default_factory=lambda: DEFAULT_COOKIE_PARAMS.copy()
    )

    def __post_init__(self):
        if not self.cookie_name:
            raise StoreConfigError("Cookie name is required")
        if not self.hash_key:
            raise StoreConfigError("Hash key is required")
        if isinstance(self.max_age, bool) or not isinstance(self.max_age, int):
            raise StoreConfigError(f"Incorrect max age: {self.max_age!r}")
        if self.max_age > 0:
            # expiry date must stay representable as an HTTP date
            try:
                datetime.fromtimestamp(time.time() + self.max_age, timezone.utc)
            except (OverflowError, OSError, ValueError):
                raise StoreConfigError(
                    f"Max age too large: {self.max_age!r}"
                ) from None

        unknown = set(self.cookie_params) - set(DEFAULT_COOKIE_PARAMS)
        if unknown:
            raise StoreConfigError(
                f"Unknown cookie params: {', '.join(sorted(unknown))}"
            )

        params = DEFAULT_COOKIE_PARAMS.copy()
        params.update(t.cast(CookieParams, self.cookie_params))
        object.__setattr__(self, "cookie_params", types.MappingProxyType(params))

    @classmethod
    def from_properties(cls, props: t.Mapping[str, t.Any]) -> "StoreConfig":
        try:
            hash_key = _as_key(props["hash_key"])
        except KeyError:
            raise StoreConfigError("Missing property: hash_key") from None

        raw_max_age = props.get("max_age", DEFAULT_MAX_AGE)
        if isinstance(raw_max_age, bool) or (
            isinstance(raw_max_age, float) and not raw_max_age.is_integer()
        ):
            raise StoreConfigError(f"Incorrect max age: {raw_max_age!r}")
        try:
            max_age = int(raw_max_age)
        except (TypeError, ValueError) as ex:
            raise StoreConfigError(
                f"Incorrect max age: {props.get('max_age')!r}"
            ) from ex

        cookie_params = {
            key: props[key] for key in DEFAULT_COOKIE_PARAMS if key in props
        }
        return cls(
            hash_key=t.cast(bytes, hash_key),
            block_key=_as_key(props.get("block_key")),
            cookie_name=props.get("name", DEFAULT_COOKIE_NAME),
            max_age=max_age,
            cookie_params=cookie_params,
        )
