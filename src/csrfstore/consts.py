from typing_extensions import TypedDict

TOKEN_LENGTH = 32
DEFAULT_COOKIE_NAME = "_csrf"
DEFAULT_MAX_AGE = 31536000  # one year in seconds

DEFAULT_CODEC_MAX_AGE = 86400 * 30
DEFAULT_CODEC_MAX_LENGTH = 4096

EXPIRED = "Thu, 01 Jan 1970 00:00:01 GMT"


CookieParams = TypedDict(
    "CookieParams",
    {
        "domain": str | None,
        "path": str,
        "secure": bool,
        "httponly": bool,
        "samesite": str,
    },
    total=False,
)

DEFAULT_COOKIE_PARAMS: CookieParams = {
    "domain": None,
    "path": "/",
    "secure": False,
    "httponly": True,
    "samesite": "Lax",
}
