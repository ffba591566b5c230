"""rfcuri.compat
A view of a URI in the layout of a conventional component-indexed URL splitter
(PHP's parse_url), including its handling of odd credentials:

- "a:b:c" is split on the first ":" into user "a" and pass "b:c".
- ":b" gives an empty user "" and pass "b"; "a:" gives user "a" and an empty pass "".
- "a" gives user "a" and no pass at all.

Empty and absent are different here: an empty string is a present component.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .uri import URI

# Component selectors. The values are the positions used by parse_url().
ALL: int = -1
URL_SCHEME: int = 0
URL_HOST: int = 1
URL_PORT: int = 2
URL_USER: int = 3
URL_PASS: int = 4
URL_PATH: int = 5
URL_QUERY: int = 6
URL_FRAGMENT: int = 7

_FIELDS: tuple[str, ...] = ("scheme", "host", "port", "user", "pass", "path", "query", "fragment")


def split_userinfo(userinfo: str | None) -> tuple[str | None, str | None]:
    """Split userinfo into (user, pass) on the first ":"."""
    if userinfo is None:
        return None, None
    user, colon, password = userinfo.partition(":")
    if len(colon) == 0:
        return user, None
    return user, password


def parsed_url(uri: "URI", component: int = ALL) -> dict[str, str | int] | str | int | None:
    """Returns every present component as a dict, or the single component selected by `component`.

    Values are raw (not normalized), except the port which is an int.
    Returns None when the URI has no scheme or no host, as such URLs are rejected
    by the splitter being emulated, and for absent components and unknown selectors.
    """
    result: dict[str, str | int] = {}

    if uri.raw_scheme is not None:
        result["scheme"] = uri.raw_scheme
    if uri.raw_host is not None:
        result["host"] = uri.raw_host
    if uri.raw_port is not None and uri.raw_port.isascii() and uri.raw_port.isdigit():
        result["port"] = int(uri.raw_port, base=10)

    user, password = split_userinfo(uri.raw_userinfo)
    if user is not None:
        result["user"] = user
    if password is not None:
        result["pass"] = password

    result["path"] = uri.raw_path
    if uri.raw_query is not None:
        result["query"] = uri.raw_query
    if uri.raw_fragment is not None:
        result["fragment"] = uri.raw_fragment

    if not result.get("scheme") or not result.get("host"):
        return None

    if component == ALL:
        return result
    if component not in range(len(_FIELDS)):
        return None
    return result.get(_FIELDS[component])
