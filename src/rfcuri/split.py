"""rfcuri.split
Decompose a URI or relative reference into its raw components.
Nothing here is checked against the grammar; the URI setters do that.
"""

from .errors import InvalidURIError


def _split_port(hostport: str) -> tuple[str, str | None]:
    """Split "host:port", leaving IP-literals such as "[::1]" intact."""
    cut: int = max(hostport.rfind(":"), hostport.rfind("]"))
    # The port is the trailing run after the last ":", provided it is non-empty
    # and that ":" is not part of a bracketed literal.
    if cut == -1 or cut == len(hostport) - 1 or hostport[cut] != ":":
        return hostport, None
    return hostport[:cut], hostport[cut + 1 :]


def split_uri(text: str, relative: bool = False) -> dict[str, str]:
    """Split `text` into scheme, userinfo, host, port, path, query, and fragment.

    When `relative` is false, `text` must start with a scheme followed by ":".
    Components that are absent from `text` are absent from the result, except
    for the path, which is always present.
    """
    result: dict[str, str] = {}
    rest: str = text

    if not relative:
        scheme, colon, rest = text.partition(":")
        # A URI starting with ":" has no scheme either.
        if len(colon) == 0 or len(scheme) == 0:
            raise InvalidURIError("No scheme found", "scheme", text)
        result["scheme"] = scheme

    rest, hash_mark, fragment = rest.partition("#")
    if len(hash_mark) > 0:
        result["fragment"] = fragment

    rest, question_mark, query = rest.partition("?")
    if len(question_mark) > 0:
        result["query"] = query

    # path-absolute, path-rootless, path-noscheme, and path-empty
    if not rest.startswith("//"):
        result["path"] = rest
        return result

    # "//" authority path-abempty
    authority, slash, path = rest[len("//") :].partition("/")
    result["path"] = slash + path

    userinfo, at, hostport = authority.rpartition("@")
    if len(at) > 0:
        result["userinfo"] = userinfo

    host, port = _split_port(hostport)
    if port is not None:
        result["port"] = port
    result["host"] = host
    return result
