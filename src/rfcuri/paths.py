"""rfcuri.paths
Conversion of absolute native file system paths into "file" URIs.

Local paths map to host "localhost". On Windows, UNC paths ("\\\\server\\share\\dir")
and long UNC paths ("\\\\?\\UNC\\server\\share\\dir") map to the server name,
and long local paths ("\\\\?\\C:\\dir") to "localhost".
"""

import os

from typing import TYPE_CHECKING, Literal
from urllib.parse import quote

from .errors import InvalidURIError

if TYPE_CHECKING:
    from .uri import URI

Flavor = Literal["posix", "windows"]

# Characters that need no escaping in a path segment or a reg-name.
_SEGMENT_SAFE: str = "!$&'()*+,;=:@"
_HOST_SAFE: str = "!$&'()*+,;="


def _split_windows(path: str) -> tuple[str, list[str]]:
    if not path.startswith("\\\\"):
        return "localhost", path.split("\\")

    parts: list[str] = path.lstrip("\\").split("\\")
    if parts[0] == "?":
        del parts[0]
        if len(parts) > 0 and ":" in parts[0]:
            # \\?\C:\dir
            return "localhost", parts
        if len(parts) == 0 or parts[0] != "UNC":
            raise InvalidURIError("Invalid UNC path", "path", path)
        del parts[0]

    if len(parts) == 0 or len(parts[0]) == 0:
        raise InvalidURIError("Invalid UNC path", "path", path)
    return parts[0], parts[1:]


def native_path_to_uri(
    path: str, strict: bool = True, flavor: Flavor | None = None, *, cls: "type[URI] | None" = None
) -> "URI":
    """Build a "file" URI from the absolute native path `path`.

    In strict mode, "/" is only a separator on POSIX; on Windows it is a literal
    character and ends up encoded as "%2F". Otherwise "/" is also a separator.
    `flavor` defaults to the running platform.
    """
    if cls is None:
        from .uri import URI

        cls = URI

    if flavor is None:
        flavor = "windows" if os.name == "nt" else "posix"

    segments: list[str]
    if flavor == "windows":
        if not strict:
            path = path.replace("/", "\\")
        host, segments = _split_windows(path)
    else:
        host, segments = "localhost", path.split("/")

    # Drop the separators leading the path.
    while len(segments) > 0 and len(segments[0]) == 0:
        del segments[0]

    encoded: str = "/".join(quote(segment, safe=_SEGMENT_SAFE) for segment in segments)
    return cls(f"file://{quote(host, safe=_HOST_SAFE)}/{encoded}")
