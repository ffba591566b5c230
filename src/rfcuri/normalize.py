"""rfcuri.normalize
Syntax-based normalization from RFC 3986 section 6.2.2,
and the path routines used by reference resolution (section 5.2).
"""

import re
import string

_PCT_ENCODED_PAT: re.Pattern[str] = re.compile(r"%([0-9A-Fa-f]{2})")

# unreserved = ALPHA / DIGIT / "-" / "." / "_" / "~"
_UNRESERVED_CHARS: frozenset[str] = frozenset(string.ascii_letters + string.digits + "-._~")


def _normalize_triplet(m: re.Match[str]) -> str:
    char: str = chr(int(m[1], 16))
    if char in _UNRESERVED_CHARS:
        return char
    return f"%{m[1].upper()}"


def normalize_percent(text: str) -> str:
    """Returns text with percent-encodings in canonical form.
    Encoded unreserved characters are decoded and the rest use uppercase hex digits,
    e.g. normalize_percent("%7euser%3a") == "~user%3A"
    """
    return _PCT_ENCODED_PAT.sub(_normalize_triplet, text)


def remove_dot_segments(path: str) -> str:
    """Implementation of the "remove_dot_segments" routine from RFC 3986 section 5.2.4"""
    output: str = ""
    while len(path) > 0:
        if path.startswith("../"):
            path = path[len("../") :]
        elif path.startswith("./"):
            path = path[len("./") :]
        elif path.startswith("/./"):
            path = path[len("/.") :]
        elif path == "/.":
            path = "/"
        elif path.startswith("/../"):
            path = path[len("/..") :]
            output, _, _ = output.rpartition("/")
        elif path == "/..":
            path = "/"
            output, _, _ = output.rpartition("/")
        elif path in (".", ".."):
            path = ""
        else:
            # Move the first segment, with its leading "/" if any, to the output.
            end: int = path.find("/", 1)
            if end == -1:
                end = len(path)
            output += path[:end]
            path = path[end:]
    return output


def merge_paths(base_path: str, base_has_authority: bool, path: str) -> str:
    """Implementation of the "merge" routine defined in RFC 3986 section 5.2.3"""
    if base_has_authority and len(base_path) == 0:
        return f"/{path}"
    dirname, slash, _ = base_path.rpartition("/")
    return dirname + slash + path
