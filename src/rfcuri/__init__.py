__version__ = "0.1"

from .compat import ALL, URL_FRAGMENT, URL_HOST, URL_PASS, URL_PATH, URL_PORT, URL_QUERY, URL_SCHEME, URL_USER, parsed_url, split_userinfo
from .errors import InvalidURIError
from .normalize import merge_paths, normalize_percent, remove_dot_segments
from .paths import native_path_to_uri
from .ports import PortRegistry, StaticPorts, SystemPorts, no_ports, system_ports
from .split import split_uri
from .uri import URI
