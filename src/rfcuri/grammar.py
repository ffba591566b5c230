"""rfcuri.grammar
Recognizers for the RFC 3986 component productions.
RFC 6874 zone identifiers are accepted inside IP-literals.
"""

import re

# Each of these ABNF rules is from RFC 3986, 6874, or 5234.
# ABNF string literals are case-insensitive, hence "[vV]" for IPvFuture.

# ALPHA = %x41-5A / %x61-7A
_ALPHA: str = r"[A-Za-z]"

# DIGIT = %x30-39
_DIGIT: str = r"[0-9]"

# HEXDIG = DIGIT / "A" / "B" / "C" / "D" / "E" / "F"
_HEXDIG: str = r"[0-9A-Fa-f]"

# unreserved = ALPHA / DIGIT / "-" / "." / "_" / "~"
_UNRESERVED: str = r"[A-Za-z0-9\-._~]"

# pct-encoded = "%" HEXDIG HEXDIG
_PCT_ENCODED: str = rf"%{_HEXDIG}{_HEXDIG}"

# sub-delims = "!" / "$" / "&" / "'" / "(" / ")" / "*" / "+" / "," / ";" / "="
_SUB_DELIMS: str = r"[!$&'()*+,;=]"

# pchar = unreserved / pct-encoded / sub-delims / ":" / "@"
_PCHAR: str = rf"(?:{_UNRESERVED}|{_PCT_ENCODED}|{_SUB_DELIMS}|[:@])"

# query = *( pchar / "/" / "?" )
_QUERY: str = rf"(?:{_PCHAR}|[/?])*"

# fragment = *( pchar / "/" / "?" )
_FRAGMENT: str = rf"(?:{_PCHAR}|[/?])*"

# scheme = ALPHA *( ALPHA / DIGIT / "+" / "-" / "." )
# The whole production is optional here so that an unset scheme can be
# written back as "".
_SCHEME: str = rf"(?:{_ALPHA}(?:{_ALPHA}|{_DIGIT}|[+\-.])*)?"

# segment = *pchar
_SEGMENT: str = rf"{_PCHAR}*"

# segment-nz = 1*pchar
_SEGMENT_NZ: str = rf"{_PCHAR}+"

# segment-nz-nc = 1*( unreserved / pct-encoded / sub-delims / "@" )
_SEGMENT_NZ_NC: str = rf"(?:{_UNRESERVED}|{_PCT_ENCODED}|{_SUB_DELIMS}|@)+"

# path-abempty = *( "/" segment )
_PATH_ABEMPTY: str = rf"(?:/{_SEGMENT})*"

# path-absolute = "/" [ segment-nz *( "/" segment ) ]
_PATH_ABSOLUTE: str = rf"/(?:{_SEGMENT_NZ}(?:/{_SEGMENT})*)?"

# path-noscheme = segment-nz-nc *( "/" segment )
_PATH_NOSCHEME: str = rf"{_SEGMENT_NZ_NC}(?:/{_SEGMENT})*"

# path-rootless = segment-nz *( "/" segment )
_PATH_ROOTLESS: str = rf"{_SEGMENT_NZ}(?:/{_SEGMENT})*"

# userinfo = *( unreserved / pct-encoded / sub-delims / ":" )
_USERINFO: str = rf"(?:{_UNRESERVED}|{_PCT_ENCODED}|{_SUB_DELIMS}|:)*"

# dec-octet = DIGIT / %x31-39 DIGIT / "1" 2DIGIT / "2" %x30-34 DIGIT / "25" %x30-35
_DEC_OCTET: str = rf"(?:25[0-5]|2[0-4]{_DIGIT}|1{_DIGIT}{{2}}|[1-9]{_DIGIT}|{_DIGIT})"

# IPv4address = dec-octet "." dec-octet "." dec-octet "." dec-octet
_IPV4ADDRESS: str = rf"{_DEC_OCTET}\.{_DEC_OCTET}\.{_DEC_OCTET}\.{_DEC_OCTET}"

# h16 = 1*4HEXDIG
_H16: str = rf"(?:{_HEXDIG}{{1,4}})"

# ls32 = ( h16 ":" h16 ) / IPv4address
_LS32: str = rf"(?:{_H16}:{_H16}|{_IPV4ADDRESS})"

# IPv6address =                                      6( h16 ":" ) ls32
#                       /                       "::" 5( h16 ":" ) ls32
#                       / [               h16 ] "::" 4( h16 ":" ) ls32
#                       / [ *1( h16 ":" ) h16 ] "::" 3( h16 ":" ) ls32
#                       / [ *2( h16 ":" ) h16 ] "::" 2( h16 ":" ) ls32
#                       / [ *3( h16 ":" ) h16 ] "::"    h16 ":"   ls32
#                       / [ *4( h16 ":" ) h16 ] "::"              ls32
#                       / [ *5( h16 ":" ) h16 ] "::"              h16
#                       / [ *6( h16 ":" ) h16 ] "::"
_IPV6ADDRESS: str = (
    "(?:"
    + r"|".join(
        (
                                           rf"(?:{_H16}:){{6}}{_LS32}",
                                         rf"::(?:{_H16}:){{5}}{_LS32}",
                              rf"(?:{_H16})?::(?:{_H16}:){{4}}{_LS32}",
            rf"(?:(?:{_H16}:){{0,1}}{_H16})?::(?:{_H16}:){{3}}{_LS32}",
            rf"(?:(?:{_H16}:){{0,2}}{_H16})?::(?:{_H16}:){{2}}{_LS32}",
            rf"(?:(?:{_H16}:){{0,3}}{_H16})?::{_H16}:{_LS32}",
            rf"(?:(?:{_H16}:){{0,4}}{_H16})?::{_LS32}",
            rf"(?:(?:{_H16}:){{0,5}}{_H16})?::{_H16}",
            rf"(?:(?:{_H16}:){{0,6}}{_H16})?::",
        )
    )
    + ")"
)

# ZoneID = 1*( unreserved / pct-encoded )
_ZONEID: str = rf"(?:{_UNRESERVED}|{_PCT_ENCODED})+"

# IPv6addrz = IPv6address "%25" ZoneID
_IPV6ADDRZ: str = rf"{_IPV6ADDRESS}%25{_ZONEID}"

# IPvFuture = "v" 1*HEXDIG "." 1*( unreserved / sub-delims / ":" )
_IPVFUTURE: str = rf"[vV]{_HEXDIG}+\.(?:{_UNRESERVED}|{_SUB_DELIMS}|:)+"

# IP-literal = "[" ( IPv6addrz / IPv6address / IPvFuture ) "]"
_IP_LITERAL: str = rf"\[(?:{_IPV6ADDRZ}|{_IPV6ADDRESS}|{_IPVFUTURE})\]"

# reg-name = *( unreserved / pct-encoded / sub-delims )
_REG_NAME: str = rf"(?:{_UNRESERVED}|{_PCT_ENCODED}|{_SUB_DELIMS})*"

# host = IP-literal / IPv4address / reg-name
_HOST: str = rf"(?:{_IP_LITERAL}|{_IPV4ADDRESS}|{_REG_NAME})"

# port = *DIGIT
_PORT: str = rf"{_DIGIT}*"

_SCHEME_PAT: re.Pattern[str] = re.compile(_SCHEME)
_USERINFO_PAT: re.Pattern[str] = re.compile(_USERINFO)
_HOST_PAT: re.Pattern[str] = re.compile(_HOST)
_PORT_PAT: re.Pattern[str] = re.compile(_PORT)
_QUERY_PAT: re.Pattern[str] = re.compile(_QUERY)
_FRAGMENT_PAT: re.Pattern[str] = re.compile(_FRAGMENT)
_PATH_ABEMPTY_PAT: re.Pattern[str] = re.compile(_PATH_ABEMPTY)
_PATH_NO_AUTHORITY_PAT: re.Pattern[str] = re.compile(rf"{_PATH_ABSOLUTE}|{_PATH_ROOTLESS}")
_PATH_RELATIVE_PAT: re.Pattern[str] = re.compile(rf"{_PATH_ABSOLUTE}|{_PATH_NOSCHEME}")


def _matches(pattern: re.Pattern[str], value: object) -> bool:
    return isinstance(value, str) and pattern.fullmatch(value) is not None


def is_scheme(value: object) -> bool:
    return _matches(_SCHEME_PAT, value)


def is_userinfo(value: object) -> bool:
    return _matches(_USERINFO_PAT, value)


def is_host(value: object) -> bool:
    """IP-literal (zoned IPv6, IPv6, IPvFuture), IPv4address, or reg-name."""
    return _matches(_HOST_PAT, value)


def is_port(value: object) -> bool:
    return _matches(_PORT_PAT, value)


def is_query(value: object) -> bool:
    return _matches(_QUERY_PAT, value)


def is_fragment(value: object) -> bool:
    return _matches(_FRAGMENT_PAT, value)


def is_path(value: object, authority: bool, relative: bool) -> bool:
    """Check a path against the production allowed by its context.

    With an authority, only path-abempty is allowed.
    Without one, path-absolute and either path-noscheme (relative references)
    or path-rootless (URIs) are allowed.
    path-empty is allowed in every context.
    """
    if not isinstance(value, str):
        return False
    if len(value) == 0:
        return True
    if authority:
        return _matches(_PATH_ABEMPTY_PAT, value)
    if relative:
        return _matches(_PATH_RELATIVE_PAT, value)
    return _matches(_PATH_NO_AUTHORITY_PAT, value)
