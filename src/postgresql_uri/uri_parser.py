"""Split connection URIs into their generic RFC 3986 components."""

import re
import urllib.parse

from postgresql_uri.errors import (
    InvalidPortError,
    InvalidUriError,
    UnsupportedSchemeError,
)
from postgresql_uri.uri_types import DecomposedUri


POSTGRESQL_SCHEME = "postgresql"

_SCHEME_AND_AUTHORITY = re.compile(r"[A-Za-z][A-Za-z0-9+.-]*://")
_PORT = re.compile(r"[0-9]+")


def decompose(uri: str) -> DecomposedUri:
    """
    Decompose ``scheme://[userinfo@]host[:port][/path][?query]``.

    The fragment, if any, is dropped. A URI without a scheme or without the
    ``//`` authority marker is rejected.
    """
    if not isinstance(uri, str) or not uri:
        err = "Connection URI must be a non-empty string"
        raise InvalidUriError(err)
    if _SCHEME_AND_AUTHORITY.match(uri) is None:
        err = "Connection URI must start with 'scheme://'"
        raise InvalidUriError(err)
    try:
        parts = urllib.parse.urlsplit(uri)
    except ValueError as e:
        # urlsplit messages may quote the netloc, credentials included
        err = "Malformed connection URI"
        raise InvalidUriError(err) from e

    userinfo, at, hostport = parts.netloc.rpartition("@")
    host, port = _split_host_port(hostport)
    return DecomposedUri(
        scheme=parts.scheme.lower(),
        host=decode_component(host),
        port=port,
        path=decode_component(parts.path) if parts.path else None,
        userinfo=userinfo if at else None,
        query=parts.query or None,
    )


def decode_component(value: str) -> str:
    """Percent-decode a positional URI component, rejecting invalid UTF-8."""
    try:
        return urllib.parse.unquote(value, errors="strict")
    except UnicodeDecodeError as e:
        err = "Connection URI contains an invalid percent-encoded sequence"
        raise InvalidUriError(err) from e


def _split_host_port(hostport: str) -> tuple[str, int | None]:
    if "," in hostport:
        err = "Multiple hosts are not supported"
        raise InvalidUriError(err)
    if hostport.startswith("["):
        host, _, rest = hostport[1:].partition("]")
        if rest and not rest.startswith(":"):
            err = "Unexpected characters after IPv6 address literal"
            raise InvalidUriError(err)
        raw_port = rest[1:]
    else:
        host, _, raw_port = hostport.partition(":")

    # "host:" carries no port at all
    if not raw_port:
        return host, None
    if _PORT.fullmatch(raw_port) is None:
        raise InvalidPortError(raw_port)
    return host, int(raw_port)


def validate_scheme(scheme: str) -> None:
    if scheme.lower() != POSTGRESQL_SCHEME:
        raise UnsupportedSchemeError(scheme)
