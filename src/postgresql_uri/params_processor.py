"""Translate PostgreSQL connection URIs into connection parameters."""

import itertools
import logging
import re
import typing as t
import urllib.parse
from collections.abc import Iterable

from postgresql_uri.errors import (
    InvalidPortError,
    InvalidTimeoutError,
    PostgresUriError,
)
from postgresql_uri.uri_parser import (
    decode_component,
    decompose,
    validate_scheme,
)
from postgresql_uri.uri_types import DecomposedUri, ParamKey, QueryKey


logger = logging.getLogger(__name__)

ParamValue = str | int | bool
ParamEntry = tuple[str, ParamValue]

SSLMODE_DISABLE = "disable"

# positional fields in the order they are emitted
URI_FIELDS = ("host", "path", "port", "userinfo")

_INTEGER = re.compile(r"[+-]?[0-9]+")
_USERINFO_KEYS = (ParamKey.USERNAME, ParamKey.PASSWORD)


def _to_int(value: str) -> int | None:
    if _INTEGER.fullmatch(value) is None:
        return None
    return int(value)


def map_uri_param(field: str, value: t.Any) -> list[ParamEntry]:
    """Map one positional URI field to zero, one or two parameter entries."""
    if value is None:
        return []
    if field == "host":
        # positional host never denotes a socket directory
        return [(ParamKey.HOSTNAME.value, value)] if value else []
    if field == "port":
        return [(ParamKey.PORT.value, value)]
    if field == "path":
        return [(ParamKey.DATABASE.value, value.removeprefix("/"))]
    if field == "userinfo":
        parts = [decode_component(part) for part in value.split(":", 1)]
        return [
            (key.value, part)
            for key, part in zip(_USERINFO_KEYS, parts, strict=False)
        ]
    err = f"Unknown positional URI field: {field}"
    raise ValueError(err)


def map_query_param(key: str, value: str) -> list[ParamEntry]:
    """
    Map one decoded query pair to parameter entries.

    Empty values are dropped whatever the key. Keys outside the
    known set are passed through with their value untouched.
    """
    if value == "":
        return []
    if key == QueryKey.PORT:
        port = _to_int(value)
        if port is None:
            raise InvalidPortError(value)
        return [(ParamKey.PORT.value, port)]
    if key == QueryKey.HOST:
        if value.startswith("/"):
            return [(ParamKey.SOCKET_DIR.value, value)]
        return [(ParamKey.HOSTNAME.value, value)]
    if key == QueryKey.USER:
        return [(ParamKey.USERNAME.value, value)]
    if key == QueryKey.DBNAME:
        return [(ParamKey.DATABASE.value, value)]
    if key == QueryKey.SSLMODE:
        return [(ParamKey.SSL.value, value != SSLMODE_DISABLE)]
    if key == QueryKey.CONNECT_TIMEOUT:
        seconds = _to_int(value)
        if seconds is None:
            raise InvalidTimeoutError(value)
        return [(ParamKey.CONNECT_TIMEOUT.value, seconds * 1000)]
    return [(key, value)]


def uri_entries(uri: DecomposedUri) -> list[ParamEntry]:
    return list(
        itertools.chain.from_iterable(
            map_uri_param(field, getattr(uri, field)) for field in URI_FIELDS
        )
    )


def query_entries(query: str | None) -> list[ParamEntry]:
    if not query:
        return []
    pairs = urllib.parse.parse_qsl(query, keep_blank_values=True)
    return list(
        itertools.chain.from_iterable(
            map_query_param(key, value) for key, value in pairs
        )
    )


def merge_params(entries: Iterable[ParamEntry]) -> dict[str, ParamValue]:
    """Fold entries into one mapping, later entries overwriting earlier ones."""
    params: dict[str, ParamValue] = {}
    for key, value in entries:
        params[key] = value
    return params


def parse(uri: str) -> dict[str, ParamValue]:
    """
    Parse a PostgreSQL connection URI into connection parameters.

    Args:
        uri: Connection URI of the form
             ``postgresql://[user[:password]@][host][:port][/dbname][?key=value&...]``

    Returns:
        Dictionary with any of ``hostname``, ``port``, ``database``,
        ``username``, ``password``, ``socket_dir``, ``ssl`` and
        ``connect_timeout`` (milliseconds), plus unrecognized query keys
        passed through verbatim. Query parameters take precedence over
        the positional parts of the URI.

    Raises:
        InvalidUriError: the string is not a URI.
        UnsupportedSchemeError: the scheme is not ``postgresql``.
        InvalidPortError: a port is not an integer.
        InvalidTimeoutError: ``connect_timeout`` is not an integer.

    Example:
        >>> params = parse("postgresql://someuser:pw@some.ser.ver:2345/somedb")
        >>> params["hostname"], params["port"], params["database"]
        ('some.ser.ver', 2345, 'somedb')
        >>> parse("postgresql:///some_db?host=/run/postgresql")
        {'database': 'some_db', 'socket_dir': '/run/postgresql'}
    """
    try:
        decomposed = decompose(uri)
        validate_scheme(decomposed.scheme)
        params = merge_params(
            itertools.chain(uri_entries(decomposed), query_entries(decomposed.query))
        )
    except PostgresUriError as e:
        logger.debug("Rejected connection URI: %s", e)
        raise
    logger.debug("Parsed connection URI into parameters: %s", ", ".join(params))
    return params
