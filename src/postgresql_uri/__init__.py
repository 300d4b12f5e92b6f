from postgresql_uri.config import PostgresDatabase
from postgresql_uri.errors import (
    InvalidPortError,
    InvalidTimeoutError,
    InvalidUriError,
    PostgresUriError,
    UnsupportedSchemeError,
)
from postgresql_uri.params_processor import parse
from postgresql_uri.uri_types import ParamKey


__all__ = [
    "parse",
    "ParamKey",
    "PostgresDatabase",
    "PostgresUriError",
    "InvalidUriError",
    "UnsupportedSchemeError",
    "InvalidPortError",
    "InvalidTimeoutError",
]
