"""Errors raised while parsing PostgreSQL connection URIs."""


class PostgresUriError(ValueError):
    """Base class for every connection URI parse failure."""


class InvalidUriError(PostgresUriError):
    """Raised when the input cannot be decomposed as a URI."""


class UnsupportedSchemeError(PostgresUriError):
    def __init__(self, scheme: str):
        self.scheme = scheme
        super().__init__(f"Unsupported URI scheme: {scheme!r}, expected 'postgresql'")


class InvalidPortError(PostgresUriError):
    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Port is not a valid integer: {value!r}")


class InvalidTimeoutError(PostgresUriError):
    def __init__(self, value: str):
        self.value = value
        super().__init__(f"connect_timeout is not a valid integer: {value!r}")
