import enum

from pydantic import BaseModel, ConfigDict, Field


class ParamKey(enum.StrEnum):
    HOSTNAME = "hostname"
    PORT = "port"
    DATABASE = "database"
    USERNAME = "username"
    PASSWORD = "password"
    SOCKET_DIR = "socket_dir"
    SSL = "ssl"
    CONNECT_TIMEOUT = "connect_timeout"


class QueryKey(enum.StrEnum):
    PORT = "port"
    HOST = "host"
    USER = "user"
    DBNAME = "dbname"
    SSLMODE = "sslmode"
    CONNECT_TIMEOUT = "connect_timeout"


class DecomposedUri(BaseModel):
    """Generic parts of a connection URI, before any PostgreSQL interpretation.

    ``host`` and ``path`` are percent-decoded. ``userinfo`` is kept encoded so
    that an encoded ``:`` in the user name does not split it.
    """

    model_config = ConfigDict(frozen=True)

    scheme: str
    host: str = ""
    port: int | None = None
    path: str | None = None
    userinfo: str | None = Field(default=None, repr=False)
    query: str | None = Field(default=None, repr=False)
