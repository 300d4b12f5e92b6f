from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator

from postgresql_uri.params_processor import ParamValue, parse


class PostgresDatabase(BaseModel):
    model_config = ConfigDict(
        protected_namespaces=(),
        hide_input_in_errors=True,
        title="Postgres Database",
        json_schema_extra={
            "description": "Configure the Postgres connection with a single "
            "postgresql:// connection URI.",
        },
    )
    uri: SecretStr = Field(
        ...,
        title="Connection URI",
        description="postgresql://[user[:password]@][host][:port][/dbname]"
        "[?key=value&...], as accepted by psql.",
    )

    @field_validator("uri")
    @classmethod
    def _validate_uri(cls, value: SecretStr) -> SecretStr:
        # parse errors are ValueErrors, reported as validation errors
        parse(value.get_secret_value())
        return value

    @property
    def connection_params(self) -> dict[str, ParamValue]:
        return parse(self.uri.get_secret_value())
