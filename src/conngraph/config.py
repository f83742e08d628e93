from functools import lru_cache
from typing import Any, Literal

from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigError(RuntimeError):
    """Configuration-related error."""
    pass


# ─────────────────────────────────────────────────────────────
# Section configs
# ─────────────────────────────────────────────────────────────


class LoggingSettings(BaseModel):
    level: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = "INFO"
    format: str = "%(asctime)-20s %(name)-32s %(levelname)-8s: %(message)s"


class ReportSettings(BaseModel):
    """
    Text report output.

    In production, override via:
    - env var:     CONNGRAPH_REPORT__OUTPUT
    - dotenv:      .env / .env.local
    """
    output: str = Field(
        "output.txt",
        description="Output file used when the CLI is not given -o.",
    )
    encoding: str = Field(
        "utf-8",
        description="Text encoding of the written report.",
    )

    def validate_output(self) -> None:
        """Ensure the default output path and encoding are usable."""
        import codecs

        if not self.output.strip():
            raise ConfigError("report.output must be a non-empty path")
        try:
            codecs.lookup(self.encoding)
        except LookupError as exc:
            raise ConfigError(f"Unknown report encoding {self.encoding!r}") from exc


# ─────────────────────────────────────────────────────────────
# Top-level settings
# ─────────────────────────────────────────────────────────────


class AppSettings(BaseSettings):
    """
    Canonical application configuration for conngraph.

    Precedence (highest → lowest):

    1. Init kwargs (tests/overrides)
    2. Environment variables
    3. .env and .env.local
    4. Defaults in this class
    """

    model_config = SettingsConfigDict(
        env_prefix="CONNGRAPH_",  # CONNGRAPH_LOGGING__LEVEL, CONNGRAPH_REPORT__OUTPUT, ...
        env_file=(".env", ".env.local"),  # .env.local overrides .env
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    app_name: str = "conngraph"
    debug: bool = False

    logging: LoggingSettings = LoggingSettings()
    report: ReportSettings = ReportSettings()  # type: ignore[call-arg]


@lru_cache(maxsize=1)
def get_settings(**overrides: Any) -> AppSettings:
    """
    Cached accessor for process-wide settings.

    `overrides` are init kwargs → highest precedence (handy in tests).
    """
    try:
        settings = AppSettings(**overrides)
    except ValidationError as exc:
        raise ConfigError(f"Invalid settings: {exc}") from exc
    settings.report.validate_output()
    return settings
