"""Explorer configuration.

Values come from ``SWAGGER_EXPLORER_*`` environment variables and are
passed explicitly to the loader, builder, executor and coordinator.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

SCHEMA_FILENAME = "swagger.json"


class ExplorerConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="SWAGGER_EXPLORER_", case_sensitive=False, extra="ignore")

    base_path: str = Field(default="")  # API root, e.g. /people_api
    github_url: str = Field(default="")
    log_level: str = Field(default="INFO")
    verify_tls: bool = Field(default=True)

    @property
    def schema_url(self) -> str:
        return f"{self.base_path.rstrip('/')}/{SCHEMA_FILENAME}"
