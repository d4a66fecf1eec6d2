"""Configuration management using Pydantic Settings."""

import logging
from functools import lru_cache
from pathlib import Path
from typing import List, Literal

import yaml
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class MongoConfig(BaseModel):
    """MongoDB connection parameters."""

    url: str = "mongodb://localhost:27017"
    database: str = "blog-app"
    collection: str = "blogposts"
    test_url: str = ""  # Integration tests run only when this is set
    test_database: str = "test-blog-app"
    server_selection_timeout_ms: int = 5000


class ServerConfig(BaseModel):
    """HTTP server parameters."""

    host: str = "0.0.0.0"
    port: int = 8080
    allowed_origins: List[str] = Field(default_factory=lambda: ["http://localhost:3000"])

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def parse_origins(cls, v):
        """Parse comma-separated origins into a list."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v


class Settings(BaseSettings):
    """Main configuration class."""

    environment: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    # Which PostStore backs the API
    store: Literal["mongo", "memory"] = "mongo"

    # Optional YAML overlay for the nested sections
    config_file: Path = Path("config.yaml")

    # Observability
    logfire_token: str = ""

    mongo: MongoConfig = Field(default_factory=MongoConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment.lower() == "development"

    def load_yaml_config(self) -> None:
        """Load and merge YAML configuration."""
        config_path = self.config_file

        if not config_path.exists():
            logger.debug(f"Config file not found: {config_path}. Using defaults.")
            return

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                yaml_config = yaml.safe_load(f)

            if not yaml_config:
                logger.warning(f"Empty config file: {config_path}")
                return

            for section_name in ["mongo", "server"]:
                if section_name in yaml_config:
                    section = getattr(self, section_name)
                    yaml_section = yaml_config[section_name]

                    section_dict = section.model_dump()
                    section_dict.update(yaml_section)

                    new_section = section.__class__(**section_dict)
                    setattr(self, section_name, new_section)

            logger.info(f"Loaded configuration from {config_path}")

        except yaml.YAMLError as e:
            logger.error(f"Failed to parse YAML config: {e}")
            raise


@lru_cache()
def get_settings() -> Settings:
    """Get singleton Settings instance."""
    settings = Settings()
    settings.load_yaml_config()
    return settings
