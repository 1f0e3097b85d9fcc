"""Configuration settings for suntimes."""

import os
from pathlib import Path
from typing import Dict, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

OFFLINE_ENV = "_suntimes_offline"
FIXTURE_ENV_PREFIX = "_dummy_data_"
SOURCE_NAMES = ("ipapi", "suntimes")


class ApiSettings(BaseModel):
    """Remote API endpoints and request options."""

    ip_lookup_url: str = Field(default="http://ip-api.com/json", description="IP geolocation endpoint")
    times_url: str = Field(default="https://api.sunrise-sunset.org/json", description="Sunrise-sunset API endpoint")
    user_agent: str = Field(
        default="Opera/9.80 (X11; Linux i686; U; ru) Presto/2.8.131 Version/11.11",
        description="User-Agent header sent with every request"
    )
    timeout: Optional[float] = Field(default=None, gt=0, description="Request timeout in seconds, none by default")


class DefaultsSettings(BaseModel):
    """Fallback values for the report command options."""

    city: str = Field(default="Unknown", description="City label")
    timezone: str = Field(default="UTC", description="Timezone name")
    coordinates: str = Field(default="24.85468,67.02071", description="Coordinates in lat,lon format")


class OfflineSettings(BaseModel):
    """Offline mode reads local fixture files instead of calling the APIs."""

    enabled: bool = Field(default=False, description="Read fixtures instead of the network")
    fixtures: Dict[str, Path] = Field(default_factory=dict, description="Fixture file per source name")

    @field_validator('fixtures')
    @classmethod
    def validate_source_names(cls, v):
        """Only known data sources can have fixtures."""
        unknown = set(v) - set(SOURCE_NAMES)
        if unknown:
            raise ValueError(f"Unknown fixture sources: {sorted(unknown)}. Valid sources: {list(SOURCE_NAMES)}")
        return v


class LoggingSettings(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(validate_assignment=True)

    level: str = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$", description="Log level")
    file_path: Optional[Path] = Field(default=None, description="Log file path")
    max_file_size: int = Field(default=10_485_760, description="Maximum log file size in bytes")  # 10MB
    backup_count: int = Field(default=5, description="Number of log file backups")


class Settings(BaseModel):
    """Main application settings."""

    api: ApiSettings = Field(default_factory=ApiSettings)
    defaults: DefaultsSettings = Field(default_factory=DefaultsSettings)
    offline: OfflineSettings = Field(default_factory=OfflineSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @classmethod
    def from_file(cls, config_path: Optional[Path] = None) -> "Settings":
        """Load settings from configuration file."""
        if config_path is None:
            config_path = Path("suntimes.yaml")

        if not config_path.exists():
            return cls()

        with open(config_path, 'r') as f:
            config_data = yaml.safe_load(f) or {}

        return cls(**config_data)

    def save_to_file(self, config_path: Path) -> None:
        """Save settings to configuration file."""
        config_data = self.model_dump()

        # Convert Path objects to strings for YAML serialization
        def convert_paths(obj):
            if isinstance(obj, dict):
                return {k: convert_paths(v) for k, v in obj.items()}
            elif isinstance(obj, list):
                return [convert_paths(item) for item in obj]
            elif isinstance(obj, Path):
                return str(obj)
            else:
                return obj

        config_data = convert_paths(config_data)

        # Ensure parent directory exists
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, 'w') as f:
            yaml.dump(config_data, f, default_flow_style=False, indent=2)

    @classmethod
    def load_with_env(cls, config_path: Optional[Path] = None) -> "Settings":
        """Load settings from file and environment variables."""
        # Load environment variables from .env file if it exists
        load_dotenv()

        settings = cls.from_file(config_path)

        # Override with environment variables if present
        if os.getenv("TZ"):
            settings.defaults.timezone = os.getenv("TZ")

        if os.getenv(OFFLINE_ENV) is not None:
            settings.offline.enabled = os.getenv(OFFLINE_ENV) == "1"

        for source in SOURCE_NAMES:
            fixture = os.getenv(f"{FIXTURE_ENV_PREFIX}{source}")
            if fixture:
                settings.offline.fixtures[source] = Path(fixture)

        if os.getenv("SUNTIMES_LOG_LEVEL"):
            settings.logging.level = os.getenv("SUNTIMES_LOG_LEVEL").upper()

        return settings


# Built-in defaults; a run loads file and environment through load_with_env
settings = Settings()
