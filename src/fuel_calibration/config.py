"""
Configuration management for the fuel sensor calibration engine.

Uses pydantic-settings for environment-based configuration with validation.
All settings can be overridden via environment variables with FUEL_ prefix.
"""

from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()


class CalibrationSettings(BaseSettings):
    """Settings for calibration document parsing and rescaling."""

    model_config = SettingsConfigDict(env_prefix="FUEL_CALIBRATION_")

    # Rescaling
    default_divisor: float = Field(default=1.0, gt=0.0)

    # Document structure
    group_tag: str = Field(default="sensor", min_length=1)
    entry_tag: str = Field(default="value", min_length=1)
    date_tag: str = Field(default="calibrationDate", min_length=1)
    code_attribute: str = Field(default="code", min_length=1)

    # Point labels
    label_prefix: str = Field(default="Калибровка")


class SeriesSettings(BaseSettings):
    """Settings for raw series parsing and timestamp derivation."""

    model_config = SettingsConfigDict(env_prefix="FUEL_SERIES_")

    delimiter: str = Field(default=",", min_length=1, max_length=1)

    # Comma-separated, matched case-insensitively against the first line
    header_keywords: str = Field(default="time,date,время,дата")

    # IANA zone name for date labels; None means the local zone
    timezone: Optional[str] = Field(default=None)

    @property
    def header_keyword_list(self) -> list[str]:
        """Header keywords as a lowercased list."""
        return [part.strip().lower() for part in self.header_keywords.split(",") if part.strip()]


class ExportSettings(BaseSettings):
    """Settings for the tabular export."""

    model_config = SettingsConfigDict(env_prefix="FUEL_EXPORT_")

    measurement_decimals: int = Field(default=1, ge=0, le=6)
    unknown_date_label: str = Field(default="Неизвестно")
    calibration_type_label: str = Field(default="Калибровка")
    measurement_type_label: str = Field(default="Измерение")
    filename_prefix: str = Field(default="fuel-data-export")
    encoding: str = Field(default="utf-8")


class Settings(BaseSettings):
    """Main application settings aggregating all subsettings."""

    model_config = SettingsConfigDict(
        env_prefix="FUEL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application info
    app_name: str = Field(default="Fuel Sensor Calibration")
    debug: bool = Field(default=False)
    log_level: str = Field(default="INFO")
    log_file: Optional[Path] = Field(default=None)

    # Subsettings
    calibration: CalibrationSettings = Field(default_factory=CalibrationSettings)
    series: SeriesSettings = Field(default_factory=SeriesSettings)
    export: ExportSettings = Field(default_factory=ExportSettings)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and check the log level name."""
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level


# Global settings instance - lazy loaded
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance, creating it if necessary."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def configure(settings: Optional[Settings] = None, **kwargs) -> Settings:
    """
    Configure the global settings.

    Args:
        settings: Optional Settings instance to use directly
        **kwargs: Settings overrides

    Returns:
        The configured Settings instance
    """
    global _settings
    if settings is not None:
        _settings = settings
    elif kwargs:
        _settings = Settings(**kwargs)
    else:
        _settings = Settings()
    return _settings
