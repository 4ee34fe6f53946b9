"""Application configuration via Pydantic Settings.

All configuration is loaded from environment variables (or a local ``.env``)
following 12-factor principles. Every field has a default so the geodata
scripts and the preview server run without any environment set up.
"""

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SUPABASE_URL = "https://uieniviriyblquryluxx.supabase.co"
# Publishable client-side key of the same project
DEFAULT_SUPABASE_ANON_KEY = "sb_publishable_-L-eQJsyRREQZBO7dnTMPw_e2Se9VcF"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Hosted data service (Supabase REST)
    supabase_url: str = Field(
        default=DEFAULT_SUPABASE_URL,
        validation_alias=AliasChoices("supabase_url", "vite_supabase_url"),
        description="Base URL of the hosted data service",
    )
    supabase_anon_key: str | None = Field(
        default=DEFAULT_SUPABASE_ANON_KEY,
        validation_alias=AliasChoices("supabase_anon_key", "vite_supabase_anon_key"),
        description="Publishable (anon) API key for the hosted data service",
    )
    spectra_table: str = Field(
        default="test_raman",
        description="Table holding the spectroscopic measurement rows",
    )
    data_service_timeout: float = Field(
        default=30.0,
        description="Data service request timeout in seconds",
        gt=0,
    )

    @field_validator("supabase_url")
    @classmethod
    def validate_supabase_url(cls, v: str) -> str:
        if not v.startswith(("https://", "http://")):
            msg = "supabase_url must be an http(s) URL"
            raise ValueError(msg)
        return v.rstrip("/")

    # Geodata preparation
    districts_source: str = Field(
        default="tmp/geoBoundaries/geoBoundaries-IND-ADM4.geojson",
        description="Unsimplified district boundaries used for containment refinement",
    )
    districts_source_simplified: str = Field(
        default="tmp/geoBoundaries/geoBoundaries-IND-ADM4_simplified.geojson",
        description="Simplified district boundaries used for the initial nearest-state split",
    )
    states_boundary_file: str = Field(
        default="public/india_states.geojson",
        description="State features used to seed the nearest-state split",
    )
    state_districts_dir: str = Field(
        default="public/state-districts",
        description="Directory of per-state district FeatureCollections",
    )
    state_polygons_dir: str = Field(
        default="public/state-polygons",
        description="Directory for dissolved per-state outlines",
    )

    # Preview server
    preview_root: str = Field(
        default="dist",
        description="Static build output served by the preview server",
    )
    preview_port: int = Field(
        default=5177,
        description="Preview server port",
        gt=0,
        lt=65536,
    )
    preview_url: str = Field(
        default="http://localhost:5177/",
        description="Default target for the header checker",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    log_dir: str | None = Field(
        default=None,
        description="Directory for log files (enables file logging with 24h rotation when set)",
    )


def get_settings() -> Settings:
    """Create and return application settings."""
    return Settings()
