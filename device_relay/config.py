"""
Configuration management for the device relay.

Uses Pydantic settings for validation and environment variable support.
"""
from functools import lru_cache
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StoreSettings(BaseSettings):
    """Limits for the in-memory stores."""

    model_config = SettingsConfigDict(
        env_prefix='STORE_',
        env_file='.env',
        extra='ignore'
    )

    max_log_entries: int = Field(default=50000, ge=1, description='Retention ceiling for device reports')
    default_list_limit: int = Field(default=1000, ge=1, description='Default page size for log listings')
    max_list_limit: int = Field(default=10000, ge=1, description='Upper bound for the limit query parameter')
    max_queue_length: Optional[int] = Field(
        default=100,
        ge=1,
        description='Max pending commands per device (None disables the cap)'
    )


class AuthSettings(BaseSettings):
    """Operator authentication configuration."""

    model_config = SettingsConfigDict(
        env_prefix='AUTH_',
        env_file='.env',
        extra='ignore'
    )

    session_ttl_hours: float = Field(default=8, gt=0, description='Session lifetime from login')
    session_sweep_interval_seconds: float = Field(
        default=300,
        gt=0,
        description='Interval between expired-session sweeps'
    )
    bcrypt_rounds: int = Field(default=12, ge=4, le=31, description='bcrypt work factor')

    # Seed account created at startup
    admin_username: str = Field(default='admin')
    admin_password: str = Field(
        default='admin-change-me',
        description='Password for the seeded admin account'
    )


class CORSSettings(BaseSettings):
    """CORS configuration."""

    model_config = SettingsConfigDict(
        env_prefix='CORS_',
        env_file='.env',
        extra='ignore'
    )

    allowed_origins: List[str] = Field(
        default=[
            'https://espapp.netlify.app',
            'http://localhost:5173',
            'http://localhost:3000',
        ],
        description='Allowed origins for CORS (use ["*"] to allow any)'
    )
    allow_credentials: bool = Field(default=False)
    allowed_methods: List[str] = Field(default=['GET', 'POST', 'OPTIONS'])
    allowed_headers: List[str] = Field(default=['Content-Type', 'Accept', 'Authorization'])


class AppSettings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        extra='ignore'
    )

    # Application
    app_name: str = Field(default='ESP32 Ping Logger API')
    app_version: str = Field(default='1.1.0')
    debug: bool = Field(default=False)
    environment: str = Field(default='development')

    # Server
    host: str = Field(default='0.0.0.0')
    port: int = Field(default=3000)
    reload: bool = Field(default=False)

    # API
    api_prefix: str = Field(default='/api')
    max_body_bytes: int = Field(default=262144, ge=1, description='Largest accepted request body')

    # Logging
    log_level: str = Field(default='INFO')
    log_format: str = Field(default='text', description='text or json')

    # Sub-settings
    store: StoreSettings = Field(default_factory=StoreSettings)
    auth: AuthSettings = Field(default_factory=AuthSettings)
    cors: CORSSettings = Field(default_factory=CORSSettings)


@lru_cache()
def get_settings() -> AppSettings:
    """
    Get cached application settings.

    Uses LRU cache to avoid re-reading environment variables on every access.
    """
    return AppSettings()
