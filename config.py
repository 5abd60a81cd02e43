"""
config.py — application settings from environment variables.
Every variable carries the SMART_CALC_ prefix.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Logging
    log_level: str = "WARNING"

    # Converter: False restores immediate emission of function tokens
    defer_functions: bool = True

    # Interactive loop
    prompt: str = "> "
    exit_command: str = "exit"

    # App
    app_title: str = "SmartCalc"
    app_version: str = "0.1.0"

    model_config = SettingsConfigDict(env_prefix="SMART_CALC_", env_file=".env", extra="ignore")
