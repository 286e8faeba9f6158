"""This file contains global application settings."""

from os import path
from typing import List

from pydantic import ConfigDict
from pydantic_settings import BaseSettings

DOTENV_FILE = ".env" if path.isfile(".env") else None


class Settings(BaseSettings):
    """Application settings."""

    # Application
    environment: str = "local"
    application_name: str = "order-service"
    application_title: str = "Order Service"
    application_description: str = "Microservice for order management"
    application_version: str = "1.0.0"

    # API
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_prefix: str = "/api/v1"
    actuator_prefix: str = "/actuator"
    api_reload: bool = False
    cors_origins: List[str] = ["*"]

    # Logging
    log_level: str = "INFO"

    model_config = ConfigDict(env_file=DOTENV_FILE, extra="ignore")


settings = Settings()
