# shiritori/settings.py
from __future__ import annotations

from typing import Literal, Optional
import os

from dotenv import load_dotenv
from pydantic import BaseModel

DeploymentEnvironment = Literal["production", "development"]

REQUIRED_VARIABLES = [
    "API_DEPLOYMENT_ENVIRONMENT",
    "API_REDIS_URL",
    "API_REDIS_USERNAME",
    "API_REDIS_PASSWORD",
]


class MissingEnvironmentVariable(RuntimeError):
    def __init__(self, variable: str):
        self.variable = variable
        super().__init__(f"missing environment variable: {variable}")


class Settings(BaseModel):
    APP_NAME: str = "shiritori-server"

    API_DEPLOYMENT_ENVIRONMENT: DeploymentEnvironment

    # Store
    API_REDIS_URL: str
    API_REDIS_USERNAME: str
    API_REDIS_PASSWORD: str

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # Dev
    LOG_LEVEL: str = "INFO"

    @property
    def is_production(self) -> bool:
        return self.API_DEPLOYMENT_ENVIRONMENT == "production"


def get_settings(dotenv_path: Optional[str] = None) -> Settings:
    """
    Build settings from the environment. A `.env` file (searched upward from this
    package, or `dotenv_path`) fills variables that are not already set.
    """
    load_dotenv(dotenv_path)

    for variable in REQUIRED_VARIABLES:
        if not os.getenv(variable):
            raise MissingEnvironmentVariable(variable)

    return Settings(
        APP_NAME=os.getenv("APP_NAME", "shiritori-server"),
        API_DEPLOYMENT_ENVIRONMENT=os.environ["API_DEPLOYMENT_ENVIRONMENT"],
        API_REDIS_URL=os.environ["API_REDIS_URL"],
        API_REDIS_USERNAME=os.environ["API_REDIS_USERNAME"],
        API_REDIS_PASSWORD=os.environ["API_REDIS_PASSWORD"],
        HOST=os.getenv("HOST", "0.0.0.0"),
        PORT=int(os.getenv("PORT", "8000")),
        LOG_LEVEL=os.getenv("LOG_LEVEL", "INFO"),
    )
