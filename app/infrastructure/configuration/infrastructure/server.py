"""Server infrastructure settings."""

import json
from typing import Annotated, Any, List

from pydantic import Field, field_validator
from pydantic_settings import NoDecode

from infrastructure.configuration.base import InfrastructureSettings


class ServerSettings(InfrastructureSettings):
    """Server and application runtime configuration.

    Environment Variables:
        SERVER_HOST: Interface uvicorn binds to (default: 127.0.0.1)
        SERVER_PORT: Port uvicorn listens on (default: 8080)
        CORS_ALLOW_ORIGINS: JSON list or comma separated list of origins
            allowed outside production (default: local development origins)

    Example:
        ```python
        from infrastructure.services import get_settings

        port = get_settings().server.PORT
        ```
    """

    HOST: str = Field(default="127.0.0.1", alias="SERVER_HOST")
    PORT: int = Field(default=8080, alias="SERVER_PORT")
    CORS_ALLOW_ORIGINS: Annotated[List[str], NoDecode] = Field(
        default=["http://localhost:8080", "http://127.0.0.1:8080"],
        alias="CORS_ALLOW_ORIGINS",
    )

    @field_validator("CORS_ALLOW_ORIGINS", mode="before")
    @classmethod
    def split_origins(cls, v: Any) -> Any:
        """Accept a JSON list or a plain comma separated string."""
        if isinstance(v, str):
            if v.strip().startswith("["):
                return json.loads(v)
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v
