from pydantic import ConfigDict
from pydantic_settings import BaseSettings

from app.schemas.common import AgentLevel


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = ConfigDict(env_file=".env", case_sensitive=True)

    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # CORS configuration — comma-separated origins (Next.js frontend)
    CORS_ORIGINS: str = "http://localhost:3000,http://localhost:3001"

    # slowapi limit string applied to POST /projections
    PROJECTION_RATE_LIMIT: str = "30/minute"

    # Level assumed when a projection request omits agent_level
    DEFAULT_AGENT_LEVEL: AgentLevel = AgentLevel.INITIAL

    @property
    def effective_log_level(self) -> str:
        """DEBUG overrides LOG_LEVEL."""
        return "DEBUG" if self.DEBUG else self.LOG_LEVEL


settings = Settings()
