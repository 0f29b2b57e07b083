"""
Configuration management for the event analytics subgraph
"""

from pathlib import Path

from pydantic_settings import BaseSettings

DEFAULT_MOCK_DATA_PATH = Path(__file__).parent / "data" / "mock-data.json"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Supergraph (upstream data source)
    supergraph_url: str = "http://localhost:4000"
    supergraph_timeout: float = 30.0  # seconds, per upstream request

    # Mock mode serves a recorded fixture instead of querying the supergraph
    use_mock_data: bool = False
    mock_data_path: str | None = None

    # API Settings (4000 is taken by the router in local development)
    api_host: str = "0.0.0.0"
    api_port: int = 4001
    api_reload: bool = False
    cors_origins: list[str] = ["http://localhost:3000"]

    # Environment
    environment: str = "development"  # 'development', 'staging', 'production'
    debug: bool = True
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "ANALYTICS_"
        case_sensitive = False

    def resolved_mock_data_path(self) -> Path:
        """Path of the fixture used in mock mode."""
        if self.mock_data_path:
            return Path(self.mock_data_path)
        return DEFAULT_MOCK_DATA_PATH

    @property
    def is_production(self) -> bool:
        return self.environment.lower() in ("production", "prod")


# Global settings instance
settings = Settings()
