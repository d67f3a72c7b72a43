from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "3D Print Pricer"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3001
    LOG_LEVEL: str = "info"
    CORS_ORIGINS: str = "*"  # comma-separated list of allowed origins

    # Interactive client
    API_BASE_URL: str = "http://localhost:3001/api"
    REMOTE_TIMEOUT_SECONDS: float = 10.0
    DEFAULT_PROFIT_PERCENT: float = 30.0

    class Config:
        env_file = ".env"

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


settings = Settings()
