from pydantic import model_validator
from pydantic_settings import BaseSettings

DEFAULT_SECRET_KEY = "change-me"


class Settings(BaseSettings):
    secret_key: str = DEFAULT_SECRET_KEY
    # "production" switches the session cookie to secure + SameSite=None
    environment: str = "development"
    database_url: str = "sqlite:///./solosphere.db"
    token_ttl_hours: int = 5
    jwt_algorithm: str = "HS256"
    cookie_name: str = "token"
    cors_origins: list[str] = ["http://localhost:5173"]
    host: str = "127.0.0.1"
    port: int = 5000

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @model_validator(mode="after")
    def _require_secret_in_production(self):
        if self.is_production and self.secret_key == DEFAULT_SECRET_KEY:
            raise ValueError("SOLOSPHERE_SECRET_KEY must be set in production")
        return self

    model_config = {"env_prefix": "SOLOSPHERE_", "env_file": ".env", "extra": "ignore"}


settings = Settings()


def get_settings() -> Settings:
    return settings
