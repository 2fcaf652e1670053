from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    PROJECT_NAME: str = "WordPairs"
    DATABASE_URL: str = "sqlite:///wordpairs.db"
    SECRET_KEY: str
    JWT_ALG: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 15
    JWT_TOKEN_LOCATION: list[str] = ["headers"]
    CORS_ORIGINS: str = "http://localhost:5173,http://localhost:3000"
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str | None = None
    LOG_FILE: str = "wordpairs.log"


settings = Settings()
