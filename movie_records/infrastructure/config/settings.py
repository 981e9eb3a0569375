from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    MONGODB_URL: str = "mongodb://localhost:27017"
    MONGODB_DATABASE: str = "movie_records"
    MONGODB_TIMEOUT_MS: int = 5000
    MOVIES_COLLECTION: str = "movies"
