from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    LOG_LEVEL: str = "INFO"
    PASSWORD_MIN_LENGTH: int = 8
    RESET_REDIRECT_DELAY_MS: int = 3000
    LOGIN_ROUTE: str = "/auth/login"
    RESET_TOKEN_PARAM: str = "token"

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

settings = Settings()
