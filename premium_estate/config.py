from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # --- Listings API (public, unauthenticated) ---
    LISTINGS_BASE_URL: str = "https://gsl-apps-technical-test.dignp.com"

    # --- HTTP transport ---
    HTTP_TIMEOUT_S: float = 10.0
    HTTP_USER_AGENT: str = "premium-estate/0.1 (+local dev)"

    # --- State holders ---
    # Drop completions of a fetch that was superseded by a newer retry/load.
    # False restores plain last-write-wins.
    DROP_STALE_RESPONSES: bool = True

    # --- Runtime ---
    LOG_LEVEL: str = "INFO"


settings = Settings()
