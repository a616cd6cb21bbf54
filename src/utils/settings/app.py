from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    DEBUG: bool = False
    ENVIRONMENT: str = "DEV"

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.upper() == "PROD"


app_settings = AppSettings()
