from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	# Exchange rate provider
	EXCHANGE_RATE_API_URL: str = 'https://api.exchangerate.host'
	EXCHANGE_RATE_API_KEY: str = ''
	RATE_API_TIMEOUT: float = 10.0

	# Logging
	LOG_LEVEL: str = 'INFO'
	LOG_JSON: bool = False

	# Application
	APP_NAME: str = 'Currency Converter API'
	DEBUG: bool = True
	CORS_ORIGINS: list[str] = ['*']
	HOST: str = '0.0.0.0'
	PORT: int = 8000

	model_config = SettingsConfigDict(env_file='.env', case_sensitive=False, extra='ignore')


@lru_cache
def get_settings() -> Settings:
	return Settings()
