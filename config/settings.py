from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	# Upstream
	API_KEY: str = ''
	UPSTREAM_BASE_URL: str = 'https://www.alphavantage.co/query'
	UPSTREAM_TIMEOUT: int = 10
	TARGET_CURRENCY: str = 'RUB'
	SYMBOLS: list[str] = ['USD', 'EUR', 'GBP', 'CNY', 'BTC']
	WORKER_POOL_SIZE: int = 8

	# Application
	APP_NAME: str = 'Exchange Rate Gateway'
	HOST: str = '0.0.0.0'
	PORT: int = 8000
	LOG_LEVEL: str = 'INFO'
	LOG_FORMAT: str = 'text'

	model_config = SettingsConfigDict(env_file='.env', case_sensitive=False, extra='ignore', frozen=True)


@lru_cache
def get_settings() -> Settings:
	return Settings()
