from unittest.mock import patch

import pytest

from api.dependencies import cleanup_dependencies, deps, get_rate_service, init_dependencies
from config.settings import Settings
from infrastructure.providers import AlphaVantageProvider


def test_defaults():
    settings = Settings(_env_file=None)

    assert settings.API_KEY == ''
    assert settings.UPSTREAM_BASE_URL == 'https://www.alphavantage.co/query'
    assert settings.TARGET_CURRENCY == 'RUB'
    assert settings.SYMBOLS == ['USD', 'EUR', 'GBP', 'CNY', 'BTC']
    assert settings.WORKER_POOL_SIZE == 8
    assert settings.PORT == 8000


def test_environment_overrides():
    with patch.dict('os.environ', {
        'API_KEY': 'secret',
        'target_currency': 'USD',
        'SYMBOLS': '["JPY", "CHF"]',
    }):
        settings = Settings(_env_file=None)

    assert settings.API_KEY == 'secret'
    assert settings.TARGET_CURRENCY == 'USD'
    assert settings.SYMBOLS == ['JPY', 'CHF']


def test_settings_are_immutable():
    settings = Settings(_env_file=None)

    with pytest.raises(Exception):
        settings.API_KEY = 'changed'


@pytest.mark.asyncio
async def test_init_dependencies_wires_provider_from_settings():
    settings = Settings(_env_file=None, API_KEY='k', TARGET_CURRENCY='EUR', SYMBOLS=['USD'])

    init_dependencies(settings)
    try:
        service = get_rate_service()
        assert isinstance(service.provider, AlphaVantageProvider)
        assert service.provider.build_url('USD').endswith('&to_currency=EUR&apikey=k')
        assert service.symbols == ('USD',)
    finally:
        await cleanup_dependencies()

    assert deps.rate_service is None
    with pytest.raises(RuntimeError):
        get_rate_service()
