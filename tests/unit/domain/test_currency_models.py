# nosec B101


import dataclasses

import pytest

from domain.models.currency import ExchangeRate, FetchError, RequestContext


def test_exchange_rate_to_json_exact_format():
    rate = ExchangeRate(
        time='2024-01-01',
        from_currency='USD',
        to_currency='RUB',
        bid='90.00',
        ask='90.50',
    )

    assert rate.to_json() == (
        '{"time":"2024-01-01", "fromCurrency":"USD", "toCurrency":"RUB", '
        '"bid":"90.00", "ask":"90.50"}'
    )


def test_exchange_rate_is_immutable():
    rate = ExchangeRate('t', 'USD', 'RUB', '1', '2')

    with pytest.raises(dataclasses.FrozenInstanceError):
        rate.bid = '3'


def test_fetch_error_is_a_value_not_an_exception():
    error = FetchError(symbol='USD', reason='boom')

    assert not isinstance(error, BaseException)
    assert error == FetchError('USD', 'boom')


def test_request_context_currency_lookup():
    context = RequestContext(request_id='id-1', remote_address='127.0.0.1:5000', params={'currency': 'eur'})

    assert context.currency == 'eur'
    assert RequestContext('id-2', 'unknown').currency is None


def test_request_context_params_are_read_only():
    params = {'currency': 'usd'}
    context = RequestContext('id-1', 'unknown', params)
    params['currency'] = 'gbp'

    assert context.currency == 'usd'
    with pytest.raises(TypeError):
        context.params['x'] = '1'
