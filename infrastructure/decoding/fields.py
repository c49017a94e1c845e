from domain.exceptions.currency import DecodeFailure
from domain.models.currency import ExchangeRate
from domain.models.json_value import JsonNumber, JsonObject, JsonString, JsonValue

RATE_SECTION = 'Realtime Currency Exchange Rate'

LAST_REFRESHED = '6. Last Refreshed'
FROM_CURRENCY_CODE = '1. From_Currency Code'
TO_CURRENCY_CODE = '3. To_Currency Code'
BID_PRICE = '8. Bid Price'
ASK_PRICE = '9. Ask Price'


def _require_text(section: JsonObject, key: str) -> str:
    value = section.get(key)
    if value is None:
        raise DecodeFailure(f'Missing field {key!r}')
    if isinstance(value, JsonString):
        return value.value
    if isinstance(value, JsonNumber):
        return str(value.value)
    raise DecodeFailure(f'Field {key!r} is a {value.kind.value}, expected a string')


def extract_exchange_rate(tree: JsonValue) -> ExchangeRate:
    if not isinstance(tree, JsonObject):
        raise DecodeFailure(f'Expected a JSON object, got {tree.kind.value}')

    section = tree.get(RATE_SECTION)
    if section is None:
        raise DecodeFailure(f'Missing field {RATE_SECTION!r}')
    if not isinstance(section, JsonObject):
        raise DecodeFailure(f'Field {RATE_SECTION!r} is a {section.kind.value}, expected an object')

    return ExchangeRate(
        time=_require_text(section, LAST_REFRESHED),
        from_currency=_require_text(section, FROM_CURRENCY_CODE),
        to_currency=_require_text(section, TO_CURRENCY_CODE),
        bid=_require_text(section, BID_PRICE),
        ask=_require_text(section, ASK_PRICE),
    )
