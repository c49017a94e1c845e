# tests/fixtures/api_responses.py
"""
Sample Alpha Vantage CURRENCY_EXCHANGE_RATE payloads.
Kept as raw text because the gateway decodes them with its own parser.
"""


def exchange_rate_payload(
    from_code: str = "USD",
    from_name: str = "United States Dollar",
    bid: str = "90.12000000",
    ask: str = "90.15000000",
    refreshed: str = "2024-01-01 10:00:01",
) -> str:
    return (
        '{\n'
        '    "Realtime Currency Exchange Rate": {\n'
        f'        "1. From_Currency Code": "{from_code}",\n'
        f'        "2. From_Currency Name": "{from_name}",\n'
        '        "3. To_Currency Code": "RUB",\n'
        '        "4. To_Currency Name": "Russian Ruble",\n'
        '        "5. Exchange Rate": "90.13000000",\n'
        f'        "6. Last Refreshed": "{refreshed}",\n'
        '        "7. Time Zone": "UTC",\n'
        f'        "8. Bid Price": "{bid}",\n'
        f'        "9. Ask Price": "{ask}"\n'
        '    }\n'
        '}'
    )


USD_RUB = exchange_rate_payload()

# Same fields, shuffled, with unrelated keys around them
SHUFFLED_WITH_NOISE = (
    '{"Meta": {"source": "test", "count": 2, "tags": ["a", "b"]},'
    ' "Realtime Currency Exchange Rate": {'
    '"9. Ask Price": "1.10", "7. Time Zone": "UTC", "8. Bid Price": "1.05",'
    ' "3. To_Currency Code": "RUB", "6. Last Refreshed": "2024-02-02 00:00:00",'
    ' "1. From_Currency Code": "EUR"},'
    ' "Trailer": [1, 2, 3]}'
)

RATE_LIMIT_NOTE = (
    '{\n'
    '    "Note": "Thank you for using Alpha Vantage! Our standard API call frequency is '
    '5 calls per minute and 500 calls per day."\n'
    '}'
)

INVALID_API_CALL = (
    '{\n'
    '    "Error Message": "Invalid API call. Please retry or visit the documentation '
    'for CURRENCY_EXCHANGE_RATE."\n'
    '}'
)

MISSING_ASK = (
    '{"Realtime Currency Exchange Rate": {'
    '"1. From_Currency Code": "GBP", "3. To_Currency Code": "RUB",'
    ' "6. Last Refreshed": "2024-01-01 10:00:01", "8. Bid Price": "115.0"}}'
)
