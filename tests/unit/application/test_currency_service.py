# nosec B101


import pytest

from application.services.currency_service import CurrencyService
from domain.constants.currencies import DEFAULT_REGISTRY
from domain.exceptions.currency import InvalidAmountError, UnsupportedCurrencyError
from domain.models.currency import CurrencyRegistry


@pytest.fixture
def service():
    return CurrencyService(DEFAULT_REGISTRY)


def test_get_supported_currencies_returns_canonical_order(service):
    assert service.get_supported_currencies() == [
        'USD', 'EUR', 'BRL', 'GBP', 'JPY', 'CAD', 'AUD', 'CHF', 'CNY', 'SEK'
    ]


def test_get_currency_details(service):
    details = service.get_currency_details()

    assert len(details) == 10
    assert details[2] == {'code': 'BRL', 'name': 'Real Brasileiro', 'symbol': 'R$'}


@pytest.mark.parametrize('amount,expected', [
    ('100', 100.0),
    ('0', 0.0),
    (' 12.5 ', 12.5),
    (7, 7.0),
    ('12abc', 12.0),
    ('1_000', 1.0),
    ('.5', 0.5),
    ('2e3xyz', 2000.0),
    ('3.', 3.0),
])
def test_parse_amount_accepts_non_negative_numbers(service, amount, expected):
    assert service.parse_amount(amount) == expected


@pytest.mark.parametrize('amount', [True, '1e400', '-inf', 'inf', 'Infinity', 'abc12', '', '-5abc'])
def test_parse_amount_rejects(service, amount):
    with pytest.raises(InvalidAmountError):
        service.parse_amount(amount)


def test_validate_currencies_uses_injected_registry():
    registry = CurrencyRegistry(
        codes=('USD', 'XTS'),
        names={'USD': 'Dólar Americano', 'XTS': 'Test'},
        symbols={'USD': '$', 'XTS': '?'},
        fixed_rates={},
    )
    service = CurrencyService(registry)

    service.validate_currencies('USD', 'XTS')

    with pytest.raises(UnsupportedCurrencyError) as exc_info:
        service.validate_currencies('USD', 'BRL')

    assert str(exc_info.value) == 'Moeda não suportada. Moedas suportadas: USD, XTS'
