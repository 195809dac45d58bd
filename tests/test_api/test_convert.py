from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_conversion_service, get_provider
from api.main import app
from domain.exceptions.currency import ProviderError


@pytest.fixture
def mock_provider():
    provider = MagicMock()
    provider.name = 'mock-provider'
    provider.fetch_latest_rates = AsyncMock(return_value={'USD': 1, 'BRL': 5.0, 'EUR': 0.9})
    return provider


@pytest.fixture
def client(mock_provider):
    # Override the real provider with mock
    app.dependency_overrides[get_provider] = lambda: mock_provider
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


def test_convert_currency_live_rates(client, mock_provider):
    response = client.get('/api/convert', params={'amount': '100', 'from': 'USD', 'to': 'BRL'})

    assert response.status_code == 200
    assert response.json() == {
        'originalAmount': 100.0,
        'from': 'USD',
        'to': 'BRL',
        'convertedAmount': 500.0,
        'rate': 5.0,
        'source': 'API',
    }
    mock_provider.fetch_latest_rates.assert_awaited_once()


def test_convert_currency_falls_back_to_fixed_rates(client, mock_provider):
    mock_provider.fetch_latest_rates.side_effect = ProviderError('exchangerate.host request failed')

    response = client.get('/api/convert', params={'amount': '100', 'from': 'USD', 'to': 'BRL'})

    assert response.status_code == 200
    data = response.json()
    assert data['convertedAmount'] == 500.0
    assert data['source'] == 'Fixed rates'


def test_convert_lowercase_currencies_normalized(client):
    response = client.get('/api/convert', params={'amount': '10', 'from': 'usd', 'to': ' brl '})

    assert response.status_code == 200
    data = response.json()
    assert data['from'] == 'USD'
    assert data['to'] == 'BRL'


def test_convert_zero_amount_returns_null_rate(client):
    response = client.get('/api/convert', params={'amount': '0', 'from': 'USD', 'to': 'EUR'})

    assert response.status_code == 200
    data = response.json()
    assert data['convertedAmount'] == 0
    assert data['rate'] is None


def test_convert_negative_amount(client):
    response = client.get('/api/convert', params={'amount': '-1', 'from': 'USD', 'to': 'BRL'})

    assert response.status_code == 400
    assert response.json() == {'error': 'Valor inválido. Deve ser um número positivo.'}


def test_convert_invalid_amount_type(client):
    response = client.get('/api/convert', params={'amount': 'not_a_number', 'from': 'USD', 'to': 'BRL'})

    assert response.status_code == 400
    assert 'Valor inválido' in response.json()['error']


def test_convert_missing_amount(client):
    response = client.get('/api/convert', params={'from': 'USD', 'to': 'BRL'})

    assert response.status_code == 400
    assert 'Valor inválido' in response.json()['error']


@pytest.mark.parametrize('params', [{'amount': '100', 'to': 'BRL'}, {'amount': '100', 'from': 'USD', 'to': ''}])
def test_convert_missing_currencies(client, params):
    response = client.get('/api/convert', params=params)

    assert response.status_code == 400
    assert response.json() == {'error': 'Moedas de origem e destino são obrigatórias.'}


def test_convert_unsupported_currency(client, mock_provider):
    response = client.get('/api/convert', params={'amount': '100', 'from': 'INVALID', 'to': 'BRL'})

    assert response.status_code == 400
    assert response.json() == {
        'error': 'Moeda não suportada. Moedas suportadas: USD, EUR, BRL, GBP, JPY, CAD, AUD, CHF, CNY, SEK'
    }
    mock_provider.fetch_latest_rates.assert_not_called()


@pytest.fixture
def failing_client():
    service = MagicMock()
    service.convert = AsyncMock(side_effect=RuntimeError('corrupted state'))

    app.dependency_overrides[get_conversion_service] = lambda: service
    client = TestClient(app, raise_server_exceptions=False)
    yield client
    app.dependency_overrides.clear()


def test_convert_unexpected_error_returns_generic_500(failing_client):
    response = failing_client.get('/api/convert', params={'amount': '100', 'from': 'USD', 'to': 'BRL'})

    assert response.status_code == 500
    assert response.json() == {'error': 'Erro interno do servidor'}
    assert 'corrupted state' not in response.text


def test_convert_amount_tie_rounds_up(client, mock_provider):
    mock_provider.fetch_latest_rates.side_effect = ProviderError('exchangerate.host request failed')

    response = client.get('/api/convert', params={'amount': '0.125', 'from': 'USD', 'to': 'USD'})

    assert response.status_code == 200
    data = response.json()
    assert data['convertedAmount'] == 0.13
    assert data['source'] == 'Fixed rates'


def test_convert_amount_with_trailing_text(client, mock_provider):
    mock_provider.fetch_latest_rates.side_effect = ProviderError('exchangerate.host request failed')

    response = client.get('/api/convert', params={'amount': '100abc', 'from': 'USD', 'to': 'BRL'})

    assert response.status_code == 200
    data = response.json()
    assert data['originalAmount'] == 100.0
    assert data['convertedAmount'] == 500.0
