from .base import ExchangeRateProvider
from .exchangerate_host import ExchangeRateHostProvider

__all__ = ['ExchangeRateProvider', 'ExchangeRateHostProvider']
