from .requests import ConversionRequest
from .responses import (
	ConversionResponse,
	CurrencyDetail,
	CurrencyDetailsResponse,
	ErrorResponse,
	SupportedCurrenciesResponse,
)

__all__ = [
	'ConversionRequest',
	'ConversionResponse',
	'CurrencyDetail',
	'CurrencyDetailsResponse',
	'ErrorResponse',
	'SupportedCurrenciesResponse',
]
