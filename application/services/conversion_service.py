import logging

from application.services.converters import (
	convert_with_fixed_rates,
	convert_with_live_rates,
	round_half_up,
)
from application.services.currency_service import CurrencyService
from application.services.rate_service import RateService
from domain.exceptions.currency import MissingRateError
from domain.models.currency import ConversionResult, LiveRates, RateSource, RatesUnavailable

logger = logging.getLogger(__name__)

LIVE_SOURCE = 'API'
FIXED_SOURCE = 'Fixed rates'


class ConversionService:
	def __init__(self, rate_service: RateService, currency_service: CurrencyService):
		self.rate_service = rate_service
		self.currency_service = currency_service

	async def convert(
		self, amount: str | float | None, from_currency: str | None, to_currency: str | None
	) -> ConversionResult:
		value = self.currency_service.parse_amount(amount)
		self.currency_service.validate_currencies(from_currency, to_currency)

		rate_source = await self.rate_service.get_rate_source()
		converted, source = self._resolve(value, from_currency, to_currency, rate_source)

		result = ConversionResult(
			original_amount=value,
			from_currency=from_currency,
			to_currency=to_currency,
			converted_amount=round_half_up(converted, 2),
			rate=round_half_up(converted / value, 4) if value else None,
			source=source,
		)
		logger.info(
			f'Converted {value} {from_currency} -> {result.converted_amount} {to_currency} ({source})'
		)
		return result

	def _resolve(
		self,
		amount: float,
		from_currency: str,
		to_currency: str,
		rate_source: RateSource,
	) -> tuple[float, str]:
		if isinstance(rate_source, LiveRates):
			try:
				converted = convert_with_live_rates(
					amount, from_currency, to_currency, rate_source.rates
				)
				return converted, LIVE_SOURCE
			except MissingRateError as e:
				logger.warning(f'{rate_source.provider} table unusable ({e}), using fixed rates')
		elif isinstance(rate_source, RatesUnavailable):
			logger.warning(f'Live rates unavailable ({rate_source.reason}), using fixed rates')
		else:
			raise TypeError(f'Unknown rate source: {rate_source!r}')

		converted = convert_with_fixed_rates(
			amount, from_currency, to_currency, self.currency_service.registry
		)
		return converted, FIXED_SOURCE
