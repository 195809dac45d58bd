import logging
import math
from collections.abc import Mapping

from domain.exceptions.currency import MissingRateError
from domain.models.currency import USD, CurrencyRegistry

logger = logging.getLogger(__name__)


def round_half_up(value: float, places: int) -> float:
	"""Round to `places` decimals with ties going up (0.125 -> 0.13)."""
	factor = 10**places
	return math.floor(value * factor + 0.5) / factor


def _fixed_rate_or_one(registry: CurrencyRegistry, from_currency: str, to_currency: str) -> float:
	rate = registry.fixed_rate(from_currency, to_currency)
	if rate is None:
		logger.warning(f'No fixed rate for {from_currency} -> {to_currency}, using 1')
		return 1.0
	return rate


def convert_with_fixed_rates(
	amount: float, from_currency: str, to_currency: str, registry: CurrencyRegistry
) -> float:
	"""
	Convert using only the registry's fixed table.

	Non-USD pairs always pivot through USD; the table's direct cross entries
	are not consulted.
	"""
	if from_currency == to_currency:
		return amount

	if from_currency == USD:
		return amount * _fixed_rate_or_one(registry, USD, to_currency)

	amount_in_usd = amount / _fixed_rate_or_one(registry, from_currency, USD)
	return amount_in_usd * _fixed_rate_or_one(registry, USD, to_currency)


def _live_rate(rates: Mapping[str, float], code: str) -> float:
	rate = rates.get(code)
	if rate is None or rate <= 0:
		raise MissingRateError(f'Missing rate for {code}')
	return rate


def convert_with_live_rates(
	amount: float, from_currency: str, to_currency: str, rates: Mapping[str, float]
) -> float:
	if from_currency == to_currency:
		return amount

	amount_in_usd = amount
	if from_currency != USD:
		amount_in_usd = amount / _live_rate(rates, from_currency)

	return amount_in_usd * _live_rate(rates, to_currency)
