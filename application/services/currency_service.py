import logging
import math
import re

from domain.exceptions.currency import (
	InvalidAmountError,
	MissingCurrencyError,
	UnsupportedCurrencyError,
)
from domain.models.currency import CurrencyRegistry

logger = logging.getLogger(__name__)

INVALID_AMOUNT_MESSAGE = 'Valor inválido. Deve ser um número positivo.'
MISSING_CURRENCIES_MESSAGE = 'Moedas de origem e destino são obrigatórias.'
UNSUPPORTED_CURRENCY_MESSAGE = 'Moeda não suportada. Moedas suportadas: {supported}'

# Leading numeric prefix, trailing text is ignored ("100abc" reads as 100).
LEADING_NUMBER = re.compile(r'\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)')


class CurrencyService:
	def __init__(self, registry: CurrencyRegistry):
		self.registry = registry

	def get_supported_currencies(self) -> list[str]:
		return list(self.registry.codes)

	def get_currency_details(self) -> list[dict]:
		return [
			{
				'code': code,
				'name': self.registry.name(code),
				'symbol': self.registry.symbol(code),
			}
			for code in self.registry.codes
		]

	def parse_amount(self, amount: str | float | None) -> float:
		if amount is None or isinstance(amount, bool):
			raise InvalidAmountError(INVALID_AMOUNT_MESSAGE)
		if isinstance(amount, str):
			match = LEADING_NUMBER.match(amount)
			if match is None:
				raise InvalidAmountError(INVALID_AMOUNT_MESSAGE)
			value = float(match.group(1))
		else:
			try:
				value = float(amount)
			except (TypeError, ValueError) as e:
				raise InvalidAmountError(INVALID_AMOUNT_MESSAGE) from e

		if not math.isfinite(value) or value < 0:
			raise InvalidAmountError(INVALID_AMOUNT_MESSAGE)
		return value

	def validate_currencies(self, from_currency: str | None, to_currency: str | None) -> None:
		if not from_currency or not to_currency:
			raise MissingCurrencyError(MISSING_CURRENCIES_MESSAGE)

		if not self.registry.is_supported(from_currency) or not self.registry.is_supported(
			to_currency
		):
			logger.info(f'Rejected unsupported pair {from_currency} -> {to_currency}')
			raise UnsupportedCurrencyError(
				UNSUPPORTED_CURRENCY_MESSAGE.format(supported=self.registry.label)
			)
