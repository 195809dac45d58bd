from typing import Protocol


class ExchangeRateProvider(Protocol):
	"""A source of USD-based exchange rate tables."""

	@property
	def name(self) -> str: ...

	async def fetch_latest_rates(self) -> dict[str, float]: ...

	async def close(self) -> None: ...
