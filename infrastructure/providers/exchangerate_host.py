import math

import httpx

from domain.exceptions.currency import ProviderError
from domain.models.currency import USD


class ExchangeRateHostProvider:
	BASE_URL = 'https://api.exchangerate.host'

	def __init__(
		self,
		api_key: str = '',
		client: httpx.AsyncClient | None = None,
		base_url: str | None = None,
		timeout: float = 10,
	):
		self.api_key = api_key
		self.base_url = (base_url or self.BASE_URL).rstrip('/')
		self._client = client or httpx.AsyncClient(timeout=timeout)

	@property
	def name(self) -> str:
		return 'exchangerate.host'

	async def _request(self, endpoint: str, params: dict) -> dict:
		if self.api_key:
			params['access_key'] = self.api_key
		url = f'{self.base_url}/{endpoint}'

		try:
			response = await self._client.get(url, params=params)
			response.raise_for_status()
			data = response.json()

			if not data.get('success', False):
				info = data.get('error', {}).get('info', 'Unknown error')
				raise ProviderError(f'exchangerate.host API error: {info}')

			return data

		except ProviderError:
			raise
		except httpx.HTTPStatusError as e:
			raise ProviderError(
				f'exchangerate.host HTTP error {e.response.status_code}: {e.response.text[:200]}'
			) from e
		except httpx.RequestError as e:
			raise ProviderError(f'exchangerate.host request failed: {e.__class__.__name__}') from e
		except Exception as e:
			raise ProviderError(f'exchangerate.host response parsing error: {str(e)}') from e

	async def fetch_latest_rates(self) -> dict[str, float]:
		"""Return the latest USD-based table, 1 USD = N <code>."""
		data = await self._request('latest', {'base': USD})

		raw_rates = data.get('rates')
		if not isinstance(raw_rates, dict):
			raise ProviderError('Missing rates in exchangerate.host response')

		rates: dict[str, float] = {}
		for code, value in raw_rates.items():
			try:
				rate = float(value)
			except (TypeError, ValueError) as e:
				raise ProviderError(f'Invalid rate for {code}: {value!r}') from e
			if not math.isfinite(rate):
				raise ProviderError(f'Invalid rate for {code}: {value!r}')
			rates[code] = rate

		rates.setdefault(USD, 1.0)
		return rates

	async def close(self) -> None:
		await self._client.aclose()
