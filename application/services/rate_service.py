import logging

from domain.models.currency import LiveRates, RateSource, RatesUnavailable
from infrastructure.providers.base import ExchangeRateProvider

logger = logging.getLogger(__name__)


class RateService:
    def __init__(self, provider: ExchangeRateProvider):
        self.provider = provider

    async def get_rate_source(self) -> RateSource:
        """
        Fetch the live USD table once. Any failure degrades to RatesUnavailable;
        nothing is raised to the caller.
        """
        try:
            rates = await self.provider.fetch_latest_rates()
        except Exception as e:
            logger.error(f"Provider {self.provider.name} failed: {e}")
            return RatesUnavailable(reason=str(e))

        logger.debug(f"Fetched {len(rates)} live rates from {self.provider.name}")
        return LiveRates(rates=rates, provider=self.provider.name)
