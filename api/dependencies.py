import logging
from typing import Annotated

from fastapi import Depends

from application.services import ConversionService, CurrencyService, RateService
from config.settings import get_settings
from domain.constants.currencies import DEFAULT_REGISTRY
from domain.models.currency import CurrencyRegistry
from infrastructure.providers import ExchangeRateHostProvider, ExchangeRateProvider

logger = logging.getLogger(__name__)


class AppDependencies:
	"""Container for application-wide singleton dependencies."""

	registry: CurrencyRegistry = DEFAULT_REGISTRY
	provider: ExchangeRateProvider | None = None


deps = AppDependencies()


def init_dependencies() -> None:
	"""Initialize all singleton dependencies. Called at app startup."""
	logger.info('Initializing dependencies...')
	settings = get_settings()

	deps.registry = DEFAULT_REGISTRY
	deps.provider = ExchangeRateHostProvider(
		api_key=settings.EXCHANGE_RATE_API_KEY,
		base_url=settings.EXCHANGE_RATE_API_URL,
		timeout=settings.RATE_API_TIMEOUT,
	)
	logger.info('Dependencies initialized')


async def cleanup_dependencies() -> None:
	logger.info('Cleaning up dependencies...')

	if deps.provider:
		await deps.provider.close()
		deps.provider = None

	logger.info('Cleanup complete')


def get_currency_registry() -> CurrencyRegistry:
	return deps.registry


def get_provider() -> ExchangeRateProvider:
	if deps.provider is None:
		raise RuntimeError('Exchange rate provider not initialized')
	return deps.provider


def get_currency_service(
	registry: Annotated[CurrencyRegistry, Depends(get_currency_registry)],
) -> CurrencyService:
	return CurrencyService(registry=registry)


def get_rate_service(
	provider: Annotated[ExchangeRateProvider, Depends(get_provider)],
) -> RateService:
	return RateService(provider=provider)


def get_conversion_service(
	rate_service: Annotated[RateService, Depends(get_rate_service)],
	currency_service: Annotated[CurrencyService, Depends(get_currency_service)],
) -> ConversionService:
	return ConversionService(rate_service=rate_service, currency_service=currency_service)
