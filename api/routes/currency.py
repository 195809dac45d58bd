from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from api.dependencies import get_conversion_service, get_currency_service
from api.schemas import (
	ConversionRequest,
	ConversionResponse,
	CurrencyDetailsResponse,
	ErrorResponse,
	SupportedCurrenciesResponse,
)
from application.services import ConversionService, CurrencyService

router = APIRouter(prefix='/api', tags=['currency'])


@router.get(
	'/convert',
	response_model=ConversionResponse,
	status_code=status.HTTP_200_OK,
	responses={
		400: {'model': ErrorResponse, 'description': 'Invalid amount or currency'},
		500: {'model': ErrorResponse, 'description': 'Internal error'},
	},
	summary='Convert currency amount',
)
async def convert_currency(
	service: Annotated[ConversionService, Depends(get_conversion_service)],
	amount: Annotated[str | None, Query()] = None,
	from_currency: Annotated[str | None, Query(alias='from')] = None,
	to_currency: Annotated[str | None, Query(alias='to')] = None,
) -> ConversionResponse:
	request = ConversionRequest(amount=amount, from_currency=from_currency, to_currency=to_currency)
	result = await service.convert(request.amount, request.from_currency, request.to_currency)
	return ConversionResponse.from_result(result)


def _supported_currencies(service: CurrencyService) -> SupportedCurrenciesResponse:
	currencies = service.get_supported_currencies()
	return SupportedCurrenciesResponse(currencies=currencies, count=len(currencies))


@router.post(
	'/convert',
	response_model=SupportedCurrenciesResponse,
	status_code=status.HTTP_200_OK,
	summary='List supported currencies (legacy client route)',
)
async def list_currencies_legacy(
	service: Annotated[CurrencyService, Depends(get_currency_service)],
) -> SupportedCurrenciesResponse:
	return _supported_currencies(service)


@router.get(
	'/currencies',
	response_model=SupportedCurrenciesResponse,
	status_code=status.HTTP_200_OK,
	summary='List supported currencies',
)
async def get_supported_currencies(
	service: Annotated[CurrencyService, Depends(get_currency_service)],
) -> SupportedCurrenciesResponse:
	return _supported_currencies(service)


@router.get(
	'/currencies/details',
	response_model=CurrencyDetailsResponse,
	status_code=status.HTTP_200_OK,
	summary='List supported currencies with names and symbols',
)
async def get_currency_details(
	service: Annotated[CurrencyService, Depends(get_currency_service)],
) -> CurrencyDetailsResponse:
	details = service.get_currency_details()
	return CurrencyDetailsResponse(currencies=details, count=len(details))
