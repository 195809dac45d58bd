from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from domain.models.currency import ConversionResult


class ConversionResponse(BaseModel):
	model_config = ConfigDict(
		alias_generator=to_camel,
		populate_by_name=True,
		json_schema_extra={
			'example': {
				'originalAmount': 100.0,
				'from': 'USD',
				'to': 'BRL',
				'convertedAmount': 500.0,
				'rate': 5.0,
				'source': 'API',
			}
		},
	)

	original_amount: float = Field(..., description='Original amount requested')
	from_currency: str = Field(..., alias='from', description='Source currency code')
	to_currency: str = Field(..., alias='to', description='Target currency code')
	converted_amount: float = Field(..., description='Converted amount, 2 decimal places')
	rate: float | None = Field(..., description='Effective rate, 4 decimal places')
	source: str = Field(..., description="'API' or 'Fixed rates'")

	@classmethod
	def from_result(cls, result: ConversionResult) -> 'ConversionResponse':
		return cls(
			original_amount=result.original_amount,
			from_currency=result.from_currency,
			to_currency=result.to_currency,
			converted_amount=result.converted_amount,
			rate=result.rate,
			source=result.source,
		)


class SupportedCurrenciesResponse(BaseModel):
	model_config = ConfigDict(
		json_schema_extra={'examples': [{'currencies': ['USD', 'EUR', 'BRL'], 'count': 3}]}
	)

	currencies: list[str] = Field(description='List of currency codes')
	count: int = Field(description='Number of supported currencies')


class CurrencyDetail(BaseModel):
	code: str
	name: str
	symbol: str


class CurrencyDetailsResponse(BaseModel):
	currencies: list[CurrencyDetail]
	count: int


class ErrorResponse(BaseModel):
	error: str = Field(..., description='Human-readable error message')
