from pydantic import BaseModel, ConfigDict, Field, field_validator


class ConversionRequest(BaseModel):
	"""Query parameters of a conversion; values are validated by the service."""

	model_config = ConfigDict(populate_by_name=True)

	amount: str | None = None
	from_currency: str | None = Field(default=None, alias='from')
	to_currency: str | None = Field(default=None, alias='to')

	@field_validator('from_currency', 'to_currency')
	@classmethod
	def uppercase_currency(cls, v: str | None):
		return v.strip().upper() if v is not None else v
