class CurrencyException(Exception):
    pass


class ValidationError(CurrencyException):
    pass


class InvalidAmountError(ValidationError):
    pass


class MissingCurrencyError(ValidationError):
    pass


class UnsupportedCurrencyError(ValidationError):
    pass


class ProviderError(CurrencyException):
    pass


class MissingRateError(ProviderError):
    pass
