from collections.abc import Mapping
from dataclasses import dataclass
from typing import Literal

USD = "USD"

RateSourceName = Literal["API", "Fixed rates"]


@dataclass(frozen=True)
class CurrencyRegistry:
    codes: tuple[str, ...]
    names: Mapping[str, str]
    symbols: Mapping[str, str]
    fixed_rates: Mapping[str, Mapping[str, float]]

    def is_supported(self, code: str) -> bool:
        return code in self.codes

    def fixed_rate(self, from_currency: str, to_currency: str) -> float | None:
        return self.fixed_rates.get(from_currency, {}).get(to_currency)

    def name(self, code: str) -> str:
        return self.names[code]

    def symbol(self, code: str) -> str:
        return self.symbols[code]

    @property
    def label(self) -> str:
        return ", ".join(self.codes)


@dataclass(frozen=True)
class LiveRates:
    rates: Mapping[str, float]  # 1 USD = N <code>
    provider: str


@dataclass(frozen=True)
class RatesUnavailable:
    reason: str


RateSource = LiveRates | RatesUnavailable


@dataclass(frozen=True)
class ConversionResult:
    original_amount: float
    from_currency: str
    to_currency: str
    converted_amount: float
    rate: float | None  # undefined when original_amount is 0
    source: RateSourceName
