# core/pricing.py
"""
Token accounting and USD cost estimation for OpenAI requests.
"""
import logging
from dataclasses import dataclass
from typing import Optional, Tuple

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ModelRate:
    """USD price per million tokens for every model whose name starts with `prefix`."""
    prefix: str
    input_per_million: float
    output_per_million: float


# Order matters: the first matching prefix wins, so the mini variant comes first.
MODEL_RATES: Tuple[ModelRate, ...] = (
    ModelRate(prefix="gpt-4o-mini", input_per_million=0.150, output_per_million=0.600),
    ModelRate(prefix="gpt-4o", input_per_million=5.00, output_per_million=15.00),
)


@dataclass(frozen=True)
class TokenUsage:
    input_tokens: int = 0
    output_tokens: int = 0

    @property
    def total(self) -> int:
        return self.input_tokens + self.output_tokens

    def __add__(self, other: "TokenUsage") -> "TokenUsage":
        return TokenUsage(
            input_tokens=self.input_tokens + other.input_tokens,
            output_tokens=self.output_tokens + other.output_tokens,
        )


def find_rate(model: str) -> Optional[ModelRate]:
    for rate in MODEL_RATES:
        if model.startswith(rate.prefix):
            return rate
    return None


def calculate_cost(model: str, input_tokens: int, output_tokens: int) -> float:
    """
    Estimates the USD cost of a request.

    Models missing from MODEL_RATES are priced at zero. That is a known gap in
    the rate table, so it is logged rather than guessed.
    """
    rate = find_rate(model)
    if rate is None:
        logger.warning(f"No pricing entry for model '{model}'. Reporting a cost of $0.")
        return 0.0

    input_cost = (input_tokens / 1_000_000) * rate.input_per_million
    output_cost = (output_tokens / 1_000_000) * rate.output_per_million
    return input_cost + output_cost
