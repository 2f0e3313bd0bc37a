from decimal import Decimal

from pydantic import BaseModel, model_validator


class PriceSummary(BaseModel):
    highest: Decimal
    lowest: Decimal
    prices: list[Decimal] = []  # accepted samples, input order

    @model_validator(mode="after")
    def _check_bounds(self) -> "PriceSummary":
        if self.highest < self.lowest:
            raise ValueError("highest price must not be lower than lowest price")
        return self
