"""Value types produced by the ingredient-line parser."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, SerializerFunctionWrapHandler, model_serializer


class Amount(BaseModel):
    """A quantity attached to a unit, kept exactly as written."""

    # Non-finite values ("1e400", "1/0") survive a JSON round-trip as Infinity/NaN
    model_config = ConfigDict(frozen=True, ser_json_inf_nan="constants")

    unit: str
    value: float
    upper_value: float | None = None  # only set for ranges like "1-2 cups"
    approximate: bool = Field(default=False, description="Set for 'about' amounts when kept")

    @classmethod
    def of(cls, unit: str, value: float) -> "Amount":
        """Build a plain amount."""
        return cls(unit=unit, value=value)

    @classmethod
    def ranged(cls, unit: str, value: float, upper: float) -> "Amount":
        """Build a range amount such as ``2-3 cups``."""
        return cls(unit=unit, value=value, upper_value=upper)

    @model_serializer(mode="wrap")
    def omit_default_estimate(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        if not self.approximate:
            data.pop("approximate", None)
        return data

    def __str__(self) -> str:
        from ingredient_normalizer.formatting import format_amount

        return format_amount(self)


class Ingredient(BaseModel):
    """A parsed ingredient line: name, amounts and an optional modifier."""

    model_config = ConfigDict(frozen=True, ser_json_inf_nan="constants")

    name: str
    amounts: tuple[Amount, ...] = ()
    modifier: str | None = None

    @classmethod
    def from_line(cls, text: str) -> "Ingredient":
        """Parse a raw ingredient line, raising verbose syntax errors."""
        from ingredient_normalizer.parsing import parse_ingredient_line

        return parse_ingredient_line(text, verbose=True)

    def __str__(self) -> str:
        from ingredient_normalizer.formatting import format_ingredient

        return format_ingredient(self)
