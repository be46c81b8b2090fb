from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Annotated, Any, Generic, List, TypeVar

from pydantic import AliasChoices, BaseModel, BeforeValidator, ConfigDict, Field, PlainSerializer

T = TypeVar("T")


def lenient_decimal(value: Any) -> Decimal | None:
    """Number or numeric string -> Decimal; anything else is treated as absent."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        return value
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        return Decimal(str(value))
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            parsed = Decimal(text)
        except InvalidOperation:
            return None
        return parsed if parsed.is_finite() else None
    return None


def _decimal_to_number(value: Decimal | None) -> int | float | None:
    if value is None:
        return None
    if value == value.to_integral_value():
        return int(value)
    return float(value)


# Decimals go over the wire as JSON numbers, the way the backend stores them.
WireDecimal = Annotated[Decimal, PlainSerializer(_decimal_to_number, when_used="json")]
LenientDecimal = Annotated[
    Decimal | None,
    BeforeValidator(lenient_decimal),
    PlainSerializer(_decimal_to_number, when_used="json"),
]


class WireModel(BaseModel):
    """Immutable snapshot of a server record."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )


class RequestModel(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)


class LoginResult(WireModel):
    token: str = Field(min_length=1)
    token_type: str = "Bearer"


class UserInfo(WireModel):
    id: int
    name: str = ""
    username: str = Field(default="", validation_alias=AliasChoices("username", "phone"))
    role: str = ""
    branch_id: int | None = Field(default=None, validation_alias=AliasChoices("branch_id", "filial_id"))
    branch_name: str | None = Field(default=None, validation_alias=AliasChoices("branch_name", "filial_name"))


class PaginationMeta(WireModel):
    current_page: int = 1
    last_page: int = 1
    per_page: int = 0
    total: int = 0
    from_: int | None = Field(default=None, alias="from")
    to: int | None = None


class PaginatedResult(WireModel, Generic[T]):
    data: List[T] = Field(default_factory=list)
    current_page: int = 1
    last_page: int = 1
    per_page: int = 0
    total: int = 0
    from_: int | None = None
    to: int | None = None

    @property
    def is_last_page(self) -> bool:
        return self.current_page >= self.last_page

    @property
    def has_next(self) -> bool:
        return not self.is_last_page
