from __future__ import annotations

from datetime import datetime

from pydantic import Field

from .models import RequestModel, WireModel


class Client(WireModel):
    id: int
    name: str
    phone: str
    phone2: str | None = Field(default=None, alias="phone_additional")
    address: str | None = None
    passport_series: str | None = None
    passport_number: str | None = None
    pnfl: str | None = None
    description: str | None = None
    when_given: str | None = None
    birth_day: str | None = Field(default=None, alias="birthday")
    image: str | None = None
    image_passport: str | None = Field(default=None, alias="image_pasport")
    branch_id: int | None = None
    branch_name: str | None = None
    created_at: datetime
    updated_at: datetime | None = None

    @property
    def passport_display(self) -> str:
        if self.passport_series and self.passport_number:
            return f"{self.passport_series} {self.passport_number}"
        return "-"


class ClientOption(WireModel):
    """Short client entry used to fill pickers."""

    id: int
    name: str
    phone: str | None = None
    branch_id: int | None = None
    branch_name: str | None = None


class ClientRequest(RequestModel):
    name: str
    phone: str
    phone2: str | None = Field(default=None, serialization_alias="phone_additional")
    address: str | None = None
    passport_series: str | None = None
    passport_number: str | None = None
    pnfl: str | None = None
    description: str | None = None
    when_given: str | None = None
    birth_day: str | None = Field(default=None, serialization_alias="birthday")
    image: str | None = None
    image_passport: str | None = Field(default=None, serialization_alias="image_pasport")
    branch_id: int | None = None

    def to_wire(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class ImageUploadResult(WireModel):
    image_path: str
