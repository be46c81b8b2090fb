from __future__ import annotations

from dataclasses import dataclass

from .exceptions import ApiError, ClientValidationError, ErrorKind, NotFoundError

_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.UNAUTHENTICATED: "Tizimga qayta kiring",
    ErrorKind.INVALID_CREDENTIALS: "Telefon raqam yoki parol noto'g'ri",
    ErrorKind.FORBIDDEN: "Sizda ushbu manbaga kirish uchun ruxsat yo'q",
    ErrorKind.NOT_FOUND: "Ma'lumot topilmadi",
    ErrorKind.RATE_LIMITED: "Ko'p marta urinish. Iltimos biroz kuting",
    ErrorKind.SERVER_MISCONFIGURED: "Server HTML qaytardi, JSON emas. Base URL yoki endpoint noto'g'ri",
    ErrorKind.ENVELOPE_MALFORMED: "Server javobini o'qishda xatolik",
    ErrorKind.TRANSPORT: "Server bilan bog'lanishda xatolik",
    ErrorKind.APPLICATION_FAILURE: "Amalni bajarib bo'lmadi",
    ErrorKind.SERVER_ERROR: "Serverda xatolik yuz berdi",
    ErrorKind.VALIDATION: "Bir yoki bir nechta validation xatoliklari yuz berdi.",
    ErrorKind.LOCAL_STORAGE: "Faylni o'qish yoki saqlashda xatolik",
}

_ENTITY_NAMES = {
    "branch": "Filial",
    "client": "Mijoz",
    "invoice": "Faktura",
    "user": "Foydalanuvchi",
}


@dataclass(frozen=True)
class UserFacingError:
    message: str
    details: str | None = None

    @property
    def technical_details(self) -> str | None:
        if self.details:
            return self.details
        return None


def to_user_facing_error(exc: ApiError) -> UserFacingError:
    primary = _MESSAGES.get(exc.kind, "Noma'lum xatolik")
    if isinstance(exc, NotFoundError) and exc.entity:
        name = _ENTITY_NAMES.get(exc.entity, exc.entity.capitalize())
        primary = f"{name} topilmadi (ID: {exc.key})"
    elif exc.kind is ErrorKind.APPLICATION_FAILURE and exc.message.strip():
        primary = exc.message.strip()
    elif isinstance(exc, ClientValidationError) and exc.issues:
        primary = f"{primary} {exc.message}"

    details = f"{exc.code} (HTTP {exc.status_code})"
    if exc.details:
        details = f"{details}: {exc.details}"
    return UserFacingError(message=primary, details=details)
