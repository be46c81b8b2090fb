"""Decoder for the backend's response envelope.

Successful responses come in a handful of shapes, all keyed by the
backend's own spelling ``resoult``::

    {"success": true, "resoult": {...}}                       # one object
    {"success": true, "resoult": [{...}, ...]}                # plain list
    {"resoult": {"data": [...], "meta": {"current_page": 1}}} # paginated
    {"success": true, "message": "..."}                       # status only

``decode_envelope`` tries them in that order of specificity (paginated,
list, object) and the ``expect_*`` helpers turn the result into typed
models. ``success: false`` is an application failure, never an empty
result.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypeVar, Union

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from .exceptions import ApplicationFailureError, EnvelopeMalformedError
from .models import PaginatedResult, PaginationMeta

RESULT_KEY = "resoult"

M = TypeVar("M", bound=BaseModel)


@dataclass(frozen=True)
class PaginatedEnvelope:
    items: list[dict[str, Any]]
    meta: dict[str, Any]


@dataclass(frozen=True)
class ListEnvelope:
    items: list[dict[str, Any]]


@dataclass(frozen=True)
class ObjectEnvelope:
    item: dict[str, Any]


@dataclass(frozen=True)
class StatusEnvelope:
    success: bool
    message: str | None = None


Envelope = Union[PaginatedEnvelope, ListEnvelope, ObjectEnvelope, StatusEnvelope]


def decode_envelope(payload: Any, *, require_result: bool = True) -> Envelope:
    if not isinstance(payload, dict):
        raise _malformed(f"expected a JSON object, got {type(payload).__name__}", payload)

    success = payload.get("success")
    message = _message(payload)
    if _is_failure(success):
        raise ApplicationFailureError(
            code="APPLICATION_FAILURE",
            message=message or "Server reported a failure",
            raw_payload=payload,
        )

    result = payload.get(RESULT_KEY)
    if result is None:
        if require_result:
            raise _malformed(f"missing '{RESULT_KEY}'", payload)
        return StatusEnvelope(success=True, message=message)

    if isinstance(result, dict) and "data" in result and "meta" in result:
        data = result["data"]
        meta = result["meta"]
        if not isinstance(data, list) or not isinstance(meta, dict):
            raise _malformed("paginated result needs a 'data' list and a 'meta' object", payload)
        return PaginatedEnvelope(items=_objects(data, payload), meta=meta)
    if isinstance(result, list):
        return ListEnvelope(items=_objects(result, payload))
    if isinstance(result, dict):
        return ObjectEnvelope(item=result)
    raise _malformed(f"unsupported '{RESULT_KEY}' type {type(result).__name__}", payload)


def expect_object(payload: Any, model: type[M]) -> M:
    envelope = decode_envelope(payload)
    if not isinstance(envelope, ObjectEnvelope):
        raise _malformed("expected a single object result", payload)
    return _validate(model, envelope.item, payload)


def unwrap_object(payload: Any, model: type[M]) -> M:
    """Like ``expect_object`` but also accepts the record sent without an envelope."""
    if isinstance(payload, dict) and (RESULT_KEY in payload or "success" in payload):
        return expect_object(payload, model)
    if not isinstance(payload, dict):
        raise _malformed(f"expected a JSON object, got {type(payload).__name__}", payload)
    return _validate(model, payload, payload)


def expect_list(payload: Any, model: type[M]) -> list[M]:
    envelope = decode_envelope(payload)
    if isinstance(envelope, (ListEnvelope, PaginatedEnvelope)):
        return [_validate(model, item, payload) for item in envelope.items]
    raise _malformed("expected a list result", payload)


def expect_page(payload: Any, model: type[M]) -> PaginatedResult[M]:
    envelope = decode_envelope(payload)
    if isinstance(envelope, PaginatedEnvelope):
        items = [_validate(model, item, payload) for item in envelope.items]
        meta = _validate(PaginationMeta, envelope.meta, payload)
        return PaginatedResult[model](
            data=items,
            current_page=meta.current_page,
            last_page=meta.last_page,
            per_page=meta.per_page,
            total=meta.total,
            from_=meta.from_,
            to=meta.to,
        )
    if isinstance(envelope, ListEnvelope):
        items = [_validate(model, item, payload) for item in envelope.items]
        return PaginatedResult[model](
            data=items,
            per_page=len(items),
            total=len(items),
            from_=1 if items else None,
            to=len(items) if items else None,
        )
    raise _malformed("expected a paginated result", payload)


def expect_success(payload: Any) -> bool:
    decode_envelope(payload, require_result=False)
    return True


def _is_failure(success: Any) -> bool:
    if isinstance(success, bool):
        return not success
    if isinstance(success, (int, float)):
        return success == 0
    if isinstance(success, str):
        return success.strip().lower() in {"false", "0"}
    return False


def _message(payload: dict[str, Any]) -> str | None:
    message = payload.get("message")
    if message is None:
        return None
    return str(message)


def _objects(items: list[Any], payload: Any) -> list[dict[str, Any]]:
    if not all(isinstance(item, dict) for item in items):
        raise _malformed("list items must be objects", payload)
    return items


def _validate(model: type[M], data: dict[str, Any], payload: Any) -> M:
    try:
        return model.model_validate(data)
    except PydanticValidationError as exc:
        issue = exc.errors()[0] if exc.errors() else {"loc": (), "msg": "invalid"}
        location = ".".join(str(part) for part in issue.get("loc", ())) or model.__name__
        raise _malformed(f"{model.__name__}.{location}: {issue.get('msg')}", payload) from exc


def _malformed(message: str, payload: Any) -> EnvelopeMalformedError:
    return EnvelopeMalformedError(code="ENVELOPE_MALFORMED", message=message, raw_payload=payload)
