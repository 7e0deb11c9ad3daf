from typing import Any, Type, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from folio.domain.exceptions import ValidationFailed

T = TypeVar("T")


def validation_details(exc: ValidationError) -> list[dict[str, Any]]:
    return [
        {
            "field": ".".join(str(part) for part in error["loc"]),
            "message": error["msg"],
            "type": error["type"],
        }
        for error in exc.errors(include_url=False)
    ]


def validate_payload(model: Type[BaseModel], payload: Any, message: str = "Invalid input data"):
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise ValidationFailed(message, details=validation_details(exc)) from exc


def validate_with(adapter: TypeAdapter[T], payload: Any, message: str = "Invalid input data") -> T:
    try:
        return adapter.validate_python(payload)
    except ValidationError as exc:
        raise ValidationFailed(message, details=validation_details(exc)) from exc
