"""Platform payload formatters and request builders."""

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from umeng_push.errors import PayloadValidationError

M = TypeVar("M", bound=BaseModel)


def coerce_model(model: type[M], value: Any, what: str) -> M:
    """Accept either a model instance or a plain mapping for it."""
    if isinstance(value, model):
        return value
    try:
        return model.model_validate(value)
    except ValidationError as exc:
        raise PayloadValidationError(f"invalid {what}: {describe_errors(exc)}") from exc


def describe_errors(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        loc = ".".join(str(p) for p in error["loc"]) or "value"
        parts.append(f"{loc}: {error['msg']}")
    return "; ".join(parts)
