"""Validation Layer — deserialize-then-validate for mutating requests.

Invariants:
    - Validation runs to completion: every violation is reported, never only the first
    - One message per violation, formatted "<field>: <message>"
    - Validation never touches the store
    - Callers receive either a valid model instance or ValidationFailedError
"""

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from helium.core.errors import ValidationFailedError

ModelT = TypeVar("ModelT", bound=BaseModel)


def format_violation(error: dict) -> str:
    """Render one pydantic error dict as a human-readable message."""
    location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
    message = error.get("msg", "Invalid value")
    # model-level validators report an empty location
    return f"{location}: {message}" if location else message


def flatten_violations(errors: list[dict]) -> list[str]:
    return [format_violation(e) for e in errors]


def validate_document(model: type[ModelT], payload: Any) -> ModelT:
    """Validate payload against model, aggregating all violations."""
    if not isinstance(payload, dict):
        raise ValidationFailedError(["body: Input should be a JSON object"])
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        raise ValidationFailedError(flatten_violations(e.errors())) from e
