from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Type, Union
from pydantic import BaseModel, ValidationError


@dataclass(frozen=True)
class ValidationSuccess:
    data: Any


@dataclass(frozen=True)
class ValidationFailure:
    field_errors: Dict[str, List[str]] = field(default_factory=dict)
    summary_message: str = ""


ValidationResult = Union[ValidationSuccess, ValidationFailure]


def validate_invoice_form(schema: Type[BaseModel], raw: Mapping[str, Any]) -> ValidationResult:
    """
    Validate raw form values against an invoice form schema without raising

    Every error on a field is reported with the schema's message for that
    field, so the form always shows the same text for the same input.

    Args:
        schema: CreateInvoice or UpdateInvoice
        raw: Values keyed by form field name (customerId, amount, status)

    Returns:
        ValidationSuccess holding the schema instance, or ValidationFailure
    """
    try:
        return ValidationSuccess(data=schema.model_validate(dict(raw)))
    except ValidationError as e:
        field_messages: Dict[str, str] = getattr(schema, "field_messages", {})
        field_errors: Dict[str, List[str]] = {}
        for error in e.errors():
            name = str(error["loc"][0]) if error["loc"] else "form"
            message = field_messages.get(name, error["msg"])
            messages = field_errors.setdefault(name, [])
            if message not in messages:
                messages.append(message)
        return ValidationFailure(
            field_errors=field_errors,
            summary_message=getattr(schema, "failure_message", ""),
        )
