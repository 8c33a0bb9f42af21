"""
GrubDash — Data-driven request validation

A single engine validates the `data` object of every request. Each resource
describes its fields with a `ResourceRules` value; `ResourceRules.validate`
runs the checks in a fixed order and raises `ValidationError` on the first
failure, so nothing downstream runs for an invalid payload.

Check order:
  1. required fields present and truthy
  2. text fields are non-empty strings
  3. numeric fields are integers greater than 0
  4. collection field is a non-empty list whose lines carry a positive integer
  5. enum field is one of the allowed values
"""
from dataclasses import dataclass, replace
from typing import Any, Mapping, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from grubdash.core.errors import ConflictError, ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


def is_falsy(value: Any) -> bool:
    """Falsiness as a JSON client sees it: empty lists/objects are truthy."""
    if value is None or value is False or value == "":
        return True
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value == 0 or value != value  # NaN
    return False


def is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


@dataclass(frozen=True)
class ResourceRules:
    resource: str
    required: tuple[str, ...] = ()
    text: tuple[str, ...] = ()
    positive: tuple[str, ...] = ()
    collection: str | None = None
    collection_item: str = "Item"
    collection_quantity: str = "quantity"
    enum_field: str | None = None
    enum_values: tuple[str, ...] = ()

    def validate(self, payload: Mapping[str, Any]) -> None:
        for field in self.required:
            if is_falsy(payload.get(field)):
                raise ValidationError(f"{self.resource} must include a {field}")

        for field in self.text:
            value = payload.get(field)
            if value is not None and (not isinstance(value, str) or value == ""):
                raise ValidationError(f"{self.resource} must include a {field}")

        for field in self.positive:
            if not is_positive_int(payload.get(field)):
                raise ValidationError(
                    f"{self.resource} must have a {field} that is an integer greater than 0"
                )

        if self.collection is not None:
            self._validate_collection(payload.get(self.collection))

        if self.enum_field is not None and payload.get(self.enum_field) not in self.enum_values:
            raise ValidationError(
                f"{self.resource} must have a {self.enum_field} of {', '.join(self.enum_values)}"
            )

    def _validate_collection(self, lines: Any) -> None:
        if not isinstance(lines, list) or not lines:
            raise ValidationError(
                f"{self.resource} must include at least on {self.collection_item.lower()}"
            )
        for index, line in enumerate(lines):
            quantity = line.get(self.collection_quantity) if isinstance(line, dict) else None
            if not is_positive_int(quantity):
                raise ValidationError(
                    f"{self.collection_item} {index} must have a {self.collection_quantity} "
                    f"that is an integer greater than 0"
                )

    def check_route_id(self, payload: Mapping[str, Any], route_id: str) -> None:
        """Reject a payload whose own id disagrees with the id in the path."""
        payload_id = payload.get("id")
        if not is_falsy(payload_id) and payload_id != route_id:
            raise ConflictError(
                f"{self.resource} id does not match route id. "
                f"{self.resource}: {payload_id}, Route: {route_id}"
            )

    def with_enum(self, field: str, values: tuple[str, ...]) -> "ResourceRules":
        return replace(self, required=self.required + (field,), enum_field=field, enum_values=values)


def build_record(resource: str, model: type[ModelT], **fields: Any) -> ModelT:
    """Instantiate a record from validated fields, reporting type mismatches as 400s."""
    try:
        return model(**fields)
    except PydanticValidationError as exc:
        error = exc.errors()[0]
        location = ".".join(str(part) for part in error["loc"])
        raise ValidationError(f"{resource} has an invalid {location}: {error['msg']}") from exc
