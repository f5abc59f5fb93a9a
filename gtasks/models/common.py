"""Shared pieces of the resource models: timestamps, base classes, collections, query options."""

from datetime import datetime, timezone
from typing import Annotated, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, PlainSerializer, ValidationError
from pydantic.alias_generators import to_camel

from gtasks.exceptions import DecodeError


def format_timestamp(value: datetime) -> str:
    """Format a datetime the way the Tasks API writes them: UTC, millisecond precision, `Z` suffix."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


Timestamp = Annotated[datetime, PlainSerializer(format_timestamp, return_type=str, when_used="json")]


class Resource(BaseModel):
    """Base for API resources. Every field is optional and unknown fields are dropped."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    def to_body(self, exclude: set[str] | None = None) -> dict:
        """JSON-ready request body with camelCase keys and no absent fields."""
        return self.model_dump(by_alias=True, exclude_none=True, exclude=exclude, mode="json")


T = TypeVar("T", bound=Resource)
R = TypeVar("R", bound=BaseModel)


class Collection(Resource, Generic[T]):
    kind: str | None = None
    etag: str | None = None
    items: list[T] | None = None
    next_page_token: str | None = None


class QueryOptions(BaseModel):
    """Base for query-string options. Fields are emitted in declaration order."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")

    def to_params(self) -> list[tuple[str, str]]:
        params = []
        for name, field in type(self).model_fields.items():
            value = getattr(self, name)
            if value is None:
                continue
            params.append((field.alias or name, _param_value(value)))
        return params


def _param_value(value) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return format_timestamp(value)
    return str(value)


def parse_resource(model: type[R], data: dict | None) -> R | None:
    """Validate a decoded response body into `model`. Empty bodies give None."""
    if data is None:
        return None
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise DecodeError(f"Response does not match {model.__name__}: {e}") from e
