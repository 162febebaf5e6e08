from __future__ import annotations

from typing import Any, Dict, Type, TypeVar

from pydantic import BaseModel, ValidationError

from podio_client.errors import ResponseValidationError

M = TypeVar("M", bound=BaseModel)


class PodioModel(BaseModel):
    """Base for every request/response shape exchanged with the service."""

    def to_payload(self) -> Dict[str, Any]:
        """JSON body sent when this model is used as a request entity."""
        return self.model_dump(mode="json")


def parse_model(model: Type[M], data: Any) -> M:
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise ResponseValidationError(
            f"Response validation failed for {model.__name__}: {exc}",
            payload=data,
        ) from exc
