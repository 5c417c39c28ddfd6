"""Shared plumbing for resource facades."""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING, Any, Iterator, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as ModelValidationError

from ..classifier import Document
from ..errors import SendlyError

if TYPE_CHECKING:  # pragma: no cover
    from ..client import SendlyClient

M = TypeVar("M", bound=BaseModel)


def unwrap(document: Document, *keys: str) -> Any:
    """Pick the first envelope key holding an object, falling back to the whole document."""
    if isinstance(document, dict):
        for key in keys:
            if isinstance(document.get(key), dict):
                return document[key]
    return document


@contextmanager
def decoding(name: str) -> Iterator[None]:
    try:
        yield
    except ModelValidationError as exc:
        raise SendlyError(f"Unexpected {name} response: {exc.error_count()} invalid field(s)") from exc


def parse_model(model: Type[M], document: Any, *keys: str) -> M:
    with decoding(model.__name__):
        return model.model_validate(unwrap(document, *keys))


def parse_list(list_cls: Any, document: Document) -> Any:
    with decoding(list_cls.__name__):
        return list_cls.from_document(document)


class Resource:
    def __init__(self, client: "SendlyClient") -> None:
        self._client = client


__all__ = ["Resource", "decoding", "parse_list", "parse_model", "unwrap"]
