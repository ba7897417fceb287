"""Use case base class."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from pydantic import BaseModel

RequestT = TypeVar("RequestT", bound=BaseModel)
ResponseT = TypeVar("ResponseT", bound=BaseModel)


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """One caller-facing operation.

    Use cases translate request models into domain service calls and wrap
    the results in response models. Domain errors pass through untouched
    for the interface layer to map.
    """

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT: ...
