"""Provider metadata shared by every DI layer."""

from typing import ClassVar, Literal

from dishka import Provider

# Components whose implementation tests can swap out
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Provider carrying mock-selection metadata.

    A mockable component is a provider base with subclasses: one flagged
    ``__is_mock__ = True`` for tests and one production implementation.
    Bases set ``__mock_component__`` so tests can unmock them by name.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False

    @classmethod
    def is_mockable(cls) -> bool:
        return bool(cls.__subclasses__())
