"""Production container and FastAPI wiring."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from nyumba.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Container with every production implementation.

    Nothing connects until first use; the engine is created lazily when a
    request first needs a session.
    """
    providers = [get_provider(base)() for base in PROVIDERS]
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach the container so ``FromDishka`` parameters resolve per request."""
    setup_dishka(container, app)
