"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from nyumba.config import AuthSettings, MentorshipSettings, MessagingSettings, Settings
from nyumba.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_mentorship_settings(self, settings: Settings) -> MentorshipSettings:
        """Provide mentorship request rules."""
        return settings.mentorship

    @provide(scope=Scope.APP)
    def provide_messaging_settings(self, settings: Settings) -> MessagingSettings:
        """Provide messaging rules."""
        return settings.messaging
