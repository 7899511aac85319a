"""Fixed settings provider for tests."""

from dishka import Provider, Scope, provide

from blog.config import Settings


class StaticConfigProvider(Provider):
    """Provide a prebuilt Settings object instead of reading the environment.

    Registered after the production config provider so that it takes
    precedence.
    """

    def __init__(self, settings: Settings) -> None:
        super().__init__()
        self._settings = settings

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        return self._settings
