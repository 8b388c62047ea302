from __future__ import annotations

from typing import Protocol

from .model import Settings


class SettingsRepository(Protocol):
    def get(self) -> Settings:
        raise NotImplementedError

    def save(self, settings: Settings) -> None:
        raise NotImplementedError


class InMemorySettingsRepository(SettingsRepository):
    def __init__(self, initial: Settings | None = None):
        self._settings = initial or Settings()

    def get(self) -> Settings:
        return self._settings

    def save(self, settings: Settings) -> None:
        self._settings = settings
