"""Preference persistence infrastructure settings."""

from typing import Literal

from pydantic import Field

from infrastructure.configuration.base import InfrastructureSettings


class PersistenceSettings(InfrastructureSettings):
    """Preference store configuration.

    Environment Variables:
        PREFERENCE_STORE_BACKEND: 'memory', 'file' or 'none' (default: memory)
        PREFERENCE_STORE_PATH: JSON file used by the 'file' backend

    Backends:
        - memory: process-local dictionary (development, testing)
        - file: JSON object on disk, survives restarts
        - none: no persistent storage; detection falls back to other signals
    """

    backend: Literal["memory", "file", "none"] = Field(
        default="memory",
        alias="PREFERENCE_STORE_BACKEND",
    )
    path: str = Field(
        default=".preferences.json",
        alias="PREFERENCE_STORE_PATH",
    )
