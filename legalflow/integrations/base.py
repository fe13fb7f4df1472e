from __future__ import annotations

from abc import ABC, abstractmethod


class IntegrationBase(ABC):
    """Abstract base for outbound collaborators (webhook, AI service)."""

    @property
    @abstractmethod
    def name(self) -> str:
        ...

    @abstractmethod
    def is_configured(self) -> bool:
        """Whether the settings carry what this integration needs to run."""
        ...
