"""Abstract repository for Addon reference data."""

from __future__ import annotations

from abc import abstractmethod

from linkit.domain.model.addon import Addon
from linkit.domain.repository.base import Repository


class AddonRepository(Repository[Addon, str]):

    @abstractmethod
    def next_id(self) -> str:
        """Generate the next unique addon ID."""
