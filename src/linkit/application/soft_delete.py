"""Application service: Soft Delete / Restore / Purge for any entity.

Normal deletion only flips the ``is_deleted`` flag so records can be
restored.  ``PurgeHandler`` is the one path that physically removes a
record; it only accepts records that are already soft-deleted.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

from linkit.domain.exceptions import EntityNotFoundError, ValidationError
from linkit.domain.model.actor import Actor
from linkit.domain.repository.base import Repository

logger = logging.getLogger(__name__)


class _EntityHandler:

    def __init__(self, repo: Repository[Any, Any], entity_name: str) -> None:
        self._repo = repo
        self._entity_name = entity_name

    def _load(self, entity_id: Any) -> Any:
        entity = self._repo.get_by_id(entity_id, include_deleted=True)
        if entity is None:
            raise EntityNotFoundError(f"{self._entity_name} '{entity_id}' not found")
        return entity


class SoftDeleteHandler(_EntityHandler):

    def handle(self, entity_id: Any, actor: Actor, now: datetime | None = None) -> None:
        actor.require_admin()
        entity = self._load(entity_id)
        entity.soft_delete(now)
        self._repo.save(entity)
        logger.info(
            "Entity soft-deleted",
            extra={"entity": self._entity_name, "entity_id": entity_id, "actor": actor.id},
        )


class RestoreHandler(_EntityHandler):

    def handle(self, entity_id: Any, actor: Actor) -> None:
        actor.require_admin()
        entity = self._load(entity_id)
        entity.restore()
        self._repo.save(entity)
        logger.info(
            "Entity restored",
            extra={"entity": self._entity_name, "entity_id": entity_id, "actor": actor.id},
        )


class PurgeHandler(_EntityHandler):

    def handle(self, entity_id: Any, actor: Actor) -> None:
        actor.require_admin()
        entity = self._load(entity_id)
        if not entity.is_deleted:
            raise ValidationError(
                f"{self._entity_name} must be deleted before it can be purged"
            )
        self._repo.delete(entity_id)
        logger.warning(
            "Entity purged",
            extra={"entity": self._entity_name, "entity_id": entity_id, "actor": actor.id},
        )
