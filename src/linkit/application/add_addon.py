"""Application service: Add Addon use case."""

from __future__ import annotations

from linkit.domain.exceptions import ValidationError
from linkit.domain.model.actor import Actor
from linkit.domain.model.addon import Addon, AddonInputType
from linkit.domain.repository.addon_repository import AddonRepository
from linkit.domain.service.pricing import PricingPolicy


class AddAddonHandler:

    def __init__(
        self,
        addon_repo: AddonRepository,
        pricing_policy: PricingPolicy | None = None,
    ) -> None:
        self._addon_repo = addon_repo
        self._pricing_policy = pricing_policy or PricingPolicy()

    def handle(
        self,
        title: str,
        price: str,
        actor: Actor,
        input_type: str = AddonInputType.TEXT.value,
        options: list[str] | None = None,
    ) -> Addon:
        actor.require_admin()
        if not title or not title.strip():
            raise ValidationError("Addon title is required")
        try:
            kind = AddonInputType(input_type)
        except ValueError:
            raise ValidationError(
                "Input type must be one of: "
                + ", ".join(t.value for t in AddonInputType)
            ) from None
        if kind in (AddonInputType.RADIO, AddonInputType.SELECT) and not options:
            raise ValidationError(f"A {kind.value} addon needs at least one option")

        addon = Addon(
            id=self._addon_repo.next_id(),
            title=title.strip(),
            price=self._pricing_policy.money(price),
            input_type=kind,
            options=list(options or []),
        )
        self._addon_repo.save(addon)
        return addon
