"""Application service: Add Country use case."""

from __future__ import annotations

from linkit.domain.exceptions import ValidationError
from linkit.domain.model.actor import Actor
from linkit.domain.model.country import Country
from linkit.domain.repository.country_repository import CountryRepository


class AddCountryHandler:

    def __init__(self, country_repo: CountryRepository) -> None:
        self._country_repo = country_repo

    def handle(
        self, name: str, code: str, actor: Actor, display_order: int = 0
    ) -> Country:
        actor.require_admin()
        country = Country(
            id=self._country_repo.next_id(),
            name=name,
            code=code,
            display_order=display_order,
        )
        if self._country_repo.get_by_code(country.code) is not None:
            raise ValidationError(f"Country with code '{country.code}' already exists")

        self._country_repo.save(country)
        return country
