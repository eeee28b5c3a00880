"""Application service: Add City use case.

Cities belong to an existing country; names are unique within it.
"""

from __future__ import annotations

from linkit.domain.exceptions import EntityNotFoundError, ValidationError
from linkit.domain.model.actor import Actor
from linkit.domain.model.city import City
from linkit.domain.repository.city_repository import CityRepository
from linkit.domain.repository.country_repository import CountryRepository
from linkit.domain.service.pricing import PricingPolicy


class AddCityHandler:

    def __init__(
        self,
        city_repo: CityRepository,
        country_repo: CountryRepository,
        pricing_policy: PricingPolicy | None = None,
    ) -> None:
        self._city_repo = city_repo
        self._country_repo = country_repo
        self._pricing_policy = pricing_policy or PricingPolicy()

    def handle(
        self,
        name: str,
        country_id: str,
        delivery_fee: str,
        actor: Actor,
        display_order: int = 0,
    ) -> City:
        actor.require_admin()
        country = self._country_repo.get_by_id(country_id)
        if country is None:
            raise EntityNotFoundError(f"Country with ID '{country_id}' not found")

        city = City(
            id=self._city_repo.next_id(),
            name=name,
            country_id=country.id,
            delivery_fee=self._pricing_policy.money(delivery_fee),
            display_order=display_order,
        )
        for existing in self._city_repo.list_by_country(country.id):
            if existing.same_name_as(city.name):
                raise ValidationError(
                    f"City '{city.name}' already exists in {country.name}"
                )

        self._city_repo.save(city)
        return city
