"""Application service: toggle the active flag on cities and packages.

Inactive records stay in the catalog but are not offered for new orders.
"""

from __future__ import annotations

from linkit.domain.exceptions import EntityNotFoundError
from linkit.domain.model.actor import Actor
from linkit.domain.repository.city_repository import CityRepository
from linkit.domain.repository.package_repository import PackageRepository


class ToggleCityHandler:

    def __init__(self, city_repo: CityRepository) -> None:
        self._city_repo = city_repo

    def handle(self, city_id: str, actor: Actor) -> bool:
        actor.require_admin()
        city = self._city_repo.get_by_id(city_id)
        if city is None:
            raise EntityNotFoundError(f"City with ID '{city_id}' not found")
        active = city.toggle_active()
        self._city_repo.save(city)
        return active


class TogglePackageHandler:

    def __init__(self, package_repo: PackageRepository) -> None:
        self._package_repo = package_repo

    def handle(self, package_id: str, actor: Actor) -> bool:
        actor.require_admin()
        package = self._package_repo.get_by_id(package_id)
        if package is None:
            raise EntityNotFoundError(f"Package with ID '{package_id}' not found")
        active = package.toggle_active()
        self._package_repo.save(package)
        return active
