"""CLI commands for the reference data: products, addons, geography and
packages."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import click

from linkit.application.add_addon import AddAddonHandler
from linkit.application.add_city import AddCityHandler
from linkit.application.add_country import AddCountryHandler
from linkit.application.add_package import AddPackageHandler, PackageSpec
from linkit.application.add_product import AddCardDesignHandler, AddProductHandler
from linkit.application.soft_delete import (
    PurgeHandler,
    RestoreHandler,
    SoftDeleteHandler,
)
from linkit.application.toggle_active import ToggleCityHandler, TogglePackageHandler
from linkit.application.update_product import UpdateProductHandler
from linkit.domain.model.actor import Actor
from linkit.domain.model.addon import AddonInputType
from linkit.domain.model.package import PackageType
from linkit.domain.model.value_objects import OPEN_ENDED_MAX
from linkit.domain.repository.base import Repository
from linkit.infrastructure.bootstrap import (
    addon_repository,
    city_repository,
    country_repository,
    package_repository,
    pricing_policy,
    product_repository,
)
from linkit.infrastructure.cli.common import domain_errors, pass_actor


def lifecycle_commands(
    label: str, repo_factory: Callable[[], Repository[Any, Any]]
) -> list[click.Command]:
    """Build the delete / restore / purge commands for one entity type."""

    @click.command("delete")
    @click.option("--id", "entity_id", required=True, help=f"{label} ID.")
    @pass_actor
    def delete(actor: Actor, entity_id: str) -> None:
        with domain_errors():
            SoftDeleteHandler(repo_factory(), label).handle(entity_id, actor)
        click.echo(f"{label} '{entity_id}' deleted.")

    @click.command("restore")
    @click.option("--id", "entity_id", required=True, help=f"{label} ID.")
    @pass_actor
    def restore(actor: Actor, entity_id: str) -> None:
        with domain_errors():
            RestoreHandler(repo_factory(), label).handle(entity_id, actor)
        click.echo(f"{label} '{entity_id}' restored.")

    @click.command("purge")
    @click.option("--id", "entity_id", required=True, help=f"{label} ID.")
    @click.confirmation_option(prompt=f"Permanently remove this {label.lower()}?")
    @pass_actor
    def purge(actor: Actor, entity_id: str) -> None:
        with domain_errors():
            PurgeHandler(repo_factory(), label).handle(entity_id, actor)
        click.echo(f"{label} '{entity_id}' purged.")

    delete.help = f"Soft-delete a {label.lower()} (admin)."
    restore.help = f"Restore a soft-deleted {label.lower()} (admin)."
    purge.help = f"Permanently remove a soft-deleted {label.lower()} (admin)."
    return [delete, restore, purge]


# --- Products -------------------------------------------------------------------


@click.command("add")
@click.option("--title", required=True, help="Product title.")
@click.option("--price", required=True, help="Price (e.g. 25.00).")
@click.option("--image", "images", multiple=True, help="Image path (repeatable).")
@pass_actor
def product_add(actor: Actor, title: str, price: str, images: tuple[str, ...]) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repo=product_repository(), pricing_policy=pricing_policy())

    with domain_errors():
        product = handler.handle(title=title, price=price, actor=actor, images=list(images))

    click.echo(f"Product #{product.id} '{product.title}' added at {product.price}")


@click.command("list")
@click.option("--all", "include_deleted", is_flag=True, help="Include deleted products.")
def product_list(include_deleted: bool) -> None:
    """List all products in the catalog."""
    with domain_errors():
        products = product_repository().list_all(include_deleted=include_deleted)

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Title':<30} {'Price':>14} {'Designs':>8}")
    click.echo("-" * 61)
    for p in products:
        flag = " (deleted)" if p.is_deleted else ""
        click.echo(
            f"{p.id:<6} {p.title:<30} {str(p.price):>14} {len(p.card_designs):>8}{flag}"
        )


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--price", default=None, help="New price (e.g. 29.99).")
@click.option("--title", default=None, help="New title.")
@pass_actor
def product_update(
    actor: Actor, product_id: str, price: str | None, title: str | None
) -> None:
    """Update a product's price or title."""
    if price is None and title is None:
        raise click.UsageError("Pass --price and/or --title")
    handler = UpdateProductHandler(product_repo=product_repository(), pricing_policy=pricing_policy())

    with domain_errors():
        product = handler.handle(product_id, actor, new_price=price, new_title=title)

    click.echo(f"Product #{product.id} '{product.title}' now costs {product.price}")


@click.command("add-design")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--color", required=True, help="Colour code (e.g. #000000).")
@click.option("--color-name", required=True, help="Colour name shown to customers.")
@click.option("--image", default=None, help="Preview image path.")
@pass_actor
def product_add_design(
    actor: Actor, product_id: str, color: str, color_name: str, image: str | None
) -> None:
    """Add a card colour variant to a product."""
    handler = AddCardDesignHandler(product_repo=product_repository())

    with domain_errors():
        handler.handle(product_id, color, color_name, actor, image=image)

    click.echo(f"Product #{product_id}: added {color_name} ({color}) design.")


# --- Addons -------------------------------------------------------------------


@click.command("add")
@click.option("--title", required=True, help="Addon title.")
@click.option("--price", required=True, help="Price (e.g. 5.00).")
@click.option(
    "--input-type",
    type=click.Choice([t.value for t in AddonInputType]),
    default=AddonInputType.TEXT.value,
    help="How the customer supplies a value.",
)
@click.option("--option", "options", multiple=True, help="Choice for radio/select addons.")
@pass_actor
def addon_add(
    actor: Actor, title: str, price: str, input_type: str, options: tuple[str, ...]
) -> None:
    """Add an optional priced extra."""
    handler = AddAddonHandler(addon_repo=addon_repository(), pricing_policy=pricing_policy())

    with domain_errors():
        addon = handler.handle(title, price, actor, input_type=input_type, options=list(options))

    click.echo(f"Addon #{addon.id} '{addon.title}' added at {addon.price}")


@click.command("list")
def addon_list() -> None:
    """List addons."""
    with domain_errors():
        addons = addon_repository().list_all()

    if not addons:
        click.echo("No addons found.")
        return
    click.echo(f"{'ID':<6} {'Title':<30} {'Type':<8} {'Price':>14}")
    click.echo("-" * 61)
    for a in addons:
        click.echo(f"{a.id:<6} {a.title:<30} {a.input_type.value:<8} {str(a.price):>14}")


# --- Countries ----------------------------------------------------------------


@click.command("add")
@click.option("--name", required=True, help="Country name.")
@click.option("--code", required=True, help="2-3 letter country code.")
@click.option("--order", "display_order", type=int, default=0, help="Display order.")
@pass_actor
def country_add(actor: Actor, name: str, code: str, display_order: int) -> None:
    """Add a delivery country."""
    handler = AddCountryHandler(country_repo=country_repository())

    with domain_errors():
        country = handler.handle(name, code, actor, display_order=display_order)

    click.echo(f"Country #{country.id} {country.name} ({country.code}) added")


@click.command("list")
def country_list() -> None:
    """List delivery countries."""
    with domain_errors():
        countries = sorted(
            country_repository().list_all(), key=lambda c: (c.display_order, c.name)
        )

    if not countries:
        click.echo("No countries found.")
        return
    for c in countries:
        state = "" if c.is_active else " (inactive)"
        click.echo(f"{c.id:<6} {c.code:<4} {c.name}{state}")


# --- Cities -------------------------------------------------------------------


@click.command("add")
@click.option("--name", required=True, help="City name.")
@click.option("--country", "country_id", required=True, help="Country ID.")
@click.option("--fee", "delivery_fee", required=True, help="Delivery fee (e.g. 3.00).")
@click.option("--order", "display_order", type=int, default=0, help="Display order.")
@pass_actor
def city_add(
    actor: Actor, name: str, country_id: str, delivery_fee: str, display_order: int
) -> None:
    """Add a delivery city with its fee."""
    handler = AddCityHandler(
        city_repo=city_repository(),
        country_repo=country_repository(),
        pricing_policy=pricing_policy(),
    )

    with domain_errors():
        city = handler.handle(name, country_id, delivery_fee, actor, display_order=display_order)

    click.echo(f"City #{city.id} {city.name} added (delivery {city.delivery_fee})")


@click.command("list")
@click.option("--country", "country_id", required=True, help="Country ID.")
def city_list(country_id: str) -> None:
    """List the cities of a country."""
    with domain_errors():
        cities = city_repository().list_by_country(country_id)

    if not cities:
        click.echo("No cities found.")
        return
    for c in cities:
        state = "" if c.is_active else " (inactive)"
        click.echo(f"{c.id:<6} {c.name:<24} {str(c.delivery_fee):>12}{state}")


@click.command("toggle")
@click.option("--id", "city_id", required=True, help="City ID.")
@pass_actor
def city_toggle(actor: Actor, city_id: str) -> None:
    """Switch a city between active and inactive (admin)."""
    with domain_errors():
        active = ToggleCityHandler(city_repo=city_repository()).handle(city_id, actor)
    click.echo(f"City #{city_id} is now {'active' if active else 'inactive'}.")


# --- Packages -----------------------------------------------------------------


@click.command("add")
@click.option("--name", required=True, help="Package name.")
@click.option("--min", "min_quantity", type=int, required=True, help="Minimum cards.")
@click.option(
    "--max", "max_quantity", type=int, default=OPEN_ENDED_MAX, help="Maximum cards."
)
@click.option("--price", "price_per_card", required=True, help="Price per card.")
@click.option(
    "--type",
    "package_type",
    type=click.Choice([t.value for t in PackageType]),
    required=True,
    help="Package tier.",
)
@click.option("--fixed/--custom", "is_fixed_price", default=False, help="Pricing kind.")
@click.option("--feature", "features", multiple=True, help="Feature line (repeatable).")
@click.option("--description", default="", help="Short description.")
@click.option("--order", "display_order", type=int, default=0, help="Display order.")
@click.option("--days", "estimated_days", type=int, default=10, help="Estimated days.")
@pass_actor
def package_add(
    actor: Actor,
    name: str,
    min_quantity: int,
    max_quantity: int,
    price_per_card: str,
    package_type: str,
    is_fixed_price: bool,
    features: tuple[str, ...],
    description: str,
    display_order: int,
    estimated_days: int,
) -> None:
    """Add a quantity package."""
    spec = PackageSpec(
        name=name,
        min_quantity=min_quantity,
        max_quantity=max_quantity,
        price_per_card=price_per_card,
        package_type=package_type,
        is_fixed_price=is_fixed_price,
        features=list(features),
        description=description,
        display_order=display_order,
        estimated_days=estimated_days,
    )
    handler = AddPackageHandler(package_repo=package_repository(), pricing_policy=pricing_policy())

    with domain_errors():
        package = handler.handle(spec, actor)

    click.echo(
        f"Package #{package.id} '{package.name}' added for "
        f"{package.quantity_display} cards"
    )


@click.command("list")
def package_list() -> None:
    """List packages."""
    with domain_errors():
        packages = sorted(package_repository().list_all(), key=lambda p: p.display_order)

    if not packages:
        click.echo("No packages found.")
        return
    click.echo(f"{'ID':<6} {'Name':<20} {'Cards':<12} {'Pricing':<8} {'Per card':>14}")
    click.echo("-" * 64)
    for p in packages:
        kind = "fixed" if p.pricing.is_fixed_price else "custom"
        state = "" if p.is_active else " (inactive)"
        click.echo(
            f"{p.id:<6} {p.name:<20} {p.quantity_display:<12} {kind:<8} "
            f"{str(p.pricing.price_per_card):>14}{state}"
        )


@click.command("toggle")
@click.option("--id", "package_id", required=True, help="Package ID.")
@pass_actor
def package_toggle(actor: Actor, package_id: str) -> None:
    """Switch a package between active and inactive (admin)."""
    with domain_errors():
        active = TogglePackageHandler(package_repo=package_repository()).handle(
            package_id, actor
        )
    click.echo(f"Package #{package_id} is now {'active' if active else 'inactive'}.")
