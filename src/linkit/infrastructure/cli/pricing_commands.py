"""CLI commands for pre-quote pricing lookups."""

from __future__ import annotations

import click

from linkit.application.pricing_info import PackagePricingHandler, TierInfoHandler
from linkit.infrastructure.bootstrap import package_repository, pricing_policy
from linkit.infrastructure.cli.common import domain_errors


@click.command("tier")
@click.option("--quantity", type=int, required=True, help="Number of cards.")
def pricing_tier(quantity: int) -> None:
    """Show the pricing tier a card quantity falls in."""
    with domain_errors():
        tier = TierInfoHandler(pricing_policy=pricing_policy()).handle(quantity)

    click.echo(f"{tier.name}: {tier.description} ({tier.pricing_type} pricing)")
    if tier.price_per_card is not None:
        click.echo(f"Price per card: {tier.price_per_card}")
        click.echo(f"Total for {quantity}: {tier.total_for(quantity)}")
    for feature in tier.features:
        click.echo(f"  - {feature}")


@click.command("package")
@click.option("--quantity", type=int, required=True, help="Number of cards.")
@click.option("--package", "package_id", default=None, help="Package ID to price against.")
def pricing_package(quantity: int, package_id: str | None) -> None:
    """Price a card quantity against the package catalog."""
    with domain_errors():
        info = PackagePricingHandler(package_repo=package_repository()).handle(
            quantity, package_id
        )

    click.echo(f"Package: {info.package.name} ({info.package.quantity_display} cards)")
    if info.pricing_type == "fixed":
        click.echo(f"Price per card: {info.price_per_card}")
        click.echo(f"Total for {quantity}: {info.total_price}")
    else:
        click.echo(info.message)
