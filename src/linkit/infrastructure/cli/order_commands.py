"""CLI commands for the Order aggregate."""

from __future__ import annotations

from typing import IO

import click

from linkit.application.create_order import CreateOrderHandler
from linkit.application.dto import OrderDTO
from linkit.application.order_stats import OrderStatsHandler
from linkit.application.show_order import ListOrdersHandler, ShowOrderHandler
from linkit.application.soft_delete import (
    PurgeHandler,
    RestoreHandler,
    SoftDeleteHandler,
)
from linkit.application.update_order import UpdateOrderHandler
from linkit.application.update_order_status import UpdateOrderStatusHandler
from linkit.domain.model.actor import Actor
from linkit.domain.model.order import OrderStatus
from linkit.infrastructure.bootstrap import (
    addon_repository,
    city_repository,
    country_repository,
    delivery_policy,
    order_repository,
    pricing_policy,
    product_repository,
)
from linkit.infrastructure.cli.common import (
    domain_errors,
    echo_json,
    json_option,
    pass_actor,
)
from linkit.infrastructure.cli.payloads import (
    load_payload,
    order_changes,
    place_order_request,
)


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    click.echo(f"Customer: {dto.customer_name}")
    click.echo(f"Product:  {dto.product_title}  ({dto.card_color})")
    click.echo(f"Deliver:  {dto.delivery_address}")
    if dto.estimated_delivery:
        click.echo(f"ETA:      {dto.estimated_delivery:%Y-%m-%d}")
    click.echo()
    click.echo(f"  {'Product price':<20} {dto.product_price:>12.2f}")
    click.echo(f"  {'Printed logo':<20} {dto.logo_surcharge:>12.2f}")
    click.echo(f"  {'Delivery fee':<20} {dto.delivery_fee:>12.2f}")
    click.echo(f"  {'Addons':<20} {dto.addons_total:>12.2f}")
    click.echo(f"  {'-'*33}")
    click.echo(f"  {'Order Total':<20} {dto.formatted_total:>12}")


@click.command("create")
@click.option("--payload", type=click.File("r"), required=True, help="Order JSON file.")
@json_option
@pass_actor
def order_create(actor: Actor, payload: IO[str], as_json: bool) -> None:
    """Place a standard card order."""
    request = place_order_request(load_payload(payload))
    handler = CreateOrderHandler(
        order_repo=order_repository(),
        product_repo=product_repository(),
        city_repo=city_repository(),
        country_repo=country_repository(),
        addon_repo=addon_repository(),
        pricing_policy=pricing_policy(),
        delivery_policy=delivery_policy(),
    )

    with domain_errors():
        dto = handler.handle(request, actor)

    if as_json:
        echo_json(dto.as_dict())
        return
    click.echo(dto.message)
    _display_order(dto)


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
@json_option
@pass_actor
def order_show(actor: Actor, order_id: int, as_json: bool) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_repo=order_repository())

    with domain_errors():
        dto = handler.handle(order_id, actor)

    if as_json:
        echo_json(dto.as_dict())
    else:
        _display_order(dto)


@click.command("list")
@click.option(
    "--status",
    type=click.Choice([s.value for s in OrderStatus]),
    default=None,
    help="Only orders in this status.",
)
@json_option
@pass_actor
def order_list(actor: Actor, status: str | None, as_json: bool) -> None:
    """List orders, newest first."""
    with domain_errors():
        dtos = ListOrdersHandler(order_repo=order_repository()).handle(actor, status)

    if as_json:
        echo_json([dto.as_dict() for dto in dtos])
        return
    if not dtos:
        click.echo("No orders found.")
        return
    click.echo(f"{'ID':<6} {'Status':<12} {'Customer':<24} {'Total':>14}")
    click.echo("-" * 59)
    for dto in dtos:
        click.echo(
            f"{dto.id:<6} {dto.status:<12} {dto.customer_name:<24} {dto.formatted_total:>14}"
        )


@click.command("update")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to update.")
@click.option("--payload", type=click.File("r"), required=True, help="Changes JSON file.")
@json_option
@pass_actor
def order_update(actor: Actor, order_id: int, payload: IO[str], as_json: bool) -> None:
    """Correct the details of an order (re-prices it)."""
    changes = order_changes(load_payload(payload))
    handler = UpdateOrderHandler(
        order_repo=order_repository(),
        city_repo=city_repository(),
        country_repo=country_repository(),
        pricing_policy=pricing_policy(),
    )

    with domain_errors():
        dto = handler.handle(order_id, changes, actor)

    if as_json:
        echo_json(dto.as_dict())
        return
    click.echo(dto.message)
    _display_order(dto)


@click.command("status")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.option("--to", "new_status", required=True, help="New status.")
@pass_actor
def order_status(actor: Actor, order_id: int, new_status: str) -> None:
    """Move an order to another status (admin)."""
    handler = UpdateOrderStatusHandler(order_repo=order_repository())

    with domain_errors():
        dto = handler.handle(order_id, new_status, actor)

    click.echo(f"Order #{order_id} is now {dto.status}.")
    click.echo(dto.message)


@click.command("stats")
@json_option
@pass_actor
def order_stats(actor: Actor, as_json: bool) -> None:
    """Order counts and revenue (admin)."""
    handler = OrderStatsHandler(order_repo=order_repository(), pricing_policy=pricing_policy())

    with domain_errors():
        stats = handler.handle(actor)

    if as_json:
        echo_json(stats.as_dict())
        return
    click.echo(f"Orders:        {stats.total_orders}")
    click.echo(f"Revenue:       {stats.total_revenue}")
    click.echo(f"Average order: {stats.average_order_value}")
    for status, count in stats.by_status.items():
        click.echo(f"  {status:<12} {count:>5}")


@click.command("delete")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@pass_actor
def order_delete(actor: Actor, order_id: int) -> None:
    """Soft-delete an order (admin)."""
    with domain_errors():
        SoftDeleteHandler(order_repository(), "Order").handle(order_id, actor)
    click.echo(f"Order #{order_id} deleted.")


@click.command("restore")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@pass_actor
def order_restore(actor: Actor, order_id: int) -> None:
    """Restore a soft-deleted order (admin)."""
    with domain_errors():
        RestoreHandler(order_repository(), "Order").handle(order_id, actor)
    click.echo(f"Order #{order_id} restored.")


@click.command("purge")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.confirmation_option(prompt="Permanently remove this order?")
@pass_actor
def order_purge(actor: Actor, order_id: int) -> None:
    """Permanently remove a soft-deleted order (admin)."""
    with domain_errors():
        PurgeHandler(order_repository(), "Order").handle(order_id, actor)
    click.echo(f"Order #{order_id} purged.")
