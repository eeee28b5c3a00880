"""CLI commands for the CustomOrder aggregate (bulk quotes)."""

from __future__ import annotations

from typing import IO

import click

from linkit.application.assign_package import AssignPackageHandler
from linkit.application.create_custom_order import CreateCustomOrderHandler
from linkit.application.custom_order_stats import CustomOrderStatsHandler
from linkit.application.dto import CustomOrderDTO
from linkit.application.preview_quote_email import PreviewQuoteEmailHandler
from linkit.application.respond_to_quote import RespondToQuoteHandler
from linkit.application.set_custom_pricing import SetCustomPricingHandler
from linkit.application.show_custom_order import (
    ListCustomOrdersHandler,
    ShowCustomOrderHandler,
)
from linkit.application.soft_delete import (
    PurgeHandler,
    RestoreHandler,
    SoftDeleteHandler,
)
from linkit.application.update_custom_order_status import (
    UpdateCustomOrderStatusHandler,
)
from linkit.domain.model.actor import Actor
from linkit.domain.model.custom_order_status import CustomOrderStatus
from linkit.infrastructure.bootstrap import (
    custom_order_repository,
    delivery_policy,
    package_repository,
    pricing_policy,
    quote_mailer,
)
from linkit.infrastructure.cli.common import (
    domain_errors,
    echo_json,
    json_option,
    pass_actor,
)
from linkit.infrastructure.cli.payloads import custom_order_request, load_payload


def _display_custom_order(dto: CustomOrderDTO) -> None:
    click.echo(f"Custom order #{dto.id}  (status={dto.status}: {dto.status_label})")
    click.echo(f"Company:  {dto.company_name}")
    click.echo(f"Contact:  {dto.contact_person} <{dto.email}>")
    click.echo(f"Cards:    {dto.employee_count}")
    if dto.price_per_card is not None:
        click.echo(f"Per card: {dto.price_per_card}")
    if dto.selected_package_id is not None:
        click.echo(f"Package:  {dto.selected_package_id}")
    click.echo(f"Total:    {dto.total_price}")
    if dto.estimated_delivery:
        click.echo(f"ETA:      {dto.estimated_delivery:%Y-%m-%d}")
    if dto.admin_notes:
        click.echo(f"Notes:    {dto.admin_notes}")


def _emit(dto: CustomOrderDTO, as_json: bool) -> None:
    if as_json:
        echo_json(dto.as_dict())
        return
    if dto.message:
        click.echo(dto.message)
    _display_custom_order(dto)


@click.command("create")
@click.option("--payload", type=click.File("r"), required=True, help="Request JSON file.")
@json_option
@pass_actor
def custom_order_create(actor: Actor, payload: IO[str], as_json: bool) -> None:
    """Submit a bulk card request."""
    request = custom_order_request(load_payload(payload))
    handler = CreateCustomOrderHandler(
        custom_order_repo=custom_order_repository(),
        delivery_policy=delivery_policy(),
    )
    with domain_errors():
        dto = handler.handle(request, actor)
    _emit(dto, as_json)


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Custom order ID.")
@json_option
@pass_actor
def custom_order_show(actor: Actor, order_id: int, as_json: bool) -> None:
    """Show a custom order."""
    handler = ShowCustomOrderHandler(
        custom_order_repo=custom_order_repository(),
        package_repo=package_repository(),
    )
    with domain_errors():
        dto = handler.handle(order_id, actor)
    _emit(dto, as_json)


@click.command("list")
@click.option(
    "--status",
    type=click.Choice([s.value for s in CustomOrderStatus]),
    default=None,
    help="Only custom orders in this status.",
)
@json_option
@pass_actor
def custom_order_list(actor: Actor, status: str | None, as_json: bool) -> None:
    """List custom orders, newest first."""
    handler = ListCustomOrdersHandler(
        custom_order_repo=custom_order_repository(),
        package_repo=package_repository(),
    )
    with domain_errors():
        dtos = handler.handle(actor, status)

    if as_json:
        echo_json([dto.as_dict() for dto in dtos])
        return
    if not dtos:
        click.echo("No custom orders found.")
        return
    click.echo(f"{'ID':<6} {'Status':<14} {'Company':<24} {'Cards':>6} {'Total':>16}")
    click.echo("-" * 70)
    for dto in dtos:
        click.echo(
            f"{dto.id:<6} {dto.status:<14} {dto.company_name:<24} "
            f"{dto.employee_count:>6} {dto.total_price:>16}"
        )


@click.command("status")
@click.option("--id", "order_id", required=True, type=int, help="Custom order ID.")
@click.option("--to", "new_status", required=True, help="New status.")
@click.option("--notes", default=None, help="Admin notes.")
@pass_actor
def custom_order_status(
    actor: Actor, order_id: int, new_status: str, notes: str | None
) -> None:
    """Move a custom order along the quote workflow (admin)."""
    handler = UpdateCustomOrderStatusHandler(custom_order_repo=custom_order_repository())
    with domain_errors():
        dto = handler.handle(order_id, new_status, actor, admin_notes=notes)
    click.echo(f"Custom order #{order_id} is now {dto.status}.")


@click.command("price")
@click.option("--id", "order_id", required=True, type=int, help="Custom order ID.")
@click.option("--per-card", "price_per_card", required=True, help="Price per card.")
@click.option("--notes", default=None, help="Admin notes.")
@json_option
@pass_actor
def custom_order_price(
    actor: Actor, order_id: int, price_per_card: str, notes: str | None, as_json: bool
) -> None:
    """Quote a custom per-card price (admin)."""
    handler = SetCustomPricingHandler(
        custom_order_repo=custom_order_repository(),
        mailer=quote_mailer(),
        pricing_policy=pricing_policy(),
    )
    with domain_errors():
        dto = handler.handle(order_id, price_per_card, actor, admin_notes=notes)
    _emit(dto, as_json)


@click.command("assign-package")
@click.option("--id", "order_id", required=True, type=int, help="Custom order ID.")
@click.option("--package", "package_id", required=True, help="Package ID.")
@click.option("--notes", default=None, help="Admin notes.")
@json_option
@pass_actor
def custom_order_assign_package(
    actor: Actor, order_id: int, package_id: str, notes: str | None, as_json: bool
) -> None:
    """Quote a custom order at a package's price (admin)."""
    handler = AssignPackageHandler(
        custom_order_repo=custom_order_repository(),
        package_repo=package_repository(),
        mailer=quote_mailer(),
    )
    with domain_errors():
        dto = handler.handle(order_id, package_id, actor, admin_notes=notes)
    _emit(dto, as_json)


@click.command("respond")
@click.option("--id", "order_id", required=True, type=int, help="Custom order ID.")
@click.option("--approve/--reject", "approved", default=None, help="Accept or decline.")
@click.option("--notes", default="", help="Notes for the sales team.")
@pass_actor
def custom_order_respond(
    actor: Actor, order_id: int, approved: bool | None, notes: str
) -> None:
    """Answer a quote on your own custom order."""
    if approved is None:
        raise click.UsageError("Pass either --approve or --reject")
    handler = RespondToQuoteHandler(custom_order_repo=custom_order_repository())
    with domain_errors():
        dto = handler.handle(order_id, approved, actor, customer_notes=notes)
    click.echo(dto.message)


@click.command("quote-email")
@click.option("--id", "order_id", required=True, type=int, help="Custom order ID.")
@pass_actor
def custom_order_quote_email(actor: Actor, order_id: int) -> None:
    """Preview the quote e-mail for a priced custom order (admin)."""
    handler = PreviewQuoteEmailHandler(
        custom_order_repo=custom_order_repository(),
        package_repo=package_repository(),
    )
    with domain_errors():
        email = handler.handle(order_id, actor)
    click.echo(f"To:      {email.recipient}")
    click.echo(f"Subject: {email.subject}")
    click.echo()
    click.echo(email.body)


@click.command("stats")
@json_option
@pass_actor
def custom_order_stats(actor: Actor, as_json: bool) -> None:
    """Custom order counts and potential revenue (admin)."""
    handler = CustomOrderStatsHandler(
        custom_order_repo=custom_order_repository(), pricing_policy=pricing_policy()
    )
    with domain_errors():
        stats = handler.handle(actor)

    if as_json:
        echo_json(stats.as_dict())
        return
    click.echo(f"Custom orders:     {stats.total_orders}")
    click.echo(f"Pending:           {stats.pending_orders}")
    click.echo(f"Quoted:            {stats.quoted_orders}")
    click.echo(f"Completed:         {stats.completed_orders}")
    click.echo(f"Potential revenue: {stats.potential_revenue}")


@click.command("delete")
@click.option("--id", "order_id", required=True, type=int, help="Custom order ID.")
@pass_actor
def custom_order_delete(actor: Actor, order_id: int) -> None:
    """Soft-delete a custom order (admin)."""
    with domain_errors():
        SoftDeleteHandler(custom_order_repository(), "Custom order").handle(order_id, actor)
    click.echo(f"Custom order #{order_id} deleted.")


@click.command("restore")
@click.option("--id", "order_id", required=True, type=int, help="Custom order ID.")
@pass_actor
def custom_order_restore(actor: Actor, order_id: int) -> None:
    """Restore a soft-deleted custom order (admin)."""
    with domain_errors():
        RestoreHandler(custom_order_repository(), "Custom order").handle(order_id, actor)
    click.echo(f"Custom order #{order_id} restored.")


@click.command("purge")
@click.option("--id", "order_id", required=True, type=int, help="Custom order ID.")
@click.confirmation_option(prompt="Permanently remove this custom order?")
@pass_actor
def custom_order_purge(actor: Actor, order_id: int) -> None:
    """Permanently remove a soft-deleted custom order (admin)."""
    with domain_errors():
        PurgeHandler(custom_order_repository(), "Custom order").handle(order_id, actor)
    click.echo(f"Custom order #{order_id} purged.")
