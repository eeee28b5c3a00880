"""Helpers shared by every CLI command module."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from contextlib import contextmanager

import click

from linkit.domain.exceptions import DomainException, FatalError
from linkit.domain.model.actor import Actor

logger = logging.getLogger(__name__)

pass_actor = click.make_pass_decorator(Actor)

json_option = click.option(
    "--json", "as_json", is_flag=True, default=False, help="Print JSON instead of text."
)


@contextmanager
def domain_errors() -> Iterator[None]:
    """Turn domain exceptions into a CLI error with the right message."""
    try:
        yield
    except FatalError:
        logger.exception("Unexpected failure")
        raise click.ClickException("Something went wrong")
    except DomainException as exc:
        raise click.ClickException(str(exc))


def echo_json(data: object) -> None:
    click.echo(json.dumps(data, indent=2, default=str))
