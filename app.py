import logging
import os

import asyncclick as click
from dotenv import load_dotenv

from src.cli_interface.demo import build_demo_roster
from src.cli_interface.helpers import format_user, get_dashboard_text
from src.cli_interface.session import run_session
from src.hospital_roster.dashboard import get_dashboard
from src.hospital_roster.types import User

load_dotenv()

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group()
@click.option(
    "--log-level",
    help="Logging level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=lambda: os.getenv("HMS_LOG_LEVEL", "WARNING"),
    show_default="Value from .env or WARNING",
)
def cli(log_level: str) -> None:
    logging.basicConfig(format="%(asctime)s - %(name)s - %(levelname)s - %(message)s", level=log_level.upper())


@cli.command()
@click.option(
    "--currency",
    "-c",
    help="Currency symbol printed before amounts",
    type=str,
    default=lambda: os.getenv("HMS_CURRENCY_SYMBOL", "₹"),
    show_default="Value from .env or ₹",
)
@click.option("--demo/--no-demo", help="Start with a sample roster", default=False)
async def run(currency: str, demo: bool) -> None:
    roster: list[User] = build_demo_roster() if demo else []
    if demo:
        click.secho(f"Loaded sample roster with {len(roster)} users", fg="green")

    run_session(roster, currency)

    click.echo("Session closed, the roster is discarded")


@cli.command()
@click.option(
    "--currency",
    "-c",
    help="Currency symbol printed before amounts",
    type=str,
    default=lambda: os.getenv("HMS_CURRENCY_SYMBOL", "₹"),
    show_default="Value from .env or ₹",
)
async def demo(currency: str) -> None:
    roster = build_demo_roster()
    for user in roster:
        click.secho("-----------------------", fg="yellow")
        click.secho(format_user(user), fg="green")
        click.echo(get_dashboard_text(get_dashboard(user["id"], roster), currency))


if __name__ == "__main__":
    cli()
