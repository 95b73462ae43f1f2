"""Shopfront CLI application using Typer.

Command-line utilities for deployment: secret generation and the
one-time superuser setup without going through the HTTP API.
"""

import asyncio
import secrets

import typer
from rich.console import Console

from shopfront.application.services import SuperUserService, SuperUserStatus
from shopfront.domain.shared import DomainException
from shopfront.domain.user import SuperUser
from shopfront.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyRepositoryFactory,
)
from shopfront.presentation.api.dependencies import (
    create_tables,
    get_engine,
    get_session_maker,
)
from shopfront_auth import JWTService, PasswordHashingService
from shopfront_config.settings import get_settings

app = typer.Typer(
    name="shopfront",
    help="Shopfront - storefront administration CLI",
    no_args_is_help=True,
)
console = Console()


secrets_app = typer.Typer(
    name="secrets",
    help="Secret generation utilities",
    no_args_is_help=True,
)
app.add_typer(secrets_app)

superuser_app = typer.Typer(
    name="superuser",
    help="Superuser setup and status",
    no_args_is_help=True,
)
app.add_typer(superuser_app)


@secrets_app.command("generate")
def generate_secrets() -> None:
    """Generate secure secrets for Shopfront configuration.

    Copy the output to your .env file.
    """
    console.print("\n[bold green]Shopfront Secret Generation[/bold green]")
    console.print("=" * 60)
    console.print(
        "\nGenerated secrets for your [bold].env[/bold] configuration file:\n"
    )

    # 64 bytes of entropy for HS256
    jwt_secret = secrets.token_urlsafe(64)
    console.print(f"[cyan]JWT_SECRET_KEY[/cyan]={jwt_secret}")

    console.print("\n" + "=" * 60)
    console.print(
        "[yellow]Keep these secrets secure and never commit them "
        "to version control![/yellow]"
    )
    console.print(
        "[dim]Copy the above values to your config/.env (Docker) or "
        "config/.env.dev (local) file.[/dim]\n"
    )


def _build_superuser_service(factory: SQLAlchemyRepositoryFactory) -> SuperUserService:
    settings = get_settings()
    return SuperUserService(
        superuser_repository=factory.superuser_repository(),
        password_service=PasswordHashingService(
            rounds=settings.bcrypt_superuser_rounds,
            min_length=settings.password_min_length,
        ),
        jwt_service=JWTService(
            secret_key=settings.jwt_secret_key.get_secret_value(),
            access_token_expire_hours=settings.jwt_access_token_expire_hours,
        ),
        allow_override=settings.superuser_bootstrap_override,
    )


async def _superuser_status() -> SuperUserStatus:
    await create_tables()
    try:
        async with get_session_maker()() as session:
            factory = SQLAlchemyRepositoryFactory(session)
            return await _build_superuser_service(factory).check()
    finally:
        await get_engine().dispose()


async def _create_superuser(
    name: str,
    email: str,
    password: str,
    force: bool,
) -> SuperUser:
    await create_tables()
    try:
        async with get_session_maker()() as session:
            factory = SQLAlchemyRepositoryFactory(session)
            service = _build_superuser_service(factory)
            superuser, _ = await service.create(name, email, password, force=force)
            await session.commit()
            return superuser
    finally:
        await get_engine().dispose()


@superuser_app.command("status")
def superuser_status() -> None:
    """Show whether the one-time superuser setup has been completed."""
    status = asyncio.run(_superuser_status())
    if status.exists:
        console.print("[green]Superuser exists[/green] - the API is ready.")
    else:
        console.print(
            "[yellow]No active superuser[/yellow] - "
            "run [bold]shopfront superuser create[/bold]."
        )


@superuser_app.command("create")
def superuser_create(
    name: str = typer.Option(..., prompt=True, help="Display name"),
    email: str = typer.Option(..., prompt=True, help="Email address"),
    password: str = typer.Option(
        ...,
        prompt=True,
        hide_input=True,
        confirmation_prompt=True,
        help="Password (at least 6 characters)",
    ),
    force: bool = typer.Option(
        False,
        "--force",
        help="Replace the active superuser (requires SUPERUSER_BOOTSTRAP_OVERRIDE)",
    ),
) -> None:
    """Create the superuser."""
    try:
        superuser = asyncio.run(_create_superuser(name, email, password, force))
    except DomainException as e:
        console.print(f"[red]Error:[/red] {e.message} ({e.code.value})")
        raise typer.Exit(code=1) from e

    console.print(
        f"[green]Superuser created:[/green] {superuser.email} ({superuser.id})"
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
