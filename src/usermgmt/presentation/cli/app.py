"""User management CLI application using Typer.

Database maintenance and read-only listings against the configured
database, plus a ``serve`` command that runs the HTTP API.
"""

import asyncio
from typing import Awaitable, Callable, TypeVar

import typer
from rich.console import Console
from rich.table import Table
from sqlalchemy.ext.asyncio import AsyncEngine

from usermgmt.application.services import RoleService, UserProfileService
from usermgmt.infrastructure.persistence.sqlalchemy.database import (
    create_engine,
    create_session_maker,
)
from usermgmt.infrastructure.persistence.sqlalchemy.init_db import (
    initialize_database,
    reset_database,
)
from usermgmt.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyRepositoryFactory,
)
from usermgmt_config.settings import get_settings

T = TypeVar("T")

app = typer.Typer(
    name="usermgmt",
    help="User Management - roles and user profiles CLI",
    no_args_is_help=True,
)
console = Console()

db_app = typer.Typer(name="db", help="Database maintenance", no_args_is_help=True)
roles_app = typer.Typer(name="roles", help="Inspect roles", no_args_is_help=True)
profiles_app = typer.Typer(
    name="profiles",
    help="Inspect user profiles",
    no_args_is_help=True,
)
app.add_typer(db_app)
app.add_typer(roles_app)
app.add_typer(profiles_app)


def _run_with_engine(work: Callable[[AsyncEngine], Awaitable[T]]) -> T:
    settings = get_settings()

    async def _main() -> T:
        engine = create_engine(settings.database_url, echo=settings.database_echo)
        try:
            return await work(engine)
        finally:
            await engine.dispose()

    return asyncio.run(_main())


def _with_factory(
    work: Callable[[SQLAlchemyRepositoryFactory], Awaitable[T]],
) -> Callable[[AsyncEngine], Awaitable[T]]:
    async def _inner(engine: AsyncEngine) -> T:
        async with create_session_maker(engine)() as session:
            return await work(SQLAlchemyRepositoryFactory(session))

    return _inner


@db_app.command("init")
def init_db() -> None:
    """Create missing tables and insert the initial roles."""
    seeded = _run_with_engine(initialize_database)
    console.print(
        f"[green]Database initialized[/green] ({seeded} initial roles inserted)"
    )


@db_app.command("reset")
def reset_db(
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation"),
) -> None:
    """Drop every table, recreate the schema and reseed the initial roles."""
    if not force:
        typer.confirm("This deletes all roles and user profiles. Continue?", abort=True)

    seeded = _run_with_engine(reset_database)
    console.print(f"[yellow]Database reset[/yellow] ({seeded} initial roles inserted)")


@roles_app.command("list")
def list_roles() -> None:
    """Show all stored roles."""

    async def _load(factory: SQLAlchemyRepositoryFactory) -> list:
        return await RoleService.from_factory(factory).list_roles()

    roles = _run_with_engine(_with_factory(_load))

    table = Table(title="Roles")
    table.add_column("Id", justify="right")
    table.add_column("Name")
    table.add_column("Guid", style="dim")
    table.add_column("Updated")
    for role in sorted(roles, key=lambda r: r.id):
        table.add_row(
            str(role.id),
            role.name,
            str(role.guid),
            role.updated_on.strftime("%Y-%m-%d %H:%M"),
        )
    console.print(table)


@profiles_app.command("list")
def list_profiles() -> None:
    """Show all stored user profiles with their role names."""

    async def _load(factory: SQLAlchemyRepositoryFactory) -> list:
        return await UserProfileService.from_factory(factory).list_profiles()

    profiles = _run_with_engine(_with_factory(_load))

    if not profiles:
        console.print("[dim]No user profiles stored.[/dim]")
        return

    table = Table(title="User Profiles")
    table.add_column("Id", justify="right")
    table.add_column("Name")
    table.add_column("Email")
    table.add_column("Role")
    table.add_column("Newsletter", justify="center")
    for profile in sorted(profiles, key=lambda p: p.id):
        table.add_row(
            str(profile.id),
            profile.name,
            profile.email,
            profile.role.name if profile.role else str(profile.role_id),
            "yes" if profile.receive_newsletter else "no",
        )
    console.print(table)


@app.command("serve")
def serve(
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
) -> None:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "usermgmt.presentation.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=reload,
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
