"""Page Compose CLI tool (pagecompose)."""

import asyncio
import logging
from typing import Optional
from uuid import UUID

import typer

from pagecompose.core.config import settings
from pagecompose.core.exceptions import PageComposeError

app = typer.Typer(name="pagecompose", help=f"{settings.APP_NAME}: compose pages for rendering")
db_app = typer.Typer(help="Database management commands")
page_app = typer.Typer(help="Page composition commands")
cache_app = typer.Typer(help="Cache commands")
app.add_typer(db_app, name="db")
app.add_typer(page_app, name="page")
app.add_typer(cache_app, name="cache")


@app.callback()
def main():
    """Configure logging before any command runs."""
    logging.basicConfig(
        level=logging.DEBUG if settings.DEBUG else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


@db_app.command("create")
def db_create():
    """Create all tables."""
    from pagecompose.db.session import create_tables

    create_tables()
    typer.echo("✅ Tables created")


@db_app.command("seed")
def db_seed():
    """Seed roles and the demo site."""
    from pagecompose.db.session import SessionLocal
    from pagecompose.db.seeds.seed_roles import seed_roles
    from pagecompose.db.seeds.seed_sample_data import seed_sample_data

    db = SessionLocal()
    try:
        seed_roles(db)
        seed_sample_data(db)
    finally:
        db.close()
    typer.echo("✅ All seeds applied")


@page_app.command("show")
def page_show(
    site_id: UUID = typer.Argument(..., help="Site ID"),
    page_id: UUID = typer.Argument(..., help="Page ID"),
    language: Optional[UUID] = typer.Option(None, "--language", "-l", help="Language ID"),
):
    """Compose a page and print it as JSON."""
    from pagecompose.services.page_info_service import build_page_info_service

    service = build_page_info_service()
    try:
        page_info = asyncio.run(service.get_page_info(site_id, page_id, language))
    except PageComposeError as e:
        typer.echo(f"❌ {e.message}", err=True)
        raise typer.Exit(code=1)

    if page_info is None:
        typer.echo(f"❌ Page {page_id} not found for site {site_id}", err=True)
        raise typer.Exit(code=1)
    typer.echo(page_info.model_dump_json(by_alias=True, indent=2))


@cache_app.command("health")
def cache_health():
    """Check that the configured cache backend is reachable."""
    from pagecompose.services.cache_service import build_cache_store

    store = build_cache_store(settings)
    if not asyncio.run(store.health_check()):
        typer.echo(f"⚠️  {settings.CACHE_BACKEND} cache not available", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"✅ {settings.CACHE_BACKEND} cache connected")


if __name__ == "__main__":
    app()
