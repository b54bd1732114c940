"""JewelCalc CLI.

Commands:
- init: Initialize database schema
- seed: Insert a small demo catalog
- price: Compute the price breakdown for a product
- availability: Check stock for a product/metal/purity/ring-size combination
- web serve: Run the HTTP API
"""

from __future__ import annotations

import asyncio
from decimal import Decimal

import typer
from rich.console import Console
from rich.table import Table

from jewelcalc.catalog import repository
from jewelcalc.catalog.availability import check_availability
from jewelcalc.catalog.gateway import SqlCatalogGateway
from jewelcalc.config import get_config
from jewelcalc.core.logging import configure_logging
from jewelcalc.db.connection import close_db, get_session, get_session_factory, init_db
from jewelcalc.errors import ProductNotFoundError
from jewelcalc.pricing.assembly import price_product

app = typer.Typer(
    name="jewelcalc",
    help="JewelCalc - jewellery catalog and pricing",
    no_args_is_help=True,
)
web_cli = typer.Typer(help="Web API")
app.add_typer(web_cli, name="web")

console = Console()


@app.callback()
def _setup() -> None:
    configure_logging()


@app.command()
def init(
    drop: bool = typer.Option(False, "--drop", help="Drop existing tables"),
):
    """Initialize database schema."""
    config = get_config()
    console.print(f"[bold]Initializing database:[/bold] {config.db.url}")

    async def _init():
        try:
            if drop:
                console.print("[yellow]Dropping existing tables...[/yellow]")
            await init_db(drop=drop)
        finally:
            await close_db()

    asyncio.run(_init())
    console.print("[bold green]✓[/bold green] Database initialized")


@app.command()
def seed():
    """Insert a demo catalog (one diamond ring, one plain band)."""

    async def _seed():
        try:
            async with get_session() as session:
                gold = await repository.create_metal(
                    session, name="Gold", purity="22K", color="Yellow",
                    price_per_gram=Decimal("5500"), is_alloy=True,
                )
                diamond = await repository.create_diamond(
                    session, carat=Decimal("1.5"), price_per_carat=Decimal("50000"), quality="VS1"
                )
                purity = await repository.create_purity_level(
                    session, label="22K", purity_percentage=Decimal("91.6")
                )
                sizes = [await repository.create_ring_size(session, label=str(n)) for n in (12, 13, 14)]

                ring = await repository.create_product(
                    session, name="Solitaire Ring", base_weight=Decimal("5.5"),
                    making_charges=Decimal("1500"), is_bis_hallmarked=True, is_gia_certified=True,
                )
                await repository.link_metal(session, ring.id, gold.id)
                await repository.link_diamond(session, ring.id, diamond.id)
                await repository.upsert_pricing_components(
                    session, ring.id, tax_percentage=Decimal("3"), exchange_discount=Decimal("200")
                )
                for size, quantity in zip(sizes, (4, 0, 2)):
                    await repository.create_inventory(
                        session, ring.id, gold.id, purity.id, size.id, quantity
                    )

                band = await repository.create_product(
                    session, name="Plain Band", base_weight=Decimal("3"),
                    making_charges=Decimal("1500"),
                )
            return ring.id, band.id
        finally:
            await close_db()

    ring_id, band_id = asyncio.run(_seed())
    console.print(f"[bold green]✓[/bold green] Seeded products {ring_id} (ring) and {band_id} (band)")


@app.command()
def price(product_id: int = typer.Argument(..., help="Product ID")):
    """Compute and print the price breakdown for a product."""

    async def _price():
        try:
            return await price_product(SqlCatalogGateway(get_session_factory()), product_id)
        finally:
            await close_db()

    try:
        breakdown = asyncio.run(_price())
    except ProductNotFoundError as exc:
        console.print(f"[red]✗[/red] {exc}")
        raise typer.Exit(code=1) from exc

    table = Table(title=f"Price breakdown - product {product_id}")
    table.add_column("Component", style="cyan")
    table.add_column("Amount", justify="right", style="green")

    table.add_row("Metal cost", str(breakdown.metal_cost))
    table.add_row("Diamond cost", str(breakdown.diamond_cost))
    table.add_row("Making charges", str(breakdown.making_charges))
    table.add_row("Base price", str(breakdown.base_price))
    table.add_row("Tax", str(breakdown.tax_amount))
    table.add_row("Exchange discount", f"-{breakdown.exchange_discount}")
    table.add_row("[bold]Final price[/bold]", f"[bold]{breakdown.final_price}[/bold]")

    console.print(table)


@app.command()
def availability(
    product_id: int = typer.Argument(..., help="Product ID"),
    metal_id: int = typer.Argument(..., help="Metal ID"),
    purity_id: int = typer.Argument(..., help="Purity level ID"),
    ring_size_id: int = typer.Argument(..., help="Ring size ID"),
):
    """Check stock for one product/metal/purity/ring-size combination."""

    async def _check():
        try:
            gateway = SqlCatalogGateway(get_session_factory())
            return await check_availability(gateway, product_id, metal_id, purity_id, ring_size_id)
        finally:
            await close_db()

    result = asyncio.run(_check())
    marker = "[green]✓[/green]" if result.available else "[yellow]⚠[/yellow]"
    quantity = "-" if result.quantity is None else result.quantity
    console.print(f"{marker} {result.message} (quantity: {quantity})")


@web_cli.command("serve")
def web_serve(
    host: str = typer.Option("0.0.0.0", help="Host to bind"),
    port: int | None = typer.Option(None, help="Port to bind (default: PORT or 3000)"),
    reload: bool = typer.Option(False, help="Enable autoreload (dev only)"),
):
    """Run the FastAPI catalog API."""
    import uvicorn

    port = port or get_config().port
    typer.echo(f"Server is listening on http://{host}:{port}")
    uvicorn.run("jewelcalc.web.app:app", host=host, port=port, reload=reload, workers=1)


def main():
    """Entry point for CLI."""
    app()


if __name__ == "__main__":
    main()
