#!/usr/bin/env python3
"""Stockroom CLI for day-to-day catalog chores."""

import argparse

import questionary
from rich.console import Console
from rich.table import Table

from stockroom.config import config, configure_logging
from stockroom.errors import StockroomError
from stockroom.product.service import ProductService

console = Console()


def list_products(args: argparse.Namespace) -> None:
    """Print one page of products as a table."""
    service = ProductService()
    result = service.search(
        page=args.page,
        per_page=args.per_page,
        sort=args.sort,
        sort_dir=args.sort_dir,
        filter=args.filter,
    )
    if not result.items:
        console.print("[red]No products found.[/]")
        return

    table = Table(title="Products")
    table.add_column("ID", style="dim")
    table.add_column("Name", style="bold")
    table.add_column("Price", justify="right")
    table.add_column("Quantity", justify="right")
    table.add_column("Created")
    for product in result.items:
        table.add_row(
            product.id,
            product.name,
            str(product.price),
            str(product.quantity),
            product.created_at.strftime("%Y-%m-%d %H:%M"),
        )
    console.print(table)
    console.print(
        f"[dim]Page {result.current_page} of {result.last_page} "
        f"({result.total} total, sorted by {result.sort} {result.sort_dir})[/]"
    )


def add_product(args: argparse.Namespace) -> None:
    """Prompt for a new product and create it."""
    name = questionary.text("Name:").ask()
    if not name:
        return
    price = questionary.text("Price:", default="0.00").ask()
    quantity = questionary.text(
        "Quantity:", default="0", validate=lambda v: v.isdigit() or "Enter a whole number"
    ).ask()
    if price is None or quantity is None:
        return

    console.print(f"[yellow]Will add [bold]{name}[/] at {price} x {quantity}.[/]")
    if not questionary.confirm("Proceed with these changes?").ask():
        console.print("[dim]Cancelled.[/]")
        return

    try:
        product = ProductService().create(name=name, price=price, quantity=int(quantity))
    except StockroomError as e:
        console.print(f"[red]{e.message}[/]")
        return
    console.print(f"[green]Created {product.name} (id={product.id}).[/]")


def remove_product(args: argparse.Namespace) -> None:
    """Pick a product from the first page matching the filter and delete it."""
    service = ProductService()
    result = service.search(per_page=config.default_per_page, sort="name", sort_dir="asc", filter=args.filter)
    if not result.items:
        console.print("[red]No products found.[/]")
        return

    product = questionary.select(
        "Select a product:",
        choices=[
            questionary.Choice(title=f"{p.name} ({p.quantity} in stock)", value=p) for p in result.items
        ],
    ).ask()
    if not product:
        return

    console.print(f"[yellow]Will delete [bold]{product.name}[/].[/]")
    if not questionary.confirm("Proceed with these changes?").ask():
        console.print("[dim]Cancelled.[/]")
        return

    try:
        service.delete(product.id)
    except StockroomError as e:
        console.print(f"[red]{e.message}[/]")
        return
    console.print(f"[green]Deleted {product.name}.[/]")


def main():
    configure_logging()

    parser = argparse.ArgumentParser(description="Stockroom CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    list_parser = subparsers.add_parser("list", help="List products")
    list_parser.add_argument("--page", type=int, default=1)
    list_parser.add_argument("--per-page", type=int, default=config.default_per_page)
    list_parser.add_argument("--sort", choices=["name", "created_at"], default="created_at")
    list_parser.add_argument("--sort-dir", choices=["asc", "desc"], default="desc")
    list_parser.add_argument("--filter", help="Case-insensitive name substring")
    list_parser.set_defaults(handler=list_products)

    add_parser = subparsers.add_parser("add", help="Add a product")
    add_parser.set_defaults(handler=add_product)

    remove_parser = subparsers.add_parser("remove", help="Remove a product")
    remove_parser.add_argument("--filter", help="Narrow the list to choose from")
    remove_parser.set_defaults(handler=remove_product)

    args = parser.parse_args()
    args.handler(args)


if __name__ == "__main__":
    main()
