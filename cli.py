# cli.py
import argparse
import asyncio
import sys
from datetime import datetime
from typing import List, Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from prompt_toolkit import prompt
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.styles import Style as PromptStyle

from inventory_api.models import Product
from inventory_api.settings import setup_logging
from inventory_sdk import CatalogClient, FetchResult, config

console = Console()

custom_style = PromptStyle.from_dict({
    'completion-menu.completion': 'bg:#008888 #ffffff',
    'completion-menu.completion.current': 'bg:#00aaaa #000000',
})

COMMANDS = ["retry", "quit"]


# ---------------------------
# Display helpers
# ---------------------------
def create_header(url: str):
    header = Table(show_header=False, box=box.ROUNDED)
    header.add_column("left", width=24)
    header.add_column("center", width=44)
    header.add_column("right", width=22)
    now = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    header.add_row("📦 InventoryHub", f"[bold blue]{url}[/bold blue]", f"[dim]{now}[/dim]")
    return Panel(header, style="bold blue")


def show_products(products: List[Product]):
    if not products:
        console.print(f"[italic yellow]{config.NO_DATA_MESSAGE}[/italic yellow]")
        return

    table = Table(
        title="📦 Product List",
        box=box.ROUNDED,
        header_style="bold cyan",
        title_style="bold magenta",
        show_lines=True
    )
    table.add_column("ID", style="dim", justify="right", width=6)
    table.add_column("Name", style="bold", width=22)
    table.add_column("Price", justify="right", width=12)
    table.add_column("Stock", justify="right", width=8)
    table.add_column("Category", width=15)

    for p in products:
        table.add_row(str(p.id), p.name, f"${p.price:.2f}", str(p.stock), p.category.name)
    console.print(table)


def show_error(message: str):
    console.print(Panel.fit(f"[red]{message}[/red]", title="❌ Error", border_style="red"))


def show_result(result: FetchResult):
    if result.success:
        show_products(result.products or [])
    else:
        show_error(result.error_message or "")


def load_products(client: CatalogClient) -> FetchResult:
    with console.status(config.LOADING_MESSAGE):
        return asyncio.run(client.fetch_products())


# ---------------------------
# Main loop
# ---------------------------
def menu(client: CatalogClient):
    console.clear()
    console.print(create_header(client.product_list_url))

    while True:
        show_result(load_products(client))

        try:
            choice = prompt(
                f"\n{config.RETRY_BUTTON_TEXT} or quit? ",
                completer=WordCompleter(COMMANDS),
                style=custom_style,
                default="quit",
            ).strip().lower()
        except EOFError:
            # ctrl-d
            choice = "quit"
        if choice in ("q", "quit", "exit"):
            console.print(Panel.fit("[bold green]Goodbye 👋[/bold green]"))
            return
        console.rule(style="dim")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="InventoryHub catalog viewer")
    parser.add_argument("--url", default=config.BASE_URL, help="Base URL of the catalog API")
    parser.add_argument("--once", action="store_true", help="Fetch once and exit")
    parser.add_argument("--log-level", default="WARNING", help="Logging level")
    args = parser.parse_args(argv)

    setup_logging(args.log_level.upper())
    client = CatalogClient(base_url=args.url)

    try:
        if args.once:
            result = load_products(client)
            show_result(result)
            return 0 if result.success else 1

        menu(client)
    except KeyboardInterrupt:
        console.print("\n\n[bold red]Interrupted by user[/bold red]")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
