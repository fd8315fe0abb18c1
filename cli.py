# cli.py
import os
import sys
from datetime import datetime
from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import IntPrompt, Confirm, Prompt
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich import box

from prompt_toolkit import prompt
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.styles import Style as PromptStyle

from sdk.catalog_client import CatalogClient

console = Console()
c = CatalogClient(base_url=os.getenv("CATALOG_URL", "http://127.0.0.1:9090"))

PAGE_SIZE = 5

# Global state for status messages and caching
status_message = "Ready"
product_cache: List[Dict[str, Any]] = []

custom_style = PromptStyle.from_dict({
    'completion-menu.completion': 'bg:#008888 #ffffff',
    'completion-menu.completion.current': 'bg:#00aaaa #000000',
    'scrollbar.background': 'bg:#88aaaa',
    'scrollbar.button': 'bg:#222222',
})


# ---------------------------
# Display helpers
# ---------------------------
def show_products(products: List[Dict[str, Any]], pagination: Optional[Dict[str, Any]] = None):
    if not products:
        console.print("[italic yellow]No products found[/italic yellow]")
        return

    title = "📦 Products Catalog"
    if pagination:
        title += (f" (page {pagination['current_page']}/{pagination['total_pages']},"
                  f" {pagination['total_items']} items)")

    table = Table(
        title=title,
        box=box.ROUNDED,
        header_style="bold cyan",
        title_style="bold magenta",
        show_lines=True
    )
    table.add_column("ID", style="dim", width=6)
    table.add_column("Name", style="bold", width=20)
    table.add_column("Price", justify="right", width=10)
    table.add_column("Category", width=15)
    table.add_column("Description", width=30)

    for p in products:
        table.add_row(
            str(p.get("id", "N/A")),
            p.get("name", "N/A"),
            f"€{p.get('price', 0):.2f}",
            p.get("category", ""),
            p.get("description", ""),
        )
    console.print(table)


def show_price(quote: Dict[str, Any]):
    console.print(
        Panel.fit(
            f"{quote['quantity']} x [bold]{quote['name']}[/bold] = "
            f"[green]€{quote['total_price']:.2f}[/green]",
            title="🧮 Price",
            border_style="green"
        )
    )


def show_status(message: str, success: bool = True):
    style = "green" if success else "red"
    icon = "✅" if success else "❌"
    return Panel(f"{icon} {message}", style=style, box=box.SIMPLE)


def _error_text(e: Exception) -> str:
    # requests/httpx errors carry the plain-text body returned by the API
    response = getattr(e, "response", None)
    if response is not None and getattr(response, "text", ""):
        return f"HTTP {response.status_code}: {response.text}"
    return str(e)


def try_api(fn, *args, success_msg: Optional[str] = None, **kwargs):
    """
    Calls fn(*args, **kwargs) behind a spinner.
    Returns the result, or None after printing the error.
    """
    global status_message
    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            transient=True,
        ) as progress:
            progress.add_task(description="Processing...", total=None)
            result = fn(*args, **kwargs)

        if success_msg:
            status_message = success_msg
            console.print(show_status(success_msg, True))
        return result
    except Exception as e:
        status_message = f"Error: {_error_text(e)}"
        console.print(show_status(status_message, False))
        return None


# ---------------------------
# Autocompletion helpers
# ---------------------------
def refresh_product_cache():
    global product_cache
    page = try_api(c.list_products, limit=1000, offset=0)
    product_cache = page["data"] if page else []


def get_product_completer():
    if not product_cache:
        refresh_product_cache()
    ids = [str(p.get("id", "")) for p in product_cache]
    return WordCompleter(ids, ignore_case=True)


def get_name_completer():
    if not product_cache:
        refresh_product_cache()
    return WordCompleter([p.get("name", "") for p in product_cache if p.get("name")], ignore_case=True)


def get_category_completer():
    if not product_cache:
        refresh_product_cache()
    return WordCompleter(sorted({p.get("category", "") for p in product_cache if p.get("category")}),
                         ignore_case=True)


# ---------------------------
# Input helpers with autocomplete
# ---------------------------
def create_header():
    header = Table(show_header=False, box=box.ROUNDED)
    header.add_column("left", width=30)
    header.add_column("center", width=40)
    header.add_column("right", width=30)

    now = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    header.add_row(
        "🛍️ Product Catalog",
        "[bold blue]Catalog CLI with Autocomplete[/bold blue]",
        f"[dim]{now}[/dim]"
    )
    return Panel(header, style="bold blue")


def prompt_with_autocomplete(message: str, completer=None, default: str = ""):
    return prompt(f"{message} ", completer=completer, style=custom_style, default=default)


def ask_float(message: str, default: float = 10.0) -> float:
    while True:
        raw = Prompt.ask(message, default=str(default))
        try:
            return float(raw)
        except ValueError:
            console.print("[red]Please enter a valid number.[/red]")


def ask_product_fields(defaults: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    defaults = defaults or {}
    return {
        "name": prompt_with_autocomplete("Product name", default=defaults.get("name", "")),
        "price": ask_float("💰 Price", default=defaults.get("price", 10.0)),
        "description": prompt_with_autocomplete("Description", default=defaults.get("description", "")),
        "category": prompt_with_autocomplete("🏷️ Category", completer=get_category_completer(),
                                             default=defaults.get("category", "")),
    }


def browse_products():
    min_price = ask_float("Minimum price (0 = no limit)", default=0)
    max_price = ask_float("Maximum price (0 = no limit)", default=0)
    name = prompt_with_autocomplete("Name contains (blank = any)", completer=get_name_completer()).strip()
    category = prompt_with_autocomplete("Category (blank = any)", completer=get_category_completer()).strip()
    sort_by = Prompt.ask("Sort by price", choices=["none", "LnH", "HnL"], default="none")

    offset = 0
    while True:
        page = try_api(
            c.list_products,
            limit=PAGE_SIZE,
            offset=offset,
            min_price=min_price or None,
            max_price=max_price or None,
            name=name or None,
            sort_by=None if sort_by == "none" else sort_by,
            category=category or None,
        )
        if page is None:
            return
        show_products(page["data"], page["pagination"])
        if offset + PAGE_SIZE >= page["pagination"]["total_items"]:
            return
        if not Confirm.ask("Next page?"):
            return
        offset += PAGE_SIZE


# ---------------------------
# Main menu
# ---------------------------
def menu():
    console.clear()
    console.print(create_header())

    refresh_product_cache()

    while True:
        menu_table = Table.grid(padding=(0, 2))
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)

        options = [
            ("1", "📦 Browse products", "5", "🗑️ Delete product"),
            ("2", "ℹ️ Get product by ID", "6", "🧮 Calculate price"),
            ("3", "➕ Add product", "7", "🔄 Reset catalog"),
            ("4", "✏️ Update product", "q", "👋 Quit"),
        ]

        for row in options:
            menu_table.add_row(*row)

        console.print(Panel(menu_table, title="📋 Menu", border_style="yellow"))

        choice = prompt_with_autocomplete(
            "\nChoose an option",
            completer=WordCompleter([str(i) for i in range(1, 8)] + ["q", "quit", "exit"])
        ).strip()

        if choice == "1":
            browse_products()

        elif choice == "2":
            pid = prompt_with_autocomplete("Enter product ID", completer=get_product_completer())
            resp = try_api(c.get_product, pid, success_msg=f"Product {pid} details loaded")
            if resp:
                show_products([resp])

        elif choice == "3":
            fields = ask_product_fields()
            resp = try_api(c.add_product, success_msg=f"Product '{fields['name']}' added", **fields)
            if resp:
                show_products([resp])
                refresh_product_cache()

        elif choice == "4":
            pid = prompt_with_autocomplete("Enter product ID", completer=get_product_completer())
            current = try_api(c.get_product, pid)
            if current:
                fields = ask_product_fields(current)
                resp = try_api(c.update_product, pid, success_msg=f"Product {pid} updated", **fields)
                if resp:
                    show_products([resp])
                    refresh_product_cache()

        elif choice == "5":
            pid = prompt_with_autocomplete("Enter product ID", completer=get_product_completer())
            if Confirm.ask(f"[red]Delete product {pid}?[/red]"):
                try_api(c.delete_product, pid, success_msg=f"Product {pid} deleted")
                refresh_product_cache()

        elif choice == "6":
            name = prompt_with_autocomplete("Product name", completer=get_name_completer())
            qty = IntPrompt.ask("Quantity", default=1)
            resp = try_api(c.calculate_price, name, qty)
            if resp:
                show_price(resp)

        elif choice == "7":
            if Confirm.ask("[red]This restores the sample catalog. Continue?[/red]"):
                try_api(c.reset, success_msg="Catalog reset successfully")
                refresh_product_cache()

        elif choice.lower() in ("q", "quit", "exit"):
            if Confirm.ask("Are you sure you want to quit?"):
                console.print(Panel.fit("[bold green]Goodbye! 👋[/bold green]", title="Goodbye"))
                sys.exit(0)

        console.print()
        console.rule(style="dim")


if __name__ == "__main__":
    try:
        menu()
    except KeyboardInterrupt:
        console.print("\n\n[bold red]Interrupted by user[/bold red]")
        sys.exit(1)
