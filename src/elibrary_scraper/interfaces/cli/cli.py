"""Command-line interface for eLibrary contractor lookups."""

import asyncio
import logging
import sys
from typing import List, Optional

from httpx import AsyncClient, RequestError
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ...application.contractor_lookup import create_elibrary_client
from ...config.settings import Settings, get_settings
from ...domain.exceptions import InvalidContractError
from ...domain.models import ContractorPage
from ...infrastructure.http.client import HTTPClientFactory

console = Console(force_terminal=True, legacy_windows=False)


def _create_http_client(settings: Settings) -> AsyncClient:
    """Create a fresh HTTP client for a single CLI run."""
    return HTTPClientFactory.create(settings.http_timeout_seconds, verify=settings.verify_tls)


def _configure_logging(settings: Settings) -> None:
    level = getattr(logging, settings.log_level, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _print_error(message: str) -> None:
    error_panel = Panel(
        f"[red]Error:[/red] {message}",
        title="[bold red]Error[/bold red]",
        border_style="red",
    )
    console.print(error_panel)


def _print_page(page: ContractorPage, json_output: bool = False) -> None:
    """Print lookup result to console.

    Args:
        page: Resolved contractor page.
        json_output: If True, output as JSON. Otherwise, print formatted text.
    """
    if json_output:
        console.print_json(page.model_dump_json(exclude_none=True))
        return

    table = Table(show_header=False, border_style="cyan", padding=(0, 1), box=None)
    table.add_column("Field", style="bold bright_white")
    table.add_column("Value", style="cyan", overflow="fold")
    table.add_row("Contract", page.contract)
    table.add_row("URL", page.url)
    console.print(
        Panel(table, title="[bold cyan]Contractor Page[/bold cyan]", border_style="cyan")
    )

    if page.html is not None:
        console.print()
        console.print(page.html, markup=False, highlight=False)


async def _lookup_contract(
    contract: str, fetch_html: bool = False, json_output: bool = False
) -> int:
    """Resolve a contract, optionally fetch its page, and print the result.

    Returns:
        Exit code (0 for success, 1 for error).
    """
    settings = get_settings()
    try:
        async with _create_http_client(settings) as http_client:
            client = create_elibrary_client(http_client, settings)
            url = await client.get_contractor_info_url(contract)
            html = await client.get_contractor_info_html(url) if fetch_html else None
    except InvalidContractError as e:
        _print_error(e.message)
        return 1
    except RequestError as e:
        _print_error(f"Transport error: {e}")
        return 1

    _print_page(ContractorPage(contract=contract, url=url, html=html), json_output=json_output)
    return 0


def _print_help() -> None:
    help_content = Text()
    help_content.append("elibrary-scraper", style="bold cyan")
    help_content.append(" - GSA eLibrary contractor lookup\n\n", style="white")

    help_content.append("Usage:\n", style="bold")
    help_content.append("  elibrary-scraper", style="cyan")
    help_content.append(" <contract>", style="yellow")
    help_content.append("          Print the contractor page URL\n", style="dim")
    help_content.append("  elibrary-scraper", style="cyan")
    help_content.append(" --html <contract>", style="yellow")
    help_content.append("   Also print the page HTML\n", style="dim")
    help_content.append("  elibrary-scraper", style="cyan")
    help_content.append(" --json <contract>", style="yellow")
    help_content.append("   Output results as JSON\n\n", style="dim")

    help_content.append("Notes:\n", style="bold")
    help_content.append(
        "  A blank contract is rejected here. The Python API sends any string,\n"
        "  empty or not, to the search endpoint as-is.\n\n",
        style="dim",
    )

    help_content.append("Environment Variables:\n", style="bold")
    help_content.append("  ELIBRARY_BASE_URL", style="yellow")
    help_content.append("      Site root (default https://www.gsaelibrary.gsa.gov)\n", style="dim")
    help_content.append("  ELIBRARY_VERIFY_TLS", style="yellow")
    help_content.append(
        "    Verify the site certificate (default false for the public site, true otherwise)\n",
        style="dim",
    )
    help_content.append("  HTTP_TIMEOUT_SECONDS", style="yellow")
    help_content.append("   Request timeout (default 20)\n", style="dim")
    help_content.append("  LOG_LEVEL", style="yellow")
    help_content.append("              Logging level (default WARNING)\n", style="dim")

    console.print(
        Panel(
            help_content,
            title="[bold bright_blue]Help[/bold bright_blue]",
            border_style="bright_blue",
            padding=(1, 2),
        )
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point.

    Usage:
        elibrary-scraper <contract>          # Print contractor page URL
        elibrary-scraper --html <contract>   # Also print the page HTML
        elibrary-scraper --json <contract>   # Output as JSON
        elibrary-scraper --help              # Show help

    Returns:
        Exit code (0 for success, 1 for error).
    """
    args = list(sys.argv[1:] if argv is None else argv)

    if not args or args[0] in ("-h", "--help"):
        _print_help()
        return 0

    json_output = False
    fetch_html = False
    while args and args[0] in ("--json", "--html"):
        flag = args.pop(0)
        if flag == "--json":
            json_output = True
        else:
            fetch_html = True

    contract = " ".join(args)
    if not contract.strip():
        _print_error("Contract number cannot be empty")
        return 1

    _configure_logging(get_settings())
    return asyncio.run(
        _lookup_contract(contract, fetch_html=fetch_html, json_output=json_output)
    )


if __name__ == "__main__":
    sys.exit(main())
