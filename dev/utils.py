from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.theme import Theme

# Custom theme for the CLI
custom_theme = Theme({
    "info": "dim cyan",
    "warning": "magenta",
    "error": "bold red",
    "success": "bold green",
    "header": "bold white on blue",
})

console = Console(theme=custom_theme)

def print_header(text: str):
    """Prints a styled header panel."""
    console.print(Panel(f"[bold white]{text}[/bold white]", style="blue", expand=False))

def print_success(text: str):
    """Prints a success message."""
    console.print(f"[success]✔ {text}[/success]")

def print_error(text: str):
    """Prints an error message."""
    console.print(f"[error]✖ {text}[/error]")

def print_info(text: str):
    """Prints an info message."""
    console.print(f"[info]ℹ {text}[/info]")

def print_warning(text: str):
    """Prints a warning message."""
    console.print(f"[warning]⚠ {text}[/warning]")

def mods_table(mods, title: str = "Saved mods", limit: int = 20) -> Table:
    """Rich table of catalog mods, most recent first as stored."""
    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("ID", style="dim", justify="right")
    table.add_column("Name", style="cyan")
    table.add_column("Category")
    table.add_column("Version")
    table.add_column("Source", style="green")
    table.add_column("Downloads", justify="right")

    for mod in mods[:limit]:
        table.add_row(
            str(mod.id),
            mod.name,
            mod.category,
            mod.version,
            mod.source,
            f"{mod.download_count:,}",
        )
    if len(mods) > limit:
        table.caption = f"... and {len(mods) - limit} more"
    return table
