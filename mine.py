import importlib.util
import os
import subprocess
import sys

import typer
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

app = typer.Typer(help="ModVoyage CLI Tool")
console = Console()

DEV_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "dev")


def load_commands():
    """Mount every dev/<group>.py that exposes a Typer `app` as `mine.py <group>`."""
    if not os.path.isdir(DEV_DIR):
        return

    for filename in sorted(os.listdir(DEV_DIR)):
        if not filename.endswith(".py") or filename in ("__init__.py", "utils.py"):
            continue
        group = filename[:-3]
        try:
            spec = importlib.util.spec_from_file_location(f"dev.{group}", os.path.join(DEV_DIR, filename))
            module = importlib.util.module_from_spec(spec)
            sys.modules[f"dev.{group}"] = module
            spec.loader.exec_module(module)
        except Exception as e:
            console.print(f"[red]Failed to load command group {group}: {e}[/red]")
            continue
        if hasattr(module, "app"):
            app.add_typer(module.app, name=group)


load_commands()


# (area, action, description, argv); "{limit}" is asked for before running
MENU = [
    ("Server", "Run (Dev)", "Start the API with auto-reload", ["server", "run"]),
    ("Database", "Setup", "Migrate, then seed", ["database", "all"]),
    ("Database", "Initialize", "Create tables and stamp head", ["database", "init-db"]),
    ("Database", "Status", "Current migration revision", ["database", "status"]),
    ("Parser", "All Sources", "Pull mods from CurseForge and Modrinth",
     ["parser", "run", "--limit", "{limit}"]),
    ("Parser", "Reload", "Clear the catalog, then pull again",
     ["parser", "run", "--limit", "{limit}", "--clear"]),
]


def _menu_table() -> Table:
    table = Table(show_header=True, header_style="bold magenta", expand=True)
    table.add_column("No.", style="dim", width=4, justify="center")
    table.add_column("Area", style="cyan", width=10)
    table.add_column("Action", style="white")
    table.add_column("Description", style="dim")
    for number, (area, action, description, _) in enumerate(MENU, start=1):
        table.add_row(str(number), area, action, description)
    table.add_row("0", "Exit", "Quit", "Close the CLI")
    return table


def _run_entry(argv):
    if "{limit}" in argv:
        limit = Prompt.ask("Mods per provider", default="20")
        argv = [limit if arg == "{limit}" else arg for arg in argv]
    subprocess.run([sys.executable, os.path.abspath(__file__), *argv])


@app.callback(invoke_without_command=True)
def main_interactive(ctx: typer.Context):
    """Without a sub-command, show the menu."""
    if ctx.invoked_subcommand is not None:
        return

    choices = [str(n) for n in range(len(MENU) + 1)]
    while True:
        console.clear()
        console.print(Panel.fit(
            "[bold white]ModVoyage CLI[/bold white]\n[cyan]Run the API, manage the catalog database and pull mods.[/cyan]",
            border_style="blue",
        ))
        console.print(_menu_table())

        choice = Prompt.ask("\nSelect an option", choices=choices, default="1")
        if choice == "0":
            console.print("[bold]Goodbye![/bold]")
            raise typer.Exit()

        _run_entry(MENU[int(choice) - 1][3])
        Prompt.ask("\nPress Enter to continue", default="", show_default=False)


if __name__ == "__main__":
    app()
