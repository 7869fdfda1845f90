import asyncio
import os
import sys

import typer

# Add parent directory to sys.path to allow imports from project root when running standalone
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from app.services import parser_service
from app.services.ingestion_service import ingest
from app.storage import create_store
from dev.utils import console, mods_table, print_error, print_header, print_info, print_success, print_warning

app = typer.Typer(help="Mod provider ingestion commands")

SOURCES = {
    "all": parser_service.parse_all_sources,
    "curseforge": parser_service.parse_curseforge,
    "modrinth": parser_service.parse_modrinth,
}

@app.command("run")
def run_parser(
    source: str = typer.Option("all", "--source", "-s", help="all, curseforge or modrinth"),
    limit: int = typer.Option(20, "--limit", "-l", min=1, help="Mods to request per provider"),
    clear: bool = typer.Option(False, "--clear", help="Drop existing mods and categories first"),
    backend: str = typer.Option("db", "--backend", help="Store to write into (db or memory)"),
):
    """
    Pull mods from the providers and write them into the catalog
    """
    adapter = SOURCES.get(source.lower())
    if adapter is None:
        print_error(f"Unknown source '{source}'. Choose from: {', '.join(SOURCES)}")
        raise typer.Exit(code=1)

    print_header(f"Parsing {source} (limit {limit})")
    if not os.getenv("CURSEFORGE_API_KEY") and source.lower() in ("all", "curseforge"):
        print_warning("CURSEFORGE_API_KEY is not set; CurseForge will serve fallback data.")

    try:
        store = create_store(backend)
    except ValueError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    result = asyncio.run(adapter(limit))
    print_info(f"Parsed {len(result.mods)} mods and {len(result.categories)} categories")

    report = ingest(store, result, clear_first=clear)
    console.print(mods_table(report.saved_mods))
    print_success(
        f"Saved {len(report.saved_mods)}/{report.parsed_mods} mods and "
        f"{len(report.saved_categories)}/{report.parsed_categories} categories"
    )
