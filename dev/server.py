import typer
import uvicorn
import os
from dev.utils import print_header, print_info

app = typer.Typer(help="API server commands")

@app.command("run")
def run_server(
    host: str = typer.Option("127.0.0.1", help="Host to bind"),
    port: int = typer.Option(8000, help="Port to bind"),
    reload: bool = typer.Option(True, help="Enable auto-reload (Dev mode)"),
    prod: bool = typer.Option(False, "--prod", help="Production mode (disables reload)"),
    no_parse: bool = typer.Option(False, "--no-parse", help="Skip the startup ingestion from the providers"),
):
    """
    Start the ModVoyage API server
    """
    if prod:
        reload = False
        print_header("Starting ModVoyage in PRODUCTION mode")
    else:
        print_header("Starting ModVoyage in DEVELOPMENT mode")

    if no_parse:
        # Read by main.create_app; survives the reloader's subprocess
        os.environ["AUTO_PARSE"] = "false"
        print_info("Auto-parse disabled for this run.")

    uvicorn.run(
        "main:app",
        host=host,
        port=port,
        reload=reload,
        log_level="info"
    )

@app.command("prod")
def run_prod():
    """Shortcut for production run"""
    run_server(host="0.0.0.0", port=8000, reload=False, prod=True, no_parse=False)
