import os
import sys

import typer

# Project root on sys.path when this file is loaded by mine.py
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from database import migrate
from database.seeder import SEEDERS, run_all_seeders, run_specific_seeder
from dev.utils import print_error, print_header, print_success

app = typer.Typer(help="Catalog database commands", no_args_is_help=True)


def _db_store():
    # Seeding the memory store from a CLI process would be lost on exit
    from app.storage import create_store
    return create_store("db")


def _require(ok: bool, success: str, failure: str):
    if not ok:
        print_error(failure)
        raise typer.Exit(code=1)
    print_success(success)


@app.command("all")
def db_all():
    """Apply migrations, then run every seeder"""
    print_header("Migrate + Seed")
    _require(migrate.run_migrations(), "Migrations applied.", "Migrations failed, nothing seeded.")
    run_all_seeders(_db_store())
    print_success("Seeding completed.")


@app.command("migrate")
def migrate_cmd():
    """Apply pending migrations"""
    print_header("Applying Migrations")
    _require(migrate.run_migrations(), "Schema is at head.", "Migration failed.")


@app.command("rollback")
def rollback_cmd():
    """Step back one migration"""
    print_header("Rolling Back")
    _require(migrate.rollback_migration(), "Rolled back one revision.", "Rollback failed.")


@app.command("reset")
def reset_cmd():
    """Downgrade to base and migrate back up (drops all data)"""
    print_header("Resetting Database")
    _require(migrate.reset_database(), "Database rebuilt.", "Reset failed.")


@app.command("status")
def status_cmd():
    """Show the current revision"""
    print_header("Migration Status")
    migrate.show_current()


@app.command("history")
def history_cmd():
    """List known revisions"""
    print_header("Migration History")
    migrate.show_history()


@app.command("init-db")
def init_db_cmd():
    """Create tables from the models and stamp head; for an empty database"""
    print_header("Initializing Database")
    _require(migrate.create_database(), "Database initialized.", "Initialization failed.")


@app.command("seed")
def seed_cmd(name: str = typer.Argument("all", help=f"Seeder to run ({', '.join(SEEDERS)}) or 'all'")):
    """Seed versions, categories and sample mods"""
    print_header(f"Running Seeder: {name}")
    if name == "all":
        run_all_seeders(_db_store())
    elif name.lower() in SEEDERS:
        run_specific_seeder(_db_store(), name)
    else:
        print_error(f"Unknown seeder '{name}'.")
        raise typer.Exit(code=1)
