"""
Alembic wrapper for the catalog schema.

    python database/migrate.py [run|rollback|reset|status|history|init]
"""
import os
import subprocess
import sys

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)


def _alembic(*args):
    # alembic.ini sits in the project root
    return subprocess.run(
        [sys.executable, "-m", "alembic", *args],
        cwd=PROJECT_ROOT,
        capture_output=True,
        text=True,
    )


def _run_steps(tag: str, *steps) -> bool:
    """Run alembic invocations in order, stopping at the first failure."""
    for args in steps:
        result = _alembic(*args)
        if result.stdout:
            print(result.stdout)
        if result.returncode != 0:
            print(f"[{tag}] alembic {' '.join(args)} failed ✗")
            print(result.stderr)
            return False
    print(f"[{tag}] Done ✓")
    return True


def _show(*args):
    result = _alembic(*args)
    print(result.stdout or result.stderr)


def create_database() -> bool:
    """Create the tables straight from the models and mark them as at head."""
    from database.connection import engine
    from database.models import Base

    print("[INIT] Creating catalog tables...")
    try:
        Base.metadata.create_all(bind=engine)
    except Exception as e:
        print(f"[INIT] Could not create tables: {e}")
        return False
    return _run_steps("INIT", ("stamp", "head"))


def run_migrations() -> bool:
    return _run_steps("MIGRATE", ("upgrade", "head"))


def rollback_migration() -> bool:
    return _run_steps("ROLLBACK", ("downgrade", "-1"))


def reset_database() -> bool:
    return _run_steps("RESET", ("downgrade", "base"), ("upgrade", "head"))


def show_current():
    _show("current")


def show_history():
    _show("history")


COMMANDS = {
    "run": run_migrations,
    "rollback": rollback_migration,
    "reset": reset_database,
    "status": show_current,
    "history": show_history,
    "init": create_database,
}


if __name__ == "__main__":
    name = sys.argv[1] if len(sys.argv) > 1 else "run"
    if name not in COMMANDS:
        print(f"Unknown command: {name}. Choose from: {', '.join(COMMANDS)}")
        sys.exit(2)
    outcome = COMMANDS[name]()
    sys.exit(1 if outcome is False else 0)
