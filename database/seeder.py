"""
Seeder Runner
Main entry point to run all catalog seeders
"""
import sys
import os

# Add the project root to the Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.storage import create_store
from app.storage.base import CatalogStore
from database.seeders.version_seeder import seed_versions
from database.seeders.category_seeder import seed_categories
from database.seeders.mod_seeder import seed_mods

SEEDERS = {
    "versions": seed_versions,
    "categories": seed_categories,
    "mods": seed_mods,
}


def run_all_seeders(store: CatalogStore):
    """Run all seeders in order against the given store"""
    print("=" * 50)
    print("Starting Catalog Seeding...")
    print("=" * 50)

    for name, seeder_func in SEEDERS.items():
        print(f"\n[SEEDER] Running {name} seeder...")
        try:
            seeder_func(store)
            print(f"[SEEDER] {name} seeder completed ✓")
        except Exception as e:
            print(f"[SEEDER] {name} seeder failed ✗: {e}")

    print("\n" + "=" * 50)
    print("Catalog Seeding Complete!")
    print("=" * 50)


def run_specific_seeder(store: CatalogStore, seeder_name: str):
    """Run a specific seeder by name"""
    seeder_name = seeder_name.lower()
    if seeder_name in SEEDERS:
        print(f"Running {seeder_name} seeder...")
        SEEDERS[seeder_name](store)
        print(f"{seeder_name} seeder completed!")
    else:
        print(f"Unknown seeder: {seeder_name}")
        print(f"Available seeders: {', '.join(SEEDERS.keys())}")


if __name__ == "__main__":
    from dotenv import load_dotenv
    load_dotenv()

    # A memory store would vanish with this process, so seed the database
    target = create_store("db")
    if len(sys.argv) > 1:
        run_specific_seeder(target, sys.argv[1])
    else:
        run_all_seeders(target)
