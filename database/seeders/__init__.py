"""
Catalog Seeders Package
__init__.py for the seeders module
"""
from .version_seeder import seed_versions
from .category_seeder import seed_categories
from .mod_seeder import seed_mods

__all__ = [
    'seed_versions',
    'seed_categories',
    'seed_mods'
]
