"""
Category Seeder
Seeds the catalog categories with their card images
"""
from app.storage.base import CatalogStore
from database.schemas import CategoryCreate

CATEGORIES = [
    ("Technology", "https://i.imgur.com/sFBc8RC.jpg"),
    ("Magic", "https://i.imgur.com/wPD9Tza.jpg"),
    ("Adventure", "https://i.imgur.com/PqaI5HO.jpg"),
    ("World Generation", "https://i.imgur.com/4Rmmfzu.jpg"),
    ("Utility", "https://i.imgur.com/J3lMPOw.jpg"),
    ("Quality of Life", "https://i.imgur.com/wUMR6Ea.jpg"),
    ("Storage", "https://i.imgur.com/BPzjvJp.jpg"),
    ("API/Library", "https://i.imgur.com/IFVnrfS.jpg"),
    ("Tools", "https://i.imgur.com/nqWLwEj.jpg"),
    ("Building", "https://i.imgur.com/nUc2fMG.jpg"),
    ("Mobs", "https://i.imgur.com/MU3sP22.jpg"),
    ("Dimension", "https://i.imgur.com/YGhrSyF.jpg"),
    ("Transportation", "https://i.imgur.com/QdBBG3b.jpg"),
    ("Food", "https://i.imgur.com/uoGW5st.jpg"),
    ("Library", "https://i.imgur.com/GAbHnT9.jpg"),
]


def seed_categories(store: CatalogStore):
    """Seed categories if there are none yet"""
    if store.get_categories():
        print("Categories already exist, skipping seed.")
        return

    print("Seeding Categories...")
    for name, image_url in CATEGORIES:
        store.create_category(CategoryCreate(name=name, image_url=image_url))
    print(f"Created {len(CATEGORIES)} categories")
