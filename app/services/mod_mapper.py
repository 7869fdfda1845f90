"""
Rules shared by every provider adapter for turning a provider listing into
ModCreate / CategoryCreate records.
"""
import datetime
import re
from typing import Iterable, List, Optional
from urllib.parse import quote

from database.schemas import CategoryCreate, ModCreate

LOADER_TAGS = {"forge", "fabric", "quilt", "liteloader", "neoforge"}
DEFAULT_CATEGORY = "Utility"
DEFAULT_GAME_VERSION = "1.20.1"
NEW_MOD_WINDOW = datetime.timedelta(days=30)

PLACEHOLDER_HOST = "https://placehold.co"
RELEASE_VERSION = re.compile(r"^\d+\.\d+(\.\d+)?$")


def infer_category(tags: Optional[Iterable[str]]) -> str:
    """First tag that is not a mod loader, capitalised. Falls back to Utility."""
    for tag in tags or []:
        if not tag or tag.lower() in LOADER_TAGS:
            continue
        return tag[0].upper() + tag[1:]
    return DEFAULT_CATEGORY


def is_recent(created: Optional[datetime.datetime], now: Optional[datetime.datetime] = None) -> bool:
    if created is None:
        return False
    if created.tzinfo is None:
        created = created.replace(tzinfo=datetime.timezone.utc)
    now = now or datetime.datetime.now(datetime.timezone.utc)
    return created > now - NEW_MOD_WINDOW


def latest_game_version(versions: Optional[Iterable[str]]) -> str:
    """Newest release version in the list (snapshots ignored)."""
    releases = [v for v in versions or [] if v and RELEASE_VERSION.match(v)]
    if not releases:
        return DEFAULT_GAME_VERSION
    return max(releases, key=lambda v: tuple(int(part) for part in v.split(".")))


def slugify(name: str) -> str:
    return re.sub(r"\s+", "-", name.lower()).replace("'", "")


def placeholder_image(text: str, size: str = "400x200") -> str:
    return f"{PLACEHOLDER_HOST}/{size}/333333/FFFFFF.png?text={quote(text, safe='')}"


def category_image(name: str) -> str:
    return placeholder_image(name, size="200x150")


def collect_categories(mods: Iterable[ModCreate]) -> List[CategoryCreate]:
    """Unique category names of the given mods, in first-seen order."""
    seen = set()
    categories = []
    for mod in mods:
        if mod.category in seen:
            continue
        seen.add(mod.category)
        categories.append(CategoryCreate(name=mod.category, image_url=category_image(mod.category)))
    return categories


def dedupe_categories(categories: Iterable[CategoryCreate]) -> List[CategoryCreate]:
    seen = set()
    unique = []
    for category in categories:
        if category.name in seen:
            continue
        seen.add(category.name)
        unique.append(category)
    return unique
