# Export Base for Alembic migrations
from .base import Base

# Export all models
from .user import User
from .mod import Mod
from .category import Category
from .minecraft_version import MinecraftVersion
