from sqlalchemy import Column, Integer, String, Boolean, DateTime, Text
from database.models.base import Base

class Mod(Base):
    __tablename__ = "mods"
    # AUTOINCREMENT keeps SQLite from handing out ids again after a clear
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False, index=True)
    description = Column(Text, nullable=False)
    version = Column(String, nullable=False)  # Minecraft version, e.g. 1.20.1
    category = Column(String, nullable=False)  # Category.name, not a foreign key
    download_count = Column(Integer, nullable=False, default=0)
    image_url = Column(String, nullable=False)
    download_url = Column(String, nullable=False)
    source_url = Column(String, nullable=False)  # Provider page the download redirects to
    source = Column(String, nullable=False, default="unknown")  # CurseForge, Modrinth, ...
    is_new = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, nullable=False)
