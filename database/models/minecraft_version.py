from sqlalchemy import Column, Integer, String
from database.models.base import Base

class MinecraftVersion(Base):
    __tablename__ = "minecraft_versions"

    id = Column(Integer, primary_key=True, index=True)
    version = Column(String, unique=True, nullable=False)
