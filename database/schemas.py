from pydantic import BaseModel, Field, StringConstraints
from pydantic.alias_generators import to_camel
from typing import Annotated, Optional, List
from datetime import datetime


class CamelModel(BaseModel):
    """Wire models speak camelCase, Python code uses snake_case."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


# --- Mods ---

class ModCreate(CamelModel):
    name: str
    description: str
    version: str
    category: str
    download_count: Optional[int] = Field(default=None, ge=0)
    image_url: str
    download_url: str
    source_url: str
    source: Optional[str] = None
    is_new: Optional[bool] = None

class Mod(CamelModel):
    id: int
    name: str
    description: str
    version: str
    category: str
    download_count: int
    image_url: str
    download_url: str
    source_url: str
    source: str
    is_new: bool
    created_at: datetime

class ModDownload(Mod):
    redirect_url: str

class ModFilter(CamelModel):
    search: Optional[str] = None
    version: Optional[str] = None
    category: Optional[str] = None
    source: Optional[str] = None
    sort_by: Optional[str] = None  # popular, recent, name, downloads
    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=10, ge=1)

class PaginatedMods(CamelModel):
    data: List[Mod]
    total: int
    page: int
    page_size: int
    page_count: int


# --- Categories & versions ---

class CategoryCreate(CamelModel):
    name: str
    image_url: str

class Category(CategoryCreate):
    id: int

class MinecraftVersionCreate(CamelModel):
    version: str

class MinecraftVersion(MinecraftVersionCreate):
    id: int


# --- Users ---

class UserCreate(BaseModel):
    username: str
    hashed_password: str

class User(BaseModel):
    id: int
    username: str
    hashed_password: str

    class Config:
        from_attributes = True

class UserPublic(CamelModel):
    id: int
    username: str

class RegisterRequest(BaseModel):
    username: Annotated[str, StringConstraints(strip_whitespace=True, min_length=3, max_length=20)]
    password: str = Field(min_length=6, max_length=50)

class UserLogin(BaseModel):
    username: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
    password: str = Field(min_length=1)

class AuthResponse(BaseModel):
    message: str
    user: UserPublic


# --- Ingestion ---

class ParseResult(BaseModel):
    mods: List[ModCreate] = []
    categories: List[CategoryCreate] = []

class CategoryParseSummary(BaseModel):
    parsed: int
    saved: int
    items: List[Category]

class CurseForgeParseResponse(BaseModel):
    parsed: int
    saved: int
    mods: List[Mod]

class ParseResponse(CurseForgeParseResponse):
    categories: CategoryParseSummary

class PageParseResponse(ParseResponse):
    page: int
