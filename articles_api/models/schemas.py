# articles_api/models/schemas.py
from pydantic import BaseModel, Field
from typing import Optional


# --- Stored article ---
# Returned by every route that hands back rows
class Article(BaseModel):
    id: int
    title: str
    content: str
    author: str

    class Config:
        from_attributes = True


# --- Request bodies ---
# All fields optional: presence is checked by the store,
# and whatever is still missing reaches the NOT NULL columns.
class ArticleCreate(BaseModel):
    title: Optional[str] = None
    content: Optional[str] = None
    author: Optional[str] = None


class ArticleReplace(BaseModel):
    id: Optional[int] = None
    title: Optional[str] = None
    content: Optional[str] = None
    author: Optional[str] = None


class ArticleTitleUpdate(BaseModel):
    id: Optional[int] = None
    title: Optional[str] = None


# --- Response envelopes ---
class MessageResponse(BaseModel):
    message: str


class TitleUpdateResponse(MessageResponse):
    result: Article


class DeleteResponse(MessageResponse):
    deleted_article: Article = Field(alias="deletedArticle")

    class Config:
        populate_by_name = True
