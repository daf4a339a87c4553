# articles_api/api/articles.py
import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from typing import List
from articles_api.core.errors import ArticleNotFoundError, ArticleValidationError, error_body
from articles_api.models.schemas import (
    Article,
    ArticleCreate,
    ArticleReplace,
    ArticleTitleUpdate,
    DeleteResponse,
    MessageResponse,
    TitleUpdateResponse,
)
from articles_api.services import articles as svc

router = APIRouter(prefix="/articles", tags=["articles"])
logger = logging.getLogger("articles_api.api")

# Errors raised by the store are rendered by the handlers in core.errors
# as {"message": ...} with status 500. DELETE is the only route that
# reports a missing article as 404.


@router.get("", response_model=List[Article],
            responses={500: {"model": MessageResponse}},
            summary="All articles ordered by id")
async def api_list_articles():
    return await svc.list_articles()


@router.post("", response_model=Article, status_code=status.HTTP_201_CREATED,
             responses={500: {"model": MessageResponse}},
             summary="Create an article with a title not used yet")
async def api_create_article(payload: ArticleCreate):
    return await svc.create_article(payload.title, payload.content, payload.author)


@router.put("/edit", response_model=Article,
            responses={500: {"model": MessageResponse}},
            summary="Replace title, content and author of an article")
async def api_replace_article(payload: ArticleReplace):
    return await svc.replace_article(payload.id, payload.title, payload.content, payload.author)


@router.patch("/edit/title", response_model=TitleUpdateResponse,
              responses={500: {"model": MessageResponse}},
              summary="Change only the title of an article")
async def api_update_title(payload: ArticleTitleUpdate):
    row = await svc.update_article_title(payload.id, payload.title)
    return TitleUpdateResponse(message="Article title updated", result=Article(**row))


@router.delete("/{article_id}", response_model=DeleteResponse,
               responses={404: {"model": MessageResponse}, 500: {"model": MessageResponse}},
               summary="Delete an article by id")
async def api_delete_article(article_id: str):
    try:
        row = await svc.delete_article(_parse_article_id(article_id))
    except ArticleNotFoundError as exc:
        return JSONResponse(error_body(exc.message), status_code=status.HTTP_404_NOT_FOUND)
    except Exception as exc:
        logger.error(
            "Delete failed",
            extra={"event": "article_delete_failed", "article_id": article_id, "error": str(exc)},
        )
        return JSONResponse(
            error_body(f"Delete failed: {exc}"),
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
    return DeleteResponse(message="Article deleted", deleted_article=Article(**row))


def _parse_article_id(raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise ArticleValidationError(f"Invalid article id: {raw!r}") from None
