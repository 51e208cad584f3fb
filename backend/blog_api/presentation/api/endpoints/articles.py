"""Article CRUD endpoints.

Every route runs through the request pipeline: validation first, then
authentication where required, then the ownership check on routes that
mutate an existing article.
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import Response

from blog_api.application.pipeline import (
    Authenticator,
    OwnershipAuthorizer,
    RequestContext,
    RequestPipeline,
    RequestShape,
)
from blog_api.application.schemas import (
    ArticleCreate,
    ArticlePatch,
    ArticleResponse,
    ArticleUpdate,
    MessageResponse,
    PaginationQuery,
    ResourceIdParams,
)
from blog_api.application.services import ArticleService
from blog_api.infrastructure.dependencies import (
    get_article_ownership,
    get_article_service,
    get_authenticator,
    get_pipeline,
)
from blog_api.presentation.api.http import json_body, json_response, read_request

router = APIRouter(prefix="/articles", tags=["Articles"])

LIST_ARTICLES = RequestShape(query=PaginationQuery)
ARTICLE_BY_ID = RequestShape(params=ResourceIdParams)
CREATE_ARTICLE = RequestShape(body=ArticleCreate)
UPDATE_ARTICLE = RequestShape(params=ResourceIdParams, body=ArticleUpdate)
PATCH_ARTICLE = RequestShape(params=ResourceIdParams, body=ArticlePatch)


def _to_response(article) -> ArticleResponse:
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.get("", response_model=list[ArticleResponse])
async def list_articles(
    request: Request,
    pipeline: RequestPipeline = Depends(get_pipeline),
    service: ArticleService = Depends(get_article_service),
) -> Response:
    """Retrieve a page of articles (``?page=1&limit=10``)."""

    async def handler(ctx: RequestContext[None, PaginationQuery, None]) -> Response:
        articles = await service.list_articles(skip=ctx.query.offset, limit=ctx.query.limit)
        return json_response([_to_response(a) for a in articles])

    return await pipeline.run(await read_request(request), LIST_ARTICLES, handler)


@router.get("/{id}", response_model=ArticleResponse)
async def get_article(
    request: Request,
    pipeline: RequestPipeline = Depends(get_pipeline),
    service: ArticleService = Depends(get_article_service),
) -> Response:
    """Retrieve a single article by ID."""

    async def handler(ctx: RequestContext[ResourceIdParams, None, None]) -> Response:
        article = await service.get_article(ctx.params.id)
        return json_response(_to_response(article))

    return await pipeline.run(await read_request(request), ARTICLE_BY_ID, handler)


@router.post(
    "",
    response_model=ArticleResponse,
    status_code=status.HTTP_201_CREATED,
    openapi_extra=json_body(ArticleCreate),
)
async def create_article(
    request: Request,
    pipeline: RequestPipeline = Depends(get_pipeline),
    authenticator: Authenticator = Depends(get_authenticator),
    service: ArticleService = Depends(get_article_service),
) -> Response:
    """Create a new article owned by the caller."""

    async def handler(ctx: RequestContext[None, None, ArticleCreate]) -> Response:
        article = await service.create_article(ctx.body, ctx.require_identity())
        return json_response(_to_response(article), status_code=status.HTTP_201_CREATED)

    return await pipeline.run(
        await read_request(request), CREATE_ARTICLE, handler, stages=[authenticator]
    )


@router.put("/{id}", response_model=ArticleResponse, openapi_extra=json_body(ArticleUpdate))
async def update_article(
    request: Request,
    pipeline: RequestPipeline = Depends(get_pipeline),
    authenticator: Authenticator = Depends(get_authenticator),
    ownership: OwnershipAuthorizer = Depends(get_article_ownership),
    service: ArticleService = Depends(get_article_service),
) -> Response:
    """Replace title, body and category of an article the caller owns."""

    async def handler(ctx: RequestContext[ResourceIdParams, None, ArticleUpdate]) -> Response:
        article = await service.replace_article(ctx.params.id, ctx.body)
        return json_response(_to_response(article))

    return await pipeline.run(
        await read_request(request), UPDATE_ARTICLE, handler, stages=[authenticator, ownership]
    )


@router.patch("/{id}", response_model=MessageResponse, openapi_extra=json_body(ArticlePatch))
async def patch_article(
    request: Request,
    pipeline: RequestPipeline = Depends(get_pipeline),
    authenticator: Authenticator = Depends(get_authenticator),
    ownership: OwnershipAuthorizer = Depends(get_article_ownership),
    service: ArticleService = Depends(get_article_service),
) -> Response:
    """Change only the supplied fields of an article the caller owns."""

    async def handler(ctx: RequestContext[ResourceIdParams, None, ArticlePatch]) -> Response:
        await service.patch_article(ctx.params.id, ctx.body)
        return json_response(MessageResponse(message="Article updated"))

    return await pipeline.run(
        await read_request(request), PATCH_ARTICLE, handler, stages=[authenticator, ownership]
    )


@router.delete("/{id}", response_model=MessageResponse)
async def delete_article(
    request: Request,
    pipeline: RequestPipeline = Depends(get_pipeline),
    authenticator: Authenticator = Depends(get_authenticator),
    ownership: OwnershipAuthorizer = Depends(get_article_ownership),
    service: ArticleService = Depends(get_article_service),
) -> Response:
    """Delete an article the caller owns."""

    async def handler(ctx: RequestContext[ResourceIdParams, None, None]) -> Response:
        await service.delete_article(ctx.params.id)
        return json_response(MessageResponse(message="Article deleted"))

    return await pipeline.run(
        await read_request(request), ARTICLE_BY_ID, handler, stages=[authenticator, ownership]
    )
