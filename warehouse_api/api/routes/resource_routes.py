"""Resource Routes — builds the five CRUD endpoints for one ResourceDefinition.

Invariants:
    - GET    /api/{kind}?pageNumber=&pageSize=&search=  → 200 array (maybe empty)
      (pageSize capped by settings.max_page_size; a pageNumber past the end → [])
    - GET    /api/{kind}/{id}                          → 200 object | 404
    - POST   /api/{kind}                               → 201 + Location + stored entity
    - PUT    /api/{kind}/{id}                          → 204 | 400 id mismatch | 404
    - DELETE /api/{kind}/{id}                          → 204 | 404
    - Routes hold no logic: they bind HTTP to ResourceHandler calls

Design Decisions:
    - Factory function over three copy-pasted modules: body/response schemas are
      closed over so OpenAPI still documents each resource's own shapes
    - Handler built per request from the request-scoped session (get_db)
"""

from fastapi import APIRouter, Depends, Query, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from warehouse_api.config import get_settings
from warehouse_api.core.domain_types import EntityId
from warehouse_api.infrastructure.database import get_db
from warehouse_api.infrastructure.store_gateway import SqlStoreGateway
from warehouse_api.services.resource_handler import (
    ResourceDefinition, ResourceHandler,
)


def build_resource_router(resource: ResourceDefinition) -> APIRouter:
    """Create the APIRouter serving `resource` under /api/{kind}."""
    kind = resource.kind.value
    router = APIRouter(prefix=f"/api/{kind}", tags=[kind])
    write_schema = resource.write_schema
    read_schema = resource.read_schema
    detail_route = f"get_{kind}_item"
    settings = get_settings()
    default_page_size = settings.default_page_size
    max_page_size = settings.max_page_size

    def get_handler(db: AsyncSession = Depends(get_db)) -> ResourceHandler:
        store = SqlStoreGateway(
            db, resource.model, search_fields=resource.search_fields,
        )
        return ResourceHandler(resource, store)

    @router.get("", response_model=list[read_schema], name=f"list_{kind}")
    async def list_items(
        page_number: int = Query(1, ge=1, alias="pageNumber"),
        page_size: int = Query(
            default_page_size, ge=1, le=max_page_size, alias="pageSize",
        ),
        search: str | None = Query(None),
        handler: ResourceHandler = Depends(get_handler),
    ):
        return await handler.list_page(page_number, page_size, search)

    @router.get("/{entity_id}", response_model=read_schema, name=detail_route)
    async def get_item(
        entity_id: int, handler: ResourceHandler = Depends(get_handler),
    ):
        return await handler.get(EntityId(entity_id))

    @router.post(
        "", response_model=read_schema,
        status_code=status.HTTP_201_CREATED, name=f"create_{kind}_item",
    )
    async def create_item(
        body: write_schema,
        request: Request,
        response: Response,
        handler: ResourceHandler = Depends(get_handler),
    ):
        created = await handler.create(body)
        response.headers["Location"] = str(
            request.url_for(detail_route, entity_id=created.id),
        )
        return created

    @router.put(
        "/{entity_id}", status_code=status.HTTP_204_NO_CONTENT,
        response_class=Response, name=f"update_{kind}_item",
    )
    async def update_item(
        entity_id: int,
        body: write_schema,
        handler: ResourceHandler = Depends(get_handler),
    ):
        await handler.update(EntityId(entity_id), body)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @router.delete(
        "/{entity_id}", status_code=status.HTTP_204_NO_CONTENT,
        response_class=Response, name=f"delete_{kind}_item",
    )
    async def delete_item(
        entity_id: int, handler: ResourceHandler = Depends(get_handler),
    ):
        await handler.delete(EntityId(entity_id))
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router
