"""Resource Routes — builds the five CRUD endpoints for any ResourceDefinition.

Invariants:
    - POST "" -> 201 DTO | 400; GET "/{id}" -> 200 DTO | 404; GET "" -> 200 [DTO];
      PUT "/{id}" -> 200 DTO | 400 | 404; DELETE "/{id}" -> 204 | 404
    - Handlers only parse, call the service, and hand the outcome to respond()
    - One ResourceService + SqlAlchemyStore per request (request-scoped DB session)

Design Decisions:
    - Router factory instead of one hand-written module per resource
      (ADR: Product and Student expose identical endpoint shapes)
"""

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from resource_api.api.error_translation import respond
from resource_api.core.domain_types import EntityId
from resource_api.core.outcome import Failed
from resource_api.core.resource_definition import ResourceDefinition
from resource_api.infrastructure.database import get_db
from resource_api.infrastructure.sql_store import SqlAlchemyStore
from resource_api.schemas.error import ERROR_RESPONSES
from resource_api.services.resource_service import ResourceService


def build_resource_router(
    definition: ResourceDefinition, *, prefix: str, tag: str,
) -> APIRouter:
    """APIRouter exposing create/get/list/update/delete for definition."""
    router = APIRouter(prefix=prefix, tags=[tag], responses={500: ERROR_RESPONSES[500]})
    dto_type = definition.dto_type
    name = definition.name.lower()

    def get_service(db: AsyncSession = Depends(get_db)) -> ResourceService:
        return ResourceService(
            definition, SqlAlchemyStore(definition.entity_type, db),
        )

    @router.post(
        "", response_model=dto_type,
        status_code=status.HTTP_201_CREATED,
        responses={400: ERROR_RESPONSES[400]},
        summary=f"Create a new {name}",
    )
    async def create_resource(
        request: Request, body: dto_type,
        service: ResourceService = Depends(get_service),
    ):
        return respond(await service.create(body), request)

    @router.get(
        "/{entity_id}", response_model=dto_type,
        responses={404: ERROR_RESPONSES[404]},
        summary=f"Get {name} by ID",
    )
    async def get_resource(
        request: Request, entity_id: int,
        service: ResourceService = Depends(get_service),
    ):
        return respond(await service.get(EntityId(entity_id)), request)

    @router.get(
        "", response_model=list[dto_type],
        summary=f"Get all {name}s",
    )
    async def list_resources(
        request: Request,
        service: ResourceService = Depends(get_service),
    ):
        return respond(await service.list_all(), request)

    @router.put(
        "/{entity_id}", response_model=dto_type,
        responses={400: ERROR_RESPONSES[400], 404: ERROR_RESPONSES[404]},
        summary=f"Update {name}",
    )
    async def update_resource(
        request: Request, entity_id: int, body: dto_type,
        service: ResourceService = Depends(get_service),
    ):
        return respond(await service.update(EntityId(entity_id), body), request)

    @router.delete(
        "/{entity_id}", status_code=status.HTTP_204_NO_CONTENT,
        response_class=Response,
        responses={404: ERROR_RESPONSES[404]},
        summary=f"Delete {name}",
    )
    async def delete_resource(
        request: Request, entity_id: int,
        service: ResourceService = Depends(get_service),
    ):
        outcome = await service.delete(EntityId(entity_id))
        if isinstance(outcome, Failed):
            return respond(outcome, request)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router
