"""CRUD Router Factory — the HTTP adapter shared by every inventory entity.

Invariants:
    - GET list → 200 array, GET one → 200, POST → 201 with assigned id,
      PUT → 200, DELETE → 204 with empty body
    - PUT takes the id from the path; a body id is overwritten
    - No PUT route for non-updatable entities (device logs)
    - Errors are not caught here: InventoryError and validation failures are
      turned into responses by api/error_handlers.py

Design Decisions:
    - Handlers are closures over the entity's schema so FastAPI validates and
      documents each body type; this module must keep real (non-string)
      annotations for that to work
    - Child entities get an optional `?{parent_column}=` filter on the list route
"""

from fastapi import APIRouter, Depends, Query, Response, status

from inventory.api.dependencies import service_provider
from inventory.services.crud_service import CrudService
from inventory.services.entities import EntityDefinition

API_PREFIX = "/api/v1"


def build_crud_router(entity: EntityDefinition) -> APIRouter:
    """Build list/get/create/update/delete routes for one entity."""
    schema = entity.schema
    get_service = service_provider(entity)
    router = APIRouter(
        prefix=f"{API_PREFIX}/{entity.collection}", tags=[entity.collection],
    )

    if entity.parent_column:
        @router.get("", response_model=list[schema])
        async def list_records(
            parent_id: str | None = Query(None, alias=entity.parent_column),
            service: CrudService = Depends(get_service),
        ):
            return await service.get_many(parent_id)
    else:
        @router.get("", response_model=list[schema])
        async def list_records(service: CrudService = Depends(get_service)):
            return await service.get_many()

    @router.get("/{record_id}", response_model=schema)
    async def get_record(
        record_id: str, service: CrudService = Depends(get_service),
    ):
        return await service.get_one(record_id)

    @router.post(
        "", response_model=schema, status_code=status.HTTP_201_CREATED,
    )
    async def create_record(
        record: schema, service: CrudService = Depends(get_service),
    ):
        await service.create(record)
        return record

    if entity.updatable:
        @router.put("/{record_id}", response_model=schema)
        async def update_record(
            record_id: str,
            record: schema,
            service: CrudService = Depends(get_service),
        ):
            record.id = record_id
            await service.update(record)
            return record

    @router.delete(
        "/{record_id}", status_code=status.HTTP_204_NO_CONTENT,
    )
    async def delete_record(
        record_id: str, service: CrudService = Depends(get_service),
    ):
        await service.delete(record_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router


def add_child_list_route(
    router: APIRouter, path: str, child: EntityDefinition,
) -> None:
    """Add `GET {path}` listing `child` records by the parent id in the path."""
    get_service = service_provider(child)

    @router.get(
        path,
        response_model=list[child.schema],
        name=f"list_{child.name.lower()}_by_parent",
    )
    async def list_children(
        parent_id: str, service: CrudService = Depends(get_service),
    ):
        return await service.get_many(parent_id)
