"""Owner Routes — CRUD plus single-record lookups by campus id and email.

Invariants:
    - Lookups answer 404 when no owner matches (NotFoundError)
    - Lookup paths have two segments, so they never shadow GET /owners/{id}
"""

from fastapi import Depends

from inventory.api.crud_router import build_crud_router
from inventory.api.dependencies import service_provider
from inventory.schemas.owner import OwnerRecord
from inventory.services.crud_service import CrudService
from inventory.services.entities import OWNERS

router = build_crud_router(OWNERS)
get_owner_service = service_provider(OWNERS)


@router.get("/campus/{campus_id}", response_model=OwnerRecord)
async def get_owner_by_campus_id(
    campus_id: str, service: CrudService = Depends(get_owner_service),
):
    return await service.get_one_by("campus_id", campus_id)


@router.get("/email/{email}", response_model=OwnerRecord)
async def get_owner_by_email(
    email: str, service: CrudService = Depends(get_owner_service),
):
    return await service.get_one_by("email", email)
