"""API Dependencies — hand routes the settings, pool and services owned by the app.

Invariants:
    - Settings and DatabaseSessionManager live on app.state (set by create_app
      and the lifespan); no module-level singletons
    - A service is built per request over the shared pool

Design Decisions:
    - service_provider(entity) returns a FastAPI dependency, so one router
      factory serves every entity
"""

from typing import Callable

from fastapi import Depends, Request

from inventory.config import Settings
from inventory.infrastructure.database import DatabaseSessionManager
from inventory.services.crud_service import CrudService, build_service
from inventory.services.entities import EntityDefinition


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_db_manager(request: Request) -> DatabaseSessionManager:
    db = getattr(request.app.state, "db", None)
    if db is None:
        raise RuntimeError("Database not initialized")
    return db


def service_provider(
    entity: EntityDefinition,
) -> Callable[..., CrudService]:
    """Build the dependency that yields a CrudService for `entity`."""

    def provide_service(
        db: DatabaseSessionManager = Depends(get_db_manager),
        settings: Settings = Depends(get_app_settings),
    ) -> CrudService:
        return build_service(entity, db, strict_writes=settings.strict_writes)

    return provide_service
