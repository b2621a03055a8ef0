"""
FastAPI backend: REST API over the contact directory.
Run with uvicorn: uvicorn api.main:app --reload
"""

import logging
from contextlib import asynccontextmanager
from typing import Any

from fastapi import Depends, FastAPI, Query, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from neo4j import GraphDatabase
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from api.config import STORE_NEO4J, Settings
from rolodex.application import (
    ContactDetail,
    ContactNotFound,
    ContactService,
    CreateContactData,
    Duplicate,
    Invalid,
    QuerySpec,
    UpdateContactData,
)
from rolodex.infrastructure import (
    InMemoryContactRepository,
    Neo4jContactRepository,
    ensure_contact_constraints,
    seed_contacts,
)

logger = logging.getLogger(__name__)

CONTACTS_PATH = "/api/contacts"


# --- Wire models (camelCase JSON) ---


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CreateContactBody(_CamelModel):
    """Loosely typed so ill-typed values reach validate_create and come back as field errors."""

    first_name: Any = None
    last_name: Any = None
    email: Any = None
    phone: Any = None
    company: Any = None
    address_line1: Any = None
    address_line2: Any = None
    city: Any = None
    state: Any = None
    postal_code: Any = None
    country: Any = None
    is_active: Any = True


class UpdateContactBody(_CamelModel):
    """Every field optional; only keys present in the request body are applied."""

    first_name: Any = None
    last_name: Any = None
    email: Any = None
    phone: Any = None
    company: Any = None
    address_line1: Any = None
    address_line2: Any = None
    city: Any = None
    state: Any = None
    postal_code: Any = None
    country: Any = None
    is_active: Any = None


class ContactListItemOut(_CamelModel):
    id: str
    first_name: str
    last_name: str
    email: str
    company: str | None = None
    is_active: bool
    created_at: str


class ContactDetailOut(_CamelModel):
    id: str
    first_name: str
    last_name: str
    email: str
    phone: str | None = None
    company: str | None = None
    address_line1: str | None = None
    address_line2: str | None = None
    city: str | None = None
    state: str | None = None
    postal_code: str | None = None
    country: str | None = None
    is_active: bool
    created_at: str
    updated_at: str


class ContactListResponse(_CamelModel):
    items: list[ContactListItemOut]
    total: int
    page: int
    page_size: int
    sort: str
    dir: str


def _detail_out(detail: ContactDetail) -> ContactDetailOut:
    return ContactDetailOut(
        id=detail.id,
        first_name=detail.first_name,
        last_name=detail.last_name,
        email=detail.email,
        phone=detail.phone,
        company=detail.company,
        address_line1=detail.address_line1,
        address_line2=detail.address_line2,
        city=detail.city,
        state=detail.state,
        postal_code=detail.postal_code,
        country=detail.country,
        is_active=detail.is_active,
        created_at=detail.created_at.isoformat(),
        updated_at=detail.updated_at.isoformat(),
    )


def _not_found(contact_id: str) -> JSONResponse:
    return JSONResponse(
        status_code=404,
        content={"detail": f"Contact {contact_id} not found"},
    )


def _invalid(result: Invalid) -> JSONResponse:
    return JSONResponse(status_code=400, content=result.errors)


def _duplicate(result: Duplicate) -> JSONResponse:
    return JSONResponse(
        status_code=409,
        content={"email": [f"A contact with email {result.email} already exists."]},
    )


def get_service(request: Request) -> ContactService:
    return request.app.state.service


def _build_repository(settings: Settings):
    """Return (repository, driver). driver is None for the in-memory store."""
    if settings.store == STORE_NEO4J:
        driver = GraphDatabase.driver(
            settings.neo4j_uri, auth=(settings.neo4j_user, settings.neo4j_password)
        )
        return Neo4jContactRepository(driver), driver
    return InMemoryContactRepository(), None


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings.from_env()
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=settings.log_level,
    )
    repository, driver = _build_repository(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Contact store backend: %s", settings.store)
        try:
            if driver is not None:
                ensure_contact_constraints(driver)
            if settings.seed_data:
                seed_contacts(repository, count=settings.seed_count)
            yield
        finally:
            if driver is not None:
                driver.close()

    app = FastAPI(title="Rolodex API", lifespan=lifespan)
    app.state.settings = settings
    app.state.service = ContactService(repository)

    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=list(settings.cors_origins),
            allow_methods=["*"],
            allow_headers=["*"],
            allow_credentials=True,
        )

    @app.exception_handler(Exception)
    async def unhandled_exception(request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            "Unhandled error on %s %s", request.method, request.url.path, exc_info=exc
        )
        return JSONResponse(
            status_code=500,
            content={
                "type": "https://tools.ietf.org/html/rfc7231#section-6.6.1",
                "title": "An error occurred while processing your request.",
                "status": 500,
                "detail": None,
                "instance": request.url.path,
            },
        )

    _register_routes(app)
    return app


def _register_routes(app: FastAPI) -> None:
    # --- REST: health ---

    @app.get("/health")
    def health():
        return {"status": "ok"}

    # --- REST: contacts ---

    @app.get(CONTACTS_PATH, response_model=ContactListResponse)
    def list_contacts(
        query: str | None = None,
        page: int = Query(1, ge=1),
        page_size: int = Query(10, ge=1, alias="pageSize"),
        sort: str = "lastName",
        direction: str = Query("asc", alias="dir"),
        is_active: bool | None = Query(None, alias="isActive"),
        service: ContactService = Depends(get_service),
    ):
        result = service.list_contacts(
            QuerySpec(
                search_text=query,
                is_active=is_active,
                sort_field=sort,
                sort_direction=direction,
                page=page,
                page_size=page_size,
            )
        )
        return ContactListResponse(
            items=[
                ContactListItemOut(
                    id=item.id,
                    first_name=item.first_name,
                    last_name=item.last_name,
                    email=item.email,
                    company=item.company,
                    is_active=item.is_active,
                    created_at=item.created_at.isoformat(),
                )
                for item in result.items
            ],
            total=result.total,
            page=result.page,
            page_size=result.page_size,
            sort=result.sort,
            dir=result.direction,
        )

    @app.get(CONTACTS_PATH + "/{contact_id}", response_model=ContactDetailOut)
    def get_contact(contact_id: str, service: ContactService = Depends(get_service)):
        result = service.get_contact(contact_id)
        if isinstance(result, ContactNotFound):
            return _not_found(contact_id)
        return _detail_out(result)

    @app.post(CONTACTS_PATH, response_model=ContactDetailOut, status_code=201)
    def create_contact(
        body: CreateContactBody,
        response: Response,
        service: ContactService = Depends(get_service),
    ):
        result = service.create_contact(CreateContactData(**body.model_dump()))
        if isinstance(result, Invalid):
            return _invalid(result)
        if isinstance(result, Duplicate):
            return _duplicate(result)
        response.headers["Location"] = f"{CONTACTS_PATH}/{result.id}"
        return _detail_out(result)

    @app.put(CONTACTS_PATH + "/{contact_id}", response_model=ContactDetailOut)
    def update_contact(
        contact_id: str,
        body: UpdateContactBody,
        service: ContactService = Depends(get_service),
    ):
        payload = UpdateContactData(**body.model_dump(exclude_unset=True))
        result = service.update_contact(contact_id, payload)
        if isinstance(result, ContactNotFound):
            return _not_found(contact_id)
        if isinstance(result, Invalid):
            return _invalid(result)
        if isinstance(result, Duplicate):
            return _duplicate(result)
        return _detail_out(result)

    @app.delete(CONTACTS_PATH + "/{contact_id}", status_code=204)
    def delete_contact(contact_id: str, service: ContactService = Depends(get_service)):
        result = service.delete_contact(contact_id)
        if isinstance(result, ContactNotFound):
            return _not_found(contact_id)
        return Response(status_code=204)


app = create_app()
