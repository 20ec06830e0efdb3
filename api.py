from datetime import datetime, timezone
from typing import List, Optional

from fastapi import FastAPI, HTTPException, Response, Security
from fastapi.security import APIKeyHeader
from pydantic import BaseModel, Field

from config import configure_logging, settings
from patrons import (
    Address,
    Book,
    DuplicatePersonError,
    Email,
    PatronRegistry,
    Person,
    PersonNotFoundError,
    PersonValidationError,
    Phone,
    Tag,
)
from patrons.registry import changes_from_text
from patrons.sample_data import build_sample_registry

configure_logging()

registry = build_sample_registry() if settings.seed_sample_data else PatronRegistry()

app = FastAPI(title=f"{settings.app_name} API", version=settings.app_version)


# --- Security ---
api_key_header = APIKeyHeader(name="X-API-Key")


def get_api_key(api_key: str = Security(api_key_header)):
    """Dependency that validates the API key."""
    if api_key == settings.api_key:
        return api_key
    raise HTTPException(status_code=403, detail="Could not validate credentials")


# --- Models ---
class BookModel(BaseModel):
    title: str = Field(..., min_length=1)
    author: str = Field(..., min_length=1)


class PatronIn(BaseModel):
    name: str
    phone: str
    email: str
    address: str
    tags: List[str] = Field(default_factory=list)


class PatronUpdate(BaseModel):
    name: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    tags: Optional[List[str]] = None


class PatronOut(BaseModel):
    name: str
    phone: str
    email: str
    address: str
    tags: List[str]
    borrowed_books: List[BookModel]
    summary: str

    @classmethod
    def from_person(cls, person: Person) -> "PatronOut":
        return cls(**person.to_dict(), summary=str(person))


def _get_patron(name: str) -> Person:
    try:
        return registry.get(name)
    except PersonNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e


def _to_book(payload: BookModel) -> Book:
    try:
        return Book(payload.title, payload.author)
    except PersonValidationError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e


# --- Health ---
@app.get("/health")
async def health():
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "total_patrons": len(registry),
        "version": settings.app_version,
    }


# --- Patrons ---
@app.get("/patrons", response_model=List[PatronOut])
async def list_patrons():
    return [PatronOut.from_person(p) for p in registry.list_patrons()]


@app.get("/patrons/{name}", response_model=PatronOut)
async def get_patron(name: str):
    return PatronOut.from_person(_get_patron(name))


@app.post("/patrons", response_model=PatronOut, status_code=201)
async def add_patron(payload: PatronIn, api_key: str = Security(get_api_key)):
    try:
        person = Person(
            payload.name,
            Phone(payload.phone),
            Email(payload.email),
            Address(payload.address),
            [Tag(label) for label in payload.tags],
        )
        registry.add(person)
    except PersonValidationError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    except DuplicatePersonError as e:
        raise HTTPException(status_code=409, detail=str(e)) from e
    return PatronOut.from_person(person)


@app.put("/patrons/{name}", response_model=PatronOut)
async def edit_patron(name: str, payload: PatronUpdate, api_key: str = Security(get_api_key)):
    try:
        changes = changes_from_text(payload.name, payload.phone, payload.email,
                                    payload.address, payload.tags)
        person = registry.edit(name, **changes)
    except PersonNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    except PersonValidationError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    except DuplicatePersonError as e:
        raise HTTPException(status_code=409, detail=str(e)) from e
    return PatronOut.from_person(person)


@app.post("/patrons/{name}/borrow", response_model=PatronOut)
async def borrow_book(name: str, payload: BookModel, api_key: str = Security(get_api_key)):
    book = _to_book(payload)
    try:
        person = registry.borrow(name, book)
    except PersonNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    return PatronOut.from_person(person)


@app.post("/patrons/{name}/return", response_model=PatronOut)
async def return_book(name: str, payload: BookModel, api_key: str = Security(get_api_key)):
    book = _to_book(payload)
    try:
        person = registry.return_book(name, book)
    except PersonNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    return PatronOut.from_person(person)


@app.delete("/patrons/{name}", status_code=204)
async def delete_patron(name: str, api_key: str = Security(get_api_key)):
    registry.remove(_get_patron(name))
    return Response(status_code=204)
