"""
FastAPI backend: REST API over an in-memory contact store.
Run with uvicorn: uvicorn api.main:app --reload
"""

import json
import logging
import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from repo root (when run from repo root or from Docker)
for path in (
    Path(__file__).resolve().parent.parent.parent / ".env",
    Path.cwd() / ".env",
):
    if path.exists():
        load_dotenv(path)
        break

from fastapi import FastAPI, Header, Request
from fastapi.responses import JSONResponse, RedirectResponse, Response

from contactbook.application import (
    DEFAULT_PAGE,
    DEFAULT_PAGE_SIZE,
    DEFAULT_SORT_DIRECTION,
    DEFAULT_SORT_FIELD,
    ContactPage,
    ContactService,
    ListQuery,
)
from contactbook.domain import ContactError, ErrorKind
from contactbook.infrastructure import InMemoryContactRepository, load_seed_contacts

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=getattr(logging, os.environ.get("LOG_LEVEL", "INFO").strip().upper(), logging.INFO),
)
logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "An internal error occurred"

# Every ErrorKind must appear here.
STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.INVALID_CONTACT: 400,
    ErrorKind.DUPLICATE_CONTACT: 400,
    ErrorKind.CONTACT_NOT_FOUND: 404,
    ErrorKind.INVALID_ENUM: 400,
    ErrorKind.PAGER_OUT_OF_RANGE: 416,
    ErrorKind.PAGER_LIMIT_EXCEEDED: 400,
}


def _build_repository() -> InMemoryContactRepository:
    seed_file = os.environ.get("CONTACTS_SEED_FILE", "").strip()
    if not seed_file:
        return InMemoryContactRepository()
    return InMemoryContactRepository(load_seed_contacts(seed_file))


def _error_response(error: ContactError) -> JSONResponse:
    return JSONResponse(
        content={"message": error.message},
        status_code=STATUS_BY_KIND[error.kind],
    )


def _internal_error() -> JSONResponse:
    logger.exception("Unhandled error while processing request")
    return JSONResponse(content={"message": INTERNAL_ERROR_MESSAGE}, status_code=500)


def _parse_digits(raw: str | None) -> int | None:
    """ASCII digits only. Signs, underscores, spaces and over-long values give None."""
    if not raw or not (raw.isascii() and raw.isdigit()):
        return None
    try:
        return int(raw)
    except ValueError:
        return None


def _parse_int(raw: str | None, default: int) -> int:
    """Lenient parse for query params: missing, malformed or zero means default."""
    return _parse_digits(raw) or default


def _parse_contact_id(raw: str) -> int | None:
    """Path id to int. Anything that is not a plain positive integer matches no contact."""
    return _parse_digits(raw)


async def _read_json(request: Request) -> object:
    body = await request.body()
    try:
        return json.loads(body) if body else None
    except ValueError as e:
        logger.warning("Rejected request body: %s", e)
        raise ContactError(ErrorKind.INVALID_CONTACT, "Request body must be valid JSON") from e


def _page_headers(page: ContactPage) -> dict[str, str]:
    return {
        "X-Page-Total": str(page.total_pages),
        "X-Page-Next": "" if page.next_page is None else str(page.next_page),
        "X-Page-Prev": "" if page.prev_page is None else str(page.prev_page),
    }


def _service(request: Request) -> ContactService:
    return request.app.state.service


def create_app(repository: InMemoryContactRepository | None = None) -> FastAPI:
    """Build the app around a repository. Without one, the store comes from the environment."""
    app = FastAPI(title="Contactbook API")
    if repository is None:
        repository = _build_repository()
    app.state.repository = repository
    app.state.service = ContactService(repository)

    # Handlers are coroutines so they all run on the event loop; service calls
    # never await, so one request's mutation finishes before the next starts.

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    @app.get("/contacts")
    async def list_contacts(
        request: Request,
        sort: str | None = None,
        direction: str | None = None,
        page: str | None = None,
        size: str | None = None,
        x_filter_by: str | None = Header(None, alias="X-Filter-By"),
        x_filter_operator: str | None = Header(None, alias="X-Filter-Operator"),
        x_filter_value: str | None = Header(None, alias="X-Filter-Value"),
    ) -> Response:
        try:
            query = ListQuery(
                filter_by=x_filter_by,
                filter_operator=x_filter_operator,
                filter_value=x_filter_value,
                sort=sort or DEFAULT_SORT_FIELD,
                direction=direction or DEFAULT_SORT_DIRECTION,
                page=_parse_int(page, DEFAULT_PAGE),
                size=_parse_int(size, DEFAULT_PAGE_SIZE),
            )
            result = _service(request).list_contacts(query)
        except ContactError as e:
            return _error_response(e)
        except Exception:
            return _internal_error()
        return JSONResponse(
            content=[c.to_dict() for c in result.contacts],
            headers=_page_headers(result),
        )

    @app.post("/contacts")
    async def create_contact(request: Request) -> Response:
        try:
            candidate = await _read_json(request)
            contact = _service(request).create_contact(candidate)
        except ContactError as e:
            if e.kind is ErrorKind.INVALID_CONTACT:
                logger.warning("Rejected contact: %s", e.message)
            return _error_response(e)
        except Exception:
            return _internal_error()
        return RedirectResponse(url=f"/contacts/{contact.id}", status_code=303)

    @app.get("/contacts/{contact_id}")
    async def get_contact(contact_id: str, request: Request) -> Response:
        try:
            contact = _service(request).get_contact(_parse_contact_id(contact_id))
        except ContactError as e:
            return _error_response(e)
        except Exception:
            return _internal_error()
        return JSONResponse(content=contact.to_dict())

    @app.put("/contacts/{contact_id}")
    async def update_contact(contact_id: str, request: Request) -> Response:
        try:
            changes = await _read_json(request)
            contact = _service(request).update_contact(
                _parse_contact_id(contact_id), changes
            )
        except ContactError as e:
            if e.kind is ErrorKind.INVALID_CONTACT:
                logger.warning("Rejected update for contact %s: %s", contact_id, e.message)
            return _error_response(e)
        except Exception:
            return _internal_error()
        return RedirectResponse(url=f"/contacts/{contact.id}", status_code=303)

    @app.delete("/contacts/{contact_id}")
    async def delete_contact(contact_id: str, request: Request) -> Response:
        try:
            _service(request).delete_contact(_parse_contact_id(contact_id))
        except ContactError as e:
            return _error_response(e)
        except Exception:
            return _internal_error()
        return RedirectResponse(url="/contacts", status_code=303)

    return app


app = create_app()
