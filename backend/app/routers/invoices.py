"""Invoice listing and form action routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import JSONResponse, RedirectResponse, Response
from starlette.concurrency import run_in_threadpool

from invoice_actions.domain.errors import PersistenceError
from invoice_actions.domain.models import (
    ActionResult,
    ActionState,
    ActionSuccess,
    Invoice,
    ValidationFailure,
)
from invoice_actions.services.actions import create_invoice, delete_invoice, update_invoice
from invoice_actions.services.cache import ListingCache
from invoice_actions.services.store import fetch_invoices

from ..config import Settings, get_listing_cache, get_settings, get_supabase
from ..schemas.invoice import ActionStateResponse, InvoiceDeleteResponse, InvoiceListResponse

# Mounted by create_app under the configured listing path
router = APIRouter(tags=["invoices"])

FAILURE_RESPONSES = {
    422: {"model": ActionStateResponse, "description": "Form fields rejected"},
    500: {"model": ActionStateResponse, "description": "Database write failed"},
}


def _state_response(result: ActionResult) -> JSONResponse:
    if isinstance(result, ActionSuccess):
        status_code = 200
    elif isinstance(result, ValidationFailure):
        status_code = 422
    else:
        status_code = 500
    return JSONResponse(
        status_code=status_code,
        content=result.to_state().model_dump(exclude_none=True),
    )


def _redirect_or_state(result: ActionResult, listing_path: str) -> Response:
    if isinstance(result, ActionSuccess):
        return RedirectResponse(url=listing_path, status_code=303)
    return _state_response(result)


@router.get("", response_model=InvoiceListResponse, summary="List invoices")
def list_invoices(
    supabase=Depends(get_supabase),
    cache: ListingCache = Depends(get_listing_cache),
    settings: Settings = Depends(get_settings),
):
    cached = cache.get(settings.listing_path)
    if cached is not None:
        return cached

    try:
        rows = fetch_invoices(supabase=supabase)
    except PersistenceError as exc:
        raise HTTPException(status_code=503, detail="Database Error: Failed to Fetch Invoices.") from exc

    payload = InvoiceListResponse(invoices=[Invoice.model_validate(row) for row in rows])
    cache.set(settings.listing_path, payload)
    return payload


@router.post(
    "/create",
    response_model=None,
    responses={303: {"description": "Invoice created"}, **FAILURE_RESPONSES},
    summary="Create an invoice from a form post",
)
async def create_invoice_action(
    request: Request,
    supabase=Depends(get_supabase),
    cache: ListingCache = Depends(get_listing_cache),
    settings: Settings = Depends(get_settings),
) -> Response:
    form = await request.form()
    result = await run_in_threadpool(
        create_invoice,
        ActionState(),
        form,
        supabase=supabase,
        cache=cache,
        listing_path=settings.listing_path,
    )
    return _redirect_or_state(result, settings.listing_path)


@router.post(
    "/{invoice_id}/edit",
    response_model=None,
    responses={303: {"description": "Invoice updated"}, **FAILURE_RESPONSES},
    summary="Update an invoice from a form post",
)
async def update_invoice_action(
    invoice_id: str,
    request: Request,
    supabase=Depends(get_supabase),
    cache: ListingCache = Depends(get_listing_cache),
    settings: Settings = Depends(get_settings),
) -> Response:
    form = await request.form()
    result = await run_in_threadpool(
        update_invoice,
        invoice_id,
        form,
        supabase=supabase,
        cache=cache,
        listing_path=settings.listing_path,
    )
    return _redirect_or_state(result, settings.listing_path)


@router.post(
    "/{invoice_id}/delete",
    response_model=InvoiceDeleteResponse,
    responses={500: FAILURE_RESPONSES[500]},
    summary="Delete an invoice",
)
def delete_invoice_action(
    invoice_id: str,
    supabase=Depends(get_supabase),
    cache: ListingCache = Depends(get_listing_cache),
    settings: Settings = Depends(get_settings),
) -> Response:
    result = delete_invoice(
        invoice_id,
        supabase=supabase,
        cache=cache,
        listing_path=settings.listing_path,
    )
    return _state_response(result)
