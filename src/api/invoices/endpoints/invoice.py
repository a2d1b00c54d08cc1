from typing import List
from fastapi import APIRouter, Depends, HTTPException, Query, Request
from sqlmodel import Session
from starlette.concurrency import run_in_threadpool
from src.api.auth.dependencies import require_session
from src.api.common.constants.routes import INVOICES_PATH
from src.api.common.utils.cache import cache_key
from src.api.common.utils.database import get_db
from src.api.invoices.schemas.invoice import FormState, InvoiceListItem, InvoiceRead
from src.api.invoices.services.invoice_service import InvoiceService

router = APIRouter(
    prefix=INVOICES_PATH,
    tags=["invoices"],
    dependencies=[Depends(require_session)],
)


def get_invoice_service(db: Session = Depends(get_db)):
    return InvoiceService(db)


@router.get("", response_model=List[InvoiceListItem])
def get_invoices(
    request: Request,
    query: str = "",
    page: int = Query(1, ge=1),
    invoice_service: InvoiceService = Depends(get_invoice_service)
):
    """Get one page of the invoices table, served from the page cache when fresh"""
    key = cache_key(INVOICES_PATH, request.url.query)
    invoices = invoice_service.cache.get(key)
    if invoices is None:
        invoices = invoice_service.get_filtered_invoices(query, page)
        invoice_service.cache.set(key, invoices)
    return invoices


@router.get("/pages")
def get_invoice_pages(
    query: str = "",
    invoice_service: InvoiceService = Depends(get_invoice_service)
):
    """Get the number of table pages for a search term"""
    return {"total_pages": invoice_service.get_invoice_pages(query)}


@router.get("/{invoice_id}", response_model=InvoiceRead)
def get_invoice(
    invoice_id: str,
    invoice_service: InvoiceService = Depends(get_invoice_service)
):
    """Get an invoice by ID"""
    invoice = invoice_service.get_invoice(invoice_id)
    if not invoice:
        raise HTTPException(status_code=404, detail="Invoice not found")
    return invoice


@router.post("/create", response_model=FormState)
async def create_invoice(
    request: Request,
    invoice_service: InvoiceService = Depends(get_invoice_service)
):
    """Create an invoice; redirects to the listing on success"""
    form_data = await request.form()
    return await run_in_threadpool(invoice_service.create_invoice, FormState(), form_data)


@router.post("/{invoice_id}/edit", response_model=FormState)
async def update_invoice(
    invoice_id: str,
    request: Request,
    invoice_service: InvoiceService = Depends(get_invoice_service)
):
    """Update an invoice; redirects to the listing on success"""
    form_data = await request.form()
    return await run_in_threadpool(
        invoice_service.update_invoice, invoice_id, FormState(), form_data)


@router.post("/{invoice_id}/delete", response_model=FormState)
def delete_invoice(
    invoice_id: str,
    invoice_service: InvoiceService = Depends(get_invoice_service)
):
    """Delete an invoice; an empty state means it is gone"""
    return invoice_service.delete_invoice(invoice_id)
