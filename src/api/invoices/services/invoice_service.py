import logging
import math
from typing import Any, List, Mapping, Optional
from sqlalchemy import String, cast, delete, func, insert, or_, update
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select
from src.api.common.constants.routes import INVOICES_PATH
from src.api.common.utils.cache import PageCache, page_cache
from src.api.common.utils.datetime import get_current_date_string
from src.api.common.utils.navigation import redirect
from src.api.customers.models.customer import Customer
from src.api.invoices.constants import (
    ITEMS_PER_PAGE,
    CREATE_DATABASE_ERROR_MESSAGE,
    UPDATE_DATABASE_ERROR_MESSAGE,
    DELETE_DATABASE_ERROR_MESSAGE,
)
from src.api.invoices.models.invoice import Invoice
from src.api.invoices.schemas.invoice import (
    CreateInvoice,
    UpdateInvoice,
    FormState,
    InvoiceListItem,
)
from src.api.invoices.schemas.validation import ValidationFailure, validate_invoice_form

logger = logging.getLogger(__name__)

INVOICE_FORM_FIELDS = ("customerId", "amount", "status")


def read_invoice_fields(form_data: Mapping[str, Any]) -> dict:
    """Pick the invoice form fields out of a submitted form"""
    return {name: form_data.get(name) for name in INVOICE_FORM_FIELDS}


class InvoiceService:
    def __init__(self, db: Session, cache: Optional[PageCache] = None):
        self.db = db
        self.cache = cache if cache is not None else page_cache

    def create_invoice(self, prev_state: FormState, form_data: Mapping[str, Any]) -> FormState:
        """
        Create an invoice from a submitted form

        On success the invoices listing is revalidated and the request is
        redirected to it, so nothing is returned. Otherwise the returned
        state describes what went wrong.

        Args:
            prev_state: State returned by the previous submission of this form
            form_data: Submitted form fields

        Returns:
            FormState with field errors or a database error message
        """
        result = validate_invoice_form(CreateInvoice, read_invoice_fields(form_data))
        if isinstance(result, ValidationFailure):
            return FormState(errors=result.field_errors, message=result.summary_message)

        invoice = result.data
        date = get_current_date_string()
        try:
            self.db.exec(
                insert(Invoice).values(
                    customer_id=invoice.customer_id,
                    amount=invoice.amount_in_cents,
                    status=invoice.status.value,
                    date=date,
                )
            )
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Database error creating invoice for customer {invoice.customer_id}: {e}")
            return FormState(message=CREATE_DATABASE_ERROR_MESSAGE)

        logger.info(f"Created invoice for customer {invoice.customer_id} ({invoice.amount_in_cents} cents)")
        self.cache.revalidate_path(INVOICES_PATH)
        redirect(INVOICES_PATH)

    def update_invoice(self, invoice_id: str, prev_state: FormState,
                       form_data: Mapping[str, Any]) -> FormState:
        """
        Update an invoice from a submitted form

        An id that matches no invoice updates nothing and is not reported.
        Success ends in a redirect to the invoices listing, like create.
        """
        result = validate_invoice_form(UpdateInvoice, read_invoice_fields(form_data))
        if isinstance(result, ValidationFailure):
            return FormState(errors=result.field_errors, message=result.summary_message)

        invoice = result.data
        try:
            self.db.exec(
                update(Invoice)
                .where(Invoice.id == invoice_id)
                .values(
                    customer_id=invoice.customer_id,
                    amount=invoice.amount_in_cents,
                    status=invoice.status.value,
                )
            )
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Database error updating invoice {invoice_id}: {e}")
            return FormState(message=UPDATE_DATABASE_ERROR_MESSAGE)

        logger.info(f"Updated invoice {invoice_id}")
        self.cache.revalidate_path(INVOICES_PATH)
        redirect(INVOICES_PATH)

    def delete_invoice(self, invoice_id: str) -> FormState:
        """Delete an invoice. The caller stays on the listing page, so there is no redirect."""
        try:
            self.db.exec(delete(Invoice).where(Invoice.id == invoice_id))
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Database error deleting invoice {invoice_id}: {e}")
            return FormState(message=DELETE_DATABASE_ERROR_MESSAGE)

        logger.info(f"Deleted invoice {invoice_id}")
        self.cache.revalidate_path(INVOICES_PATH)
        return FormState()

    def get_invoice(self, invoice_id: str) -> Optional[Invoice]:
        """Get an invoice by ID"""
        return self.db.get(Invoice, invoice_id)

    def _search_condition(self, query: str):
        pattern = f"%{query}%"
        return or_(
            Customer.name.ilike(pattern),
            Customer.email.ilike(pattern),
            cast(Invoice.amount, String).ilike(pattern),
            Invoice.date.ilike(pattern),
            Invoice.status.ilike(pattern),
        )

    def get_filtered_invoices(self, query: str = "", current_page: int = 1) -> List[InvoiceListItem]:
        """
        Get one page of invoices matching a search term, newest first

        The term is matched against customer name and email and the
        invoice amount, date and status.
        """
        offset = (max(current_page, 1) - 1) * ITEMS_PER_PAGE
        statement = (
            select(Invoice, Customer)
            .join(Customer, Invoice.customer_id == Customer.id)
            .where(self._search_condition(query))
            .order_by(Invoice.date.desc(), Invoice.id)
            .offset(offset)
            .limit(ITEMS_PER_PAGE)
        )
        return [
            InvoiceListItem(
                id=invoice.id,
                customer_id=invoice.customer_id,
                amount=invoice.amount,
                status=invoice.status,
                date=invoice.date,
                name=customer.name,
                email=customer.email,
                image_url=customer.image_url,
            )
            for invoice, customer in self.db.exec(statement).all()
        ]

    def get_invoice_pages(self, query: str = "") -> int:
        """Get how many listing pages the invoices matching a search term fill"""
        statement = (
            select(func.count())
            .select_from(Invoice)
            .join(Customer, Invoice.customer_id == Customer.id)
            .where(self._search_condition(query))
        )
        total = self.db.exec(statement).one()
        return math.ceil(total / ITEMS_PER_PAGE)
