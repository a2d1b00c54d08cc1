from typing import List
from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session
from src.api.auth.dependencies import require_session
from src.api.common.utils.database import get_db
from src.api.customers.schemas.customer import CustomerField, CustomerRead
from src.api.customers.services.customer_service import CustomerService

router = APIRouter(
    prefix="/dashboard/customers",
    tags=["customers"],
    dependencies=[Depends(require_session)],
)


def get_customer_service(db: Session = Depends(get_db)):
    return CustomerService(db)


@router.get("", response_model=List[CustomerField])
def get_customers(
    customer_service: CustomerService = Depends(get_customer_service)
):
    """Get the customers offered by the invoice form"""
    return customer_service.get_customers()


@router.get("/{customer_id}", response_model=CustomerRead)
def get_customer(
    customer_id: str,
    customer_service: CustomerService = Depends(get_customer_service)
):
    """Get a customer by ID"""
    customer = customer_service.get_customer(customer_id)
    if not customer:
        raise HTTPException(status_code=404, detail="Customer not found")
    return customer
