from fastapi import APIRouter
from src.api.auth.endpoints.auth import router as auth_router
from src.api.customers.endpoints.customer import router as customer_router
from src.api.invoices.endpoints.invoice import router as invoice_router

api_router = APIRouter()

# Include all domain routers
api_router.include_router(auth_router)
api_router.include_router(invoice_router)
api_router.include_router(customer_router)
