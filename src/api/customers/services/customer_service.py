from typing import List, Optional
from sqlmodel import Session, select
from src.api.customers.models.customer import Customer


class CustomerService:
    def __init__(self, db: Session):
        self.db = db

    def get_customer(self, customer_id: str) -> Optional[Customer]:
        """Get a customer by ID"""
        return self.db.get(Customer, customer_id)

    def get_customers(self) -> List[Customer]:
        """Get every customer, sorted by name"""
        return self.db.exec(select(Customer).order_by(Customer.name)).all()
