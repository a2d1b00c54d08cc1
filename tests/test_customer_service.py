from src.api.customers.services.customer_service import CustomerService


class TestCustomerService:
    """Test CustomerService class"""

    def test_get_customers_sorted_by_name(self, test_session, test_data_factory):
        """Test that customers come back in alphabetical order"""
        test_data_factory.create_customer(test_session, id="c1", name="Lee Robinson")
        test_data_factory.create_customer(test_session, id="c2", name="Amy Burns")
        service = CustomerService(test_session)

        result = service.get_customers()

        assert [customer.name for customer in result] == ["Amy Burns", "Lee Robinson"]

    def test_get_customers_empty_database(self, test_session):
        service = CustomerService(test_session)

        assert service.get_customers() == []

    def test_get_customer(self, test_session, test_data_factory):
        created = test_data_factory.create_customer(test_session)
        service = CustomerService(test_session)

        assert service.get_customer(created.id).email == "evil@rabbit.com"
        assert service.get_customer("missing") is None

    def test_generated_customer_id(self, test_session, test_data_factory):
        """Test that storage assigns an id when none is given"""
        customer = test_data_factory.create_customer(test_session, id=None)

        assert customer.id
