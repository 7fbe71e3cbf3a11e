"""End-to-end tests for the composition root with the pickle adapter."""

from datetime import date, timedelta
from decimal import Decimal

from storefront.bootstrap import build_user_service, get_user_service, reset_user_service
from storefront.catalogue.item import Item, Sale
from storefront.identity.user import AccountType
from storefront.ordering.cart import CartItem
from storefront.ordering.order import Order, OrderStatus
from storefront.persistence.pickle_adapter import PickleGateway
from storefront.shared.clock import FixedClock


class TestUserServiceSingleton:
    def test_first_use_seeds_the_registry(self):
        service = get_user_service()
        assert [u.id for u in service.get_users()] == [0, 1, 2, 3]

    def test_same_service_for_the_whole_process(self):
        assert get_user_service() is get_user_service()

    def test_saved_users_survive_a_restart(self, tmp_path):
        service = get_user_service()
        service.create_user("olga", "pw", "olga@x.com", AccountType.CUSTOMER)
        service.write_to_file()
        assert (tmp_path / "users.dat").exists()

        reset_user_service()
        restarted = get_user_service()

        assert restarted is not service
        assert restarted.get_user("olga", "pw").id == 4

    def test_resource_name_from_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("STOREFRONT_USERS_FILE", "accounts.dat")

        get_user_service().write_to_file()

        assert (tmp_path / "accounts.dat").exists()
        assert not (tmp_path / "users.dat").exists()


class TestRestartReconciliation:
    def test_restart_reprices_carts_and_ships_orders(self, tmp_path):
        start = date(2024, 6, 10)
        gateway = PickleGateway(tmp_path)

        service = build_user_service(gateway=gateway, clock=FixedClock(start))
        shopper = service.get_user("DefaultUser", "DefaultPassword")
        bystander = service.get_user("DefaultManager", "DefaultPassword")

        kettle = Item(name="Kettle", price=Decimal("30.00"), sale=Sale(Decimal("25.00"), start + timedelta(days=2)))
        shopper.cart.append(CartItem.for_item(kettle, start))
        bystander.cart.append(CartItem.for_item(kettle, start))
        shopper.past_orders.append(Order(ship_date=start + timedelta(days=3)))
        service.write_to_file()

        later = build_user_service(gateway=gateway, clock=FixedClock(start + timedelta(days=5)))
        shopper = later.get_user("DefaultUser", "DefaultPassword")
        bystander = later.get_user("DefaultManager", "DefaultPassword")

        assert shopper.cart[0].price == Decimal("30.00")
        assert bystander.cart[0].price == Decimal("30.00")
        assert shopper.cart[0].item is bystander.cart[0].item
        assert shopper.cart[0].item.sale is None
        assert shopper.past_orders[0].status == OrderStatus.SHIPPED

    def test_corrupt_file_falls_back_to_seed(self, tmp_path):
        (tmp_path / "users.dat").write_bytes(b"\x00garbage")

        service = build_user_service(gateway=PickleGateway(tmp_path), clock=FixedClock(date(2024, 6, 15)))

        assert len(service.get_users()) == 4
