"""Integration tests for MenuService."""

import uuid

import pytest

from kitchenpos.application.dto import (
    ChangePriceRequest,
    CreateMenuRequest,
    MenuProductSpec,
)
from kitchenpos.application.menu_service import MenuService
from kitchenpos.domain.exceptions import EntityNotFoundError, ValidationError
from kitchenpos.domain.model.menu_group import MenuGroup
from kitchenpos.domain.model.product import Product
from kitchenpos.domain.model.value_objects import Money
from tests.fakes import (
    FakeMenuGroupRepository,
    FakeMenuRepository,
    FakeProductRepository,
    FakeProfanityChecker,
)

GROUP = MenuGroup(id=uuid.uuid4(), name="Chicken")
CHICKEN = Product(id=uuid.uuid4(), name="Fried chicken", price=Money.of("16000"))
COLA = Product(id=uuid.uuid4(), name="Cola", price=Money.of("2000"))


def _setup() -> tuple[MenuService, FakeMenuRepository]:
    menu_repo = FakeMenuRepository()
    products = [
        Product(id=p.id, name=p.name, price=p.price) for p in (CHICKEN, COLA)
    ]
    service = MenuService(
        menu_repo,
        FakeMenuGroupRepository([GROUP]),
        FakeProductRepository(products),
        FakeProfanityChecker(),
    )
    return service, menu_repo


def _request(**overrides) -> CreateMenuRequest:
    fields = dict(
        name="Chicken combo",
        price="18000",
        menu_group_id=GROUP.id,
        menu_products=[
            MenuProductSpec(product_id=CHICKEN.id, quantity=1),
            MenuProductSpec(product_id=COLA.id, quantity=1),
        ],
    )
    fields.update(overrides)
    return CreateMenuRequest(**fields)


class TestCreateMenu:

    def test_creates_menu(self):
        service, menu_repo = _setup()
        menu = service.create(_request())

        assert menu.price == Money.of("18000")
        assert menu.displayed is True
        assert menu.product_ids == [CHICKEN.id, COLA.id]
        assert [mp.seq for mp in menu.menu_products] == [1, 2]
        assert menu_repo.find_by_id(menu.id) is menu

    def test_can_be_created_hidden(self):
        service, _ = _setup()
        assert service.create(_request(displayed=False)).displayed is False

    @pytest.mark.parametrize("price", [None, "-1", "Infinity"])
    def test_invalid_price_rejected(self, price):
        service, _ = _setup()
        with pytest.raises(ValidationError):
            service.create(_request(price=price))

    def test_unknown_menu_group_rejected(self):
        service, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="Menu group"):
            service.create(_request(menu_group_id=uuid.uuid4()))

    def test_no_products_rejected(self):
        service, _ = _setup()
        with pytest.raises(ValidationError, match="at least one product"):
            service.create(_request(menu_products=[]))

    def test_unknown_product_rejected(self):
        service, _ = _setup()
        with pytest.raises(ValidationError, match="Products not found"):
            service.create(_request(menu_products=[MenuProductSpec(uuid.uuid4(), 1)]))

    def test_zero_quantity_rejected(self):
        service, _ = _setup()
        with pytest.raises(ValidationError, match="at least 1"):
            service.create(_request(menu_products=[MenuProductSpec(CHICKEN.id, 0)]))

    def test_price_above_product_sum_rejected(self):
        service, menu_repo = _setup()
        with pytest.raises(ValidationError, match="exceeds the sum"):
            service.create(_request(price="18001"))
        assert menu_repo.find_all() == []

    @pytest.mark.parametrize("name", [None, "", "욕설 세트"])
    def test_bad_name_rejected(self, name):
        service, _ = _setup()
        with pytest.raises(ValidationError):
            service.create(_request(name=name))


class TestChangeMenuPrice:

    def test_changes_price(self):
        service, _ = _setup()
        menu = service.create(_request())
        assert service.change_price(menu.id, ChangePriceRequest("17000")).price == Money.of("17000")

    def test_price_above_sum_rejected(self):
        service, _ = _setup()
        menu = service.create(_request())
        with pytest.raises(ValidationError, match="exceeds the sum"):
            service.change_price(menu.id, ChangePriceRequest("99000"))

    def test_unknown_menu_rejected(self):
        service, _ = _setup()
        with pytest.raises(EntityNotFoundError):
            service.change_price(uuid.uuid4(), ChangePriceRequest("1000"))

    def test_invalid_price_checked_before_lookup(self):
        service, _ = _setup()
        with pytest.raises(ValidationError):
            service.change_price(uuid.uuid4(), ChangePriceRequest(None))


class TestDisplayAndHide:

    def test_hide_then_display(self):
        service, menu_repo = _setup()
        menu = service.create(_request())

        service.hide(menu.id)
        assert menu_repo.find_by_id(menu.id).displayed is False

        service.display(menu.id)
        assert menu_repo.find_by_id(menu.id).displayed is True

    def test_unknown_menu_rejected(self):
        service, _ = _setup()
        with pytest.raises(EntityNotFoundError):
            service.display(uuid.uuid4())
        with pytest.raises(EntityNotFoundError):
            service.hide(uuid.uuid4())


class TestFindAll:

    def test_empty(self):
        service, _ = _setup()
        assert service.find_all() == []
