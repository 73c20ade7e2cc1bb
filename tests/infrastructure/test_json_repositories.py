"""Tests for the JSON-file-backed repositories.

Each test writes into pytest's ``tmp_path``; a second repository instance
on the same file checks that data survives a reload.
"""

import uuid

from kitchenpos.domain.model.menu import Menu, MenuProduct
from kitchenpos.domain.model.menu_group import MenuGroup
from kitchenpos.domain.model.product import Product
from kitchenpos.domain.model.value_objects import Money, Quantity
from kitchenpos.infrastructure.persistence.json_menu_group_repository import (
    JsonMenuGroupRepository,
)
from kitchenpos.infrastructure.persistence.json_menu_repository import (
    JsonMenuRepository,
)
from kitchenpos.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)


def _product(name: str = "Fried chicken", price: str = "16000") -> Product:
    return Product(id=uuid.uuid4(), name=name, price=Money.of(price))


def _menu(*product_ids, price: str = "10000") -> Menu:
    return Menu(
        id=uuid.uuid4(),
        name="Combo",
        price=Money.of(price),
        menu_group_id=uuid.uuid4(),
        menu_products=[
            MenuProduct(product_id=pid, quantity=Quantity(2), seq=i)
            for i, pid in enumerate(product_ids, start=1)
        ],
        displayed=False,
    )


class TestJsonProductRepository:

    def test_creates_missing_file(self, tmp_path):
        path = tmp_path / "nested" / "products.json"
        JsonProductRepository(path)
        assert path.read_text(encoding="utf-8") == "[]"

    def test_save_and_reload(self, tmp_path):
        path = tmp_path / "products.json"
        product = _product()
        assert JsonProductRepository(path).save(product) is product

        loaded = JsonProductRepository(path).find_by_id(product.id)
        assert loaded == product

    def test_save_overwrites_existing(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        product = _product()
        repo.save(product)
        product.change_price(Money.of("17000"))
        repo.save(product)

        assert len(repo.find_all()) == 1
        assert repo.find_by_id(product.id).price == Money.of("17000")

    def test_find_all_by_id_in(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        first, second = repo.save(_product("A")), repo.save(_product("B"))

        assert repo.find_all_by_id_in([first.id]) == [first]
        assert repo.find_all_by_id_in([]) == []
        assert repo.find_all_by_id_in(None) == []
        assert second in repo.find_all()

    def test_unknown_id(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        assert repo.find_by_id(uuid.uuid4()) is None


class TestJsonMenuRepository:

    def test_round_trips_menu_products(self, tmp_path):
        path = tmp_path / "menus.json"
        product_id = uuid.uuid4()
        menu = _menu(product_id)
        JsonMenuRepository(path).save(menu)

        loaded = JsonMenuRepository(path).find_by_id(menu.id)
        assert loaded == menu
        assert loaded.menu_products[0].quantity == Quantity(2)
        assert loaded.displayed is False

    def test_find_all_by_product_id(self, tmp_path):
        repo = JsonMenuRepository(tmp_path / "menus.json")
        shared, other = uuid.uuid4(), uuid.uuid4()
        with_shared = repo.save(_menu(shared, other))
        repo.save(_menu(other))

        found = repo.find_all_by_product_id(shared)
        assert [m.id for m in found] == [with_shared.id]

    def test_find_all_by_id_in(self, tmp_path):
        repo = JsonMenuRepository(tmp_path / "menus.json")
        menu = repo.save(_menu(uuid.uuid4()))
        repo.save(_menu(uuid.uuid4()))

        assert [m.id for m in repo.find_all_by_id_in([menu.id])] == [menu.id]
        assert repo.find_all_by_id_in([]) == []
        assert repo.find_all_by_id_in(None) == []

    def test_save_updates_in_place(self, tmp_path):
        repo = JsonMenuRepository(tmp_path / "menus.json")
        menu = repo.save(_menu(uuid.uuid4()))
        menu.displayed = True
        repo.save(menu)

        assert len(repo.find_all()) == 1
        assert repo.find_by_id(menu.id).displayed is True


class TestJsonMenuGroupRepository:

    def test_save_and_find(self, tmp_path):
        path = tmp_path / "menu_groups.json"
        group = MenuGroup(id=uuid.uuid4(), name="두마리메뉴")
        JsonMenuGroupRepository(path).save(group)

        repo = JsonMenuGroupRepository(path)
        assert repo.find_by_id(group.id) == group
        assert repo.find_all() == [group]
        assert repo.find_by_id(uuid.uuid4()) is None
