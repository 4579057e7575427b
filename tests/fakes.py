"""In-memory fake repositories and unit of work for testing.

These implement the same abstract interfaces as the JSON repositories
but keep everything in dicts. No file I/O, no side effects.

FakeUnitOfWork snapshots every store when a block is entered and puts
the snapshot back on rollback, so tests can check atomicity for real.
"""

from __future__ import annotations

import copy
from dataclasses import replace

from bakery.domain.model.address import Address
from bakery.domain.model.cart import CartEntry
from bakery.domain.model.order import Order
from bakery.domain.model.product import Product
from bakery.domain.repository.address_repository import AddressRepository
from bakery.domain.repository.cart_repository import CartRepository
from bakery.domain.repository.order_repository import OrderRepository
from bakery.domain.repository.product_repository import ProductRepository
from bakery.domain.repository.unit_of_work import UnitOfWork


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[int, Product] = {}
        self._next_id = 1
        for p in products or []:
            self.save(p)

    def get_by_id(self, product_id: int) -> Product | None:
        return self._store.get(product_id)

    def get_by_name(self, name: str) -> Product | None:
        for p in self._store.values():
            if p.name.lower() == name.lower():
                return p
        return None

    def list_all(self) -> list[Product]:
        return list(self._store.values())

    def save(self, product: Product) -> None:
        if product.id is None:
            product.id = self._next_id
        self._next_id = max(self._next_id, product.id + 1)
        self._store[product.id] = product

    def delete(self, product_id: int) -> None:
        self._store.pop(product_id, None)


class FakeCartRepository(CartRepository):

    def __init__(self, entries: list[CartEntry] | None = None) -> None:
        self._store: dict[int, CartEntry] = {}
        self._next_id = 1
        for e in entries or []:
            self.save(e)

    def list_for_owner(
        self, owner_id: int, entry_ids: list[int] | None = None
    ) -> list[CartEntry]:
        return [
            e
            for e in self._store.values()
            if e.owner_id == owner_id and (not entry_ids or e.id in entry_ids)
        ]

    def get_for_owner(self, entry_id: int, owner_id: int) -> CartEntry | None:
        entry = self._store.get(entry_id)
        if entry is None or entry.owner_id != owner_id:
            return None
        return entry

    def find_by_product(self, owner_id: int, product_id: int) -> CartEntry | None:
        for e in self._store.values():
            if e.owner_id == owner_id and e.product_id == product_id:
                return e
        return None

    def save(self, entry: CartEntry) -> None:
        if entry.id is None:
            entry.id = self._next_id
        self._next_id = max(self._next_id, entry.id + 1)
        self._store[entry.id] = entry

    def delete_many(self, entry_ids: list[int]) -> None:
        for entry_id in entry_ids:
            self._store.pop(entry_id, None)

    def delete_for_product(self, product_id: int) -> int:
        doomed = [e.id for e in self._store.values() if e.product_id == product_id]
        self.delete_many(doomed)
        return len(doomed)


class FakeOrderRepository(OrderRepository):

    def __init__(self) -> None:
        self._store: dict[int, Order] = {}
        self._next_id = 1
        self._next_item_id = 1

    def get_by_id(self, order_id: int) -> Order | None:
        return self._store.get(order_id)

    def get_for_owner(self, order_id: int, owner_id: int) -> Order | None:
        order = self._store.get(order_id)
        if order is None or order.owner_id != owner_id:
            return None
        return order

    def list_for_owner(self, owner_id: int) -> list[Order]:
        orders = [o for o in self._store.values() if o.owner_id == owner_id]
        return sorted(orders, key=lambda o: (o.created_at, o.id), reverse=True)

    def save(self, order: Order) -> None:
        if order.id is None:
            order.id = self._next_id
            self._next_id += 1
        items = []
        for item in order.items:
            if item.id is None:
                item = replace(item, id=self._next_item_id)
                self._next_item_id += 1
            items.append(item)
        order.items = items
        self._store[order.id] = order


class FakeAddressRepository(AddressRepository):

    def __init__(self, addresses: list[Address] | None = None) -> None:
        self._store: dict[int, Address] = {}
        self._next_id = 1
        for a in addresses or []:
            self.save(a)

    def get_for_owner(self, address_id: int, owner_id: int) -> Address | None:
        address = self._store.get(address_id)
        if address is None or address.owner_id != owner_id:
            return None
        return address

    def save(self, address: Address) -> None:
        if address.id is None:
            address.id = self._next_id
        self._next_id = max(self._next_id, address.id + 1)
        self._store[address.id] = address


class FakeUnitOfWork(UnitOfWork):

    def __init__(
        self,
        products: list[Product] | None = None,
        cart: list[CartEntry] | None = None,
        addresses: list[Address] | None = None,
    ) -> None:
        self.products = FakeProductRepository(products)
        self.carts = FakeCartRepository(cart)
        self.orders = FakeOrderRepository()
        self.addresses = FakeAddressRepository(addresses)
        self.commits = 0
        self.rollbacks = 0
        self.fail_on_begin: Exception | None = None
        self.fail_on_commit: Exception | None = None
        self._snapshot: dict | None = None

    def _repos(self) -> dict:
        return {
            "products": self.products,
            "carts": self.carts,
            "orders": self.orders,
            "addresses": self.addresses,
        }

    def _begin(self) -> None:
        if self.fail_on_begin is not None:
            raise self.fail_on_begin
        self._snapshot = {
            name: copy.deepcopy(repo.__dict__) for name, repo in self._repos().items()
        }

    def _commit(self) -> None:
        if self.fail_on_commit is not None:
            raise self.fail_on_commit
        self.commits += 1

    def rollback(self) -> None:
        self.rollbacks += 1
        if self._snapshot is None:
            return
        for name, repo in self._repos().items():
            repo.__dict__.clear()
            repo.__dict__.update(self._snapshot[name])
        self._snapshot = None
