"""Application service: Add Address use case."""

from __future__ import annotations

from bakery.domain.exceptions import ValidationError
from bakery.domain.model.address import Address
from bakery.domain.repository.unit_of_work import UnitOfWork


class AddAddressHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, owner_id: int, text: str, label: str | None = None) -> Address:
        if not text or not text.strip():
            raise ValidationError("Address is required")

        address = Address(id=None, owner_id=owner_id, text=text.strip(), label=label)
        with self._uow as uow:
            uow.addresses.save(address)
            uow.commit()
        return address
