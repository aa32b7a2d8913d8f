"""Integration tests for the BuildOrder use case.

Uses the in-memory fake catalog — no static menu data.
"""

from decimal import Decimal

import pytest

from lunchtray.application.build_order import BuildOrderHandler, summarize
from lunchtray.domain.exceptions import UnknownItemError
from lunchtray.domain.model.menu_item import ItemType
from lunchtray.domain.model.order import OrderState
from tests.fakes import FakeMenuCatalog, make_item


def _setup(tax_rate: str = "0.08") -> tuple[BuildOrderHandler, FakeMenuCatalog]:
    catalog = FakeMenuCatalog([
        make_item("cauliflower", "7.00", name="Cauliflower"),
        make_item("salad", "2.50", ItemType.SIDE_DISH, name="Summer Salad"),
        make_item("bread", "0.50", ItemType.ACCOMPANIMENT, name="Lunch Roll"),
    ])
    return BuildOrderHandler(catalog, tax_rate=Decimal(tax_rate)), catalog


class TestBuildOrderHappyPath:

    def test_full_order(self):
        handler, _ = _setup()
        dto = handler.handle(entree="cauliflower", side="salad", accompaniment="bread")
        assert dto.entree == "Cauliflower"
        assert dto.side == "Summer Salad"
        assert dto.accompaniment == "Lunch Roll"
        assert dto.subtotal == "$10.00"
        assert dto.tax == "$0.80"
        assert dto.total == "$10.80"

    def test_partial_order_leaves_courses_empty(self):
        handler, _ = _setup()
        dto = handler.handle(entree="cauliflower", side="salad")
        assert dto.accompaniment is None
        assert dto.subtotal == "$9.50"
        assert dto.tax == "$0.76"
        assert dto.total == "$10.26"

    def test_empty_order(self):
        handler, _ = _setup()
        dto = handler.handle()
        assert dto.entree is None
        assert dto.total == "$0.00"

    def test_custom_tax_rate(self):
        handler, _ = _setup(tax_rate="0.10")
        dto = handler.handle(entree="cauliflower")
        assert dto.tax == "$0.70"
        assert dto.total == "$7.70"

    def test_selections_applied_in_course_order(self):
        handler, catalog = _setup()
        handler.handle(accompaniment="bread", entree="cauliflower", side="salad")
        assert catalog.lookups == ["cauliflower", "salad", "bread"]


class TestBuildOrderValidation:

    def test_unknown_key_rejected(self):
        handler, _ = _setup()
        with pytest.raises(UnknownItemError, match="lobster"):
            handler.handle(entree="cauliflower", side="lobster")


class TestSummarize:

    def test_maps_live_order(self):
        _, catalog = _setup()
        order = OrderState(catalog)
        order.set_entree("cauliflower")
        dto = summarize(order)
        assert dto.entree == "Cauliflower"
        assert dto.side is None
        assert dto.total == "$7.56"
