"""Unit tests for order filtering and statistics."""

import pytest

from storefront.domain.model.order import OrderStatus
from storefront.domain.model.value_objects import Money
from storefront.domain.service.order_queries import compute_order_stats, filter_orders
from tests.fakes import make_order


def _ten_orders():
    statuses = [
        OrderStatus.PENDING,
        OrderStatus.SHIPPED,
        OrderStatus.PROCESSING,
        OrderStatus.SHIPPED,
        OrderStatus.CANCELLED,
        OrderStatus.DELIVERED,
        OrderStatus.SHIPPED,
        OrderStatus.PENDING,
        OrderStatus.SHIPPED,
        OrderStatus.PROCESSING,
    ]
    return [make_order(i + 1, status=s) for i, s in enumerate(statuses)]


class TestComputeOrderStats:

    def test_revenue_excludes_cancelled(self):
        orders = [
            make_order(1, OrderStatus.PENDING, total="100"),
            make_order(2, OrderStatus.CANCELLED, total="50"),
        ]
        stats = compute_order_stats(orders)
        assert stats.total_revenue == Money.of("100")
        assert stats.total_orders == 2

    def test_counts(self):
        stats = compute_order_stats(_ten_orders())
        assert stats.total_orders == 10
        assert stats.pending_count == 2
        assert stats.shipped_count == 4
        assert stats.total_revenue == Money.of("900.00")

    def test_empty(self):
        stats = compute_order_stats([])
        assert stats.total_orders == 0
        assert stats.total_revenue == Money.zero()


class TestFilterOrders:

    def test_status_only_keeps_relative_order(self):
        orders = _ten_orders()
        result = filter_orders(orders, "shipped", "")
        assert [o.id for o in result] == [2, 4, 7, 9]

    def test_status_filter_accepts_enum(self):
        result = filter_orders(_ten_orders(), OrderStatus.PENDING)
        assert [o.id for o in result] == [1, 8]

    def test_all_with_blank_search_returns_everything(self):
        orders = _ten_orders()
        assert filter_orders(orders, "all", "   ") == orders

    def test_source_collection_untouched(self):
        orders = _ten_orders()
        ids = [o.id for o in orders]
        result = filter_orders(orders, "shipped", "ord")
        result.clear()
        assert [o.id for o in orders] == ids

    def test_invalid_status_filter_rejected(self):
        with pytest.raises(ValueError):
            filter_orders(_ten_orders(), "lost")

    @pytest.mark.parametrize("term", ["ord-10002", "JANE", "smi", "example.COM"])
    def test_search_matches_any_field_case_insensitively(self, term):
        orders = [
            make_order(1),
            make_order(
                2, email="jane.smith@example.com", first_name="Jane", last_name="Smith"
            ),
        ]
        assert [o.id for o in filter_orders(orders, "all", term)] == [2]

    def test_search_skips_missing_optional_fields(self):
        orders = [make_order(1), make_order(2, first_name="Mark")]
        assert [o.id for o in filter_orders(orders, "all", "mark")] == [2]

    def test_status_applied_before_search(self):
        orders = [
            make_order(1, OrderStatus.PENDING, first_name="Jane"),
            make_order(2, OrderStatus.SHIPPED, first_name="Jane"),
        ]
        assert [o.id for o in filter_orders(orders, "shipped", "jane")] == [2]
