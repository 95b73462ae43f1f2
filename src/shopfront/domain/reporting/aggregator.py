"""Pure report computations over order and product snapshots.

Every function here is a pure function of its inputs: no repository access,
no clock reads. Callers pass ``now`` and the reporting timezone explicitly so
results are reproducible.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import datetime, timedelta, tzinfo
from decimal import ROUND_HALF_UP, Decimal
from uuid import UUID

from shopfront.domain.commerce import LOW_STOCK_THRESHOLD, Order, Product
from shopfront.domain.reporting.reports import (
    CategoryRevenue,
    CustomerSummary,
    DailySales,
    OverviewReport,
    ProductSales,
    ProductsReport,
    SalesReport,
    UsersReport,
)
from shopfront.domain.shared.time import ensure_tz_aware, local_day

TOP_CATEGORY_LIMIT = 5

_ZERO = Decimal("0")
_CENT = Decimal("0.01")


def _round(value: Decimal) -> Decimal:
    return value.quantize(_CENT, rounding=ROUND_HALF_UP)


def filter_orders_by_window(
    orders: Iterable[Order],
    window_days: int | None,
    now: datetime,
) -> list[Order]:
    """Keep orders created within the trailing ``window_days`` days.

    Parameters
    ----------
    orders
        Order snapshot
    window_days
        Size of the trailing window. ``None`` disables filtering.
    now
        Reference time for the window end

    Returns
    -------
    Orders with ``created_at >= now - window_days``, in input order
    """
    if window_days is None:
        return list(orders)
    if window_days < 0:
        msg = f"window_days must not be negative, got {window_days}"
        raise ValueError(msg)

    cutoff = ensure_tz_aware(now) - timedelta(days=window_days)
    return [o for o in orders if ensure_tz_aware(o.created_at) >= cutoff]


def top_categories(
    orders: Iterable[Order],
    products: Iterable[Product],
    limit: int = TOP_CATEGORY_LIMIT,
) -> list[CategoryRevenue]:
    """Rank categories by summed ``price * qty`` of their order lines.

    Lines whose product is missing from the snapshot are skipped. Equal
    revenues keep the order in which the category was first encountered.
    """
    category_by_product = {p.id: p.category for p in products}

    # dicts preserve insertion order, so first encounter wins ties
    revenue_by_category: dict[str, Decimal] = {}
    for order in orders:
        for item in order.items:
            category = category_by_product.get(item.product_id)
            if category is None:
                continue
            revenue_by_category[category] = (
                revenue_by_category.get(category, _ZERO) + item.line_total
            )

    ranked = sorted(
        revenue_by_category.items(),
        key=lambda entry: entry[1],
        reverse=True,
    )
    return [
        CategoryRevenue(category=category, revenue=revenue)
        for category, revenue in ranked[:limit]
    ]


def overview_report(
    orders: Sequence[Order],
    products: Sequence[Product],
) -> OverviewReport:
    """Compute the overview report for already-filtered orders."""
    total_orders = len(orders)
    total_revenue = sum((o.total_price for o in orders), _ZERO)

    if total_orders == 0:
        average = _ZERO
        completion_rate = _ZERO
    else:
        delivered = sum(1 for o in orders if o.is_delivered)
        average = _round(total_revenue / total_orders)
        completion_rate = _round(Decimal(delivered) * 100 / total_orders)

    return OverviewReport(
        total_revenue=total_revenue,
        total_orders=total_orders,
        average_order_value=average,
        completion_rate=completion_rate,
        top_categories=top_categories(orders, products),
    )


def sales_report(orders: Sequence[Order], tz: tzinfo) -> SalesReport:
    """Bucket orders by calendar day in ``tz``, ascending by day."""
    buckets: dict[str, tuple[int, Decimal]] = {}
    for order in orders:
        day = local_day(order.created_at, tz)
        count, revenue = buckets.get(day, (0, _ZERO))
        buckets[day] = (count + 1, revenue + order.total_price)

    daily = [
        DailySales(day=day, orders=count, revenue=revenue)
        for day, (count, revenue) in sorted(buckets.items())
    ]
    return SalesReport(
        daily_sales=daily,
        total_revenue=sum((d.revenue for d in daily), _ZERO),
        total_orders=sum(d.orders for d in daily),
    )


def products_report(
    orders: Sequence[Order],
    products: Sequence[Product],
) -> ProductsReport:
    """Per-product sold quantity and revenue plus stock counts.

    Every product in the snapshot gets a row (zero sales included). Products
    that only appear in order lines are appended in first-encountered order.
    """
    sold: dict[UUID | None, tuple[int, Decimal]] = {}
    unknown_names: dict[UUID | None, str] = {}
    known_ids = {p.id for p in products}

    for order in orders:
        for item in order.items:
            qty, revenue = sold.get(item.product_id, (0, _ZERO))
            sold[item.product_id] = (qty + item.qty, revenue + item.line_total)
            if item.product_id not in known_ids:
                unknown_names.setdefault(item.product_id, item.name)

    rows = []
    for product in products:
        qty, revenue = sold.get(product.id, (0, _ZERO))
        rows.append(
            ProductSales(
                product_id=product.id,
                name=product.name,
                category=product.category,
                count_in_stock=product.count_in_stock,
                sales=qty,
                revenue=revenue,
            ),
        )
    for product_id, name in unknown_names.items():
        qty, revenue = sold[product_id]
        rows.append(
            ProductSales(
                product_id=product_id,
                name=name,
                category=None,
                count_in_stock=None,
                sales=qty,
                revenue=revenue,
            ),
        )

    return ProductsReport(
        product_sales=rows,
        total_products=len(products),
        low_stock_products=sum(
            1 for p in products if p.count_in_stock < LOW_STOCK_THRESHOLD
        ),
    )


def users_report(orders: Sequence[Order]) -> UsersReport:
    """Customer counts and per-customer spend.

    Orders without a user reference are ignored.
    """
    per_customer: dict[UUID, tuple[int, Decimal]] = {}
    for order in orders:
        if order.user_id is None:
            continue
        count, spent = per_customer.get(order.user_id, (0, _ZERO))
        per_customer[order.user_id] = (count + 1, spent + order.total_price)

    customers = [
        CustomerSummary(user_id=user_id, orders=count, total_spent=spent)
        for user_id, (count, spent) in per_customer.items()
    ]
    return UsersReport(
        unique_customers=len(customers),
        repeat_customers=sum(1 for c in customers if c.orders > 1),
        customers=customers,
    )
