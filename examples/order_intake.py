"""Validating an incoming order with guard clauses.

Demonstrates:
- Plain guards returning the value they checked
- Automatic parameter/method names in error messages
- The fluent ensure() chain
- Async predicates for checks that hit a repository
- Config context manager for scoped message formatting
"""

import asyncio
from dataclasses import dataclass
from datetime import date, timedelta
from decimal import Decimal
from uuid import UUID, uuid4

from guardclauses import (
    Config,
    GuardClauseError,
    ensure,
    ensure_date_in_range,
    ensure_not_none,
    ensure_positive,
    ensure_true_async,
)


@dataclass
class Customer:
    id: UUID
    name: str


@dataclass
class Order:
    customer: Customer | None
    quantity: int
    unit_price: Decimal
    delivery: date


KNOWN_CUSTOMERS: set[UUID] = set()


async def customer_exists(customer: Customer) -> bool:
    await asyncio.sleep(0)  # stands in for a database round trip
    return customer.id in KNOWN_CUSTOMERS


async def place_order(order: Order) -> Decimal:
    customer = ensure_not_none(order.customer)
    ensure(customer.name).not_empty().max_length(40)
    await ensure_true_async(customer, customer_exists)

    quantity = ensure_positive(order.quantity)
    price = ensure(order.unit_price).positive().smaller_than(Decimal("1000")).value
    ensure_date_in_range(order.delivery, date.today(), date.today() + timedelta(days=30))

    return quantity * price


# --- Demo ---

if __name__ == "__main__":
    known = Customer(uuid4(), "Acme B.V.")
    KNOWN_CUSTOMERS.add(known.id)
    tomorrow = date.today() + timedelta(days=1)

    orders = {
        "valid": Order(known, 3, Decimal("19.95"), tomorrow),
        "no customer": Order(None, 3, Decimal("19.95"), tomorrow),
        "unknown customer": Order(Customer(uuid4(), "Nobody"), 1, Decimal("5"), tomorrow),
        "negative quantity": Order(known, -2, Decimal("19.95"), tomorrow),
        "too expensive": Order(known, 1, Decimal("1250.50"), tomorrow),
        "late delivery": Order(known, 1, Decimal("5"), date.today() + timedelta(days=60)),
    }

    print("=" * 50)
    print("Default (nl-NL) formatting")
    print("=" * 50)
    for label, order in orders.items():
        try:
            total = asyncio.run(place_order(order))
            print(f"[{label}] total: {total}")
        except GuardClauseError as e:
            print(f"[{label}] {type(e).__name__}: {e}")

    print("\n" + "=" * 50)
    print("ISO dates and '.' decimals")
    print("=" * 50)
    with Config(date_format="%Y-%m-%d", decimal_separator="."):
        for label in ("too expensive", "late delivery"):
            try:
                asyncio.run(place_order(orders[label]))
            except GuardClauseError as e:
                print(f"[{label}] {e}")
