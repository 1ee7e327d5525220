"""
Order aggregate root.

CRITICAL: This file must contain ZERO imports from:
- pydantic
- fastapi

The aggregate is a synchronous state machine (Empty -> NonEmpty) with no
internal locking; callers serialize access to a given instance.
"""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, List, Tuple, Union

from ..errors import CurrencyMismatchError, DuplicateSkuError, ItemLimitExceededError
from ..events import DomainEvent, ItemAddedToOrder, OrderCreated, OrderTotalCalculated
from ..value_objects import Currency, CustomerId, Money, OrderId, Quantity, Sku
from .order_item import OrderItem


MAX_ITEMS = 100


@dataclass(eq=False)
class Order:
    """
    Order aggregate root.

    Owns an insertion-ordered collection of OrderItem (unique by SKU) and
    a queue of pending domain events.

    Invariants:
    - Every item's unit price is in the order currency
    - No two items share a SKU
    - At most MAX_ITEMS items
    - calculate_total() is the exact sum of item totals
    """
    id: OrderId
    customer_id: CustomerId
    currency: Currency

    _items: List[OrderItem] = field(default_factory=list, init=False, repr=False)
    _domain_events: List[DomainEvent] = field(default_factory=list, init=False, repr=False)

    @classmethod
    def create(cls, order_id: OrderId, customer_id: CustomerId, currency: Currency) -> "Order":
        """
        Factory method to create a new, empty Order.

        Records OrderCreated automatically.

        Args:
            order_id: Order identifier
            customer_id: Customer identifier
            currency: Currency every item must be priced in

        Returns:
            New Order instance with OrderCreated collected
        """
        order = cls(id=order_id, customer_id=customer_id, currency=currency)
        order._record_event(
            OrderCreated(order_id=order_id, customer_id=customer_id, currency=currency)
        )
        return order

    # =========================================================================
    # BEHAVIOUR
    # =========================================================================

    def add_item(self, sku: Sku, unit_price: Money, quantity: Quantity) -> None:
        """
        Append a line item.

        Checks run in this order, so a full order reports the limit even
        for a duplicate SKU. Nothing is mutated when a check fails.

        Raises:
            CurrencyMismatchError: Price currency differs from order currency
            ItemLimitExceededError: Order already holds MAX_ITEMS items
            DuplicateSkuError: An item with the same SKU already exists
        """
        if unit_price.currency != self.currency:
            raise CurrencyMismatchError(
                f"Item currency ({unit_price.currency.code}) does not match "
                f"order currency ({self.currency.code})"
            )

        if len(self._items) >= MAX_ITEMS:
            raise ItemLimitExceededError(f"Order cannot have more than {MAX_ITEMS} items")

        if any(item.sku == sku for item in self._items):
            raise DuplicateSkuError(f"Item with SKU '{sku.code}' already exists in the order")

        item = OrderItem.create(sku, unit_price, quantity)
        item_total = item.calculate_total()

        self._items.append(item)
        self._record_event(
            ItemAddedToOrder(
                order_id=self.id,
                sku=sku,
                unit_price=unit_price,
                quantity=quantity,
                item_total=item_total,
            )
        )

    def calculate_total(self) -> Money:
        """
        Sum all item totals in the order currency.

        An empty order returns zero without recording anything. Otherwise
        OrderTotalCalculated is recorded on every call as an audit entry.
        """
        if not self._items:
            return Money.zero(self.currency)

        total = Money.zero(self.currency)
        for item in self._items:
            total = total.add(item.calculate_total())

        self._record_event(
            OrderTotalCalculated(order_id=self.id, total=total, item_count=len(self._items))
        )
        return total

    def get_total_by_currency(self) -> Dict[str, Union[str, Decimal]]:
        """Return the total as {"currency": code, "amount": Decimal}."""
        total = self.calculate_total()
        return {"currency": total.currency.code, "amount": total.amount}

    # =========================================================================
    # STATE ACCESS
    # =========================================================================

    def is_empty(self) -> bool:
        return not self._items

    @property
    def item_count(self) -> int:
        return len(self._items)

    @property
    def items(self) -> Tuple[OrderItem, ...]:
        """Read-only snapshot of items in insertion order."""
        return tuple(self._items)

    # =========================================================================
    # EVENT COLLECTION
    # =========================================================================

    def get_domain_events(self) -> List[DomainEvent]:
        """
        Get all pending domain events.

        Returns:
            Copy of the pending events list (to be published to the Event Bus)
        """
        return list(self._domain_events)

    def clear_domain_events(self) -> None:
        """Drop all pending domain events (after publishing)."""
        self._domain_events.clear()

    def _record_event(self, event: DomainEvent) -> None:
        self._domain_events.append(event)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Order):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
