"""
Add Item To Order Use Case.

Flow:
1. Validate input and build value objects
2. Load the existing order
3. Check the requested currency against the order currency
4. Look up the unit price
5. Add the item (business rules enforced by the aggregate)
6. Persist the order and publish its domain events
7. Return the updated total
"""
import logging

from core.application.dtos.order_dto import AddItemRequest, AddItemResponse
from core.application.errors import (
    AppError,
    ConflictError,
    InfraError,
    NotFoundError,
    ValidationError,
)
from core.application.mappers import money_to_dto
from core.application.ports.pricing_service import PricingService
from core.application.use_cases.base import build_value_object, publish_pending_events
from core.domain.errors import DomainError
from core.domain.event_bus import EventBus
from core.domain.repositories.order_repository import OrderRepository
from core.domain.value_objects import Currency, Money, OrderId, Quantity, Sku


logger = logging.getLogger(__name__)


class AddItemToOrderUseCase:
    """Use case for adding a priced line item to an existing order."""

    def __init__(
        self,
        order_repository: OrderRepository,
        pricing_service: PricingService,
        event_bus: EventBus,
    ):
        self.order_repository = order_repository
        self.pricing_service = pricing_service
        self.event_bus = event_bus

    async def execute(self, request: AddItemRequest) -> AddItemResponse:
        """
        Execute the add-item workflow.

        Raises:
            ValidationError: Malformed input, or currency differs from the order's
            NotFoundError: Order or product price not found
            ConflictError: Aggregate rejected the item (duplicate SKU, item limit)
            InfraError: Repository, pricing or event bus failure
        """
        order_id = build_value_object(OrderId.create, request.order_id, "order_id")
        sku = build_value_object(Sku.create, request.sku, "sku")
        quantity = build_value_object(Quantity.create, request.qty, "qty")
        currency = build_value_object(Currency.create, request.currency, "currency")

        try:
            order = await self.order_repository.find_by_id(order_id)
            if order is None:
                raise NotFoundError(
                    f"Order with ID '{order_id}' not found",
                    resource_type="Order",
                    resource_id=str(order_id),
                )

            if order.currency != currency:
                raise ValidationError(
                    f"Currency mismatch: order is in {order.currency.code}, "
                    f"but item is in {currency.code}",
                    field="currency",
                    details={
                        "order_currency": order.currency.code,
                        "item_currency": currency.code,
                    },
                )

            unit_price = await self._get_price(sku, currency)

            try:
                order.add_item(sku, unit_price, quantity)
            except DomainError as e:
                raise ConflictError(
                    e.message,
                    code="BUSINESS_RULE_VIOLATION",
                    details={
                        "kind": e.kind.value,
                        "sku": sku.code,
                        "order_id": str(order_id),
                    },
                ) from e

            await self.order_repository.save(order)
            await publish_pending_events(order, self.event_bus)

            # The resulting OrderTotalCalculated stays pending until the next publish
            total = order.calculate_total()

        except AppError:
            raise
        except Exception as e:
            logger.error(f"Add item {sku} to order {order_id} failed: {e}", exc_info=True)
            raise InfraError(
                "Failed to add item to order due to infrastructure error",
                service_name="OrderRepository",
                original_error=e,
            ) from e

        logger.info(f"Item added: {sku} x {quantity} to order {order_id} (total: {total})")

        return AddItemResponse(order_id=order_id.value, total=money_to_dto(total))

    async def _get_price(self, sku: Sku, currency: Currency) -> Money:
        try:
            return await self.pricing_service.get_price(sku, currency)
        except NotFoundError:
            raise
        except Exception as e:
            logger.error(f"Price lookup for {sku} ({currency}) failed: {e}", exc_info=True)
            raise InfraError(
                f"Failed to get price for SKU '{sku.code}'",
                service_name="PricingService",
                original_error=e,
            ) from e
