"""
Create Order Use Case.

Flow:
1. Validate input and build value objects
2. Reject duplicate order ids
3. Create the Order aggregate
4. Persist it
5. Publish its domain events
"""
import logging

from core.application.dtos.order_dto import CreateOrderRequest, CreateOrderResponse
from core.application.errors import AppError, ConflictError, InfraError
from core.application.ports.clock import Clock
from core.application.use_cases.base import build_value_object, publish_pending_events
from core.domain.entities.order import Order
from core.domain.event_bus import EventBus
from core.domain.repositories.order_repository import OrderRepository
from core.domain.value_objects import Currency, CustomerId, OrderId


logger = logging.getLogger(__name__)


class CreateOrderUseCase:
    """Use case for creating a new, empty order."""

    def __init__(
        self,
        order_repository: OrderRepository,
        event_bus: EventBus,
        clock: Clock,
    ):
        """
        Initialize use case with dependencies.

        Args:
            order_repository: Repository for order persistence
            event_bus: Event Bus for publishing domain events
            clock: Time source for the creation timestamp
        """
        self.order_repository = order_repository
        self.event_bus = event_bus
        self.clock = clock

    async def execute(self, request: CreateOrderRequest) -> CreateOrderResponse:
        """
        Execute the create-order workflow.

        Raises:
            ValidationError: Malformed order id, customer id or currency
            ConflictError: An order with the same id already exists
            InfraError: Repository or event bus failure
        """
        order_id = build_value_object(OrderId.create, request.order_id, "order_id")
        customer_id = build_value_object(CustomerId.create, request.customer_id, "customer_id")
        currency = build_value_object(Currency.create, request.currency, "currency")

        try:
            if await self.order_repository.exists(order_id):
                raise ConflictError(
                    f"Order with ID '{order_id}' already exists",
                    code="DUPLICATE_ORDER",
                    details={"order_id": str(order_id)},
                )

            order = Order.create(order_id, customer_id, currency)

            await self.order_repository.save(order)
            await publish_pending_events(order, self.event_bus)

        except AppError:
            raise
        except Exception as e:
            logger.error(f"Create order {order_id} failed: {e}", exc_info=True)
            raise InfraError(
                "Failed to create order due to infrastructure error",
                service_name="OrderRepository",
                original_error=e,
            ) from e

        logger.info(f"Order created: {order_id} (customer: {customer_id}, currency: {currency})")

        return CreateOrderResponse(
            order_id=order_id.value,
            customer_id=customer_id.value,
            currency=currency.code,
            created_at=self.clock.now().isoformat(),
        )
