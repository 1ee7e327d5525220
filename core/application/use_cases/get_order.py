"""Get Order Use Case."""
import logging

from core.application.dtos.order_dto import OrderDTO
from core.application.errors import AppError, InfraError, NotFoundError
from core.application.mappers import order_to_dto
from core.application.use_cases.base import build_value_object, publish_pending_events
from core.domain.event_bus import EventBus
from core.domain.repositories.order_repository import OrderRepository
from core.domain.value_objects import OrderId


logger = logging.getLogger(__name__)


class GetOrderUseCase:
    """
    Load an order and describe it with its current total.

    Computing the total records an OrderTotalCalculated audit event, which
    is published and drained like any other event.
    """

    def __init__(self, order_repository: OrderRepository, event_bus: EventBus):
        self.order_repository = order_repository
        self.event_bus = event_bus

    async def execute(self, order_id: str) -> OrderDTO:
        """
        Raises:
            ValidationError: Malformed order id
            NotFoundError: Order does not exist
            InfraError: Repository or event bus failure
        """
        oid = build_value_object(OrderId.create, order_id, "order_id")

        try:
            order = await self.order_repository.find_by_id(oid)
            if order is None:
                raise NotFoundError(
                    f"Order with ID '{oid}' not found",
                    resource_type="Order",
                    resource_id=str(oid),
                )

            dto = order_to_dto(order)
            await publish_pending_events(order, self.event_bus)

        except AppError:
            raise
        except Exception as e:
            logger.error(f"Get order {oid} failed: {e}", exc_info=True)
            raise InfraError(
                "Failed to load order due to infrastructure error",
                service_name="OrderRepository",
                original_error=e,
            ) from e

        return dto
