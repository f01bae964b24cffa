from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.reservation.applications.create_reservation import (
    CreateReservationService,
    ReservationRequest,
)
from services.reservation.constants import SERVICE_NAME
from services.reservation.domain.value_object import HotelId, RoomTypeId
from services.reservation.handlers.errors import (
    domain_error_response,
    internal_error_response,
    invalid_request_response,
)
from services.reservation.handlers.request_models import CreateReservationRequest
from services.reservation.handlers.response_models import to_response
from services.reservation.infrastructure.dynamodb_inventory_repository import (
    DynamoDBInventoryRepository,
)
from services.reservation.infrastructure.dynamodb_reservation_ledger import (
    DynamoDBReservationLedger,
)
from services.shared.domain import DomainException, UserId
from services.shared.utils import api_response, get_logger

logger = get_logger(SERVICE_NAME)

inventory = DynamoDBInventoryRepository()
ledger = DynamoDBReservationLedger()
service = CreateReservationService(inventory=inventory, ledger=ledger)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """予約作成 Lambda ハンドラ"""
    logger.info("Received create reservation request")

    try:
        request = CreateReservationRequest.model_validate_json(event.body or "{}")
        reservation = service.create(
            ReservationRequest(
                hotel_id=HotelId(value=request.hotel_id),
                room_type_id=RoomTypeId(value=request.room_type_id),
                check_in=request.check_in_date,
                check_out=request.check_out_date,
                room_count=request.room_count,
                guest_count=request.guest_count,
                user_id=UserId(value=request.user_id),
            )
        )
    except DomainException as e:
        return domain_error_response(e, logger)
    except ValueError as e:
        return invalid_request_response(e)
    except Exception:
        logger.exception("Failed to create reservation")
        return internal_error_response()

    return api_response(201, to_response(reservation))
