from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.reservation.applications.get_availability import GetAvailabilityService
from services.reservation.constants import SERVICE_NAME
from services.reservation.domain.value_object import HotelId, RoomTypeId
from services.reservation.handlers.errors import (
    domain_error_response,
    error_response,
    internal_error_response,
    invalid_request_response,
)
from services.reservation.handlers.request_models import AvailabilityQuery
from services.reservation.handlers.response_models import (
    AvailabilityResponse,
    RoomAvailabilityData,
)
from services.reservation.infrastructure.dynamodb_inventory_repository import (
    DynamoDBInventoryRepository,
)
from services.reservation.infrastructure.dynamodb_reservation_ledger import (
    DynamoDBReservationLedger,
)
from services.shared.domain import DomainException
from services.shared.utils import api_response, get_logger

logger = get_logger(SERVICE_NAME)

inventory = DynamoDBInventoryRepository()
ledger = DynamoDBReservationLedger()
service = GetAvailabilityService(inventory=inventory, ledger=ledger)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """空室照会 Lambda ハンドラ"""
    path_params = event.path_parameters or {}
    hotel_id = path_params.get("hotel_id")

    if not hotel_id:
        return error_response(400, "INVALID_REQUEST", "hotel_id is required")

    try:
        query = AvailabilityQuery.model_validate(event.query_string_parameters or {})
        room_type_id = (
            RoomTypeId(value=query.room_type_id) if query.room_type_id else None
        )
        availability = service.get(
            HotelId(value=hotel_id),
            query.check_in_date,
            query.check_out_date,
            room_type_id=room_type_id,
        )
    except DomainException as e:
        return domain_error_response(e, logger)
    except ValueError as e:
        return invalid_request_response(e)
    except Exception:
        logger.exception("Failed to get availability")
        return internal_error_response()

    return api_response(
        200,
        AvailabilityResponse(
            hotel_id=hotel_id,
            check_in_date=query.check_in_date,
            check_out_date=query.check_out_date,
            data=[
                RoomAvailabilityData(room_type_id=str(rt_id), available_rooms=count)
                for rt_id, count in availability.items()
            ],
        ),
    )
