from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.reservation.applications.quote_stay import QuoteStayService
from services.reservation.constants import SERVICE_NAME
from services.reservation.domain.value_object import HotelId, RoomTypeId
from services.reservation.handlers.errors import (
    domain_error_response,
    internal_error_response,
    invalid_request_response,
)
from services.reservation.handlers.request_models import QuoteRequest
from services.reservation.handlers.response_models import QuoteData, QuoteResponse
from services.reservation.infrastructure.dynamodb_inventory_repository import (
    DynamoDBInventoryRepository,
)
from services.shared.domain import DomainException
from services.shared.utils import api_response, get_logger

logger = get_logger(SERVICE_NAME)

inventory = DynamoDBInventoryRepository()
service = QuoteStayService(inventory=inventory)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """料金見積もり Lambda ハンドラ"""
    logger.info("Received quote request")

    try:
        request = QuoteRequest.model_validate_json(event.body or "{}")
        total = service.quote(
            HotelId(value=request.hotel_id),
            RoomTypeId(value=request.room_type_id),
            request.check_in_date,
            request.check_out_date,
            request.room_count,
        )
    except DomainException as e:
        return domain_error_response(e, logger)
    except ValueError as e:
        return invalid_request_response(e)
    except Exception:
        logger.exception("Failed to quote stay")
        return internal_error_response()

    return api_response(
        200,
        QuoteResponse(
            data=QuoteData(
                hotel_id=request.hotel_id,
                room_type_id=request.room_type_id,
                check_in_date=request.check_in_date,
                check_out_date=request.check_out_date,
                room_count=request.room_count,
                total_price_amount=str(total.amount),
                price_currency=str(total.currency),
            )
        ),
    )
