from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.reservation.applications.list_user_reservations import (
    ListUserReservationsService,
)
from services.reservation.constants import SERVICE_NAME
from services.reservation.domain.value_object import Actor
from services.reservation.handlers.errors import (
    domain_error_response,
    error_response,
    internal_error_response,
    invalid_request_response,
)
from services.reservation.handlers.request_models import ActorRequest
from services.reservation.handlers.response_models import (
    ReservationListResponse,
    to_reservation_data,
)
from services.reservation.infrastructure.dynamodb_reservation_ledger import (
    DynamoDBReservationLedger,
)
from services.shared.domain import DomainException, UserId
from services.shared.utils import api_response, get_logger

logger = get_logger(SERVICE_NAME)

ledger = DynamoDBReservationLedger()
service = ListUserReservationsService(ledger=ledger)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """利用者の予約一覧 Lambda ハンドラ"""
    path_params = event.path_parameters or {}
    user_id = path_params.get("user_id")

    if not user_id:
        return error_response(400, "INVALID_REQUEST", "user_id is required")

    logger.info("Listing user reservations", extra={"user_id": user_id})

    try:
        query = ActorRequest.model_validate(event.query_string_parameters or {})
        reservations = service.list_for_user(
            UserId(value=user_id),
            Actor(user_id=UserId(value=query.actor_id), is_admin=query.is_admin),
        )
    except DomainException as e:
        return domain_error_response(e, logger)
    except ValueError as e:
        return invalid_request_response(e)
    except Exception:
        logger.exception("Failed to list user reservations")
        return internal_error_response()

    data = [to_reservation_data(r) for r in reservations]
    return api_response(200, ReservationListResponse(data=data, count=len(data)))
