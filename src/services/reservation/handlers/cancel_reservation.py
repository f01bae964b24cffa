from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.reservation.applications.cancel_reservation import (
    CancelReservationService,
)
from services.reservation.constants import SERVICE_NAME
from services.reservation.domain.value_object import (
    Actor,
    CancellationPolicy,
    ReservationId,
)
from services.reservation.handlers.errors import (
    domain_error_response,
    error_response,
    internal_error_response,
    invalid_request_response,
)
from services.reservation.handlers.request_models import ActorRequest
from services.reservation.handlers.response_models import to_response
from services.reservation.infrastructure.dynamodb_reservation_ledger import (
    DynamoDBReservationLedger,
)
from services.shared.domain import DomainException, UserId
from services.shared.utils import api_response, get_logger

logger = get_logger(SERVICE_NAME)

ledger = DynamoDBReservationLedger()
service = CancelReservationService(
    ledger=ledger, policy=CancellationPolicy.from_env()
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """予約キャンセル Lambda ハンドラ"""
    path_params = event.path_parameters or {}
    reservation_id = path_params.get("reservation_id")

    if not reservation_id:
        return error_response(400, "INVALID_REQUEST", "reservation_id is required")

    logger.info(
        "Received cancel reservation request",
        extra={"reservation_id": reservation_id},
    )

    try:
        request = ActorRequest.model_validate_json(event.body or "{}")
        reservation = service.cancel(
            ReservationId(value=reservation_id),
            Actor(user_id=UserId(value=request.actor_id), is_admin=request.is_admin),
        )
    except DomainException as e:
        return domain_error_response(e, logger)
    except ValueError as e:
        return invalid_request_response(e)
    except Exception:
        logger.exception("Failed to cancel reservation")
        return internal_error_response()

    return api_response(200, to_response(reservation))
