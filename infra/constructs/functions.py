import datetime

from aws_cdk import Duration, Stack
from aws_cdk import aws_dynamodb as dynamodb
from aws_cdk import aws_lambda as _lambda
from constructs import Construct

SERVICE_NAME = "reservation-service"

# AWS Lambda Powertools for Python (v3) の公開レイヤー。pydantic を同梱している
POWERTOOLS_LAYER_ARN = (
    "arn:aws:lambda:{region}:017000801446:layer:"
    "AWSLambdaPowertoolsPythonV3-python313-x86_64:{version}"
)


class Functions(Construct):
    """予約エンジンの Lambda 関数を管理する Construct"""

    def __init__(
        self,
        scope: Construct,
        id: str,
        table: dynamodb.Table,
        free_cancellation_days: int = 1,
        powertools_layer_version: int = 7,
    ) -> None:
        super().__init__(scope, id)

        self._table = table
        self._powertools_layer = _lambda.LayerVersion.from_layer_version_arn(
            self,
            "PowertoolsLayer",
            POWERTOOLS_LAYER_ARN.format(
                region=Stack.of(self).region, version=powertools_layer_version
            ),
        )

        self.get_availability = self._create_function(
            "GetAvailabilityLambda",
            "services.reservation.handlers.get_availability.lambda_handler",
        )

        self.quote = self._create_function(
            "QuoteLambda",
            "services.reservation.handlers.quote.lambda_handler",
        )

        self.create_reservation = self._create_function(
            "CreateReservationLambda",
            "services.reservation.handlers.create_reservation.lambda_handler",
        )

        self.cancel_reservation = self._create_function(
            "CancelReservationLambda",
            "services.reservation.handlers.cancel_reservation.lambda_handler",
            environment={"FREE_CANCELLATION_DAYS": str(free_cancellation_days)},
        )

        self.list_user_reservations = self._create_function(
            "ListUserReservationsLambda",
            "services.reservation.handlers.list_user_reservations.lambda_handler",
        )

        for fn in [self.create_reservation, self.cancel_reservation]:
            table.grant_read_write_data(fn)

        for fn in [self.get_availability, self.quote, self.list_user_reservations]:
            table.grant_read_data(fn)

    def _create_function(
        self,
        id: str,
        handler: str,
        environment: dict[str, str] | None = None,
    ) -> _lambda.Function:
        return _lambda.Function(
            self,
            id,
            runtime=_lambda.Runtime.PYTHON_3_13,
            handler=handler,
            code=_lambda.Code.from_asset("src"),
            layers=[self._powertools_layer],
            timeout=Duration.seconds(10),
            environment={
                "TABLE_NAME": self._table.table_name,
                "POWERTOOLS_SERVICE_NAME": SERVICE_NAME,
                "DEPLOY_TIME": datetime.datetime.now(datetime.timezone.utc).isoformat(),
                **(environment or {}),
            },
        )
