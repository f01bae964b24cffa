from aws_cdk import aws_apigateway as apigw
from constructs import Construct

from infra.constructs.functions import Functions


class Api(Construct):
    """API Gateway Construct

    認証は前段のレイヤーが担い、利用者IDはリクエストに含めて渡される。
    """

    def __init__(self, scope: Construct, id: str, functions: Functions) -> None:
        super().__init__(scope, id)

        self.rest_api = apigw.RestApi(
            self,
            "ReservationRestApi",
            rest_api_name="Reservation Engine API",
            deploy_options=apigw.StageOptions(
                stage_name="prod",
                throttling_burst_limit=50,
                throttling_rate_limit=20,
            ),
        )
        root = self.rest_api.root

        # GET /hotels/{hotel_id}/availability
        hotel_resource = root.add_resource("hotels").add_resource("{hotel_id}")
        hotel_resource.add_resource("availability").add_method(
            "GET", apigw.LambdaIntegration(functions.get_availability)
        )

        # POST /quotes
        root.add_resource("quotes").add_method(
            "POST", apigw.LambdaIntegration(functions.quote)
        )

        # POST /reservations
        reservations_resource = root.add_resource("reservations")
        reservations_resource.add_method(
            "POST", apigw.LambdaIntegration(functions.create_reservation)
        )

        # POST /reservations/{reservation_id}/cancel
        reservations_resource.add_resource("{reservation_id}").add_resource(
            "cancel"
        ).add_method("POST", apigw.LambdaIntegration(functions.cancel_reservation))

        # GET /users/{user_id}/reservations
        root.add_resource("users").add_resource("{user_id}").add_resource(
            "reservations"
        ).add_method("GET", apigw.LambdaIntegration(functions.list_user_reservations))
