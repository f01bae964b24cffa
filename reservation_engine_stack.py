from aws_cdk import CfnOutput, Stack
from constructs import Construct

from infra.constructs import Api, Database, Functions


class ReservationEngineStack(Stack):
    def __init__(self, scope: Construct, construct_id: str, **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)

        database = Database(self, "Database")

        fns = Functions(
            self,
            "Functions",
            table=database.table,
            free_cancellation_days=int(
                self.node.try_get_context("free_cancellation_days") or 1
            ),
        )

        api = Api(self, "Api", functions=fns)

        CfnOutput(self, "TableName", value=database.table.table_name)
        CfnOutput(self, "ApiUrl", value=api.rest_api.url)
