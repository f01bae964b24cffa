import aws_cdk as core
import aws_cdk.assertions as assertions
import pytest

from reservation_engine_stack import ReservationEngineStack


@pytest.fixture(scope="module")
def template():
    app = core.App(context={"free_cancellation_days": 2})
    stack = ReservationEngineStack(
        app,
        "ReservationEngineStack",
        env=core.Environment(account="123456789012", region="ap-northeast-1"),
    )
    return assertions.Template.from_stack(stack)


def test_lambda_functions_created(template):
    template.resource_count_is("AWS::Lambda::Function", 5)
    template.has_resource_properties(
        "AWS::Lambda::Function",
        {
            "Handler": "services.reservation.handlers.create_reservation.lambda_handler",
            "Runtime": "python3.13",
        },
    )


def test_cancel_function_receives_cancellation_window(template):
    template.has_resource_properties(
        "AWS::Lambda::Function",
        {
            "Handler": "services.reservation.handlers.cancel_reservation.lambda_handler",
            "Environment": {
                "Variables": assertions.Match.object_like(
                    {"FREE_CANCELLATION_DAYS": "2"}
                )
            },
        },
    )


def test_table_has_user_index(template):
    template.resource_count_is("AWS::DynamoDB::Table", 1)
    template.has_resource_properties(
        "AWS::DynamoDB::Table",
        {
            "BillingMode": "PAY_PER_REQUEST",
            "GlobalSecondaryIndexes": [
                assertions.Match.object_like({"IndexName": "GSI1"})
            ],
        },
    )


def test_api_routes_created(template):
    template.resource_count_is("AWS::ApiGateway::RestApi", 1)
    template.has_resource_properties(
        "AWS::ApiGateway::Resource", {"PathPart": "{reservation_id}"}
    )
    template.has_resource_properties(
        "AWS::ApiGateway::Resource", {"PathPart": "availability"}
    )
