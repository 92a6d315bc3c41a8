from aws_cdk import aws_apigateway as apigw
from aws_cdk import aws_lambda as _lambda
from constructs import Construct


class Api(Construct):
    """API Gateway Construct

    すべてのルートは X-Sharer-User-Id ヘッダーを必須とする。
    """

    def __init__(
        self,
        scope: Construct,
        id: str,
        create_booking: _lambda.Function,
        update_booking_status: _lambda.Function,
        delete_booking: _lambda.Function,
        get_booking: _lambda.Function,
        list_booker_bookings: _lambda.Function,
        list_owner_bookings: _lambda.Function,
    ) -> None:
        super().__init__(scope, id)

        self.rest_api = apigw.RestApi(
            self,
            "BookingRestApi",
            rest_api_name="Item Sharing Booking API",
            deploy_options=apigw.StageOptions(
                stage_name="prod",
                throttling_burst_limit=10,
                throttling_rate_limit=5,
            ),
        )

        required_headers = {"method.request.header.X-Sharer-User-Id": True}

        # /bookings
        bookings_resource = self.rest_api.root.add_resource("bookings")
        bookings_resource.add_method(
            "POST",
            apigw.LambdaIntegration(create_booking),
            request_parameters=required_headers,
        )
        bookings_resource.add_method(
            "GET",
            apigw.LambdaIntegration(list_booker_bookings),
            request_parameters=required_headers,
        )

        # /bookings/owner
        owner_resource = bookings_resource.add_resource("owner")
        owner_resource.add_method(
            "GET",
            apigw.LambdaIntegration(list_owner_bookings),
            request_parameters=required_headers,
        )

        # /bookings/{booking_id}
        booking_resource = bookings_resource.add_resource("{booking_id}")
        booking_resource.add_method(
            "GET",
            apigw.LambdaIntegration(get_booking),
            request_parameters=required_headers,
        )
        booking_resource.add_method(
            "PATCH",
            apigw.LambdaIntegration(update_booking_status),
            request_parameters=required_headers,
        )
        booking_resource.add_method(
            "DELETE",
            apigw.LambdaIntegration(delete_booking),
            request_parameters=required_headers,
        )
