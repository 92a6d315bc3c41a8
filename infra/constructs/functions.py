import datetime

from aws_cdk import aws_dynamodb as dynamodb
from aws_cdk import aws_lambda as _lambda
from constructs import Construct


class Functions(Construct):
    """Lambda 関数を管理する Construct"""

    def __init__(
        self,
        scope: Construct,
        id: str,
        table: dynamodb.Table,
        common_layer: _lambda.LayerVersion,
    ) -> None:
        super().__init__(scope, id)

        self.create_booking = self._create_function(
            "CreateBookingLambda",
            "services.booking.handlers.create.lambda_handler",
            table,
            common_layer,
        )

        self.update_booking_status = self._create_function(
            "UpdateBookingStatusLambda",
            "services.booking.handlers.update_status.lambda_handler",
            table,
            common_layer,
        )

        self.delete_booking = self._create_function(
            "DeleteBookingLambda",
            "services.booking.handlers.delete.lambda_handler",
            table,
            common_layer,
        )

        for fn in [
            self.create_booking,
            self.update_booking_status,
            self.delete_booking,
        ]:
            table.grant_read_write_data(fn)

        self.get_booking = self._create_function(
            "GetBookingLambda",
            "services.booking.handlers.get.lambda_handler",
            table,
            common_layer,
        )

        self.list_booker_bookings = self._create_function(
            "ListBookerBookingsLambda",
            "services.booking.handlers.list_bookings.booker_lambda_handler",
            table,
            common_layer,
        )

        self.list_owner_bookings = self._create_function(
            "ListOwnerBookingsLambda",
            "services.booking.handlers.list_bookings.owner_lambda_handler",
            table,
            common_layer,
        )

        # アイテムサービスから直接 Invoke される
        self.project_item_bookings = self._create_function(
            "ProjectItemBookingsLambda",
            "services.booking.handlers.project_items.lambda_handler",
            table,
            common_layer,
        )

        self.check_comment = self._create_function(
            "CheckCommentLambda",
            "services.booking.handlers.check_comment.lambda_handler",
            table,
            common_layer,
        )

        for fn in [
            self.get_booking,
            self.list_booker_bookings,
            self.list_owner_bookings,
            self.project_item_bookings,
            self.check_comment,
        ]:
            table.grant_read_data(fn)

    def _create_function(
        self,
        id: str,
        handler: str,
        table: dynamodb.Table,
        common_layer: _lambda.LayerVersion,
    ) -> _lambda.Function:
        return _lambda.Function(
            self,
            id,
            runtime=_lambda.Runtime.PYTHON_3_12,
            handler=handler,
            code=_lambda.Code.from_asset("src"),
            layers=[common_layer],
            environment={
                "TABLE_NAME": table.table_name,
                "POWERTOOLS_SERVICE_NAME": "booking-service",
                "DEPLOY_TIME": datetime.datetime.now(datetime.timezone.utc).isoformat(),
            },
        )
