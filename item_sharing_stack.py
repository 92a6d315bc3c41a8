from aws_cdk import Stack
from constructs import Construct

from infra.constructs import Api, Database, Functions, Layers


class ItemSharingStack(Stack):
    def __init__(self, scope: Construct, construct_id: str, **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)

        database = Database(self, "Database")
        layers = Layers(self, "Layers")

        fns = Functions(
            self,
            "Functions",
            table=database.table,
            common_layer=layers.common_layer,
        )

        Api(
            self,
            "Api",
            create_booking=fns.create_booking,
            update_booking_status=fns.update_booking_status,
            delete_booking=fns.delete_booking,
            get_booking=fns.get_booking,
            list_booker_bookings=fns.list_booker_bookings,
            list_owner_bookings=fns.list_owner_bookings,
        )
