from services.booking.domain.entity import Booking
from services.booking.domain.enum import BookingStatus
from services.booking.domain.event import BookingRequested
from services.booking.domain.value_object import BookingId, BookingPeriod
from services.shared.domain import ItemId, UserId


class BookingFactory:
    """予約エンティティのファクトリ

    - 採番済みの ID を受け取る（採番はリポジトリの責務）
    - 初期状態（WAITING）の設定
    """

    def create(
        self,
        booking_id: BookingId,
        booker_id: UserId,
        item_id: ItemId,
        period: BookingPeriod,
    ) -> Booking:
        """新規予約エンティティを生成する

        Args:
            booking_id: 採番済みの予約ID
            booker_id: 予約者
            item_id: 予約対象アイテム
            period: 検証済みの予約期間

        Returns:
            Booking: 生成された予約エンティティ（WAITING状態）
        """
        booking = Booking(
            id=booking_id,
            item_id=item_id,
            booker_id=booker_id,
            period=period,
            status=BookingStatus.WAITING,
        )
        booking.add_domain_event(
            BookingRequested(booking_id=booking_id, item_id=item_id, booker_id=booker_id)
        )
        return booking
