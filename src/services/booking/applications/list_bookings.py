from __future__ import annotations

from services.booking.domain.entity import Booking
from services.booking.domain.enum import BookerRole, BookingState
from services.booking.domain.port import ItemCatalog, UserDirectory
from services.booking.domain.repository import BookingRepository
from services.booking.domain.value_object import BookingCriteria, PageRequest
from services.shared.domain import AccessDeniedException, IsoDateTime, UserId
from services.shared.utils.logger import get_logger

logger = get_logger("booking-service")


class ListBookingsService:
    """予約一覧の取得

    state と現在時刻から条件を組み立て、予約者 / 所有者の立場ごとに
    リポジトリへ問い合わせる。結果は開始日時の降順でページングする。
    """

    def __init__(
        self,
        repository: BookingRepository,
        users: UserDirectory,
        items: ItemCatalog,
    ) -> None:
        self._repository = repository
        self._users = users
        self._items = items

    def list(
        self,
        subject_id: UserId,
        role: BookerRole,
        state: BookingState | str,
        now: IsoDateTime,
        page: PageRequest,
    ) -> list[Booking]:
        if not self._users.exists(subject_id):
            logger.warning("Unknown user", extra={"user_id": subject_id.value})
            raise AccessDeniedException(
                "You haven't access to booking. Please, log in."
            )
        # アイテムを持たない所有者は state に関わらず空
        item_ids = []
        if role == BookerRole.OWNER:
            item_ids = self._items.item_ids_owned_by(subject_id)
            if not item_ids:
                return []

        state = BookingState.parse(state)
        logger.info(
            "Listing bookings",
            extra={
                "user_id": subject_id.value,
                "role": role.value,
                "state": state.value,
                "from": page.from_index,
                "size": page.size,
            },
        )

        criteria = BookingCriteria.for_state(state, role, now)
        if role == BookerRole.BOOKER:
            return self._repository.find_by_booker(subject_id, criteria, page)
        return self._repository.find_by_items(item_ids, criteria, page)
