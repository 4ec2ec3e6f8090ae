import logging
from typing import List, Optional

from core.events import EventHandler
from managers.base import IReservationManager
from models.restaurant import Restaurant
from models.reservations import Reservation

logger = logging.getLogger(__name__)


class ReservationManager(IReservationManager):
    """
    Alta y cancelación de reservas sobre el mismo restaurante que usa TableManager.

    Cada alta/cancelación cambia también el flag `is_available` de la mesa,
    buscándola por id en `restaurant.tables`.
    """

    def __init__(self, restaurant: Restaurant) -> None:
        self.restaurant = restaurant
        self.reservation_confirmed: EventHandler[Reservation] = EventHandler()

    # ----------------------------------------------------------------------
    # CREAR RESERVA
    # ----------------------------------------------------------------------

    def make_reservation(self, reservation: Reservation) -> None:
        # No se comprueban solapes, capacidad ni existencia de la mesa
        self.restaurant.reservations.append(reservation)
        logger.info(
            "Reserva %s confirmada: mesa %s para %s a las %s",
            reservation.reservation_id,
            reservation.table.table_id,
            reservation.user.username,
            reservation.reservation_time.isoformat(),
        )
        self.reservation_confirmed.emit(self, reservation)
        self._update_table_availability(reservation.table.table_id, False)

    # ----------------------------------------------------------------------
    # CANCELAR RESERVA
    # ----------------------------------------------------------------------

    def cancel_reservation(self, reservation_id: int) -> None:
        for index, reservation in enumerate(self.restaurant.reservations):
            if reservation.reservation_id == reservation_id:
                del self.restaurant.reservations[index]
                logger.info("Reserva %s cancelada", reservation_id)
                self._update_table_availability(reservation.table.table_id, True)
                return

        logger.debug("Reserva %s no encontrada, nada que cancelar", reservation_id)

    def get_reservation(self, reservation_id: int) -> Optional[Reservation]:
        for reservation in self.restaurant.reservations:
            if reservation.reservation_id == reservation_id:
                return reservation
        return None

    def get_all_reservations(self) -> List[Reservation]:
        """Lista viva del restaurante (misma semántica que `get_all_tables`)."""
        return self.restaurant.reservations

    def _update_table_availability(self, table_id: int, is_available: bool) -> None:
        for table in self.restaurant.tables:
            if table.table_id == table_id:
                table.is_available = is_available
                return
