import logging
from datetime import datetime
from typing import List, Optional

from managers.base import ITableManager
from models.restaurant import Restaurant
from models.tables import Table

logger = logging.getLogger(__name__)


class TableManager(ITableManager):
    """
    Consultas y cambios de disponibilidad sobre las mesas de un restaurante.

    Trabaja directamente sobre `restaurant.tables` (no guarda copia propia).
    """

    def __init__(self, restaurant: Restaurant) -> None:
        self.restaurant = restaurant

    def get_available_tables(self) -> List[Table]:
        return [table for table in self.restaurant.tables if table.is_available]

    def get_table(self, table_id: int) -> Optional[Table]:
        for table in self.restaurant.tables:
            if table.table_id == table_id:
                return table
        return None

    def update_table_availability(self, table_id: int, is_available: bool) -> None:
        table = self.get_table(table_id)
        if table is None:
            logger.debug("Mesa %s no encontrada, no se cambia la disponibilidad", table_id)
            return

        table.is_available = is_available
        logger.info("Mesa %s -> disponible=%s", table_id, is_available)

    def get_all_tables(self) -> List[Table]:
        """
        Devuelve la lista viva del restaurante, no una copia: los cambios
        posteriores se ven en ella y modificarla modifica el restaurante.
        """
        return self.restaurant.tables

    def get_tables_by_capacity(self, capacity: int) -> List[Table]:
        # Orden de almacenamiento, sin ordenar por ajuste de capacidad
        return [
            table for table in self.restaurant.tables
            if table.capacity >= capacity and table.is_available
        ]

    def get_available_tables_by_capacity_and_time(self, capacity: int, when: datetime) -> List[Table]:
        """
        Mesas disponibles, con capacidad suficiente y sin ninguna reserva
        registrada exactamente a `when`.

        La comprobación de reservas es independiente del flag `is_available`
        y se mantiene aunque normalmente coincidan.
        """
        return [
            table for table in self.restaurant.tables
            if table.capacity >= capacity
            and table.is_available
            and not self._is_booked_at(table.table_id, when)
        ]

    def _is_booked_at(self, table_id: int, when: datetime) -> bool:
        return any(
            reservation.table.table_id == table_id and reservation.reservation_time == when
            for reservation in self.restaurant.reservations
        )
