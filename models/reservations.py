from datetime import datetime
from sqlmodel import SQLModel

from models.users import User
from models.tables import Table


class Reservation(SQLModel):
    """
    Reserva de una mesa por un usuario en un momento concreto.

    `user` y `table` son referencias a las instancias recibidas, no copias:
    cambiar la disponibilidad de la mesa se ve a través de la reserva.
    """

    reservation_id: int
    user: User
    table: Table
    reservation_time: datetime
