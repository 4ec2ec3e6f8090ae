from typing import List
from sqlmodel import Field, SQLModel

from models.tables import Table
from models.reservations import Reservation


class Restaurant(SQLModel):
    """Raíz del agregado: la única unidad que se carga y se guarda."""

    tables: List[Table] = Field(default_factory=list)
    reservations: List[Reservation] = Field(default_factory=list)
