from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from core.events import EventHandler
from models.users import User
from models.tables import Table
from models.reservations import Reservation


class IUserManager(ABC):
    user_registered: EventHandler[User]

    @abstractmethod
    def register_user(self, user: User) -> None:
        pass

    @abstractmethod
    def login(self, username: str, password: str) -> Optional[User]:
        pass


class ITableManager(ABC):

    @abstractmethod
    def get_available_tables(self) -> List[Table]:
        pass

    @abstractmethod
    def update_table_availability(self, table_id: int, is_available: bool) -> None:
        pass

    @abstractmethod
    def get_all_tables(self) -> List[Table]:
        pass

    @abstractmethod
    def get_tables_by_capacity(self, capacity: int) -> List[Table]:
        pass

    @abstractmethod
    def get_available_tables_by_capacity_and_time(self, capacity: int, when: datetime) -> List[Table]:
        pass


class IReservationManager(ABC):
    reservation_confirmed: EventHandler[Reservation]

    @abstractmethod
    def make_reservation(self, reservation: Reservation) -> None:
        pass

    @abstractmethod
    def cancel_reservation(self, reservation_id: int) -> None:
        pass

    @abstractmethod
    def get_all_reservations(self) -> List[Reservation]:
        pass
