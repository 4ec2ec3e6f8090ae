from datetime import datetime

import pytest

from models.users import User
from models.tables import Table
from models.reservations import Reservation
from models.restaurant import Restaurant
from managers.tables import TableManager
from managers.reservations import ReservationManager
from managers.users import UserManager

DINNER = datetime(2026, 10, 19, 21, 0)


@pytest.fixture
def user():
    return User(username="ana", password="secreto")


@pytest.fixture
def restaurant():
    return Restaurant(tables=[
        Table(table_id=1, capacity=2, is_available=True),
        Table(table_id=2, capacity=4, is_available=True),
    ])


@pytest.fixture
def table_manager(restaurant):
    return TableManager(restaurant)


@pytest.fixture
def reservation_manager(restaurant):
    return ReservationManager(restaurant)


@pytest.fixture
def user_manager():
    return UserManager()


@pytest.fixture
def make_reservation(restaurant, user):
    """Construye una reserva sobre la mesa real del restaurante con ese id."""
    def _make(reservation_id, table_id, when=DINNER):
        table = next(t for t in restaurant.tables if t.table_id == table_id)
        return Reservation(reservation_id=reservation_id, user=user, table=table, reservation_time=when)
    return _make
