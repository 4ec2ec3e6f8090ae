from datetime import datetime

from models.tables import Table

DINNER = datetime(2026, 10, 19, 21, 0)
LUNCH = datetime(2026, 10, 19, 13, 30)


def ids(tables):
    return [table.table_id for table in tables]


def test_get_available_tables_keeps_storage_order(table_manager):
    assert ids(table_manager.get_available_tables()) == [1, 2]


def test_update_table_availability(table_manager):
    table_manager.update_table_availability(1, False)

    assert ids(table_manager.get_available_tables()) == [2]

    table_manager.update_table_availability(1, True)

    assert ids(table_manager.get_available_tables()) == [1, 2]


def test_update_unknown_table_is_noop(table_manager, restaurant):
    before = [table.model_dump() for table in restaurant.tables]

    table_manager.update_table_availability(99, False)

    assert [table.model_dump() for table in restaurant.tables] == before


def test_update_duplicate_id_changes_first_match_only(restaurant, table_manager):
    restaurant.tables.append(Table(table_id=1, capacity=6, is_available=True))

    table_manager.update_table_availability(1, False)

    assert [table.is_available for table in restaurant.tables] == [False, True, True]


def test_get_all_tables_is_live_view(table_manager, restaurant):
    tables = table_manager.get_all_tables()
    restaurant.tables.append(Table(table_id=3, capacity=8))

    assert tables is restaurant.tables
    assert ids(tables) == [1, 2, 3]


def test_get_tables_by_capacity(table_manager):
    assert ids(table_manager.get_tables_by_capacity(3)) == [2]
    assert ids(table_manager.get_tables_by_capacity(2)) == [1, 2]
    assert table_manager.get_tables_by_capacity(5) == []


def test_get_tables_by_capacity_skips_unavailable(table_manager):
    table_manager.update_table_availability(2, False)

    assert table_manager.get_tables_by_capacity(3) == []


def test_get_table(table_manager):
    assert table_manager.get_table(2).capacity == 4
    assert table_manager.get_table(42) is None


def test_capacity_and_time_excludes_exact_time_collision(
    table_manager, restaurant, make_reservation
):
    # Reserva registrada sin pasar por ReservationManager: el flag sigue en True
    restaurant.reservations.append(make_reservation(10, 2, DINNER))

    assert ids(table_manager.get_available_tables_by_capacity_and_time(2, DINNER)) == [1]
    assert ids(table_manager.get_available_tables_by_capacity_and_time(2, LUNCH)) == [1, 2]


def test_capacity_and_time_respects_flag_and_capacity(table_manager):
    table_manager.update_table_availability(1, False)

    assert ids(table_manager.get_available_tables_by_capacity_and_time(1, DINNER)) == [2]
    assert table_manager.get_available_tables_by_capacity_and_time(5, DINNER) == []
