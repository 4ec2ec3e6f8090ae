import logging
import sys
from pathlib import Path
from typing import Optional, Union

# --- Configuración de Path para Módulos Hermanos ---
ROOT_DIR = Path(__file__).parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.append(str(ROOT_DIR))
# ------------------------------------------------------------------------

from core.config import settings
from core.logging_config import setup_logging
from core.persistence import load_data, save_data
from managers.users import UserManager
from managers.tables import TableManager
from managers.reservations import ReservationManager
from models.restaurant import Restaurant

logger = logging.getLogger(__name__)


class RestaurantApp:
    """
    Agrupa el restaurante cargado y los managers construidos a su alrededor.

    TableManager y ReservationManager comparten la misma instancia de
    Restaurant; UserManager es independiente y no se persiste.
    """

    def __init__(self, restaurant: Restaurant, data_file: Path) -> None:
        self.restaurant = restaurant
        self.data_file = data_file
        self.users = UserManager()
        self.tables = TableManager(restaurant)
        self.reservations = ReservationManager(restaurant)

    def save(self) -> None:
        save_data(self.restaurant, self.data_file)


def create_app(data_file: Optional[Union[str, Path]] = None) -> RestaurantApp:
    """
    Carga el restaurante desde `data_file` (o desde `settings.DATA_FILE`)
    y devuelve la aplicación lista para usar.
    """
    path = Path(data_file) if data_file is not None else settings.DATA_FILE
    restaurant = load_data(path)
    logger.info("Aplicación iniciada con datos en %s", path)
    return RestaurantApp(restaurant, path)


# --- Ejecución Local ---
if __name__ == "__main__":
    setup_logging()
    app = create_app()
    logger.info(
        "Mesas disponibles: %d de %d",
        len(app.tables.get_available_tables()),
        len(app.tables.get_all_tables()),
    )
