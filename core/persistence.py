import logging
from pathlib import Path
from typing import Union

from models.restaurant import Restaurant

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def load_data(path: PathLike) -> Restaurant:
    """
    Carga el restaurante completo desde el archivo JSON indicado.

    Si el archivo no existe se devuelve un restaurante vacío. Las reservas
    traen embebidos su usuario y su mesa, que se reconstruyen tal cual (no se
    vuelven a enlazar con las mesas de `tables` por id).
    Un archivo mal formado lanza `pydantic.ValidationError`; los errores de
    lectura se propagan como `OSError`.
    """
    path = Path(path)
    if not path.exists():
        logger.info("No existe %s, se inicia un restaurante vacío", path)
        return Restaurant()

    restaurant = Restaurant.model_validate_json(path.read_text(encoding="utf-8"))
    logger.info(
        "Datos cargados desde %s: %d mesas, %d reservas",
        path, len(restaurant.tables), len(restaurant.reservations),
    )
    return restaurant


def save_data(restaurant: Restaurant, path: PathLike) -> None:
    """Sobrescribe el archivo con el restaurante completo en JSON indentado."""
    path = Path(path)
    path.write_text(restaurant.model_dump_json(indent=2), encoding="utf-8")
    logger.info(
        "Datos guardados en %s: %d mesas, %d reservas",
        path, len(restaurant.tables), len(restaurant.reservations),
    )
