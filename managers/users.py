import logging
from typing import List, Optional

from core.events import EventHandler
from managers.base import IUserManager
from models.users import User

logger = logging.getLogger(__name__)


class UserManager(IUserManager):
    """Registro e inicio de sesión sobre una lista de usuarios en memoria."""

    def __init__(self) -> None:
        self._users: List[User] = []
        self.user_registered: EventHandler[User] = EventHandler()

    # ----------------------------------------------------------------------
    # REGISTRO
    # ----------------------------------------------------------------------

    def register_user(self, user: User) -> None:
        # Sin validaciones ni control de duplicados
        self._users.append(user)
        logger.info("Usuario registrado: %s", user.username)
        self.user_registered.emit(self, user)

    # ----------------------------------------------------------------------
    # LOGIN
    # ----------------------------------------------------------------------

    def login(self, username: str, password: str) -> Optional[User]:
        """Devuelve el primer usuario con ese username y password exactos, o None."""
        for user in self._users:
            if user.username == username and user.password == password:
                return user
        logger.debug("Login fallido para %s", username)
        return None

    def get_all_users(self) -> List[User]:
        return self._users
