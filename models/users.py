from sqlmodel import SQLModel


class User(SQLModel):
    """Usuario que puede reservar mesas (la contraseña se guarda en texto plano)."""

    username: str
    password: str
