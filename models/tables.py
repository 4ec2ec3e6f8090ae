from sqlmodel import Field, SQLModel


class Table(SQLModel):
    table_id: int
    capacity: int = Field(ge=1)

    # Único campo que mutan los managers
    is_available: bool = Field(default=True)
