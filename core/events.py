from typing import Any, Callable, Generic, List, TypeVar

T = TypeVar("T")

Handler = Callable[[Any, T], None]


class EventHandler(Generic[T]):
    """
    Lista de suscriptores que se invocan en línea, en orden de suscripción,
    con la firma `handler(sender, payload)`.

    No hay cola ni aislamiento: si un suscriptor lanza una excepción, ésta
    llega a quien disparó el evento y los suscriptores siguientes no se llaman.
    """

    def __init__(self) -> None:
        self._handlers: List[Handler] = []

    def subscribe(self, handler: Handler) -> None:
        self._handlers.append(handler)

    def unsubscribe(self, handler: Handler) -> None:
        if handler in self._handlers:
            self._handlers.remove(handler)

    def emit(self, sender: Any, payload: T) -> None:
        # Copia para tolerar (des)suscripciones durante la emisión
        for handler in list(self._handlers):
            handler(sender, payload)

    def __iadd__(self, handler: Handler) -> "EventHandler[T]":
        self.subscribe(handler)
        return self

    def __isub__(self, handler: Handler) -> "EventHandler[T]":
        self.unsubscribe(handler)
        return self

    def __len__(self) -> int:
        return len(self._handlers)
