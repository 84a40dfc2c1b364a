"""
Base interfaces for CQRS pattern.

Usage:
    @dataclass(frozen=True)
    class DeletePetCommand(Command[None]):
        pet_id: str
        user_id: str

    class DeletePetHandler(CommandHandler[None]):
        def __init__(self, gateway: PetPersistenceGateway):
            self._gateway = gateway

        async def execute(self, command: DeletePetCommand) -> None:
            ...

Stream queries return an async iterator instead of a single value; their
handlers implement execute() as an async generator.
"""
from abc import ABC, abstractmethod
from typing import AsyncIterator, TypeVar, Generic

T = TypeVar("T")
class Command(ABC, Generic[T]):
    """Base class for write operations"""
    pass

class CommandHandler(ABC, Generic[T]):
    @abstractmethod
    async def execute(self, command: Command[T]) -> T:
        """Execute the command and return a result of type T"""
        ...

class Query(ABC, Generic[T]):
    """Base class for read operations"""
    pass

class QueryHandler(ABC, Generic[T]):
    @abstractmethod
    async def execute(self, query: Query[T]) -> T:
        """Execute the query and return a result of type T"""
        ...

class StreamQueryHandler(ABC, Generic[T]):
    @abstractmethod
    def execute(self, query: Query[T]) -> AsyncIterator[T]:
        """Lazily yield results; errors surface after already yielded items"""
        ...
