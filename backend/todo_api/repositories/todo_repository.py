"""
Todo persistence.

TodoRepositoryInterface is the contract the service layer depends on;
TodoRepository implements it against a SQLModel session.
"""

import logging
from abc import ABC, abstractmethod
from typing import List, Optional

from sqlmodel import Session, select

from todo_api.models.todo import Todo

logger = logging.getLogger(__name__)


class TodoRepositoryInterface(ABC):
    """Interface for todo storage operations."""

    @abstractmethod
    def list(self) -> List[Todo]:
        """Return every stored todo, ordered by id."""

    @abstractmethod
    def get_by_id(self, todo_id: int) -> Optional[Todo]:
        """
        Find a todo by ID.

        Args:
            todo_id: ID of the todo

        Returns:
            Optional[Todo]: The todo if found, None otherwise
        """

    @abstractmethod
    def save(self, todo: Todo) -> Todo:
        """
        Persist a todo.

        A todo without an id is inserted and gets a store-assigned id.
        A todo carrying an id overwrites the row with that id.

        Returns:
            Todo: The persisted todo
        """

    @abstractmethod
    def delete_by_id(self, todo_id: int) -> None:
        """Delete a todo by ID. Missing ids are ignored."""


class TodoRepository(TodoRepositoryInterface):
    def __init__(self, session: Session):
        self.session = session

    def list(self) -> List[Todo]:
        return list(self.session.exec(select(Todo).order_by(Todo.id)).all())

    def get_by_id(self, todo_id: int) -> Optional[Todo]:
        return self.session.get(Todo, todo_id)

    def save(self, todo: Todo) -> Todo:
        if todo.id is None:
            self.session.add(todo)
        else:
            # Overwrite by primary key
            todo = self.session.merge(todo)
        self.session.commit()
        self.session.refresh(todo)

        logger.info("Saved todo %d", todo.id)
        return todo

    def delete_by_id(self, todo_id: int) -> None:
        todo = self.session.get(Todo, todo_id)
        if todo is None:
            return

        self.session.delete(todo)
        self.session.commit()
        logger.info("Deleted todo %d", todo_id)
