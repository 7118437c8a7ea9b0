import logging
from typing import List, Optional

from todo_api.models.todo import Todo
from todo_api.repositories.todo_repository import TodoRepositoryInterface

logger = logging.getLogger(__name__)


class TodoService:
    def __init__(self, repository: TodoRepositoryInterface):
        self.repository = repository

    def get_all_todos(self) -> List[Todo]:
        logger.debug("Listing todos")
        return self.repository.list()

    def get_todo_by_id(self, todo_id: int) -> Optional[Todo]:
        logger.debug("Fetching todo %d", todo_id)
        return self.repository.get_by_id(todo_id)

    def create_todo(self, todo: Todo) -> Todo:
        logger.debug("Creating todo %r", todo.title)
        return self.repository.save(todo)

    def delete_todo_by_id(self, todo_id: int) -> None:
        logger.debug("Deleting todo %d", todo_id)
        self.repository.delete_by_id(todo_id)
