"""
Request-scoped wiring: session -> repository -> service.
"""

from fastapi import Depends
from sqlmodel import Session

from todo_api.database import get_session
from todo_api.repositories.todo_repository import TodoRepository, TodoRepositoryInterface
from todo_api.services.todo_service import TodoService


def get_todo_repository(session: Session = Depends(get_session)) -> TodoRepositoryInterface:
    """Get Todo repository bound to the request session."""
    return TodoRepository(session)


def get_todo_service(repository: TodoRepositoryInterface = Depends(get_todo_repository)) -> TodoService:
    """Get Todo service instance."""
    return TodoService(repository)
