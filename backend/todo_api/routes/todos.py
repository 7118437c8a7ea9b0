from typing import List

from fastapi import APIRouter, Depends, Response
from pydantic import BaseModel

from todo_api.dependencies import get_todo_service
from todo_api.models.todo import Todo
from todo_api.services.todo_service import TodoService

router = APIRouter()


class TodoCreate(BaseModel):
    title: str
    completed: bool = False


class TodoResponse(BaseModel):
    id: int
    title: str
    completed: bool

    class Config:
        from_attributes = True


@router.get("/todos", response_model=List[TodoResponse])
def get_all_todos(service: TodoService = Depends(get_todo_service)):
    """List all todos"""
    return service.get_all_todos()


@router.get("/todos/{todo_id}", response_model=TodoResponse)
def get_todo_by_id(todo_id: int, service: TodoService = Depends(get_todo_service)):
    """Get a todo by ID (empty body if it doesn't exist)"""
    todo = service.get_todo_by_id(todo_id)
    if todo is None:
        return Response(status_code=200)
    return todo


@router.post("/todos", response_model=TodoResponse, status_code=201)
def create_todo(todo_data: TodoCreate, service: TodoService = Depends(get_todo_service)):
    """Create a new todo"""
    todo = Todo(**todo_data.model_dump())
    return service.create_todo(todo)


@router.delete("/todos/{todo_id}", status_code=204)
def delete_todo_by_id(todo_id: int, service: TodoService = Depends(get_todo_service)):
    """Delete a todo (no-op if it doesn't exist)"""
    service.delete_todo_by_id(todo_id)

    return None
