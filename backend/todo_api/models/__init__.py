from todo_api.models.todo import Todo

__all__ = [
    "Todo",
]
