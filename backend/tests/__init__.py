# Force SQLModel table registration at test discovery time
# This ensures models are registered before any test database creation
from todo_api.models.todo import Todo  # noqa: F401
