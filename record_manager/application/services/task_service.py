"""Application service (use case) for Task operations."""

from record_manager.application.schemas import TaskCreate, TaskUpdate
from record_manager.application.services.record_service import RecordService
from record_manager.domain.entities import Task


class TaskService(RecordService[Task]):
    """Keeps tasks by id; name and description can be changed after creation."""

    entity_type = Task.entity_type

    def create(self, data: TaskCreate) -> Task:
        task = Task(task_id=data.id, name=data.name, description=data.description)
        self.add(task)
        return task

    def update(self, task_id: str, data: TaskUpdate) -> Task:
        return self._update_fields(task_id, **data.model_dump(exclude_none=True))

    def update_name(self, task_id: str, name: str) -> Task:
        return self._update_fields(task_id, name=name)

    def update_description(self, task_id: str, description: str) -> Task:
        return self._update_fields(task_id, description=description)
