from datetime import datetime, timezone
from typing import Any, Dict, Optional

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field, field_validator


def utc_now() -> datetime:
    """Current UTC time, cut to milliseconds so it survives a trip through BSON."""
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


def parse_task_id(raw: str) -> Optional[ObjectId]:
    if not ObjectId.is_valid(raw):
        return None
    return ObjectId(raw)


# Stored document and wire shape: {_id, created_at, updated_at, text, completed}
class Task(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    created_at: datetime
    updated_at: datetime
    text: str
    completed: bool = False

    @field_validator("id", mode="before")
    @classmethod
    def object_id_to_hex(cls, v):
        if isinstance(v, ObjectId):
            return str(v)
        return v

    @classmethod
    def new(cls, text: str) -> "Task":
        now = utc_now()
        return cls(id=str(ObjectId()), created_at=now, updated_at=now, text=text, completed=False)

    def to_document(self) -> Dict[str, Any]:
        doc = {"_id": ObjectId(self.id)}
        doc.update(self.model_dump(exclude={"id"}))
        return doc


class TaskEnvelope(BaseModel):
    """
    Body of every write endpoint. `task` is the text for /api/add and the
    hex id for /api/rm and /api/done; `command` is accepted and ignored.
    """
    model_config = ConfigDict(strict=True)

    command: Optional[str] = None
    task: Optional[str] = None

    def to_create(self) -> "CreateTaskRequest":
        return CreateTaskRequest(text=self.task or "")

    def to_ref(self) -> "TaskRefRequest":
        return TaskRefRequest(task_id=self.task or "")


class CreateTaskRequest(BaseModel):
    text: str


class TaskRefRequest(BaseModel):
    task_id: str


class MessageResponse(BaseModel):
    message: str
    id: str
