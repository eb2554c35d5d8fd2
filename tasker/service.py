import logging
from typing import List

from pydantic import ValidationError
from pymongo import ReturnDocument
from pymongo.errors import PyMongoError

from tasker.errors import EmptyTaskError, StoreError, TaskNotFoundError
from tasker.schemas import MessageResponse, Task, parse_task_id

logger = logging.getLogger(__name__)


class TaskService:
    """
    CRUD over the tasks collection.

    `collection` is anything with pymongo's find / insert_one / delete_one /
    find_one_and_update. The service keeps no other state, so one instance
    is shared by every request thread.
    """

    def __init__(self, collection):
        self.collection = collection

    def list_tasks(self) -> List[Task]:
        # no sort: tasks come back in whatever order the store keeps them
        try:
            documents = list(self.collection.find({}))
        except PyMongoError as e:
            logger.error("Error finding collection: %s", e)
            raise StoreError("Error finding collection.") from e

        try:
            tasks = [Task.model_validate(doc) for doc in documents]
        except ValidationError as e:
            logger.error("Stored task does not fit the Task shape: %s", e)
            raise StoreError("Error parsing data.") from e

        if not tasks:
            raise TaskNotFoundError("No tasks to return.")
        return tasks

    def create_task(self, text: str) -> Task:
        logger.info("The task to add is: %s", text)
        if text == "":
            raise EmptyTaskError()

        task = Task.new(text)
        try:
            self.collection.insert_one(task.to_document())
        except PyMongoError as e:
            # the caller still gets the task it asked for
            logger.warning("Insert of task %s failed: %s", task.id, e)
        return task

    def delete_task(self, task_id: str) -> MessageResponse:
        oid = parse_task_id(task_id)
        if oid is None:
            raise TaskNotFoundError("No tasks were deleted")

        try:
            res = self.collection.delete_one({"_id": oid})
        except PyMongoError as e:
            logger.error("Error deleting task %s: %s", task_id, e)
            raise StoreError("Error deleting task.") from e

        if res.deleted_count == 0:
            raise TaskNotFoundError("No tasks were deleted")
        return MessageResponse(message="Task successfully deleted.", id=task_id)

    def complete_task(self, task_id: str) -> MessageResponse:
        oid = parse_task_id(task_id)
        if oid is None:
            raise TaskNotFoundError("Cannot find task to update.")

        # updated_at is left as it was
        try:
            updated = self.collection.find_one_and_update(
                {"_id": oid},
                {"$set": {"completed": True}},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            logger.error("Error updating task %s: %s", task_id, e)
            raise StoreError("Error updating task.") from e

        if updated is None:
            raise TaskNotFoundError("Cannot find task to update.")
        return MessageResponse(message="Status successfully updated.", id=str(updated["_id"]))
