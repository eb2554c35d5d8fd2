import logging
import os
from typing import List

from fastapi import Depends, FastAPI, Request
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles
from pydantic import ValidationError

from tasker import __version__
from tasker.config import Config
from tasker.errors import RequestDecodeError, TaskerError
from tasker.schemas import MessageResponse, Task, TaskEnvelope, utc_now
from tasker.service import TaskService
from tasker.store import connect, get_collection

logger = logging.getLogger(__name__)

DECODE_ERROR = "Decode error! please check your JSON formating."
BAD_JSON = "Bad JSON formatting."

# every endpoint answers any of these; the body decides what happens
ANY_METHOD = ["GET", "POST", "PUT", "PATCH", "DELETE"]


# --------------------------
# Dependencies
# --------------------------
def get_service(request: Request) -> TaskService:
    return request.app.state.service


def envelope_reader(decode_error_message: str):
    """Build a dependency that decodes the body into a TaskEnvelope."""
    async def read_envelope(request: Request) -> TaskEnvelope:
        body = await request.body()
        try:
            envelope = TaskEnvelope.model_validate_json(body)
        except ValidationError as e:
            logger.debug("Undecodable body on %s: %s", request.url.path, e)
            raise RequestDecodeError(decode_error_message) from e
        if envelope.command:
            logger.debug("Ignoring command %r on %s", envelope.command, request.url.path)
        return envelope
    return read_envelope


def create_app(service: TaskService = None, config=Config) -> FastAPI:
    """
    Build the API. Without a `service` the app connects to MongoDB on
    startup using `config`; tests pass one backed by a fake collection.
    """
    app = FastAPI(title="Tasker API", version=__version__)

    if service is not None:
        app.state.service = service
    else:
        @app.on_event("startup")
        def on_startup():
            client = connect(config)
            app.state.client = client
            app.state.service = TaskService(get_collection(client, config))

        @app.on_event("shutdown")
        def on_shutdown():
            app.state.client.close()

    # --------------------------
    # Error handlers
    # --------------------------
    @app.exception_handler(TaskerError)
    async def tasker_error(request: Request, exc: TaskerError):
        return PlainTextResponse(exc.message, status_code=exc.status_code)

    # anything else becomes one logged 500; the exception stops here
    @app.middleware("http")
    async def unhandled_error(request: Request, call_next):
        try:
            return await call_next(request)
        except Exception:
            logger.exception("Unhandled error on %s", request.url.path)
            return PlainTextResponse("Internal server error.", status_code=500)

    # --------------------------
    # Routes
    # --------------------------
    @app.api_route("/api/index", methods=ANY_METHOD, response_model=List[Task])
    def list_tasks(svc: TaskService = Depends(get_service)):
        return svc.list_tasks()

    @app.api_route("/api/add", methods=ANY_METHOD, response_model=Task)
    def add_task(
        envelope: TaskEnvelope = Depends(envelope_reader(DECODE_ERROR)),
        svc: TaskService = Depends(get_service),
    ):
        req = envelope.to_create()
        return svc.create_task(req.text)

    @app.api_route("/api/rm", methods=ANY_METHOD, response_model=MessageResponse)
    def delete_task(
        envelope: TaskEnvelope = Depends(envelope_reader(DECODE_ERROR)),
        svc: TaskService = Depends(get_service),
    ):
        req = envelope.to_ref()
        return svc.delete_task(req.task_id)

    @app.api_route("/api/done", methods=ANY_METHOD, response_model=MessageResponse)
    def complete_task(
        envelope: TaskEnvelope = Depends(envelope_reader(BAD_JSON)),
        svc: TaskService = Depends(get_service),
    ):
        req = envelope.to_ref()
        return svc.complete_task(req.task_id)

    # Simple health check
    @app.get("/health")
    def health():
        return {"status": "ok", "time": utc_now().isoformat()}

    # front-end assets; mounted last so the API routes win
    if os.path.isdir(config.STATIC_DIR):
        app.mount("/", StaticFiles(directory=config.STATIC_DIR, html=True), name="public")

    return app
