from fastapi import Request

from bookshelf.metrics.router import MetricsRouter
from bookshelf.schemas.schemas import MessageResponse
from bookshelf.services.schema_service import SchemaService

router = MetricsRouter(tags=["schema"])


# GET is kept for existing clients even though the call is destructive
@router.api_route(
    "/sync",
    methods=["GET", "POST"],
    status_code=201,
    response_model=MessageResponse,
    response_model_exclude_none=True,
)
def sync_tables_route(request: Request):
    SchemaService(request.app.state.database).sync()
    return MessageResponse(message="tables created")
