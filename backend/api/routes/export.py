from fastapi import APIRouter
from fastapi.responses import Response

from api.deps import StoreDep
from exceptions.errors import reraise_as_internal
from services.export_service import export_user_data

router = APIRouter()


@router.get("/{user_id}")
def export_data(user_id: str, store: StoreDep, format: str = "json"):
    # Any failing sub-retrieval fails the whole export; nothing partial is sent.
    with reraise_as_internal("Failed to export data"):
        export = export_user_data(store, user_id, format)
    return Response(
        content=export.content,
        media_type=export.media_type,
        headers={"Content-Disposition": f'attachment; filename="{export.filename}"'},
    )
