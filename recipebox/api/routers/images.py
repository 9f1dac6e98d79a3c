"""Serves stored recipe card photos."""

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import FileResponse

from recipebox.images import image_path

router = APIRouter(prefix="/api/images", tags=["images"])


@router.get("/{name}")
def get_image(name: str) -> FileResponse:
    """Return a stored photo. Public, so it can be used in <img> tags."""
    path = image_path(name)
    if path is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Image {name} not found",
        )
    return FileResponse(path, media_type="image/jpeg")
