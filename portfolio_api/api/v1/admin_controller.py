from fastapi import APIRouter, Depends, File, Request, UploadFile, status
from fastapi.responses import JSONResponse

from portfolio_api.core.dependencies import (
    get_backup_service,
    get_current_admin,
    get_dashboard_service,
    get_upload_service,
)
from portfolio_api.core.exceptions import ResponseBody
from portfolio_api.core.serialization import serialize_document
from portfolio_api.schemas.contact_schema import ImportRequest
from portfolio_api.services.backup_service import BackupService
from portfolio_api.services.dashboard_service import DashboardService
from portfolio_api.services.upload_service import UploadService

router = APIRouter(prefix="/admin", tags=["admin"], dependencies=[Depends(get_current_admin)])


def _file_url(request: Request, filename: str) -> str:
    return f"{str(request.base_url).rstrip('/')}/uploads/{filename}"


@router.get(
    "/dashboard",
    response_model=ResponseBody,
    summary="Dashboard Statistics",
    description="Message counts per status, recent messages and portfolio totals",
)
def dashboard(service: DashboardService = Depends(get_dashboard_service)):
    return ResponseBody(data=serialize_document(service.get_summary()))


@router.post(
    "/upload",
    response_model=ResponseBody,
    status_code=status.HTTP_201_CREATED,
    summary="Upload Image",
    description="Store a jpeg, png, gif or webp image of at most 5MB, served under /uploads",
)
def upload_image(
    request: Request,
    image: UploadFile = File(...),
    service: UploadService = Depends(get_upload_service),
):
    """Accepts one image file in the multipart field `image`"""
    # One byte past the limit is enough for the size check
    contents = image.file.read(service.max_size + 1)
    stored = service.save_image(image.filename, image.content_type, contents)
    stored["url"] = _file_url(request, stored["filename"])
    return ResponseBody(message="File uploaded successfully", data=stored)


@router.get(
    "/uploads",
    response_model=ResponseBody,
    summary="List Uploads",
)
def list_uploads(
    request: Request,
    service: UploadService = Depends(get_upload_service),
):
    files = service.list_files()
    for entry in files:
        entry["url"] = _file_url(request, entry["name"])
    return ResponseBody(data=serialize_document(files))


@router.delete(
    "/upload/{filename}",
    response_model=ResponseBody,
    summary="Delete Upload",
)
def delete_upload(
    filename: str,
    service: UploadService = Depends(get_upload_service),
):
    service.delete_file(filename)
    return ResponseBody(message="File deleted successfully")


@router.get(
    "/export",
    summary="Export Data",
    description="Download the portfolio and every contact message as JSON",
)
def export_data(service: BackupService = Depends(get_backup_service)):
    data = service.export_data()
    filename = f"portfolio-export-{data['exported_at'][:10]}.json"
    return JSONResponse(
        content=data,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.post(
    "/import",
    response_model=ResponseBody,
    summary="Import Data",
    description="Replace the portfolio sections and/or the contact inbox from a previous export",
)
def import_data(
    payload: ImportRequest,
    service: BackupService = Depends(get_backup_service),
):
    result = service.import_data(portfolio=payload.portfolio, contacts=payload.contacts)
    return ResponseBody(message="Data imported successfully", data=result)
