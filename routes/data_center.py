"""
Data Center import routes.

Column mapping suggestions, field catalog, mapping validation and import
preview for spreadsheet uploads.
"""

from fastapi import APIRouter, File, Form, Query, Request, UploadFile
from fastapi.responses import JSONResponse
import structlog

from config import settings
from models.column_mapping import (
    ColumnMappingRequest,
    ColumnMappingResponse,
    FieldCatalogResponse,
    ImportPreviewRequest,
    ImportPreviewResponse,
    UploadMappingResponse,
    ValidateMappingsRequest,
    ValidateMappingsResponse,
)
from parsers.spreadsheet_parser import parse_spreadsheet
from services.column_mapping_service import get_column_mapping_service
from services.import_preview_service import build_preview
from exceptions import AppError, SpreadsheetParseError

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/api/data-center", tags=["Data Center"])


# ===================
# EXCEPTION HANDLER
# ===================

def handle_error(e: Exception) -> JSONResponse:
    """Convert exception to JSON response."""
    if isinstance(e, AppError):
        return JSONResponse(
            status_code=e.status_code,
            content=e.to_dict()
        )
    # Unexpected error
    logger.error("unexpected_error", error=str(e), type=type(e).__name__)
    return JSONResponse(
        status_code=500,
        content={
            "error": {
                "code": "INTERNAL_ERROR",
                "message": "An unexpected error occurred"
            }
        }
    )


# ===================
# AI MAPPING
# ===================

@router.post("/ai-mapping", response_model=ColumnMappingResponse)
async def suggest_column_mappings(request: Request):
    """
    Suggest a canonical field for every spreadsheet column.

    Body: {"headers": [...], "sampleRows": [...], "fileType": "..."}

    Any failure, including a malformed body, returns 500 with a flat
    {"error": message} body, which is what the upload wizard expects.
    """
    try:
        payload = await request.json()
        body = ColumnMappingRequest.model_validate(payload)

        service = get_column_mapping_service()
        matches = service.suggest_mappings(body.headers, body.sample_rows, body.file_type)

        return {"mappings": [m.to_dict() for m in matches]}

    except Exception as e:
        logger.error("column_mapping_failed", error=str(e), error_type=type(e).__name__)
        message = e.message if isinstance(e, AppError) else str(e)
        return JSONResponse(status_code=500, content={"error": message})


@router.post("/ai-mapping/upload", response_model=UploadMappingResponse)
async def suggest_mappings_for_upload(
    file: UploadFile = File(...),
    file_type: str = Form(...),
):
    """
    Parse an uploaded CSV/Excel file and suggest column mappings.

    The first rows of the file are used as samples. At most
    max_upload_bytes + 1 bytes are read, enough for the parser to reject
    an oversized file.
    """
    try:
        limit = settings.max_upload_bytes
        if file.size is not None and file.size > limit:
            raise SpreadsheetParseError(
                message="File is too large",
                details={"size": file.size, "limit": limit}
            )

        content = await file.read(limit + 1)
        parsed = parse_spreadsheet(
            content,
            file.filename or "",
            max_bytes=limit,
        )

        sample_rows = parsed.sample_rows(settings.sample_row_limit)
        service = get_column_mapping_service()
        matches = service.suggest_mappings(parsed.headers, sample_rows, file_type)

        return {
            "headers": parsed.headers,
            "totalRows": parsed.total_rows,
            "sampleRows": sample_rows,
            "mappings": [m.to_dict() for m in matches],
        }

    except Exception as e:
        return handle_error(e)


# ===================
# FIELD CATALOG
# ===================

@router.get("/fields", response_model=FieldCatalogResponse)
async def get_field_catalog(
    file_type: str = Query(..., description="invoice_aging, payments or accounts")
):
    """Get the fields a column of this file type can be mapped to."""
    try:
        service = get_column_mapping_service()
        fields = service.get_fields(file_type)
        return {
            "fileType": file_type,
            "fields": [f.to_dict() for f in fields],
        }
    except Exception as e:
        return handle_error(e)


# ===================
# CONFIRMED MAPPINGS
# ===================

@router.post("/mappings/validate", response_model=ValidateMappingsResponse)
async def validate_mappings(data: ValidateMappingsRequest):
    """
    Check user-confirmed mappings before import.

    Reports required fields left unmapped and fields assigned to more than
    one column.
    """
    try:
        service = get_column_mapping_service()
        return service.validate_mappings(
            data.file_type,
            [(m.file_column, m.field_key) for m in data.mappings],
        )
    except Exception as e:
        return handle_error(e)


@router.post("/preview", response_model=ImportPreviewResponse)
async def preview_import(data: ImportPreviewRequest):
    """
    Preview the first rows under the confirmed mappings and count rows with issues.

    Assignments to fields outside the file type's catalog are ignored.
    """
    try:
        service = get_column_mapping_service()
        allowed = {f.key for f in service.get_fields(data.file_type)}
        return build_preview(
            data.rows,
            [(m.file_column, m.field_key) for m in data.mappings if m.field_key in allowed],
        )
    except Exception as e:
        return handle_error(e)
