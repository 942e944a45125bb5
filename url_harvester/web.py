from fastapi import FastAPI, File, HTTPException, Response, UploadFile
from pydantic import BaseModel, ConfigDict, Field

from url_harvester.errors import ExportError, FetchError, ReadError
from url_harvester.export import EXCEL_MIME_TYPE, EXPORT_FILENAME, generate_excel
from url_harvester.extractor import extract_from_file, extract_from_website
from url_harvester.models import ExtractionRecord, SourceType
from url_harvester.utils.logger import setup_logger

app = FastAPI(title="URL Harvester API")
logger = setup_logger()


class WebsiteRequest(BaseModel):
    url: str


class RecordModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    url: str = Field(min_length=1)
    source_type: SourceType = Field(alias="sourceType")
    source_description: str = Field(default="", alias="sourceDescription")


class ExportRequest(BaseModel):
    records: list[RecordModel]


def _results(records: list[ExtractionRecord]) -> dict:
    return {"count": len(records), "results": [r.to_dict() for r in records]}


@app.get("/")
def root():
    return {"status": "ok", "message": "URL Harvester service running"}


@app.post("/extract/website")
def extract_website(payload: WebsiteRequest):
    url = payload.url.strip()
    if not url:
        raise HTTPException(status_code=400, detail="No URL provided")

    try:
        records = extract_from_website(url)
    except FetchError as e:
        logger.error(f"Error extracting URLs from website: {e}")
        raise HTTPException(status_code=502, detail="Failed to extract URLs from the website")

    logger.info(f"Found {len(records)} URLs from the website {url}")
    return _results(records)


@app.post("/extract/file")
def extract_file(file: UploadFile = File(...)):
    filename = file.filename or "upload"
    try:
        records = extract_from_file(file.file, filename, file.content_type)
    except ReadError as e:
        logger.error(f"Error extracting URLs from file: {e}")
        raise HTTPException(status_code=422, detail="Failed to extract URLs from the file")
    finally:
        file.file.close()

    logger.info(f"Found {len(records)} URLs from {filename}")
    return _results(records)


@app.post("/export")
def export_excel(payload: ExportRequest):
    if not payload.records:
        raise HTTPException(status_code=400, detail="No records to export")

    try:
        records = [
            ExtractionRecord(
                url=r.url,
                source_type=r.source_type,
                source_description=r.source_description,
            )
            for r in payload.records
        ]
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    try:
        content = generate_excel(records)
    except ExportError as e:
        logger.error(f"Export error: {e}")
        raise HTTPException(status_code=500, detail="There was an error exporting to Excel")

    return Response(
        content=content,
        media_type=EXCEL_MIME_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{EXPORT_FILENAME}"'},
    )


@app.get("/health")
def health_check():
    return {"health": "ok"}
