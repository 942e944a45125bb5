"""Openpyxl-based Excel export of extraction records."""

from io import BytesIO
from typing import Iterable, Optional

from openpyxl import Workbook

from url_harvester.config import get_config
from url_harvester.errors import ExportError
from url_harvester.models import RECORD_FIELDS, ExtractionRecord
from url_harvester.utils.logger import setup_logger

logger = setup_logger()

EXCEL_MIME_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
EXPORT_FILENAME = "extracted_urls.xlsx"


def generate_excel(
    records: Iterable[ExtractionRecord],
    sheet_name: Optional[str] = None,
) -> bytes:
    """
    Serialize records into a single-sheet xlsx workbook.

    Row 1 holds the field names (url, sourceType, sourceDescription),
    followed by one row per record in input order.

    Raises:
        ExportError: If the workbook cannot be built or saved.
    """
    try:
        sheet_name = sheet_name or get_config().sheet_name
        wb = Workbook()
        ws = wb.active
        ws.title = sheet_name

        ws.append(list(RECORD_FIELDS))
        count = 0
        for record in records:
            ws.append(record.to_row())
            count += 1

        buf = BytesIO()
        wb.save(buf)
    except Exception as e:
        logger.error(f"Export error: {e}")
        raise ExportError(f"There was an error exporting to Excel: {e}") from e

    logger.info(f"Exported {count} records to sheet '{sheet_name}'")
    return buf.getvalue()
