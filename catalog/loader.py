# catalog/loader.py
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

log = logging.getLogger(__name__)


class ExportLoadError(ValueError):
    """The export file or payload isn't a usable envelope of records."""


class ExportMeta(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    source: Optional[str] = None
    exported_at: Optional[str] = Field(default=None, alias="exportedAt")


class CatalogExport(BaseModel):
    # Records stay raw: shape checks belong to the normalizer, not here
    meta: ExportMeta = Field(default_factory=ExportMeta)
    records: List[Dict[str, Any]] = Field(default_factory=list)


def parse_export(payload: Any) -> CatalogExport:
    """
    Accept either the export envelope {"meta": {...}, "records": [...]}
    or a bare JSON array of records.
    """
    if isinstance(payload, list):
        payload = {"records": payload}
    if not isinstance(payload, dict) or "records" not in payload:
        raise ExportLoadError("Export must be an object with 'records' or a JSON array of records")
    try:
        return CatalogExport.model_validate(payload)
    except ValidationError as e:
        raise ExportLoadError(f"Invalid export envelope: {e.error_count()} error(s)") from e


def load_export(path: Union[str, Path]) -> CatalogExport:
    """Read and parse an export file from disk."""
    path = Path(path)
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ExportLoadError(f"Cannot read export {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ExportLoadError(f"Export {path} is not valid JSON: {e}") from e

    export = parse_export(payload)
    log.info("loaded %d record(s) from %s (source=%s)",
             len(export.records), path, export.meta.source)
    return export
