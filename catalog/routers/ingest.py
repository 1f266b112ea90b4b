import logging
from typing import Any
from fastapi import APIRouter, Body, HTTPException

from catalog.loader import parse_export
from catalog.normalizers import get_default_normalizer
from catalog.normalizers.enrich import count_unresolved
from catalog.store import build_catalog, set_catalog

log = logging.getLogger(__name__)

router = APIRouter(prefix="", tags=["ingest"])


@router.post("/ingest")
def ingest(payload: Any = Body(...)):
    """
    Replace the catalog with a freshly normalized batch.

    Accepts:
        The export envelope {"meta": {...}, "records": [...]} or a bare
        JSON array of raw records.

    Behavior:
        The whole batch is normalized, then relations are resolved across
        it, then the new catalog is swapped in. Nothing is merged with the
        previous batch.

    Returns:
        {
          "ok": True,
          "source": <meta.source or None>,
          "ingested": <item count>,
          "unresolved": <relations pointing outside the batch>
        }
    """
    try:
        export = parse_export(payload)
        if not export.records:
            raise ValueError("Payload must contain at least one record")

        catalog = build_catalog(export, normalizer=get_default_normalizer())
        set_catalog(catalog)
        unresolved = count_unresolved(catalog.items)
        log.info("ingested %d item(s) from %s", len(catalog), export.meta.source or "payload")
        return {
            "ok": True,
            "source": export.meta.source,
            "ingested": len(catalog),
            "unresolved": unresolved,
        }
    # ------------------------------------------------------------
    # Global error handling
    # ------------------------------------------------------------
    except ValueError as e:
        raise HTTPException(400, str(e))
    except Exception as e:
        log.exception("ingest failed")
        raise HTTPException(500, f"Ingest failed: {e}")
