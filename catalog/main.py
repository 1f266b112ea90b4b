import logging
from contextlib import asynccontextmanager
from fastapi import Depends, FastAPI

from catalog import settings
from catalog.loader import ExportLoadError, load_export
from catalog.routers.ingest import router as ingest_router
from catalog.routers.items import router as items_router
from catalog.setup_logging import setup_logging
from catalog.store import Catalog, build_catalog, get_catalog, set_catalog

# --------------------------------------------------------------------
# App bootstrap
# --------------------------------------------------------------------
setup_logging() # Init Logging
log = logging.getLogger(__name__)

# --------------------------------------------------------------------
# FastAPI application with lifespan hook
# --------------------------------------------------------------------
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Runs once at startup: if CATALOG_EXPORT_PATH is set, normalize that
    export so /items is populated as soon as the service starts.
    A bad export is reported on /healthz instead of aborting startup.
    """
    app.state.load_error = None
    if settings.CATALOG_EXPORT_PATH:
        try:
            set_catalog(build_catalog(load_export(settings.CATALOG_EXPORT_PATH)))
        except ExportLoadError as e:
            log.error("could not load export: %s", e)
            app.state.load_error = str(e)
    yield

app = FastAPI(title="Catalog normalizer", lifespan=lifespan)

# --------------------------------------------------------------------
# Routes
# --------------------------------------------------------------------
@app.get("/healthz")
def health(catalog: Catalog = Depends(get_catalog)):
    """
    Health probe plus a summary of the loaded batch:
      - source / exportedAt: from the export envelope
      - items: number of canonical items served
      - load_error: startup load failure, if any
    """
    return {
        "ok": True,
        "service": "catalog",
        "version": 1,
        "source": catalog.meta.source,
        "exportedAt": catalog.meta.exported_at,
        "items": len(catalog),
        "load_error": getattr(app.state, "load_error", None),
    }

# Register API routers:
app.include_router(ingest_router)
app.include_router(items_router)
