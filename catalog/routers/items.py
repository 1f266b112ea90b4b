from typing import Any, Dict, List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query

from catalog.models import item_to_dict
from catalog.store import Catalog, get_catalog

router = APIRouter(prefix="", tags=["items"])

# -------------------------------------------------------------------
# List endpoint
# -------------------------------------------------------------------
@router.get("/items")
def list_items(
    department: Optional[str] = Query(None, description="Exact department match"),
    object_type: Optional[str] = Query(None, description="Exact object type match"),
    flag: Optional[str] = Query(None, description="Only items with this flag set, e.g. possibleDuplicate"),
    q: Optional[str] = Query(None, description="Title or creator contains, case-insensitive"),
    limit: int = Query(100, ge=1, le=2000),
    offset: int = Query(0, ge=0),
    catalog: Catalog = Depends(get_catalog),
) -> List[Dict[str, Any]]:
    """List canonical items with optional filters."""
    items = catalog.filter(department=department, object_type=object_type, flag=flag, q=q)
    return [item_to_dict(it) for it in items[offset:offset + limit]]

# -------------------------------------------------------------------
# Single item lookup
# -------------------------------------------------------------------
@router.get("/items/{item_id}")
def get_item(item_id: str, catalog: Catalog = Depends(get_catalog)) -> Dict[str, Any]:
    """Fetch one item by object id; its related entries carry resolved titles."""
    it = catalog.get(item_id)
    if not it:
        raise HTTPException(404, "Item not found")
    return item_to_dict(it)
