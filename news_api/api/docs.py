# news_api/api/docs.py
import json
from functools import lru_cache
from pathlib import Path

from fastapi import APIRouter

from news_api.models.schemas import Endpoints

ENDPOINTS_FILE = Path(__file__).resolve().parents[1] / "endpoints.json"

router = APIRouter(tags=["docs"])


@lru_cache(maxsize=1)
def load_endpoints() -> dict:
    with ENDPOINTS_FILE.open(encoding="utf-8") as fh:
        return json.load(fh)


@router.get("/api", response_model=Endpoints, summary="Describe every available endpoint")
async def api_endpoints():
    return {"endpoints": load_endpoints()}
