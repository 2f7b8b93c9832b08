from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from app import dependencies as deps
from app.schemas.site import SiteConfig

router = APIRouter()


@router.get("/api/config", response_model=SiteConfig)
def get_site_config(site_config: SiteConfig = Depends(deps.get_site_config)):
    return site_config


@router.get("/health", response_class=PlainTextResponse)
def health_check():
    return "OK"
