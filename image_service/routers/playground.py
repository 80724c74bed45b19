"""Preview page: tune parameters, then preview or download the image."""

from fastapi import APIRouter, HTTPException, Request
from fastapi.templating import Jinja2Templates

from image_service.config import WEB_TEMPLATES_DIR
from image_service.services.catalog import ENDPOINTS, form_values, get_endpoint, image_url

router = APIRouter()
templates = Jinja2Templates(directory=str(WEB_TEMPLATES_DIR))


@router.get("/")
async def playground_index(request: Request):
    previews = [
        {**e, "url": image_url(e["path"], form_values(e, {}))}
        for e in ENDPOINTS
    ]
    return templates.TemplateResponse(request, "index.html", {
        "endpoints": previews,
    })


@router.get("/preview/{endpoint_id}")
async def playground_preview(request: Request, endpoint_id: str):
    endpoint = get_endpoint(endpoint_id)
    if endpoint is None:
        raise HTTPException(status_code=404, detail=f"Generator '{endpoint_id}' not found")

    values = form_values(endpoint, request.query_params)
    png_url = image_url(endpoint["png_path"], values) if endpoint["png_path"] else None
    return templates.TemplateResponse(request, "preview.html", {
        "endpoint": endpoint,
        "values": values,
        "svg_url": image_url(endpoint["path"], values),
        "png_url": png_url,
    })
