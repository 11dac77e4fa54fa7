"""Interactive Documentation: Swagger UI at /docs with site title and custom CSS.

Invariants:
    - Serves the app's own /openapi.json
    - Title and CSS come from settings; the stock Swagger assets are left untouched
"""

from fastapi import APIRouter, Request
from fastapi.openapi.docs import get_swagger_ui_html
from fastapi.responses import HTMLResponse

from products_api.config import get_settings

router = APIRouter(include_in_schema=False)


@router.get("/docs", response_class=HTMLResponse)
async def swagger_ui(request: Request) -> HTMLResponse:
    settings = get_settings()
    page = get_swagger_ui_html(
        openapi_url=request.app.openapi_url,
        title=settings.docs_title,
        swagger_ui_parameters={"defaultModelsExpandDepth": -1},
    )
    html = page.body.decode()
    if settings.docs_custom_css:
        html = html.replace(
            "</head>", f"<style>{settings.docs_custom_css}</style></head>", 1,
        )
    return HTMLResponse(html)
