# inventory_api/main.py
import logging
from typing import Optional

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .models import ProductListResponse, utc_now
from .services import CatalogUnavailableError, InMemoryProductRepository, ProductService
from .settings import Settings, build_cors_policy, load_settings

logger = logging.getLogger(__name__)

PRODUCT_LIST_PATH = "/api/productlist"
PRODUCTS_RETRIEVED_MESSAGE = "Products retrieved successfully"
CATALOG_UNAVAILABLE_MESSAGE = "Product catalog is currently unavailable"

router = APIRouter()


def get_product_service() -> ProductService:
    return ProductService(InMemoryProductRepository())


# ---------------------------
# Catalog endpoint
# ---------------------------
@router.get(PRODUCT_LIST_PATH, response_model=ProductListResponse)
async def list_products(service: ProductService = Depends(get_product_service)):
    products = await service.get_products()
    logger.info("serving %d products", len(products))
    return ProductListResponse(
        success=True,
        message=PRODUCTS_RETRIEVED_MESSAGE,
        data=list(products),
        timestamp=utc_now(),
    )


async def catalog_unavailable_handler(request: Request, exc: CatalogUnavailableError):
    logger.error("catalog unavailable for %s: %s", request.url.path, exc)
    body = ProductListResponse(success=False, message=CATALOG_UNAVAILABLE_MESSAGE, data=None)
    return JSONResponse(status_code=503, content=body.model_dump(mode="json"))


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or load_settings()

    policy = build_cors_policy(settings.cors_policy, settings.allowed_origins)
    app = FastAPI(title="inventory-hub catalog api")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=policy.allow_origins,
        allow_credentials=policy.allow_credentials,
        allow_methods=policy.allow_methods,
        allow_headers=policy.allow_headers,
    )
    app.add_exception_handler(CatalogUnavailableError, catalog_unavailable_handler)
    app.include_router(router)

    logger.info("catalog api ready (env=%s, cors=%s)", settings.environment, policy.name)
    return app


app = create_app()
