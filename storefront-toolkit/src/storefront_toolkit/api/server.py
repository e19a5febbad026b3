"""
FastAPI application for the storefront assistant.

'create_app' wires a 'ShoppingAssistantController' and an 'AuthProvider' into
the routes the storefront client calls. Toolkit errors become JSON responses
of the form {"error": "..."}: 'ValidationError' is a 400, 'NotFoundError' a
404 and anything else raised by the toolkit a 500. Malformed requests (missing
body, wrong field types, bad query parameters) are a 400, and unexpected
exceptions are logged and returned as a 500 in the same shape.

Routes:
    POST   /api/chat                  one chat turn (authenticated)
    GET    /api/conversations         the caller's conversations, most recent first
    GET    /api/conversations/{id}    one of the caller's conversations
    DELETE /api/conversations/{id}    delete one of the caller's conversations
    GET    /api/products              filtered, paginated product listing
    GET    /api/products/{id}         a single product
    GET    /api/health                liveness check and assistant description
"""

from collections.abc import Sequence

from fastapi import Depends, FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from storefront_toolkit.api.auth.base import AuthProvider
from storefront_toolkit.catalog.base import Product, ProductPage, ProductQuery
from storefront_toolkit.conversation_database.controller import (
    ChatResponse,
    MessageInput,
    ShoppingAssistantController,
)
from storefront_toolkit.conversation_database.data_models.conversation import Conversation
from storefront_toolkit.exceptions import NotFoundError, StorefrontError, ValidationError


def _status_for(exc: StorefrontError) -> int:
    if isinstance(exc, ValidationError):
        return 400
    if isinstance(exc, NotFoundError):
        return 404
    return 500


def create_app(
    controller: ShoppingAssistantController,
    auth_provider: AuthProvider,
    cors_origins: Sequence[str] = ("*",),
    title: str = "Storefront Assistant",
) -> FastAPI:
    app = FastAPI(title=title)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )
    auth_provider.bind_to_app(app)
    current_user = Depends(auth_provider.get_current_user_id)

    @app.exception_handler(StorefrontError)
    async def _storefront_error(request: Request, exc: StorefrontError) -> JSONResponse:
        status_code = _status_for(exc)
        if status_code == 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc}")
        return JSONResponse(status_code=status_code, content={"error": str(exc)})

    @app.exception_handler(StarletteHTTPException)
    async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content={"error": exc.detail}, headers=exc.headers)

    @app.exception_handler(RequestValidationError)
    async def _request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        details = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
        )
        return JSONResponse(status_code=400, content={"error": f"Invalid request: {details}"})

    @app.exception_handler(Exception)
    async def _unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(f"{request.method} {request.url.path} failed unexpectedly")
        return JSONResponse(status_code=500, content={"error": "Internal server error"})

    @app.get("/api/health")
    async def health() -> dict:
        return {
            "status": "ok",
            "assistant": controller.agent.description,
            "products": len(controller.catalog.all()),
        }

    @app.post("/api/chat", response_model=ChatResponse)
    async def chat(user_input: MessageInput, user_id: str = current_user) -> ChatResponse:
        return await controller.process_new_message(user_input, user_id)

    @app.get("/api/conversations", response_model=list[Conversation])
    async def list_conversations(user_id: str = current_user) -> list[Conversation]:
        return await controller.get_conversations_by_user_id(user_id)

    @app.get("/api/conversations/{conversation_id}", response_model=Conversation)
    async def get_conversation(conversation_id: str, user_id: str = current_user) -> Conversation:
        return await controller.get_conversation(user_id, conversation_id)

    @app.delete("/api/conversations/{conversation_id}")
    async def delete_conversation(conversation_id: str, user_id: str = current_user) -> dict:
        return {"success": await controller.delete_conversation(user_id, conversation_id)}

    @app.get("/api/products", response_model=ProductPage)
    async def list_products(
        category: str | None = None,
        search: str | None = None,
        min_price: float | None = Query(default=None, alias="minPrice", ge=0),
        max_price: float | None = Query(default=None, alias="maxPrice", ge=0),
        limit: int = Query(default=20, ge=0),
        offset: int = Query(default=0, ge=0),
    ) -> ProductPage:
        return controller.list_products(
            ProductQuery(
                category=category,
                search=search,
                min_price=min_price,
                max_price=max_price,
                limit=limit,
                offset=offset,
            )
        )

    @app.get("/api/products/{product_id}", response_model=Product)
    async def get_product(product_id: str) -> Product:
        return controller.get_product(product_id)

    return app
