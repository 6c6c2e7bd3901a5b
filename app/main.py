from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
import logging
from pydantic import BaseModel, ConfigDict, Field
from starlette.exceptions import HTTPException as StarletteHTTPException

from agent.core.memory import ConversationStore
from agent.responder import Responder
from agent.tools import CatalogStore, FAQEntry, Product, ProductNotFound, load_catalog
from config.settings import get_settings


logging.basicConfig(level=logging.INFO, format="[%(asctime)s] %(levelname)s - %(message)s")
logger = logging.getLogger("sunnysips")

settings = get_settings()

app = FastAPI(title="Sunny Sips Support Chat", version="1.0.0")

# CORS: allow local frontend during development
if settings.app_env.lower() in {"dev", "development", "local"}:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

app.state.catalog = load_catalog(settings.catalog_path)
app.state.conversations = ConversationStore(limit=settings.history_limit)
app.state.responder = Responder()


def get_catalog(request: Request) -> CatalogStore:
    return request.app.state.catalog


def get_conversations(request: Request) -> ConversationStore:
    return request.app.state.conversations


def get_responder(request: Request) -> Responder:
    return request.app.state.responder


class ChatRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: Optional[str] = Field(None, description="User's latest message")
    session_id: Optional[str] = Field(
        None, alias="sessionId", description="Client-generated session identifier"
    )


class ClearRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    session_id: Optional[str] = Field(None, alias="sessionId")


router = APIRouter()


@router.post("/chat")
def chat(
    req: ChatRequest,
    conversations: ConversationStore = Depends(get_conversations),
    responder: Responder = Depends(get_responder),
) -> Dict[str, Any]:
    if not req.message:
        raise HTTPException(status_code=400, detail="Message is required")

    try:
        logger.info(
            "Incoming chat: session_id=%s message_len=%s",
            req.session_id,
            len(req.message),
        )
        reply = responder.respond(req.message)
        conversations.record(req.session_id or "", req.message, reply)
        return {"message": reply, "sessionId": req.session_id}
    except Exception as e:
        logger.exception("Chat processing failed: %s", e)
        raise HTTPException(status_code=500, detail="Failed to process message")


@router.post("/chat/clear")
def clear_chat(
    req: ClearRequest,
    conversations: ConversationStore = Depends(get_conversations),
) -> Dict[str, Any]:
    conversations.clear(req.session_id or "")
    logger.info("Cleared conversation: session_id=%s", req.session_id)
    return {"success": True}


@router.get("/products", response_model=List[Product])
def list_products(catalog: CatalogStore = Depends(get_catalog)):
    return catalog.all_products()


# Declared before /products/{product_id} so "search" is not read as an id.
@router.get("/products/search", response_model=List[Product])
def search_products(q: Optional[str] = None, catalog: CatalogStore = Depends(get_catalog)):
    return catalog.search(q)


@router.get("/products/{product_id}", response_model=Product)
def get_product(product_id: str, catalog: CatalogStore = Depends(get_catalog)):
    try:
        return catalog.product_by_id(product_id)
    except ProductNotFound:
        raise HTTPException(status_code=404, detail="Product not found")


@router.get("/faqs", response_model=List[FAQEntry])
def list_faqs(catalog: CatalogStore = Depends(get_catalog)):
    return catalog.all_faqs()


@router.get("/health")
def health():
    return {"status": "OK", "timestamp": datetime.now(timezone.utc).isoformat()}


# The browser client calls /api/...; the same routes are also served at the root.
app.include_router(router, prefix="/api")
app.include_router(router)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning("Invalid request to %s: %s", request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"error": "Invalid request body"})


@app.get("/{full_path:path}", include_in_schema=False)
def serve_ui(full_path: str):
    static_dir = Path(settings.static_dir).resolve()
    candidate = (static_dir / full_path).resolve()
    if full_path and candidate.is_file() and static_dir in candidate.parents:
        return FileResponse(candidate)

    index = static_dir / "index.html"
    if not index.is_file():
        raise HTTPException(status_code=404, detail="Chat UI not found")
    return FileResponse(index)


if __name__ == "__main__":
    import uvicorn

    logger.info("Server running on port %s", settings.port)
    uvicorn.run("app.main:app", host=settings.host, port=settings.port)
