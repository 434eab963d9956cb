"""
Event RSVP Manager - FastAPI Backend
Main application entry point
"""

import os
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Depends
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
import uvicorn

from app.core.config import settings
from app.core.db import engine, Base, get_db
from app.core.errors import AppError, NotFoundError
from app.api import routes_auth, routes_confirm, routes_events, routes_public
from app.services.qr_service import QRService
from app.services.repositories import EventRepo
from app.utils.responses import error_response
from app.utils.security import get_authenticator, resolve_gate_redirect

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan management"""
    # Create database tables
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created")
    if not settings.ADMIN_PASSWORD:
        logger.warning("ADMIN_PASSWORD is not set; admin login will fail until it is configured")
    yield
    logger.info("Application shutdown")

# Create FastAPI application
app = FastAPI(
    title="Event RSVP Manager",
    description="Event attendance confirmations with a password-protected admin dashboard",
    version="1.0.0",
    lifespan=lifespan
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.middleware("http")
async def admin_gate(request: Request, call_next):
    """Divert admin page requests according to the session marker"""
    authenticated = get_authenticator().is_authenticated(request)
    target = resolve_gate_redirect(request.url.path, authenticated)
    if target is not None:
        return RedirectResponse(url=target, status_code=307)
    return await call_next(request)

# Error handlers
@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    return error_response(exc.message, status_code=exc.status_code)

@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    if any(error.get("type") == "json_invalid" for error in exc.errors()):
        message = "Malformed JSON in request body."
    else:
        message = "Invalid request body."
    return error_response(message, status_code=400)

@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.exception("Database error on %s %s", request.method, request.url.path)
    return error_response("Internal server error.", status_code=500)

@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.exception("Unexpected error on %s %s", request.method, request.url.path)
    return error_response("Internal server error.", status_code=500)

BASE_DIR = os.path.dirname(os.path.abspath(__file__))

# Mount static files
static_dir = os.path.join(BASE_DIR, "static")
os.makedirs(static_dir, exist_ok=True)
app.mount("/static", StaticFiles(directory=static_dir), name="static")

# Setup templates
templates = Jinja2Templates(directory=os.path.join(BASE_DIR, "templates"))

# Include routers
app.include_router(routes_public.router, tags=["public"])
app.include_router(routes_confirm.router, prefix="/api/confirm", tags=["confirmations"])
app.include_router(routes_events.router, prefix="/api/events", tags=["events"])
app.include_router(routes_auth.router, prefix="/api/admin", tags=["auth"])

@app.get("/", response_class=HTMLResponse)
async def root(request: Request):
    """Landing page"""
    return templates.TemplateResponse(request, "index.html", {
        "title": "Event RSVP"
    })

@app.get("/confirm/{event_id}", response_class=HTMLResponse)
async def confirm_page(request: Request, event_id: str, db: Session = Depends(get_db)):
    """Public confirmation form for one event"""
    try:
        event = EventRepo.get(db, event_id)
    except NotFoundError as exc:
        return templates.TemplateResponse(request, "confirm.html", {
            "title": "Invalid link",
            "event": None,
            "error": exc.message
        }, status_code=404)

    return templates.TemplateResponse(request, "confirm.html", {
        "title": f"Confirm attendance - {event.name}",
        "event": event,
        "error": None
    })

@app.get("/admin/login", response_class=HTMLResponse)
async def admin_login_page(request: Request, error: str = ""):
    """Admin password form"""
    message = None
    if error == "invalid":
        message = "Incorrect password."
    elif error:
        message = "Login error."

    return templates.TemplateResponse(request, "admin_login.html", {
        "title": "Admin Login",
        "error": message
    })

@app.get("/admin/attendance", response_class=HTMLResponse)
async def admin_attendance_page(request: Request):
    """Admin dashboard: events, confirmations and guest totals"""
    return templates.TemplateResponse(request, "admin_attendance.html", {
        "title": "Attendance",
        "confirm_base_url": QRService.get_confirmation_url("")
    })

# Note: Run this ASGI app directly with Uvicorn or Hypercorn. For Gunicorn,
# use `uvicorn.workers.UvicornWorker` instead of wrapping the app.

if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host="127.0.0.1",
        port=8000,
        reload=True
    )
