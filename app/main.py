from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
from app.core.config import settings
from app.core.errors import ShopError
from app.database import engine, Base, SessionLocal
from app.models import *
from app.utils.logger import setup_logger

from app.routers import auth, sweets, users

logger = setup_logger()

app = FastAPI(title=settings.app_name)

# CORS configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth.router, prefix="/auth", tags=["Auth"])
app.include_router(sweets.router)
app.include_router(users.router)


# Error envelope: every failure leaves as {"error": ..., "code": ...}

@app.exception_handler(ShopError)
def shop_error_handler(request: Request, exc: ShopError):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message, "code": exc.code},
    )


@app.exception_handler(RequestValidationError)
def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{location}: {first.get('msg')}" if location else first.get("msg")
    else:
        message = "Invalid request"
    return JSONResponse(
        status_code=400,
        content={"error": message, "code": "VALIDATION_ERROR"},
    )


@app.exception_handler(StarletteHTTPException)
def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(Exception)
def unexpected_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


@app.on_event("startup")
def create_tables():
    logger.info("Creating database tables if not exist...")
    Base.metadata.create_all(bind=engine)

    if settings.seed_on_startup:
        from app.seed.seed_sweetshop import seed_sweets, seed_users
        db = SessionLocal()
        try:
            users_added = seed_users(db)
            sweets_added = seed_sweets(db)
            logger.info("Seeded %s users and %s sweets", users_added, sweets_added)
        except Exception:
            db.rollback()
            logger.exception("Could not seed demo data")
        finally:
            db.close()

    logger.info("Database ready.")


STATUS_PAGE = """<!doctype html>
<html lang="en">
<head><meta charset="utf-8"><title>{name}</title></head>
<body style="font-family: sans-serif; margin: 3em; color: #7a3e00;">
  <h1>{name}</h1>
  <p>Catalog API is up ({environment}).</p>
  <ul>
    <li><a href="/sweets">Browse sweets</a></li>
    <li><a href="/docs">Interactive API docs</a></li>
  </ul>
</body>
</html>
"""


@app.get("/", response_class=HTMLResponse)
def root():
    return STATUS_PAGE.format(name=settings.app_name, environment=settings.environment)
