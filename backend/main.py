# backend/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse
from dotenv import load_dotenv

load_dotenv()

from config import settings
from database import init_db
from utils.access import LoginRequired
from utils.auth_service import AuthServiceClient, AuthServiceError, get_auth_service

# Routers
from routes.auth import router as auth_router
from routes.dashboard import router as dashboard_router
from routes.products import router as products_router
from routes.sales import router as sales_router
from routes.analytics import router as analytics_router
from routes.users import router as users_router
from routes.stock import router as stock_router

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

# Schema, triggers and default settings
init_db()


def ensure_default_admin(auth_service: AuthServiceClient):
    """Ask the auth service to create the default admin if it is missing.

    Runs on every start, whether or not anyone is logged in.
    """
    try:
        result = auth_service.create_default_admin()
    except AuthServiceError:
        logger.error("Default admin setup failed: auth service unreachable")
        return
    if result.get("success"):
        logger.info(f"Default admin setup completed: {result.get('message')}")
    else:
        logger.error(f"Default admin setup failed: {result.get('error')}")


@asynccontextmanager
async def lifespan(app: FastAPI):
    auth_service = get_auth_service()
    ensure_default_admin(auth_service)
    yield
    auth_service.close()


app = FastAPI(title="Gents by Elegante API", version="1.0.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Visitors without a session are sent to the login page
@app.exception_handler(LoginRequired)
def login_required_handler(request: Request, exc: LoginRequired):
    return RedirectResponse(url="/login", status_code=303)


# Router registration
app.include_router(auth_router)
app.include_router(dashboard_router)
app.include_router(products_router)
app.include_router(sales_router)
app.include_router(analytics_router)
app.include_router(users_router)

# Stock entries live under /stock
app.include_router(stock_router, prefix="/stock")
