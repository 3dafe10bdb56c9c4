import logging
from contextlib import asynccontextmanager
from pathlib import Path

import httpx
import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from paypal_checkout.api.endpoints import orders as orders_api
from paypal_checkout.api.endpoints import upsale as upsale_api
from paypal_checkout.core import config
from paypal_checkout.core.config import get_credentials
from paypal_checkout.schemas.auth import Credentials

logging.basicConfig(level=config.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s %(message)s")
logger = logging.getLogger(__name__)

FRONTEND_DIR = Path(__file__).resolve().parent.parent / "frontend"


@asynccontextmanager
async def lifespan(app: FastAPI):
    # One connection pool for all outbound PayPal calls
    config.log_startup_config()
    app.state.http_client = httpx.AsyncClient(timeout=config.PAYPAL_HTTP_TIMEOUT)
    yield
    await app.state.http_client.aclose()


app = FastAPI(title="PayPal Checkout Demo", version="0.1.0", lifespan=lifespan)

# Browser scripts and styles
app.mount("/static", StaticFiles(directory=FRONTEND_DIR / "static"), name="static")

templates = Jinja2Templates(directory=FRONTEND_DIR / "templates")

app.include_router(orders_api.router, prefix="/api/orders", tags=["Orders"])
app.include_router(upsale_api.router, prefix="/api/upsale", tags=["Upsale"])


@app.get("/ping", tags=["Health Check"])
async def ping():
    return {"message": "pong"}


@app.get("/", response_class=HTMLResponse, tags=["Frontend"])
async def route_checkout(request: Request, credentials: Credentials = Depends(get_credentials)):
    # The client id is public: the PayPal JS SDK needs it in the page
    return templates.TemplateResponse(request, "checkout.html", {"client_id": credentials.client_id})


@app.get("/upsale", response_class=HTMLResponse, tags=["Frontend"])
async def route_upsale(request: Request, credentials: Credentials = Depends(get_credentials)):
    return templates.TemplateResponse(request, "upsale.html", {"client_id": credentials.client_id})


def run():
    """Console entry point: serve the app on ``PORT`` (8888 by default)."""
    logger.info(f"Server listening at http://localhost:{config.PORT}/")
    uvicorn.run(app, host="0.0.0.0", port=config.PORT)


if __name__ == "__main__":
    run()
