import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from tableside.api.routes import router
from tableside.core.exceptions import ConstraintViolationError
from tableside.db import create_db_and_tables

log = logging.getLogger(__name__)

# Create the FastAPI app
app = FastAPI(
    title="Tableside API",
    version="1.0.0",
    description="Restaurants, menus, tables, sessions and orders for QR table ordering.",
)


@app.exception_handler(ConstraintViolationError)
async def constraint_violation_handler(request: Request, exc: ConstraintViolationError):
    return JSONResponse(status_code=409, content={"detail": exc.detail, "table": exc.table})


@app.on_event("startup")
async def on_startup():
    log.info("Starting DB setup...")
    await create_db_and_tables()
    log.info("DB schema created.")


app.include_router(router)
