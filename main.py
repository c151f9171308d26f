from fastapi import FastAPI

from config import setup_logging
from db import init_db
from routes import discounts, transactions, upload


def create_app() -> FastAPI:
    app = FastAPI(title="Retail Discount Engine")

    @app.on_event("startup")
    def startup():
        setup_logging()
        init_db()

    @app.get("/health")
    def health():
        return {"status": "ok"}

    app.include_router(discounts.router)
    app.include_router(transactions.router)
    app.include_router(upload.router)
    return app


app = create_app()
