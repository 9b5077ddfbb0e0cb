import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sales_engine.api.error import ClientError, client_error_handler
from sales_engine.api.routes import sales_documents


def create_app(config) -> FastAPI:
    logging.basicConfig(
        level=getattr(logging, str(config.LOG_LEVEL).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(title="Sales Document Engine")

    if config.CORS_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=config.CORS_ORIGINS,
            allow_credentials=config.CORS_ALLOW_CREDENTIALS,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.add_exception_handler(ClientError, client_error_handler)
    app.include_router(sales_documents.router)
    app.include_router(sales_documents.totals_router)

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app
