from fastapi import FastAPI

from .templates import router as templates_router


def register_routes(app: FastAPI) -> None:
    """Registra todos los routers de la API en la aplicación FastAPI."""

    app.include_router(templates_router)
