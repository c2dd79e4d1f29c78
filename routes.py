# routes.py
from fastapi import FastAPI
from controller.link_controller import link_router
from controller.meta_controller import meta_router


def register_routes(app: FastAPI) -> None:
    """Fixed pages first; the link router ends in a catch-all path."""
    app.include_router(meta_router)
    app.include_router(link_router)
