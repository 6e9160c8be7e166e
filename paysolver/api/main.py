"""FastAPI application for the payment solver."""

import os

import uvicorn
from fastapi import FastAPI

from paysolver import __version__
from paysolver.api.endpoints import router

# Bind address and reload switch for `run`
HOST = os.environ.get("PAYSOLVER_HOST", "0.0.0.0")
PORT = int(os.environ.get("PAYSOLVER_PORT", "8000"))
RELOAD = os.environ.get("PAYSOLVER_DEBUG", "").strip().lower() in {"1", "true", "yes", "on"}

app = FastAPI(
    title="Payment Solver",
    description="Assigns discount cards and loyalty points to orders at minimum total cost",
    version=__version__,
)

app.include_router(router)


@app.get("/health")
async def health() -> dict[str, object]:
    """Liveness check; does not touch the solver."""
    return {"status": "ok"}


def run() -> None:
    """Serve the app with uvicorn.

    PAYSOLVER_HOST and PAYSOLVER_PORT choose the listening socket (0.0.0.0:8000 when
    unset). A truthy PAYSOLVER_DEBUG turns on auto-reload. PAYSOLVER_POINTS_METHOD is
    read by the endpoints module and names the wallet treated as loyalty points.
    """
    uvicorn.run(
        "paysolver.api.main:app",
        host=HOST,
        port=PORT,
        reload=RELOAD,
    )


if __name__ == "__main__":
    run()
