import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from sui_agent.api.routes import router
from sui_agent.config import SuiConfig
from sui_agent.core.client import SuiClient
from sui_agent.core.wallet import Wallet, WalletError
from sui_agent.tools.toolkit import SuiToolkit

logger = logging.getLogger("sui_agent.api")


def create_app(toolkit: SuiToolkit | None = None) -> FastAPI:
    """
    Build the API app.

    With no toolkit, one is created at startup from SUI_* environment
    variables; a ConfigError aborts startup.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if toolkit is not None:
            app.state.toolkit = toolkit
            yield
            return

        # Load configuration
        config = SuiConfig.from_env()
        client = SuiClient(config.rpc_url, timeout=config.timeout)
        wallet = Wallet.read_only(config.wallet_address)
        logger.info(f"Serving wallet {wallet.address[:10]}... on {config.network} ({config.rpc_url})")

        # Attach to app state
        app.state.toolkit = SuiToolkit(client, wallet, config)

        yield
        await client.aclose()

    app = FastAPI(
        title="Sui Agent SDK - Wallet API",
        description="REST API wrapping the Sui wallet history and summary tools",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Allow CORS for easy frontend integration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register routes
    app.include_router(router)

    @app.exception_handler(WalletError)
    async def wallet_error_handler(request: Request, exc: WalletError):
        return JSONResponse(
            status_code=400,
            content={"detail": str(exc)},
        )

    @app.get("/health")
    async def health_check():
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app


# uvicorn sui_agent.api.server:app
app = create_app()
