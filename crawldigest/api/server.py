from fastapi import FastAPI

from crawldigest.api.routers import create_crawl_router, create_systems_router
from crawldigest.container import Container
from crawldigest.version import __version__


def create_app(container: Container = None, debug: bool = False) -> FastAPI:
    """Build the FastAPI application from a (possibly injected) container."""
    container = container or Container()
    container_env = container.config()
    app = FastAPI(title="crawldigest", version=__version__, description="Crawl a website and digest its content with AI")
    app.state.container = container
    app.include_router(create_systems_router(container_env))
    app.include_router(
        create_crawl_router(
            container.crawl_executor,
            container.synthesis_pipeline,
            container_env,
            debug=debug,
        )
    )
    return app
