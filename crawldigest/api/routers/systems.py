from fastapi import APIRouter

from crawldigest.version import __version__

_SECRET_KEYS = ("LLM_API_KEY",)


def create_systems_router(container_env: dict):
    """Create systems router with access to container environment config."""
    router = APIRouter(prefix="/api", tags=["System"])

    @router.get("/healthcheck")
    def healthcheck():
        return {"status": "ok", "version": __version__}

    @router.get("/config")
    def get_config():
        """Return current environment configuration values (secrets masked)."""
        environment = {}
        for key, value in container_env.items():
            if value is None:
                environment[key] = None
            elif key in _SECRET_KEYS:
                environment[key] = "***"
            else:
                environment[key] = str(value)
        return {"environment": environment}

    return router
