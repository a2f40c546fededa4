from __future__ import annotations

# Standard library
import logging as _logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any, AsyncIterator, Final

# Third-party
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from strawberry.fastapi import GraphQLRouter

# Load .env before reading configuration
_ENV_PATH = Path(__file__).parent / ".env"
if _ENV_PATH.exists():
    load_dotenv(_ENV_PATH)

# Local application imports
from api.meal_plans import meal_plan_error_handler  # noqa: E402
from api.meal_plans import router as meal_plans_router  # noqa: E402
from domain.meal_plan.core.exceptions.domain_errors import MealPlanDomainError  # noqa: E402
from graphql_api.context import GraphQLContext, create_context  # noqa: E402
from graphql_api.schema import create_schema  # noqa: E402
from infrastructure.config import (  # noqa: E402
    get_app_version,
    get_log_level,
    get_port,
    get_repository_backend,
    is_development,
)
from infrastructure.persistence.factory import (  # noqa: E402
    get_meal_plan_repository,
    get_meal_plan_tag_repository,
    reset_repositories,
)

# --- Basic logging configuration (minimal) ---
_LOG_LEVEL = get_log_level()
_logging.basicConfig(
    level=getattr(_logging, _LOG_LEVEL, _logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)

# Versione letta da env (Docker build ARG -> ENV APP_VERSION)
APP_VERSION = get_app_version()

schema = create_schema()

# Explicit export per mypy/tests
__all__: list[str] = ["app"]


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    """Application lifecycle manager.

    Startup: creates the repositories selected by REPOSITORY_BACKEND.
    Shutdown: drops the singletons and closes the MongoDB client if one was
    created.
    """
    logger = _logging.getLogger("startup")

    logger.info("lifespan.startup", extra={"repository_backend": get_repository_backend()})

    repository = get_meal_plan_repository()
    tag_repository = get_meal_plan_tag_repository()

    logger.info(
        "lifespan.ready",
        extra={
            "status": "serving",
            "meal_plan_repository": type(repository).__name__,
            "tag_repository": type(tag_repository).__name__,
        },
    )
    yield

    logger.info("lifespan.shutdown", extra={"status": "cleanup"})
    reset_repositories()


app = FastAPI(
    title="Meal Plan View Service",
    version=APP_VERSION,
    lifespan=lifespan,
)
app.add_exception_handler(MealPlanDomainError, meal_plan_error_handler)  # type: ignore[arg-type]


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/version")
async def version() -> dict[str, str]:
    return {"version": APP_VERSION}


async def get_graphql_context(request: Request) -> GraphQLContext:
    """Create GraphQL context from the repository singletons."""
    return create_context(
        meal_plan_repository=get_meal_plan_repository(),
        meal_plan_tag_repository=get_meal_plan_tag_repository(),
        request=request,
    )


graphql_app: Final[GraphQLRouter[Any, Any]] = GraphQLRouter(
    schema, context_getter=get_graphql_context
)
app.include_router(graphql_app, prefix="/graphql")

# REST API: meal plan views
app.include_router(meal_plans_router)


# ============================================
# Run with uvicorn
# ============================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app:app",
        host="0.0.0.0",
        port=get_port(),
        reload=is_development(),
    )
