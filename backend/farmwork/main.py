import logging

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from farmwork import __version__
from farmwork.api import applications, jobs, uploads, validation
from farmwork.config import settings
from farmwork.services.demo_data import seed_repositories
from farmwork.services.repository import ApplicationRepository, JobRepository

# Configure structured logging
structlog.configure(
    processors=[
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.JSONRenderer(),
    ],
    wrapper_class=structlog.make_filtering_bound_logger(
        logging.getLevelName(settings.log_level)
    ),
    context_class=dict,
    logger_factory=structlog.PrintLoggerFactory(),
    cache_logger_on_first_use=True,
)

logger = structlog.get_logger()

app = FastAPI(
    title=settings.app_name,
    description="Agricultural job marketplace: job search, postings, applications and form validation",
    version=__version__,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# In-memory repositories
if settings.seed_demo_data:
    app.state.jobs, app.state.applications = seed_repositories()
else:
    app.state.jobs = JobRepository()
    app.state.applications = ApplicationRepository(app.state.jobs)

# Include routers
app.include_router(jobs.router)
app.include_router(applications.router)
app.include_router(validation.router)
app.include_router(uploads.router)


@app.on_event("startup")
async def startup():
    logger.info("FarmWork backend starting up", jobs=len(app.state.jobs))


@app.on_event("shutdown")
async def shutdown():
    logger.info("FarmWork backend shutting down")


@app.get("/api/health")
async def health():
    return {"status": "ok", "version": __version__}
