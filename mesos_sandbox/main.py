#!/usr/bin/env python3
"""
Mesos Sandbox - Main Entry Point

This is the thin orchestration layer that:
1. Loads configuration
2. Initializes modules
3. Serves the sandbox lookup API

All business logic is in the modules, following black box principles.
"""

import logging
from contextlib import asynccontextmanager
from typing import List, Optional

import redis.asyncio as redis
import uvicorn
from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import JSONResponse

from mesos_sandbox import __version__
from mesos_sandbox.config.provider import ConfigProvider, EnvConfigProvider
from mesos_sandbox.exceptions import MalformedStateError, PreconditionError
from mesos_sandbox.logging_config import configure_logging, get_logging_config

# Import modules through their black box interfaces
from mesos_sandbox.modules.api import (
    ExecutorResponse,
    HostnameResponse,
    SandboxResponse,
    TaskSandboxResponse,
)
from mesos_sandbox.modules.endpoint import ClusterStateFetcher
from mesos_sandbox.modules.framework import RedisFrameworkIDStore
from mesos_sandbox.modules.state import MesosStateService
from mesos_sandbox.modules.storage import StorageModule

# Configuration provider (centralized config access)
config_provider: ConfigProvider = EnvConfigProvider()
api_config = config_provider.get_api_config()

configure_logging(api_config.log_level)
logger = logging.getLogger(__name__)

# Module instances (initialized at startup)
storage_module: Optional[StorageModule] = None
redis_client: Optional[redis.Redis] = None
state_service: Optional[MesosStateService] = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifecycle - initialize and cleanup resources.
    """
    global storage_module, redis_client, state_service

    logger.info("Starting Mesos Sandbox API...")

    mesos_config = config_provider.get_mesos_config()
    storage_config = config_provider.get_storage_config()

    storage_module = StorageModule(storage_config.redis_url)
    redis_client = await storage_module.connect()

    fetcher = ClusterStateFetcher(mesos_config.master_url, timeout=mesos_config.request_timeout)
    framework_ids = RedisFrameworkIDStore(redis_client, key=storage_config.framework_id_key)
    state_service = MesosStateService(fetcher, framework_ids)
    logger.info(f"State service initialized against master {mesos_config.master_url}")

    yield

    logger.info("Shutting down Mesos Sandbox API...")
    await storage_module.disconnect()
    redis_client = None
    state_service = None
    logger.info("Mesos Sandbox API shutdown complete")


app = FastAPI(
    title="Mesos Sandbox API",
    description="Locate executor sandboxes in a Mesos cluster",
    version=__version__,
    lifespan=lifespan,
)


def get_state_service() -> MesosStateService:
    """Return the state service or fail with 503 before startup completes."""
    if not state_service:
        raise HTTPException(503, "Service not initialized")
    return state_service


# Sandbox Endpoints


@app.get("/api/v1/sandbox/{app_name}", response_model=List[SandboxResponse])
async def get_sandbox(app_name: str):
    """
    List the sandboxes of every executor of an application.

    Returns:
        200: Sandboxes (empty if the master is unavailable)
        502: Cluster state is malformed
    """
    sandboxes = await get_state_service().sandbox(app_name)
    return [SandboxResponse.from_info(each) for each in sandboxes]


@app.get(
    "/api/v1/sandbox/{app_name}/executors/{executor_id}",
    response_model=TaskSandboxResponse,
)
async def get_task_sandbox(app_name: str, executor_id: str):
    """
    Get the master UI browse link of one executor sandbox.

    Returns:
        200: Browse link (empty string if not available yet)
        502: Cluster state is malformed
    """
    sandbox = await get_state_service().task_sandbox(app_name, executor_id)
    return TaskSandboxResponse(sandbox=sandbox)


@app.get("/api/v1/nodes/{node_id}/hostname", response_model=HostnameResponse)
async def get_node_hostname(node_id: str):
    """Get the hostname of an agent (null if unknown)."""
    hostname = await get_state_service().hostname_for_node(node_id)
    return HostnameResponse(node_id=node_id, hostname=hostname)


@app.get("/api/v1/executors", response_model=List[ExecutorResponse])
async def list_executors(
    app_name: Optional[str] = Query(None, description="Only executors of this application"),
):
    """List our executors as registered with the master."""
    executors = await get_state_service().executors(app_name)
    return [
        ExecutorResponse.from_info(each)
        for each in sorted(executors, key=lambda info: (info.id, info.slave_id))
    ]


# Health/Monitoring Endpoints


@app.get("/health")
async def health_check():
    """
    Health check endpoint.

    Returns:
        200: Service healthy
        503: Service unhealthy
    """
    try:
        if redis_client:
            await redis_client.ping()
            redis_status = "connected"
        else:
            redis_status = "disconnected"

        if redis_status == "connected" and state_service:
            return {"status": "healthy", "redis": redis_status, "version": __version__}
        return JSONResponse(
            status_code=503,
            content={"status": "unhealthy", "redis": redis_status, "version": __version__},
        )
    except redis.RedisError as e:
        logger.error(f"Health check failed: {e}")
        return JSONResponse(status_code=503, content={"status": "unhealthy", "error": str(e)})


# Error handlers


@app.exception_handler(MalformedStateError)
async def malformed_state_handler(request, exc):
    """Handle cluster state the service cannot interpret."""
    logger.error(f"Malformed cluster state: {exc}")
    return JSONResponse(status_code=502, content={"error": str(exc)})


@app.exception_handler(PreconditionError)
async def precondition_error_handler(request, exc):
    """Handle missing required arguments."""
    logger.error(f"Precondition failed: {exc}")
    return JSONResponse(status_code=400, content={"error": str(exc)})


@app.exception_handler(redis.ConnectionError)
async def redis_error_handler(request, exc):
    """Handle Redis connection errors."""
    logger.error(f"Redis connection error: {exc}")
    return JSONResponse(status_code=503, content={"error": "Registry connection failed"})


def run() -> None:
    """Console entry point."""
    uvicorn.run(
        "mesos_sandbox.main:app",
        host=api_config.host,
        port=api_config.port,
        log_level=api_config.log_level.lower(),
        reload=api_config.debug,
        log_config=get_logging_config(api_config.log_level),
    )


if __name__ == "__main__":
    run()
