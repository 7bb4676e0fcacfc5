# Core module exports
from core.config import settings, get_settings
from core.logging import (
    configure_logging,
    get_logger,
    bind_context,
    clear_context,
    engine_logger,
    sampler_logger,
    ingest_logger,
)
