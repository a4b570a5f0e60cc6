#!/usr/bin/env python3
"""Run the survey cache API server."""

import os

import uvicorn

from settings import LOG_LEVEL
from settings.logging import setup_logging

if __name__ == "__main__":
    setup_logging(level=LOG_LEVEL, to_file=True)
    uvicorn.run(
        "web.server:app",
        host=os.getenv("SURVEY_HOST", "127.0.0.1"),
        port=int(os.getenv("SURVEY_PORT", "8000")),
    )
