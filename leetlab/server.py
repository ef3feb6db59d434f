# =============================================================================
# leetlab/server.py - Server Process Entry Point
# =============================================================================
# Starts uvicorn on the configured host and port.
#
# Usage:
#   leetlab-server
#   python -m leetlab
#   PORT=8080 leetlab-server
# =============================================================================

import uvicorn

from leetlab.config import get_settings


def run() -> None:
    """Start the HTTP listener."""
    settings = get_settings()

    uvicorn.run(
        "leetlab.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level="debug" if settings.DEBUG else "info",
    )


if __name__ == "__main__":
    run()
