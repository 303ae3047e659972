#!/usr/bin/env python3
"""
Run the Minimal API
"""

import uvicorn

if __name__ == "__main__":
    uvicorn.run(
        "minimal_api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info"
    )
