#!/usr/bin/env python3
import os
import uvicorn
from report_engine.app import create_app

app = create_app()


if __name__ == "__main__":
    is_dev_mode = os.getenv("REPORT_ENGINE_DEV_MODE", "false").lower() == "true"
    host = os.getenv("REPORT_ENGINE_HOST", "0.0.0.0")
    port = int(os.getenv("REPORT_ENGINE_PORT", "8000"))

    print(f"Starting report engine on {host}:{port}")
    print(f"Development mode: {is_dev_mode}")

    uvicorn.run("main:app", host=host, port=port, reload=is_dev_mode)
