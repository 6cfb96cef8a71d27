"""
Main entry point for the FastAPI application.
Run this file to start the server.

Usage:
    python run_fastapi.py

Or with uvicorn directly:
    uvicorn rtchat.fastapi_app:app --host 0.0.0.0 --port 9293 --reload
"""

import os

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

import uvicorn

if __name__ == "__main__":
    env = os.getenv("APP_ENV", "development")
    debug = env == "development"
    port = int(os.getenv("PORT", 9293))
    host = os.getenv("HOST", "0.0.0.0")

    print(f"Starting FastAPI application in {env} mode...")
    print(f"Server running on http://{host}:{port}")
    print(f"Realtime channel at ws://{host}:{port}/cable")

    uvicorn.run(
        "rtchat.fastapi_app:app",
        host=host,
        port=port,
        reload=debug,
        log_level="info" if debug else "warning",
    )
