#!/usr/bin/env python3
"""
Run the FastAPI backend server.

Usage:
    python run_api.py
"""

import uvicorn

from config.settings import API_HOST, API_PORT

if __name__ == "__main__":
    print("🚀 Starting Elevation Splits API server...")
    print(f"📡 API will be available at: http://localhost:{API_PORT}")
    print(f"📚 Documentation at: http://localhost:{API_PORT}/docs")
    print("🛑 Press CTRL+C to stop\n")

    try:
        # When using reload=True, we need to pass the app as a string import path
        # instead of the actual app object
        uvicorn.run(
            "api.main:app",
            host=API_HOST,
            port=API_PORT,
            reload=True  # Enable auto-reload during development
        )
    except Exception as e:
        print(f"❌ Error starting server: {e}")
        import traceback
        traceback.print_exc()
