# main.py
"""
Run: python main.py
Serves the chat proxy (POST /api/chat) with uvicorn.
"""
import os

import uvicorn


if __name__ == "__main__":
    host = os.getenv("HOST", "127.0.0.1")
    port = int(os.getenv("PORT", "8000"))
    uvicorn.run("Proxy.main:app", host=host, port=port)
