# Proxy/config.py
# Minimal env-driven config, shared by the proxy and the Streamlit UI.
import os
from dotenv import load_dotenv

# Load .env before reading anything so local overrides apply
load_dotenv()

class Settings:
    # base URL of the leave backend; the proxy posts to <base>/chat
    LEAVE_API_BASE: str = os.getenv("LEAVE_API_BASE", "http://127.0.0.1:8001")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    # where the UI reaches the proxy (the browser would use the relative /api/chat)
    CHAT_PROXY_URL: str = os.getenv("CHAT_PROXY_URL", "http://127.0.0.1:8000/api/chat")

# module-level settings object (imported elsewhere as `from .config import settings`)
settings = Settings()
