import os

# --- Version / build metadata (override via env) ---
APP_VERSION = os.getenv("APP_VERSION", "1.0.0")
GIT_SHA = os.getenv("GIT_SHA", "unknown")
BUILD_DATE = os.getenv("BUILD_DATE", "unknown")

# --- Text generation (Gemini generateContent) ---
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY")
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")
GEMINI_BASE_URL = os.getenv("GEMINI_BASE_URL", "https://generativelanguage.googleapis.com")
GEMINI_TIMEOUT_S = float(os.getenv("GEMINI_TIMEOUT_S", "60"))

# --- Page fetch ---
FETCH_TIMEOUT_S = float(os.getenv("FETCH_TIMEOUT_S", "30"))
MAX_CONTENT_CHARS = int(os.getenv("MAX_CONTENT_CHARS", "30000"))

BROWSER_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
    ),
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.9",
}

# Optional shared secret; when unset any bearer credential is accepted
ACCESS_TOKEN = os.getenv("ACCESS_TOKEN")

CORS_ALLOW_HEADERS = ["authorization", "x-client-info", "apikey", "content-type"]
