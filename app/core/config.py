import os

# ✅ Database
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./jobtrack.db")
RUN_MIGRATIONS = os.getenv("RUN_MIGRATIONS", "0") == "1"

# ✅ Security
SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-change-me")
ALGORITHM = os.getenv("ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(60 * 24 * 7)))
SESSION_COOKIE_NAME = os.getenv("SESSION_COOKIE_NAME", "jobtrack_session")
COOKIE_SECURE = os.getenv("COOKIE_SECURE", "0") == "1"

# ✅ Auth rate limiting (per client IP)
AUTH_RATE_LIMIT = int(os.getenv("AUTH_RATE_LIMIT", "10"))
AUTH_RATE_WINDOW = int(os.getenv("AUTH_RATE_WINDOW", "60"))
# Only honour X-Forwarded-For when running behind a proxy that sets it
TRUST_PROXY_HEADERS = os.getenv("TRUST_PROXY_HEADERS", "0") == "1"

# ✅ OpenAI
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")
OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o")
OPENAI_TIMEOUT = float(os.getenv("OPENAI_TIMEOUT", "30"))
AI_FEEDBACK_FALLBACK = os.getenv("AI_FEEDBACK_FALLBACK", "1") == "1"

# ✅ HTTP
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:5173,http://127.0.0.1:5173").split(",")
    if origin.strip()
]
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
