from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.core.config import settings
from app.core.logging_config import setup_logging
from app.database import Base, engine
from app.routes import auth, deposits, notifications
from app.models import user, deposit, notification  # noqa: F401 - register tables
from app.database_init import ensure_database

setup_logging()

# --- ensure database exists ---
ensure_database()

app = FastAPI(title="Deposit API")

# --- CORS ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- Create tables ---
Base.metadata.create_all(bind=engine)

# --- Include routes ---
app.include_router(auth.router)
app.include_router(deposits.router)
app.include_router(notifications.router)

# --- Root route ---
@app.get("/")
def root():
    return {"message": "Deposit API is running"}
