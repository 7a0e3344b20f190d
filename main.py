from fastapi import FastAPI, Depends, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.orm import Session
from sqlalchemy import text
from app.database import get_db
from app.core.config import settings
from app.routers import admin, user, team, team_import, pitch, fixture, email_template, user_mapping
from app.core.logging_config import logger

# Schema is managed by Alembic migrations
app = FastAPI(
    title="Touchline Club Admin API",
    version="1.0.0",
    redirect_slashes=False  # Disable automatic redirects to prevent POST data loss
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(admin.router, prefix="/api/admin", tags=["Admin"])
app.include_router(user.router, prefix="/api/users", tags=["Users"])
app.include_router(team.router, prefix="/api/teams", tags=["Teams"])
app.include_router(team_import.router, prefix="/api/team-imports", tags=["Team Import"])
app.include_router(pitch.router, prefix="/api/pitches", tags=["Pitches"])
app.include_router(fixture.router, prefix="/api/fixtures", tags=["Fixtures"])
app.include_router(email_template.router, prefix="/api/email-templates", tags=["Email Templates"])
app.include_router(user_mapping.router, prefix="/api/user-mappings", tags=["User Mappings"])


@app.get("/health")
async def health_check(db: Session = Depends(get_db)):
    try:
        db.execute(text("SELECT 1"))
        return {
            "status": "healthy",
            "database": "connected"
        }
    except Exception as e:
        logger.error(f"Health check failed: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Service unhealthy"
        )
