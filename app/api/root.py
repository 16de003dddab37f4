from fastapi import APIRouter, Request

router = APIRouter()

@router.get("/")
def root(request: Request):
    return {
        "name": request.app.state.settings.APP_NAME,
        "status": "ok",
        "docs": "/docs",
        "health": "/api/health",
        "api": "/api",
    }
