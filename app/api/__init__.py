from app.api.router import router

__all__ = ["router"]
