from app.web.server import create_app

__all__ = ["create_app"]
