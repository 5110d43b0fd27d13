from .routes import register_routes
