from .server import create_app, ServerState, run

__all__ = ["create_app", "ServerState", "run"]
