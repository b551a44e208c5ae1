"""Flask front end for playing tic-tac-toe against the computer in a browser."""

from .app import create_app

__all__ = ["create_app"]
