"""
User Service
Main application entry point
"""
from app.server import run

if __name__ == "__main__":
    run()
