"""
Video Chat Backend: root package.

This package contains the FastAPI app entry point (main.py), API routes,
domain logic, and infrastructure (local media storage, Gemini gateway,
WebSocket broadcast channel, in-memory chat sessions).
"""
