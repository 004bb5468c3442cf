"""
Webhook module - FastAPI route handlers for chat platforms.

Includes:
- bot.py: Slash command handler (POST /webhook/{adapter_name})
"""

from webhook.bot import create_bot_router, router as bot_router

__all__ = ["bot_router", "create_bot_router"]
