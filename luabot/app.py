from typing import Optional

from fastapi import FastAPI

from .api.classify import router as classify_router
from .api.health import router as health_router
from .api.messages import router as messages_router
from .app_state import build_app_state
from .config import Settings, load_settings, logger
from .transport import ChatClient


def create_app(settings: Optional[Settings] = None, chat_client: Optional[ChatClient] = None) -> FastAPI:
  settings = settings or load_settings()

  app = FastAPI(title="Lua Fence Bot")
  app.state.context = build_app_state(settings, chat_client)

  app.include_router(messages_router)
  app.include_router(classify_router)
  app.include_router(health_router)

  @app.on_event("startup")
  async def _ready() -> None:
    user = await app.state.context.chat_client.fetch_current_user()
    if user is None:
      logger.warning("Could not fetch bot user; is the token valid?")
      return
    logger.info("%s is connected!", user.get("username") or user.get("id") or "bot")

  @app.on_event("shutdown")
  async def _shutdown() -> None:
    await app.state.context.chat_client.aclose()

  return app
