import uvicorn

from .app import create_app
from .config import LOG_LEVEL, load_settings


def main() -> None:
  settings = load_settings()
  app = create_app(settings)
  uvicorn.run(app, host=settings.host, port=settings.port, log_level=LOG_LEVEL.lower())


if __name__ == "__main__":
  main()
