import uvicorn

from .settings import load_settings, setup_logging


def main():
    settings = load_settings()
    setup_logging(settings.log_level)
    uvicorn.run("inventory_api.main:app", host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
