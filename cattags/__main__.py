from os import environ

from uvicorn import run

from cattags.log import configure_logging


def main() -> None:
    configure_logging()
    run(
        "cattags.app:app",
        host=environ.get("HOST", "0.0.0.0"),
        port=int(environ.get("PORT", 8000)),
        workers=int(environ.get("WORKERS", 1)),
    )


if __name__ == "__main__":
    main()
