"""Main entry point for the Kochbuch import service."""


def main() -> None:
    """Run the import service with uvicorn."""
    # Get port from environment or use default
    import os

    import uvicorn

    from kochbuch.config import config

    port = int(os.getenv("BIND_PORT", str(config.PORT)))
    host = os.getenv("BIND_HOST", "127.0.0.1")

    uvicorn.run(
        "kochbuch.main:app",
        host=host,
        port=port,
        reload=False,
    )


if __name__ == "__main__":
    main()
