"""Backend entrypoint for packaged app. Starts uvicorn with host and port from settings."""
from dtrack.main import run


if __name__ == "__main__":
    run()
