import uvicorn
from dotenv import load_dotenv

load_dotenv()

from infrastructure.services import get_settings  # noqa: E402
from server import server  # noqa: E402

server_app = server.handler


def main():
    """Serve the API with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        server_app,
        host=settings.server.HOST,
        port=settings.server.PORT,
        log_config=None,
    )


if __name__ == "__main__":
    main()
