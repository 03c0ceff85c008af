# =======================================================================================
# checkin/__main__.py - `python -m checkin`
# =======================================================================================
import uvicorn

from .config import config


def main() -> None:
    uvicorn.run("checkin.main:app", host=config.API_HOST, port=config.API_PORT)


if __name__ == "__main__":
    main()
