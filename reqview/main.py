"""reqview - typed request views for Robyn handlers."""

from robyn import Robyn

from reqview.api.demo import router as demo_router
from reqview.api.health import router as health_router
from reqview.core.logger import LogIcon, logger
from reqview.core.settings import settings as st

app = Robyn(__file__)

# Routers
app.include_router(health_router)
app.include_router(demo_router)


def main() -> None:
    logger.info(
        "Starting service", icon=LogIcon.START, name=st.API_NAME, host=st.API_HOST, port=st.API_PORT
    )
    app.start(host=st.API_HOST, port=st.API_PORT)


if __name__ == "__main__":
    main()
