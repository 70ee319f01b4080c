from __future__ import annotations
from dotenv import load_dotenv
from app.presentation.http.server import create_app
from app.shared.setup_logger import LOGGER

if __name__ == "__main__":
    load_dotenv()
    app = create_app()
    s = app.container.settings
    LOGGER.get_logger().info(
        "[app] starting host=%s port=%s completion_mode=%s model=%s",
        s.app_host, s.app_port, app.container.completion_mode, s.completion_model,
    )
    app.run(host=s.app_host, port=s.app_port, debug=s.app_debug)
