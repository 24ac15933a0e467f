"""Launch the Streamlit UI and open the browser once the server is up."""

from __future__ import annotations

import threading
import time
import webbrowser
from pathlib import Path

import requests

PORT = 8501
URL = f"http://localhost:{PORT}"

APP_PATH = Path(__file__).resolve().parent / "app.py"


def _wait_and_open_browser(attempts: int = 30, delay: float = 1.0) -> bool:
    """Wait for the Streamlit server to become ready, then open the browser.

    Returns True if the browser was opened.
    """
    for _ in range(attempts):
        try:
            resp = requests.get(URL, timeout=2)
            if resp.status_code == 200:
                webbrowser.open(URL)
                return True
        except requests.RequestException:
            pass
        time.sleep(delay)
    return False


def main() -> None:
    from streamlit.web import bootstrap

    # Open browser in a background thread once the server is up
    threading.Thread(target=_wait_and_open_browser, daemon=True).start()

    bootstrap.run(
        str(APP_PATH),
        is_hello=False,
        args=[],
        flag_options={
            "global.developmentMode": False,
            "server.headless": True,
            "server.port": PORT,
            "browser.gatherUsageStats": False,
        },
    )


if __name__ == "__main__":
    main()
