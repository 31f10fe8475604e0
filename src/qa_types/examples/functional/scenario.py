"""
The functional check: log in through the browser and read the outcome.
"""

import logging

from .pages import LoginPage

logger = logging.getLogger(__name__)


def run_login_check(driver, base_url: str, username: str, password: str, *, timeout: float = 10.0) -> str:
    """
    Open the login page, submit the credentials and return the flash message text.

    The caller asserts on the returned text; see SUCCESS_MESSAGE in login_app.
    """
    page = LoginPage(driver, base_url, timeout=timeout).open()
    message = page.login(username, password).flash_message()
    logger.info("functional.login_check", extra={"url": page.url, "flash": message})
    return message
