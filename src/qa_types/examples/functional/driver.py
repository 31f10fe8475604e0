"""
WebDriver factory for the functional example.

Selenium 4 resolves the local driver binary (chromedriver / geckodriver) itself through Selenium
Manager, so only the browser has to be installed. With REMOTE_WEBDRIVER_URL set, the session is
created on a Selenium Grid (or a cloud grid) instead.
"""

import logging

from selenium import webdriver
from selenium.common.exceptions import WebDriverException

from qa_types.config.settings import Settings
from qa_types.exceptions.base import BrowserError

logger = logging.getLogger(__name__)


def build_options(settings: Settings):
    """Browser options for settings.BROWSER, headless when settings.HEADLESS."""
    if settings.BROWSER == "firefox":
        options = webdriver.FirefoxOptions()
        if settings.HEADLESS:
            options.add_argument("-headless")
        return options

    options = webdriver.ChromeOptions()
    if settings.HEADLESS:
        options.add_argument("--headless=new")
    options.add_argument("--no-sandbox")
    options.add_argument("--disable-dev-shm-usage")
    options.add_argument("--window-size=1280,900")
    return options


def build_driver(settings: Settings):
    """
    Start a WebDriver session.

    Raises:
        BrowserError: if the browser or the remote grid cannot be reached.
    """
    options = build_options(settings)
    logger.info(
        "browser.start",
        extra={"browser": settings.BROWSER, "headless": settings.HEADLESS, "remote": bool(settings.REMOTE_WEBDRIVER_URL)},
    )
    try:
        if settings.REMOTE_WEBDRIVER_URL:
            driver = webdriver.Remote(command_executor=settings.REMOTE_WEBDRIVER_URL, options=options)
        elif settings.BROWSER == "firefox":
            driver = webdriver.Firefox(options=options)
        else:
            driver = webdriver.Chrome(options=options)
    except WebDriverException as exc:
        logger.error("browser.start_failed", extra={"browser": settings.BROWSER, "error": exc.msg})
        raise BrowserError(f"Could not start {settings.BROWSER}: {exc.msg}") from exc

    driver.implicitly_wait(0)
    driver.set_page_load_timeout(settings.BROWSER_TIMEOUT * 3)
    return driver
