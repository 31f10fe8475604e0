"""
Page object for the login form.
"""

import logging

from selenium.common.exceptions import TimeoutException
from selenium.webdriver.common.by import By
from selenium.webdriver.support import expected_conditions as EC
from selenium.webdriver.support.ui import WebDriverWait

from qa_types.exceptions.base import BrowserError

logger = logging.getLogger(__name__)


class LoginPage:
    """
    Locators and actions for /login. Tests talk to the page through these methods, so a markup
    change means updating the locators here only.
    """

    PATH = "/login"

    USERNAME = (By.ID, "username")
    PASSWORD = (By.ID, "password")
    SUBMIT = (By.CSS_SELECTOR, "button[type='submit']")
    FLASH = (By.ID, "flash")

    def __init__(self, driver, base_url: str, timeout: float = 10.0):
        self.driver = driver
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    @property
    def url(self) -> str:
        return f"{self.base_url}{self.PATH}"

    def open(self) -> "LoginPage":
        logger.debug("page.open", extra={"url": self.url})
        self.driver.get(self.url)
        return self

    def login(self, username: str, password: str) -> "LoginPage":
        """Type the credentials into the form and submit it."""
        username_input = self.driver.find_element(*self.USERNAME)
        username_input.clear()
        username_input.send_keys(username)

        password_input = self.driver.find_element(*self.PASSWORD)
        password_input.clear()
        password_input.send_keys(password)

        self.driver.find_element(*self.SUBMIT).click()
        return self

    def flash_message(self) -> str:
        """
        Wait for the #flash banner and return its text.

        Raises:
            BrowserError: if the banner is not visible within `timeout` seconds.
        """
        try:
            element = WebDriverWait(self.driver, self.timeout).until(
                EC.visibility_of_element_located(self.FLASH)
            )
        except TimeoutException as exc:
            raise BrowserError(f"No flash message on {self.url} after {self.timeout:.0f}s") from exc
        return element.text.strip()
