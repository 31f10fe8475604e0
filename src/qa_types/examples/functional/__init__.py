from .pages import LoginPage
from .reporting import report_session_status, session_status_script
from .scenario import run_login_check

__all__ = ["LoginPage", "report_session_status", "session_status_script", "run_login_check"]
