"""
Login demo application: the system under test for the functional example.

Routes:
  GET  /login              login form (#username, #password, button[type=submit])
  POST /login              checks the credentials, renders #flash with the outcome
  GET  /health             {"status": "ok"}
  GET  /api/users/{id}     user name via UserService + SqlUserDirectory (404 when missing)

Run it locally for the browser test:
    uvicorn qa_types.examples.functional.login_app:app
"""

import html
import logging
import secrets
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Form, Request
from fastapi.responses import HTMLResponse
from sqlalchemy.ext.asyncio import AsyncSession

from qa_types.api.error_handlers import register_exception_handlers
from qa_types.config.settings import Settings, get_settings
from qa_types.core.logging import RequestIDMiddleware
from qa_types.database.session import build_engine, build_sessionmaker, create_schema
from qa_types.exceptions.base import AuthenticationError
from qa_types.examples.integration import SqlUserDirectory, UserRepository, UserService, seed_default_users

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "You logged into a secure area!"
INVALID_USERNAME_MESSAGE = "Your username is invalid!"
INVALID_PASSWORD_MESSAGE = "Your password is invalid!"

_PAGE = """<!DOCTYPE html>
<html lang="en">
<head><meta charset="utf-8"><title>Login Page</title></head>
<body>
  <h2>Login Page</h2>
  {flash}
  <form id="login" method="post" action="/login">
    <label for="username">Username</label>
    <input type="text" id="username" name="username" value="{username}">
    <label for="password">Password</label>
    <input type="password" id="password" name="password">
    <button type="submit" class="radius">Login</button>
  </form>
</body>
</html>
"""


def render_login_page(message: str | None = None, *, success: bool = False, username: str = "") -> str:
    flash = ""
    if message:
        css = "flash success" if success else "flash error"
        flash = f'<div id="flash" class="{css}">{html.escape(message)}</div>'
    return _PAGE.format(flash=flash, username=html.escape(username, quote=True))


def check_credentials(settings: Settings, username: str, password: str) -> None:
    """
    Raises:
        AuthenticationError: with the message the page shows for the failing field.
    """
    # compare_digest on both fields so timing does not reveal which one matched
    user_ok = secrets.compare_digest(username.encode(), settings.LOGIN_USERNAME.encode())
    password_ok = secrets.compare_digest(password.encode(), settings.LOGIN_PASSWORD.get_secret_value().encode())
    if not user_ok:
        raise AuthenticationError(INVALID_USERNAME_MESSAGE, fields=["username"])
    if not password_ok:
        raise AuthenticationError(INVALID_PASSWORD_MESSAGE, fields=["password"])


async def get_session(request: Request):
    async with request.app.state.sessionmaker() as session:
        yield session


async def get_user_service(session: AsyncSession = Depends(get_session)) -> UserService:
    return UserService(SqlUserDirectory(UserRepository(session)))


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        engine = build_engine(settings)
        app.state.sessionmaker = build_sessionmaker(engine)
        await create_schema(engine)
        if settings.SEED_DEMO_DATA:
            async with app.state.sessionmaker() as session:
                await seed_default_users(session)
        logger.info("login_app.started", extra={"env": settings.ENV})
        try:
            yield
        finally:
            await engine.dispose()

    app = FastAPI(title="QA login demo", lifespan=lifespan)
    app.state.settings = settings
    app.add_middleware(RequestIDMiddleware)
    register_exception_handlers(app)

    @app.get("/login", response_class=HTMLResponse)
    async def login_form() -> HTMLResponse:
        return HTMLResponse(render_login_page())

    @app.post("/login", response_class=HTMLResponse)
    async def login(username: str = Form(default=""), password: str = Form(default="")) -> HTMLResponse:
        try:
            check_credentials(settings, username, password)
        except AuthenticationError as exc:
            # never log the submitted password, not even masked
            logger.info("login.failed", extra={"fields": exc.fields})
            return HTMLResponse(render_login_page(exc.message, username=username), status_code=exc.http_status())

        logger.info("login.succeeded", extra={"username": username})
        return HTMLResponse(render_login_page(SUCCESS_MESSAGE, success=True))

    @app.get("/health")
    async def health() -> dict:
        return {"status": "ok"}

    @app.get("/api/users/{user_id}")
    async def get_user(user_id: int, service: UserService = Depends(get_user_service)) -> dict:
        name = await service.require_user_name(user_id)
        return {"id": user_id, "name": name}

    return app


# Module-level instance for `uvicorn qa_types.examples.functional.login_app:app`
app = create_app()
