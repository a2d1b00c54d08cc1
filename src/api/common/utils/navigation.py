from typing import Dict, NoReturn, Optional
from fastapi import Request
from fastapi.responses import RedirectResponse


class RedirectTo(Exception):
    """
    Ends the current handler and sends the browser to another route.

    Services raise it through ``redirect``; the exception handler
    registered in ``src.main`` turns it into a 303 response.
    """

    def __init__(self, url: str, cookies: Optional[Dict[str, str]] = None,
                 cookie_max_age: Optional[int] = None):
        super().__init__(url)
        self.url = url
        self.cookies = cookies or {}
        self.cookie_max_age = cookie_max_age


def redirect(url: str, cookies: Optional[Dict[str, str]] = None,
             cookie_max_age: Optional[int] = None) -> NoReturn:
    raise RedirectTo(url, cookies=cookies, cookie_max_age=cookie_max_age)


async def redirect_exception_handler(request: Request, exc: RedirectTo) -> RedirectResponse:
    response = RedirectResponse(exc.url, status_code=303)
    for name, value in exc.cookies.items():
        response.set_cookie(
            name,
            value,
            max_age=exc.cookie_max_age,
            httponly=True,
            samesite="lax",
        )
    return response
