"""
HTML pages for the site.

Every value that comes from a user is escaped before it reaches the markup.
"""
from html import escape
from urllib.parse import quote
from typing import Iterable, Optional

from portal.models.session import SessionData
from portal.schemas.user import UserSummary

MEMBER_IMAGES = ["/donkey.gif", "/shrek.gif", "/pus.gif"]


def render_layout(title: str, body: str) -> str:
    return f"""<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <title>{escape(title)}</title>
</head>
<body>
{body}
</body>
</html>
"""


def render_home(session: SessionData) -> str:
    if not session.authenticated:
        body = """
    <h1>Welcome</h1>
    <a href="/signup">Sign up</a>
    <br/>
    <a href="/login">Log in</a>
"""
        return render_layout("Home", body)

    username = escape(session.username or "")
    admin_link = '<br/>\n    <a href="/admin">Admin</a>' if session.is_admin else ""
    body = f"""
    <h1>Hello, {username}!</h1>
    <a href="/members">Go to Members Area</a>{admin_link}
    <br/>
    <a href="/logout">Log out</a>
"""
    return render_layout("Home", body)


def render_error_message(error: Optional[str]) -> str:
    if not error:
        return ""
    return f'<p class="error">{escape(error)}</p>'


def render_signup(
    error: Optional[str] = None,
    username: str = "",
    email: str = "",
) -> str:
    """Signup form, keeping previously entered username and email."""
    body = f"""
    <h1>Sign Up</h1>
    {render_error_message(error)}
    <form action="/signup" method="post">
        <input name="username" type="text" placeholder="Name" value="{escape(username)}">
        <br/>
        <input name="email" type="email" placeholder="Email" value="{escape(email)}">
        <br/>
        <input name="password" type="password" placeholder="Password">
        <br/>
        <button>Submit</button>
    </form>
"""
    return render_layout("Sign Up", body)


def render_login(error: Optional[str] = None, email: str = "") -> str:
    body = f"""
    <h1>Log In</h1>
    {render_error_message(error)}
    <form action="/login" method="post">
        <input name="email" type="email" placeholder="Email" value="{escape(email)}">
        <br/>
        <input name="password" type="password" placeholder="Password">
        <br/>
        <button>Submit</button>
    </form>
"""
    return render_layout("Log In", body)


def render_members(username: str, image: str) -> str:
    body = f"""
    <h1>Hello, {escape(username)}</h1>
    <img src="{escape(image)}">
    <form action="/logout"><button>Sign Out</button></form>
"""
    return render_layout("Members", body)


def render_admin(users: Iterable[UserSummary]) -> str:
    """User table with promote/demote links."""
    rows = []
    for user in users:
        name = escape(user.username)
        target = escape(quote(user.username))
        rows.append(f"""
        <tr>
            <td>{name}</td>
            <td>{escape(user.email)}</td>
            <td>{escape(str(user.user_type))}</td>
            <td><a href="/admin/promote?user={target}">Promote</a></td>
            <td><a href="/admin/demote?user={target}">Demote</a></td>
        </tr>""")

    table_rows = "".join(rows)
    body = f"""
    <h1>Admin</h1>
    <table>
        <tr><th>Username</th><th>Email</th><th>Type</th><th></th><th></th></tr>{table_rows}
    </table>
    <a href="/">Home</a>
"""
    return render_layout("Admin", body)


def render_not_authorized() -> str:
    body = """
    <h1>403 - Not Authorized</h1>
    <p>You must be an admin to view this page.</p>
    <a href="/">Home</a>
"""
    return render_layout("Not Authorized", body)


def render_not_found() -> str:
    body = """
    <h1>404 - Page Not Found</h1>
    <p>Sorry, that page doesn't exist.</p>
"""
    return render_layout("Page Not Found", body)


def render_error(status_code: int, message: str) -> str:
    body = f"""
    <h1>{status_code} - {escape(message)}</h1>
    <a href="/">Home</a>
"""
    return render_layout("Error", body)
