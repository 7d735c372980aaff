import secrets

from sqlmodel import Session, select

from modactivity.exceptions import InsufficientPermissionsError
from modactivity.models.user import User


def generate_staff_secret() -> str:
    """
    Generate a new shared secret for a staff account.

    Returns:
        str: A URL-safe random token suitable for `User.secret`.
    """
    return secrets.token_urlsafe(32)


def authenticate_staff(session: Session, secret: str) -> User:
    """
    Resolve the staff account owning a shared secret.

    Returns:
        User: The staff user whose `secret` matches.

    Raises:
        InsufficientPermissionsError: If no user holds the secret or the user is not staff.
    """
    user = session.exec(select(User).where(User.secret == secret)).first()
    if user is None or not user.staff:
        raise InsufficientPermissionsError()
    return user
