# auth.py
from errors import ConfigurationError


class AccessGate:
    """
    Single shared-password check.

    Low assurance on purpose: plain string equality, no hashing, no rate
    limiting. The "logged in" state is a client-side, tab-scoped flag that the
    server never sees; nothing here issues or checks a session token.
    """

    def __init__(self, secret: str | None):
        self.secret = secret

    @classmethod
    def from_settings(cls, settings) -> "AccessGate":
        return cls(settings.password)

    def authenticate(self, submitted: str) -> bool:
        if not self.secret:
            raise ConfigurationError("Password not configured")
        return submitted == self.secret
