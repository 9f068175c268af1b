from .email import IMailTransport
from .repositories import IUserRepository
from .security import ITokenSigner

__all__ = ["IMailTransport", "IUserRepository", "ITokenSigner"]
