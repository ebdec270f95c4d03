"""Protection proxy: only premium members may unlock PDFs."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

import structlog

from ..errors import AccessDeniedError

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class User:
    name: str
    premium_member: bool = False


class DocumentReader(ABC):
    @abstractmethod
    def unlock_pdf(self, file_path: str, password: str) -> str:
        pass


class RealDocumentReader(DocumentReader):
    def unlock_pdf(self, file_path: str, password: str) -> str:
        # Password is not checked in the lesson; only access control is
        return f"[RealDocumentReader] Unlocking PDF at: {file_path}"


class DocumentProxy(DocumentReader):
    """Forwards to the real reader only for premium users."""

    def __init__(self, user: User) -> None:
        self.user = user
        self.real_reader = RealDocumentReader()

    def unlock_pdf(self, file_path: str, password: str) -> str:
        if not self.user.premium_member:
            logger.warning(
                "Premium feature refused",
                user=self.user.name,
                feature="unlock_pdf"
            )
            raise AccessDeniedError(
                "[DocumentProxy] Access denied. Only premium members can unlock PDFs.",
                user=self.user.name,
                feature="unlock_pdf",
                context={"file_path": file_path}
            )
        return self.real_reader.unlock_pdf(file_path, password)
