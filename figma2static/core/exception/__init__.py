from figma2static.core.exception.error_codes import ErrorCode
from figma2static.core.exception.exceptions import ServiceException

__all__ = ["ErrorCode", "ServiceException"]
