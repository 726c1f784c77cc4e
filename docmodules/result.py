from enum import Enum
from datetime import datetime
from typing import Optional, Dict, Any, TYPE_CHECKING

if TYPE_CHECKING:
    from .converter.module_converter import ConversionStats


class ResultStatus(Enum):
    SUCCESS = "success"
    UNCHANGED = "unchanged"
    ERROR = "error"


class ConversionResult:
    def __init__(
        self,
        status: ResultStatus,
        message: str,
        timestamp: Optional[str] = None,
        stats: Optional['ConversionStats'] = None
    ):
        if not isinstance(status, ResultStatus):
            raise TypeError(f"status must be ResultStatus enum, got {type(status)}")

        self.status = status
        self.message = message
        self.timestamp = timestamp or datetime.now().isoformat()
        self.stats = stats

    def to_dict(self) -> Dict[str, Any]:
        result_dict = {
            'status': self.status.value,
            'message': self.message,
            'timestamp': self.timestamp
        }

        if self.stats is not None:
            result_dict['stats'] = self.stats.to_dict()

        return result_dict

    def __repr__(self) -> str:
        return f"ConversionResult(status={self.status.value}, message={self.message[:50]}...)"
