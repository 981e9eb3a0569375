import copy
from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass(frozen=True)
class StoredDocument:
    """Snapshot of a document as read from a collection"""

    id: str
    fields: Dict[str, Any] = field(default_factory=dict)

    def data(self) -> Dict[str, Any]:
        return copy.deepcopy(self.fields)
