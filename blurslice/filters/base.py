"""Common base for blur filters.

Filters are pydantic models: their fields are the blur parameters, so
validation, serialization and the parameter schema all come from the
field declarations.
"""

from abc import ABC, abstractmethod
from typing import Any, ClassVar

import numpy as np
from pydantic import BaseModel, ConfigDict

from .registry import get_filter_class


class BaseFilter(BaseModel, ABC):
    """A blur applied to (H, W) or (H, W, C) uint8 images."""

    model_config = ConfigDict(extra='forbid')

    filter_type: ClassVar[str] = ""  # set by register_filter
    name: ClassVar[str] = ""

    enabled: bool = True

    @abstractmethod
    def apply(self, image: np.ndarray) -> np.ndarray:
        """Return a blurred copy of ``image``; the input is left untouched."""

    def __call__(self, image: np.ndarray) -> np.ndarray:
        """Apply the filter, or return an unchanged copy when disabled."""
        if not self.enabled:
            return image.copy()
        return self.apply(image)

    def to_dict(self) -> dict[str, Any]:
        """Serialize as ``{'type', 'enabled', 'params'}``."""
        return {
            'type': self.filter_type,
            'enabled': self.enabled,
            'params': self.model_dump(exclude={'enabled'}),
        }

    @staticmethod
    def from_dict(data: dict[str, Any]) -> 'BaseFilter':
        """Rebuild a filter from :meth:`to_dict` output."""
        filter_cls = get_filter_class(data['type'])
        return filter_cls(enabled=data.get('enabled', True), **data.get('params', {}))

    @classmethod
    def get_params_schema(cls) -> dict[str, dict[str, Any]]:
        """Describe each blur parameter: its type, default and allowed range."""
        schema = {}
        for field_name, field_info in cls.model_fields.items():
            if field_name == 'enabled':
                continue
            param: dict[str, Any] = {
                'type': field_info.annotation.__name__,
                'default': field_info.default,
            }
            if field_info.description:
                param['description'] = field_info.description
            for meta in field_info.metadata:
                if getattr(meta, 'ge', None) is not None:
                    param['min'] = meta.ge
                if getattr(meta, 'le', None) is not None:
                    param['max'] = meta.le
            schema[field_name] = param
        return schema
