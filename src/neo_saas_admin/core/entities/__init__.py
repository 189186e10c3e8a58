"""Shared entity bases."""

from .api_model import ApiModel
from .paths import resource_path

__all__ = ["ApiModel", "resource_path"]
