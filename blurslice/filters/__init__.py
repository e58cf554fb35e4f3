"""Filters package."""

from .base import BaseFilter
from .registry import filter_registry, register_filter, get_filter_class
from .blur import FastGaussianBlurFilter, BoxBlurFilter, blur_image

__all__ = [
    'BaseFilter',
    'filter_registry',
    'register_filter',
    'get_filter_class',
    'FastGaussianBlurFilter',
    'BoxBlurFilter',
    'blur_image',
]
