from querylog.utils import logging

__all__ = ("logging",)
